"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, K]``, the base abstract class that
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Mutations return affected-row counts rather than entities: each one is
a single statement, and a count of zero is how callers learn that no
row matched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class IRepository(ABC, Generic[T, K]):
    """Base generic repository contract.

    ``T`` is the entity managed by the repository, ``K`` its primary key.
    """

    @abstractmethod
    def get_by_id(self, id: K) -> Optional[T]:
        """Retrieve a visible entity by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List visible entities."""

    @abstractmethod
    def soft_delete(self, id: K) -> int:
        """Flag an entity as deleted; return the number of matched rows."""

    @abstractmethod
    def restore(self, id: K) -> int:
        """Clear the deleted flag; return the number of changed rows."""
