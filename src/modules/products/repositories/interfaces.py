"""Product repository interface.

Extends ``IRepository[Product, int]`` with the catalog-specific
statements: name search, insert and full update of a visible row.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product", Any]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def search_by_name(self, keyword: str) -> List["Product"]:
        """Visible products whose name contains ``keyword``."""

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> int:
        """Insert a product and return its generated id."""

    @abstractmethod
    def update_visible(self, id: Any, fields: Dict[str, Any]) -> int:
        """Overwrite ``fields`` on the visible row ``id``; return matched rows."""
