"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.  Each
method issues exactly one parameterized statement on a connection
borrowed from Django for the current thread.

Ids arrive as raw path segments.  One that cannot be coerced to an
integer matches no row: look-ups return ``None`` and mutations report
zero affected rows.  ``DatabaseError`` is never caught here: the API
layer turns it into a 500.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from modules.core.models import SoftDeleteQuerySet
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @staticmethod
    def _by_id(queryset: SoftDeleteQuerySet, id: Any) -> Optional[SoftDeleteQuerySet]:
        try:
            return queryset.filter(pk=id)
        except (ValueError, TypeError):
            logger.debug("product.invalid_id", product_id=str(id))
            return None

    def get_by_id(self, id: Any) -> Optional[Product]:
        """Retrieve a visible product by primary key."""
        queryset = self._by_id(Product.objects.alive(), id)
        if queryset is None:
            return None
        return queryset.first()

    def list(self) -> List[Product]:
        """All visible products."""
        return list(Product.objects.alive().order_by("id"))

    def search_by_name(self, keyword: str) -> List[Product]:
        """Visible products whose name matches ``%keyword%``.

        Wildcards inside ``keyword`` are not escaped; they keep their
        ``LIKE`` meaning.
        """
        queryset = Product.objects.alive().filter(name__like=f"%{keyword}%")
        return list(queryset.order_by("id"))

    def create(self, fields: Dict[str, Any]) -> int:
        """Insert a product and return its generated primary key."""
        product = Product.objects.create(**fields)
        logger.info("product.inserted", product_id=product.id)
        return product.id

    def update_visible(self, id: Any, fields: Dict[str, Any]) -> int:
        """Overwrite ``fields`` on a visible row.

        Returns matched rows, so rewriting identical values still counts.
        """
        queryset = self._by_id(Product.objects.alive(), id)
        if queryset is None:
            return 0
        return queryset.update(**fields)

    def soft_delete(self, id: Any) -> int:
        """Set ``deleted = 1`` on row ``id`` whatever its current flag."""
        queryset = self._by_id(Product.objects.all(), id)
        if queryset is None:
            return 0
        return queryset.soft_delete()

    def restore(self, id: Any) -> int:
        """Set ``deleted = 0`` on row ``id`` unless it is already 0."""
        queryset = self._by_id(Product.objects.all(), id)
        if queryset is None:
            return 0
        return queryset.restore()
