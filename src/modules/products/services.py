"""Product service layer (Use Cases).

Orchestrates the catalog operations, delegating persistence to the
injected ``IProductRepository``.  A mutation whose statement affected
no row raises ``ProductNotFound`` carrying the client-facing message.

Rules enforced here:
- Reads and full updates only see visible rows (flag 0 or NULL).
- Soft delete and restore address rows by id regardless of visibility.
- Restoring a row that is not deleted is reported like a missing row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

import structlog

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every visible product."""
        products = self._repo.list()
        logger.info("product.listed", count=len(products))
        return products

    def get_product(self, id: Any) -> Product:
        """Retrieve a single visible product by ID.

        Raises:
            ProductNotFound: if no visible product has this id.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound("Product not found")
        logger.info("product.retrieved", product_id=str(id))
        return product

    def search_products(self, keyword: str) -> List[Product]:
        """Return visible products whose name contains ``keyword``."""
        products = self._repo.search_by_name(keyword)
        logger.info("product.searched", keyword=keyword, count=len(products))
        return products

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductInputDTO) -> int:
        """Insert a product and return its generated id."""
        product_id = self._repo.create(dto.to_fields())
        logger.info("product.created", product_id=product_id)
        return product_id

    def update_product(self, id: Any, dto: ProductInputDTO) -> None:
        """Overwrite all five fields of a visible product.

        Raises:
            ProductNotFound: if the product does not exist or is deleted.
        """
        if not self._repo.update_visible(id, dto.to_fields()):
            raise ProductNotFound("Product not found or deleted")
        logger.info("product.updated", product_id=str(id))

    def delete_product(self, id: Any) -> None:
        """Soft-delete a product.

        Raises:
            ProductNotFound: if no row has this id.
        """
        if not self._repo.soft_delete(id):
            raise ProductNotFound("Product not found")
        logger.info("product.soft_deleted", product_id=str(id))

    def restore_product(self, id: Any) -> None:
        """Bring a soft-deleted product back.

        Raises:
            ProductNotFound: if no row has this id or it is not deleted.
        """
        if not self._repo.restore(id):
            raise ProductNotFound("Product not found or not deleted")
        logger.info("product.restored", product_id=str(id))
