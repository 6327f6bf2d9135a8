"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: body of create and full-update requests.
- ``ProductOutputDTO``: a visible product as returned to clients.

Input fields are all optional: a missing field is written as NULL and
the database decides whether that is acceptable.  Only type coercion
happens here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.products.models import Product


PRODUCT_FIELDS = ("name", "price", "discount", "review_count", "image_url")


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for ``POST /products`` and ``PUT /products/{id}``."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    name: Optional[str] = None
    price: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    review_count: Optional[int] = None
    image_url: Optional[str] = None

    def to_fields(self) -> Dict[str, Any]:
        """Column values for an INSERT/UPDATE, missing fields included as None."""
        return {field: getattr(self, field) for field in PRODUCT_FIELDS}


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str]
    price: Optional[Decimal]
    discount: Optional[Decimal]
    review_count: Optional[int]
    image_url: Optional[str]
    deleted: bool

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            discount=product.discount,
            review_count=product.review_count,
            image_url=product.image_url,
            deleted=product.is_deleted,
        )
