"""Product model over the ``products`` table.

Every column except the primary key is nullable: writes are passed through
as received and the database decides what it accepts.  Soft delete comes
from ``SoftDeleteModel`` (nullable ``deleted`` flag, 0/NULL = active).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel


class Product(SoftDeleteModel):
    """A catalog product row."""

    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=255, null=True, blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    discount = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    review_count = models.IntegerField(null=True, blank=True)
    image_url = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "products"

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
