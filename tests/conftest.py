from decimal import Decimal

import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_product():
    """Factory persisting a Product; keyword arguments override defaults."""
    from modules.products.models import Product

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Shirt",
            "price": Decimal("10.00"),
            "discount": Decimal("0.00"),
            "review_count": 0,
            "image_url": "u",
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
