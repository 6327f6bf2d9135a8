"""Integration tests for the JSON error body contract.

404 bodies carry only ``message``; 500 bodies carry ``message`` plus the
raw datastore failure text in ``error``.
"""

from unittest.mock import patch

import pytest
from django.db import IntegrityError, OperationalError

from modules.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.integration

CONNECTION_LOST = "Lost connection to MySQL server during query"


def _failing(method: str, exc: Exception | None = None):
    return patch.object(
        ProductDjangoRepository,
        method,
        side_effect=exc or OperationalError(CONNECTION_LOST),
    )


class TestNotFoundFormat:
    def test_not_found_has_message_only(self, api_client):
        response = api_client.get("/products/424242")
        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}


class TestDatastoreFailures:
    def test_list_failure(self, api_client):
        with _failing("list"):
            response = api_client.get("/products")
        assert response.status_code == 500
        assert response.json() == {
            "message": "Error fetching products",
            "error": CONNECTION_LOST,
        }

    def test_retrieve_failure_names_the_id(self, api_client):
        with _failing("get_by_id"):
            response = api_client.get("/products/7")
        assert response.status_code == 500
        assert response.json()["message"] == "Error fetching product with id 7"
        assert response.json()["error"] == CONNECTION_LOST

    def test_search_failure_names_the_keyword(self, api_client):
        with _failing("search_by_name"):
            response = api_client.get("/products/search/shirt")
        assert response.status_code == 500
        assert (
            response.json()["message"]
            == 'Error searching products with keyword "shirt"'
        )

    def test_create_failure_includes_constraint_violation(self, api_client):
        violation = IntegrityError("Column 'name' cannot be null")
        with _failing("create", violation):
            response = api_client.post("/products", {}, format="json")
        assert response.status_code == 500
        assert response.json() == {
            "message": "Error creating product",
            "error": "Column 'name' cannot be null",
        }

    def test_update_failure(self, api_client):
        with _failing("update_visible"):
            response = api_client.put("/products/1", {"name": "x"}, format="json")
        assert response.status_code == 500
        assert response.json()["message"] == "Error updating product"

    def test_delete_failure(self, api_client):
        with _failing("soft_delete"):
            response = api_client.delete("/products/1")
        assert response.status_code == 500
        assert response.json()["message"] == "Error deleting product"

    def test_restore_failure(self, api_client):
        with _failing("restore"):
            response = api_client.patch("/products/1/restore")
        assert response.status_code == 500
        assert response.json()["message"] == "Error restoring product"


class TestUncoercibleBody:
    def test_create_with_non_numeric_price_is_rejected_as_write_error(
        self, api_client
    ):
        payload = {"name": "Shirt", "price": "ten"}
        response = api_client.post("/products", payload, format="json")
        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "Error creating product"
        assert "price" in data["error"]

    def test_update_with_non_numeric_review_count(self, api_client, make_product):
        product = make_product()
        response = api_client.put(
            f"/products/{product.id}", {"review_count": "many"}, format="json"
        )
        assert response.status_code == 500
        assert response.json()["message"] == "Error updating product"


class TestOutOfRangeIntegers:
    def test_create_with_oversized_review_count_is_json_500(self, api_client):
        payload = {"name": "x", "review_count": 2**70}
        response = api_client.post("/products", payload, format="json")
        assert response.status_code == 500
        assert response["Content-Type"].startswith("application/json")
        data = response.json()
        assert data["message"] == "Error creating product"
        assert data["error"]

    def test_update_with_oversized_review_count_is_json_500(
        self, api_client, make_product
    ):
        product = make_product()
        response = api_client.put(
            f"/products/{product.id}", {"review_count": 2**70}, format="json"
        )
        assert response.status_code == 500
        assert response.json()["message"] == "Error updating product"

    def test_overflow_on_read_is_json_500(self, api_client):
        overflow = OverflowError("Python int too large to convert to SQLite INTEGER")
        with _failing("get_by_id", overflow):
            response = api_client.get("/products/7")
        assert response.status_code == 500
        assert response.json() == {
            "message": "Error fetching product with id 7",
            "error": "Python int too large to convert to SQLite INTEGER",
        }


class TestFrameworkErrors:
    def test_malformed_json_body_uses_message_key(self, api_client):
        response = api_client.post(
            "/products", "{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert "detail" not in data
        assert data["message"].startswith("JSON parse error")

    def test_unrouted_method_uses_message_key(self, api_client):
        response = api_client.patch("/products/1", {}, format="json")
        assert response.status_code == 405
        assert response.json() == {"message": 'Method "PATCH" not allowed.'}
