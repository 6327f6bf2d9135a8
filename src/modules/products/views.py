"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes:

- ``ProductNotFound`` -> 404 ``{"message"}``.
- ``DatabaseError`` and ``OverflowError`` (and bodies the input DTO cannot
  coerce) -> 500 ``{"message", "error"}`` with the raw failure text.

Every response body is JSON.
"""

from __future__ import annotations

from typing import Any, Iterable

import structlog
from django.db import DatabaseError
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import ProductInputDTO, ProductOutputDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

# SQLite raises OverflowError for integers outside its 64-bit range
DATASTORE_ERRORS = (DatabaseError, OverflowError)
WRITE_ERRORS = (PydanticValidationError, *DATASTORE_ERRORS)


def _serialize(products: Iterable[Product]) -> list[dict[str, Any]]:
    return [ProductOutputDTO.from_entity(p).model_dump() for p in products]


def _not_found(exc: ProductNotFound) -> Response:
    return Response({"message": exc.message}, status=status.HTTP_404_NOT_FOUND)


def _server_error(message: str, exc: Exception) -> Response:
    logger.error("product.request_failed", message=message, error=str(exc))
    return Response(
        {"message": message, "error": str(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD, soft delete and restore.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    ``PATCH /products/{pk}`` is not routed; updates are full ``PUT`` overwrites.
    """

    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve / Search
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        try:
            products = self._service.list_products()
        except DATASTORE_ERRORS as exc:
            return _server_error("Error fetching products", exc)
        return Response(_serialize(products))

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound as exc:
            return _not_found(exc)
        except DATASTORE_ERRORS as exc:
            return _server_error(f"Error fetching product with id {pk}", exc)
        return Response(ProductOutputDTO.from_entity(product).model_dump())

    @action(detail=False, methods=["get"], url_path=r"search/(?P<keyword>[^/]+)")
    def search(self, request: Request, keyword: str = "") -> Response:
        """GET /products/search/{keyword}"""
        try:
            products = self._service.search_products(keyword)
        except DATASTORE_ERRORS as exc:
            return _server_error(
                f'Error searching products with keyword "{keyword}"', exc
            )
        return Response(_serialize(products))

    # ------------------------------------------------------------------
    # Create / Update
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            dto = ProductInputDTO.model_validate(request.data)
            product_id = self._service.create_product(dto)
        except WRITE_ERRORS as exc:
            return _server_error("Error creating product", exc)
        return Response(
            {"id": product_id, "message": "Product created"},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /products/{pk}"""
        try:
            dto = ProductInputDTO.model_validate(request.data)
            self._service.update_product(pk, dto)
        except ProductNotFound as exc:
            return _not_found(exc)
        except WRITE_ERRORS as exc:
            return _server_error("Error updating product", exc)
        return Response({"message": "Product updated"})

    # ------------------------------------------------------------------
    # Soft delete / Restore
    # ------------------------------------------------------------------

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /products/{pk}"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound as exc:
            return _not_found(exc)
        except DATASTORE_ERRORS as exc:
            return _server_error("Error deleting product", exc)
        return Response({"message": "Product soft deleted"})

    @action(detail=True, methods=["patch"])
    def restore(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /products/{pk}/restore"""
        try:
            self._service.restore_product(pk)
        except ProductNotFound as exc:
            return _not_found(exc)
        except DATASTORE_ERRORS as exc:
            return _server_error("Error restoring product", exc)
        return Response({"message": "Product restored"})
