"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Each action parses the path id first, validates the body second and only
then touches storage.  Domain exceptions are caught where the service is
called and translated into one response; the view never swallows
generic exceptions.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.exceptions import (
    InvalidProductId,
    ProductNotFound,
    ProductStorageError,
    ProductValidationFailed,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import (
    parse_product_id,
    patch_dto_from_payload,
    product_dto_from_payload,
)


def _error(message: str, code: int) -> Response:
    return Response({"error": message}, status=code)


def _invalid_id() -> Response:
    return _error("Invalid id", status.HTTP_400_BAD_REQUEST)


def _not_found() -> Response:
    return _error("Product not found", status.HTTP_404_NOT_FOUND)


def _storage_error() -> Response:
    return _error("Database error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def _invalid_payload(exc: ProductValidationFailed) -> Response:
    return Response({"errors": exc.errors}, status=status.HTTP_400_BAD_REQUEST)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None
    # Let "1.5" or "abc" reach the view so it can answer 400 instead of 404.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        try:
            products = self._service.list_products()
        except ProductStorageError:
            return _storage_error()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}"""
        try:
            product_id = parse_product_id(pk)
        except InvalidProductId:
            return _invalid_id()
        try:
            product = self._service.get_product(product_id)
        except ProductNotFound:
            return _not_found()
        except ProductStorageError:
            return _storage_error()
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            dto = product_dto_from_payload(request.data)
        except ProductValidationFailed as exc:
            return _invalid_payload(exc)

        try:
            product = self._service.create_product(dto)
        except ProductNotFound:
            return _not_found()
        except ProductStorageError:
            return _storage_error()

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /products/{pk}"""
        try:
            product_id = parse_product_id(pk)
        except InvalidProductId:
            return _invalid_id()
        try:
            dto = product_dto_from_payload(request.data)
        except ProductValidationFailed as exc:
            return _invalid_payload(exc)

        try:
            product = self._service.replace_product(product_id, dto)
        except ProductNotFound:
            return _not_found()
        except ProductStorageError:
            return _storage_error()

        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /products/{pk}"""
        try:
            product_id = parse_product_id(pk)
        except InvalidProductId:
            return _invalid_id()
        try:
            dto = patch_dto_from_payload(request.data)
        except ProductValidationFailed as exc:
            return _invalid_payload(exc)

        try:
            product = self._service.patch_product(product_id, dto)
        except ProductNotFound:
            return _not_found()
        except ProductStorageError:
            return _storage_error()

        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /products/{pk}"""
        try:
            product_id = parse_product_id(pk)
        except InvalidProductId:
            return _invalid_id()
        try:
            self._service.delete_product(product_id)
        except ProductNotFound:
            return _not_found()
        except ProductStorageError:
            return _storage_error()
        return Response({"message": "Product deleted"})
