"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern for missing rows: look-ups
return ``None`` and writes return ``False`` instead of raising, and the
Service Layer decides how to translate that into an API response.
Backend failures are logged and re-raised as ``ProductStorageError``.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import structlog

from django.db import DatabaseError

from modules.products.exceptions import ProductStorageError
from modules.products.models import PRODUCT_FIELDS, Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

# SQLite INTEGER PRIMARY KEY is a signed 64-bit value.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


@contextmanager
def _storage_errors(operation: str, **context: Any) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        logger.error(
            "product.storage_error",
            operation=operation,
            error=str(exc),
            **context,
        )
        raise ProductStorageError(operation) from exc


def _columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {key: fields[key] for key in PRODUCT_FIELDS if key in fields}


def _storable(id: int) -> bool:
    return _MIN_ID <= id <= _MAX_ID


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` if absent."""
        if not _storable(id):
            return None
        with _storage_errors("get_by_id", product_id=id):
            return Product.objects.filter(id=id).first()

    def get_for_update(self, id: int) -> Optional[Product]:
        if not _storable(id):
            return None
        with _storage_errors("get_for_update", product_id=id):
            return Product.objects.select_for_update().filter(id=id).first()

    def list(self) -> List[Product]:
        with _storage_errors("list"):
            return list(Product.objects.order_by("id"))

    def count(self) -> int:
        with _storage_errors("count"):
            return Product.objects.count()

    def create(self, fields: Dict[str, Any]) -> int:
        """Insert a product row and return the id SQLite assigned."""
        with _storage_errors("create"):
            product = Product.objects.create(**_columns(fields))
        logger.info("product.saved", product_id=product.id)
        return product.id

    def update(self, id: int, fields: Dict[str, Any]) -> bool:
        """Single ``UPDATE ... WHERE id = ?``; ``False`` if nothing matched."""
        if not _storable(id):
            return False
        with _storage_errors("update", product_id=id):
            changed = Product.objects.filter(id=id).update(**_columns(fields))
        return changed > 0

    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        if not _storable(id):
            return False
        with _storage_errors("delete", product_id=id):
            deleted, _ = Product.objects.filter(id=id).delete()
        return deleted > 0
