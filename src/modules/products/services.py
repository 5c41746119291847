"""Product service layer (Use Cases).

Orchestrates the product lifecycle, delegating persistence to the
injected ``IProductRepository``.

Rules enforced here:
- Every write is followed by a re-read, so responses reflect the stored row.
- Replace and delete report ``ProductNotFound`` when the statement touched
  no row; partial update reads the row first.
- Partial update's read-merge-write runs in one transaction with the row
  locked, so a concurrent writer cannot slip in between.
- Seeding only fills an empty table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, NoReturn

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import ProductDTO, ProductPatchDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Payloads arrive already validated as DTOs.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductDTO) -> Product:
        """Insert a product and return the row as stored."""
        product_id = self._repo.create(dto.model_dump())
        product = self._reload(product_id)
        logger.info("product.created", product_id=product_id)
        return product

    def replace_product(self, id: int, dto: ProductDTO) -> Product:
        """Overwrite all four fields of an existing product.

        Raises:
            ProductNotFound: if no row has this id.
        """
        if not self._repo.update(id, dto.model_dump()):
            self._not_found(id)
        product = self._reload(id)
        logger.info("product.replaced", product_id=id)
        return product

    def patch_product(self, id: int, dto: ProductPatchDTO) -> Product:
        """Merge the supplied fields over the stored row.

        Raises:
            ProductNotFound: if no row has this id.
        """
        supplied = dto.supplied()
        with transaction.atomic():
            current = self._repo.get_for_update(id)
            if current is None:
                self._not_found(id)
            merged = {**current.as_fields(), **supplied}
            self._repo.update(id, merged)
            product = self._reload(id)
        logger.info("product.patched", product_id=id, fields=sorted(supplied))
        return product

    def delete_product(self, id: int) -> None:
        """Hard-delete a product.

        Raises:
            ProductNotFound: if no row has this id.
        """
        if not self._repo.delete(id):
            self._not_found(id)
        logger.info("product.deleted", product_id=id)

    def seed_catalog(self, entries: Iterable[Dict[str, Any]]) -> int:
        """Insert ``entries`` if the table is empty; return rows inserted."""
        if self._repo.count() > 0:
            logger.info("products.seed_skipped", reason="table_not_empty")
            return 0
        inserted = 0
        with transaction.atomic():
            for entry in entries:
                self._repo.create(entry)
                inserted += 1
        logger.info("products.seeded", count=inserted)
        return inserted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product in id order."""
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            self._not_found(id)
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reload(self, id: int) -> Product:
        product = self._repo.get_by_id(id)
        if product is None:
            # Row vanished between the write and the read-back.
            self._not_found(id)
        return product

    @staticmethod
    def _not_found(id: int) -> NoReturn:
        logger.warning("product.not_found", product_id=id)
        raise ProductNotFound(f"Product {id} not found.")
