"""Product repository interface.

Extends ``IRepository[Product]`` with the single-row write primitives the
service needs.  Every method either returns or raises
``ProductStorageError``; implementations never leak backend exceptions.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product table."""

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> int:
        """Insert one row and return its newly assigned id."""

    @abstractmethod
    def update(self, id: int, fields: Dict[str, Any]) -> bool:
        """Overwrite the given columns of one row in a single UPDATE.

        Returns ``False`` when no row has that id.
        """

    @abstractmethod
    def get_for_update(self, id: int) -> Optional["Product"]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside ``transaction.atomic``; used by the partial
        update's read-merge-write.  Returns ``None`` if the row does not exist.
        """

    @abstractmethod
    def count(self) -> int:
        """Number of rows currently stored."""
