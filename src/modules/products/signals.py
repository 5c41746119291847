"""Signals that load the example catalog after migrations."""

from __future__ import annotations

import structlog
from django.conf import settings

from modules.products.constants import SEED_PRODUCTS
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)


def seed_after_migrate(sender, using: str = "default", **kwargs) -> None:
    if not getattr(settings, "PRODUCTS_SEED_ON_MIGRATE", True):
        logger.info("products.seed_disabled")
        return
    if using != "default":
        return
    ProductService(repository=ProductDjangoRepository()).seed_catalog(SEED_PRODUCTS)
