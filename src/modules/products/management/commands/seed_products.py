from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from modules.products.constants import SEED_PRODUCTS
from modules.products.exceptions import ProductStorageError
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


class Command(BaseCommand):
    help = "Load the example product catalog into an empty products table."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        service = ProductService(repository=ProductDjangoRepository())
        try:
            inserted = service.seed_catalog(SEED_PRODUCTS)
        except ProductStorageError as exc:
            raise CommandError("Could not seed products: database error.") from exc

        if inserted:
            self.stdout.write(self.style.SUCCESS(f"Seed completed: products={inserted}"))
        else:
            self.stdout.write(
                self.style.WARNING("Skipping products (table already has rows).")
            )
