"""Tests for loading the example catalog.

Covers:
- post_migrate seeding of the test database.
- seed_products management command on empty and populated tables.
- PRODUCTS_SEED_ON_MIGRATE switch.
"""

from __future__ import annotations

from io import StringIO

import pytest
from django.apps import apps
from django.core.management import call_command

from modules.products.constants import SEED_PRODUCTS
from modules.products.models import Product
from modules.products.signals import seed_after_migrate

pytestmark = pytest.mark.unit


def test_catalog_has_ten_valid_entries():
    from modules.products.validators import validate_product

    assert len(SEED_PRODUCTS) == 10
    assert all(validate_product(entry) == [] for entry in SEED_PRODUCTS)


def test_migrate_seeds_catalog():
    names = set(Product.objects.values_list("name", flat=True))
    assert {entry["name"] for entry in SEED_PRODUCTS} <= names


class TestSeedCommand:
    def test_seeds_empty_table(self):
        Product.objects.all().delete()
        out = StringIO()

        call_command("seed_products", stdout=out)

        assert Product.objects.count() == 10
        assert "products=10" in out.getvalue()

    def test_running_twice_does_not_duplicate(self):
        Product.objects.all().delete()

        call_command("seed_products", stdout=StringIO())
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert Product.objects.count() == 10
        assert "Skipping" in out.getvalue()

    def test_seeded_rows_match_catalog(self):
        Product.objects.all().delete()

        call_command("seed_products", stdout=StringIO())

        rows = [p.as_fields() for p in Product.objects.order_by("id")]
        assert rows == [{**e, "price": float(e["price"])} for e in SEED_PRODUCTS]


class TestSeedSignal:
    def test_signal_seeds_empty_table(self):
        Product.objects.all().delete()

        seed_after_migrate(sender=apps.get_app_config("products"), using="default")

        assert Product.objects.count() == 10

    def test_signal_respects_setting(self, settings):
        settings.PRODUCTS_SEED_ON_MIGRATE = False
        Product.objects.all().delete()

        seed_after_migrate(sender=apps.get_app_config("products"), using="default")

        assert Product.objects.count() == 0
