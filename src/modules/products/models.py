"""Product model.

A single flat table keyed by an auto-incrementing integer.  On SQLite the
``AutoField`` primary key is declared ``AUTOINCREMENT``, so ids of deleted
rows are never handed out again.

Field rules (non-empty strings, non-negative price) are enforced by the
Validator before anything reaches this model; the columns themselves only
declare ``NOT NULL``.
"""

from __future__ import annotations

from django.db import models

PRODUCT_FIELDS = ("name", "price", "color", "description")


class Product(models.Model):
    """Product record exposed by the ``/products`` resource."""

    id = models.AutoField(primary_key=True)
    name = models.TextField()
    price = models.FloatField()
    color = models.TextField()
    description = models.TextField()

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def as_fields(self) -> dict:
        """Return the four writable fields as a plain dict."""
        return {field: getattr(self, field) for field in PRODUCT_FIELDS}

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
