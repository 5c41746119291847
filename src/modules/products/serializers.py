"""Product DRF serializer for API output.

The serializer operates at the Interface layer (API Views) and only
renders rows.  Input is validated by ``modules.products.validators``,
which feeds Pydantic DTOs to the Service layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "color", "description"]
        read_only_fields = fields
