"""Unit tests for product payload and id validation.

Covers:
- Full mode: every field required, fixed error order.
- Partial mode: absent fields skipped, explicit null rejected.
- Field rules: blank strings, wrong types, price boundaries.
- parse_product_id: integer literals only.
"""

from __future__ import annotations

import pytest

from modules.products.exceptions import InvalidProductId, ProductValidationFailed
from modules.products.validators import (
    ValidationMode,
    parse_product_id,
    patch_dto_from_payload,
    product_dto_from_payload,
    validate_product,
)

pytestmark = pytest.mark.unit

VALID = {"name": "Pencil", "price": 1, "color": "Yellow", "description": "Writes"}
ALL_ERRORS = ["Invalid name", "Invalid price", "Invalid color", "Invalid description"]


# ===========================================================================
# Full mode
# ===========================================================================


class TestFullMode:
    def test_valid_payload_has_no_errors(self):
        assert validate_product(VALID, ValidationMode.FULL) == []

    def test_full_is_default_mode(self):
        assert validate_product({}) == ALL_ERRORS

    def test_empty_payload_reports_every_field_in_order(self):
        assert validate_product({}, ValidationMode.FULL) == ALL_ERRORS

    @pytest.mark.parametrize("missing", ["name", "price", "color", "description"])
    def test_missing_field_reported_as_invalid(self, missing):
        payload = {k: v for k, v in VALID.items() if k != missing}
        assert validate_product(payload, ValidationMode.FULL) == [f"Invalid {missing}"]

    def test_order_is_fixed_regardless_of_payload_order(self):
        payload = {"description": "", "color": "", "price": -1, "name": ""}
        assert validate_product(payload, ValidationMode.FULL) == ALL_ERRORS

    def test_only_failing_fields_listed(self):
        payload = {**VALID, "price": "cheap", "description": "   "}
        assert validate_product(payload, ValidationMode.FULL) == [
            "Invalid price",
            "Invalid description",
        ]

    def test_unknown_keys_ignored(self):
        assert validate_product({**VALID, "id": 42, "brand": "Apple"}) == []

    @pytest.mark.parametrize("payload", [None, [], "text", 5])
    def test_non_object_payload_treated_as_empty(self, payload):
        assert validate_product(payload, ValidationMode.FULL) == ALL_ERRORS


# ===========================================================================
# Partial mode
# ===========================================================================


class TestPartialMode:
    def test_empty_payload_is_valid(self):
        assert validate_product({}, ValidationMode.PARTIAL) == []

    def test_absent_fields_not_reported(self):
        assert validate_product({"price": 50}, ValidationMode.PARTIAL) == []

    def test_present_invalid_field_reported(self):
        assert validate_product({"color": " "}, ValidationMode.PARTIAL) == ["Invalid color"]

    def test_explicit_null_is_invalid(self):
        assert validate_product({"name": None}, ValidationMode.PARTIAL) == ["Invalid name"]

    def test_order_is_fixed(self):
        payload = {"description": 3, "name": 7}
        assert validate_product(payload, ValidationMode.PARTIAL) == [
            "Invalid name",
            "Invalid description",
        ]

    def test_non_object_payload_is_valid(self):
        assert validate_product([1, 2], ValidationMode.PARTIAL) == []


# ===========================================================================
# Field rules
# ===========================================================================


class TestFieldRules:
    def test_price_zero_is_valid(self):
        assert validate_product({**VALID, "price": 0}) == []

    def test_negative_price_is_invalid(self):
        assert validate_product({**VALID, "price": -0.01}) == ["Invalid price"]

    def test_float_price_is_valid(self):
        assert validate_product({**VALID, "price": 19.99}) == []

    @pytest.mark.parametrize("price", ["10", True, False, None, [1], {"v": 1}])
    def test_non_number_price_is_invalid(self, price):
        assert validate_product({**VALID, "price": price}) == ["Invalid price"]

    def test_nan_price_is_invalid(self):
        assert validate_product({**VALID, "price": float("nan")}) == ["Invalid price"]

    @pytest.mark.parametrize("price", [float("inf"), float("-inf"), 10**400])
    def test_non_finite_price_is_invalid(self, price):
        assert validate_product({**VALID, "price": price}) == ["Invalid price"]

    def test_partial_mode_rejects_infinite_price(self):
        assert validate_product({"price": float("inf")}, ValidationMode.PARTIAL) == [
            "Invalid price"
        ]

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", 5, None, ["a"]])
    @pytest.mark.parametrize("field", ["name", "color", "description"])
    def test_invalid_text_values(self, field, value):
        assert validate_product({**VALID, field: value}) == [f"Invalid {field}"]

    def test_text_with_surrounding_whitespace_is_valid(self):
        assert validate_product({**VALID, "name": "  Pen  "}) == []


# ===========================================================================
# DTO builders
# ===========================================================================


class TestDtoBuilders:
    def test_full_builder_returns_dto(self):
        dto = product_dto_from_payload(VALID)
        assert dto.name == "Pencil"
        assert dto.price == 1

    def test_full_builder_raises_with_errors(self):
        with pytest.raises(ProductValidationFailed) as exc_info:
            product_dto_from_payload({"name": "Pencil"})
        assert exc_info.value.errors == [
            "Invalid price",
            "Invalid color",
            "Invalid description",
        ]

    def test_patch_builder_keeps_only_supplied_fields(self):
        dto = patch_dto_from_payload({"price": 50, "extra": True})
        assert dto.supplied() == {"price": 50}

    def test_patch_builder_raises_with_errors(self):
        with pytest.raises(ProductValidationFailed) as exc_info:
            patch_dto_from_payload({"price": -5})
        assert exc_info.value.errors == ["Invalid price"]


# ===========================================================================
# parse_product_id
# ===========================================================================


class TestParseProductId:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", 1), ("42", 42), ("007", 7), ("-3", -3), ("999999", 999999)],
    )
    def test_integer_literals(self, raw, expected):
        assert parse_product_id(raw) == expected

    def test_int_passthrough(self):
        assert parse_product_id(5) == 5

    @pytest.mark.parametrize(
        "raw", ["abc", "", "1.5", "12abc", " 1", "1_000", "+1", "٣", None, True]
    )
    def test_rejects_non_integer_literals(self, raw):
        with pytest.raises(InvalidProductId):
            parse_product_id(raw)
