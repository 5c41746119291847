"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Validator + Views)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductDTO``: every field required (create and full replace).
- ``ProductPatchDTO``: every field optional (partial update).  Only the
  keys present in the request are passed in, so ``model_fields_set``
  tells the service which fields to overwrite.

Type checks run in ``mode="before"`` validators so that JSON values are
judged as sent: ``"12"`` is not a price and ``true`` is not a number.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _check_text(v: Any) -> Any:
    if not isinstance(v, str) or not v.strip():
        raise ValueError("Must be a non-empty string.")
    return v


def _check_price(v: Any) -> Any:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("Price must be a number.")
    try:
        as_float = float(v)
    except OverflowError:
        raise ValueError("Price must be a finite number.") from None
    # JSON ``1e400`` decodes to inf, which cannot be rendered back
    if not math.isfinite(as_float):
        raise ValueError("Price must be a finite number.")
    if as_float < 0:
        raise ValueError("Price cannot be negative.")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductDTO(BaseModel):
    """Immutable DTO for create and full-replace requests.

    Validates:
    - ``name``, ``color``, ``description`` are strings, non-empty once stripped.
    - ``price`` is a finite JSON number greater than or equal to zero.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: float
    color: str
    description: str

    @field_validator("name", "color", "description", mode="before")
    @classmethod
    def text_must_not_be_blank(cls, v: Any) -> Any:
        return _check_text(v)

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_non_negative(cls, v: Any) -> Any:
        return _check_price(v)


class ProductPatchDTO(BaseModel):
    """Immutable DTO for partial update requests.

    All fields are optional; an explicit ``null`` is still validated
    (and rejected) because defaults are the only values that skip validation.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    price: float | None = None
    color: str | None = None
    description: str | None = None

    @field_validator("name", "color", "description", mode="before")
    @classmethod
    def text_must_not_be_blank(cls, v: Any) -> Any:
        return _check_text(v)

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_non_negative(cls, v: Any) -> Any:
        return _check_price(v)

    def supplied(self) -> dict:
        """Return only the fields that were present in the request."""
        return {field: getattr(self, field) for field in self.model_fields_set}
