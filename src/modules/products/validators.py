"""Product payload and path-id validation.

``validate_product`` runs the pydantic DTOs and flattens their errors into
the ``"Invalid <field>"`` strings returned to API clients, in the fixed
field order name, price, color, description.  A missing field and a
malformed one produce the same message.
"""

from __future__ import annotations

import enum
import re
from typing import Any, List, Mapping, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.products.dtos import ProductDTO, ProductPatchDTO
from modules.products.exceptions import InvalidProductId, ProductValidationFailed
from modules.products.models import PRODUCT_FIELDS

_ID_PATTERN = re.compile(r"-?[0-9]+")


class ValidationMode(str, enum.Enum):
    FULL = "full"
    PARTIAL = "partial"


_DTO_FOR_MODE: dict[ValidationMode, Type[BaseModel]] = {
    ValidationMode.FULL: ProductDTO,
    ValidationMode.PARTIAL: ProductPatchDTO,
}


def _build(payload: Any, mode: ValidationMode) -> Tuple[BaseModel | None, List[str]]:
    if not isinstance(payload, Mapping):
        payload = {}
    data = {field: payload[field] for field in PRODUCT_FIELDS if field in payload}
    try:
        return _DTO_FOR_MODE[mode](**data), []
    except PydanticValidationError as exc:
        failed = {err["loc"][0] for err in exc.errors() if err["loc"]}
        return None, [f"Invalid {field}" for field in PRODUCT_FIELDS if field in failed]


def validate_product(payload: Any, mode: ValidationMode = ValidationMode.FULL) -> List[str]:
    """Return the ordered list of field errors; empty means valid."""
    _, errors = _build(payload, mode)
    return errors


def product_dto_from_payload(payload: Any) -> ProductDTO:
    """Validate in full mode and return the DTO.

    Raises:
        ProductValidationFailed: with the ordered error list.
    """
    dto, errors = _build(payload, ValidationMode.FULL)
    if errors:
        raise ProductValidationFailed(errors)
    return dto  # type: ignore[return-value]


def patch_dto_from_payload(payload: Any) -> ProductPatchDTO:
    """Validate in partial mode and return the DTO.

    Raises:
        ProductValidationFailed: with the ordered error list.
    """
    dto, errors = _build(payload, ValidationMode.PARTIAL)
    if errors:
        raise ProductValidationFailed(errors)
    return dto  # type: ignore[return-value]


def parse_product_id(raw: Any) -> int:
    """Parse a path identifier as a base-10 integer literal.

    Raises:
        InvalidProductId: for anything else (``"abc"``, ``"1.5"``, ``"12abc"``).
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if not isinstance(raw, str) or not _ID_PATTERN.fullmatch(raw):
        raise InvalidProductId(f"Invalid id: {raw!r}")
    return int(raw)
