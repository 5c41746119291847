"""Project-wide DRF exception handler.

Framework-level failures (malformed JSON, unsupported method or media
type) reach this handler instead of a view's own ``try`` blocks.  DRF's
``{"detail": ...}`` body is reshaped into the ``{"error": ...}`` envelope
the product endpoints use, keeping DRF's status code.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def api_exception_handler(exc: Exception, context: dict) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is None:
        # Not an API exception: let Django produce its 500.
        return None

    detail: Any = response.data
    if isinstance(detail, dict) and "detail" in detail:
        detail = detail["detail"]

    logger.warning(
        "api_error",
        status_code=response.status_code,
        exception=type(exc).__name__,
    )
    response.data = {"error": str(detail)}
    return response
