import socket
import time
from typing import Any, Dict

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.urls import reverse
from django.utils import timezone

from modules.products.models import Product

logger = structlog.get_logger()

WELCOME_MESSAGE = "Welcome to Apple Products API"


def home(request: HttpRequest) -> JsonResponse:
    return JsonResponse(
        {
            "message": WELCOME_MESSAGE,
            "hostname": socket.gethostname(),
            "products_url": request.build_absolute_uri(reverse("product-list")),
        }
    )


def _probe_database() -> Dict[str, Any]:
    start = time.monotonic()
    conn = connections["default"]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        "products": Product.objects.count(),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """Report database reachability and the size of the product table."""
    try:
        database = _probe_database()
    except DatabaseError as exc:
        database = {"status": "down"}
        logger.error("health_check.database_down", error=str(exc))

    healthy = database["status"] == "up"
    status = "healthy" if healthy else "unhealthy"
    logger.info("health_check.completed", status=status)

    return JsonResponse(
        {
            "status": status,
            "timestamp": timezone.now().isoformat(),
            "services": {"database": database},
        },
        status=200 if healthy else 503,
    )
