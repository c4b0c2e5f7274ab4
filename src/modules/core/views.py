import time

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, HttpResponse, JsonResponse

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> HttpResponse:
    """Liveness probe: the process is up and serving requests."""
    return HttpResponse("OK", content_type="text/plain")


def readiness_check(request: HttpRequest) -> JsonResponse:
    """Readiness probe: the database answers ``SELECT 1``."""
    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError:
        logger.error("readiness_check_db_failure", exc_info=True)
        return JsonResponse({"status": "unavailable"}, status=503)

    response_time_ms = round((time.monotonic() - start) * 1000, 2)
    logger.info("readiness_check_completed", response_time_ms=response_time_ms)
    return JsonResponse(
        {
            "status": "ready",
            "database": {"status": "up", "response_time_ms": response_time_ms},
        }
    )
