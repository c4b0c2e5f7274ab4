"""DRF exception handler rendering every error as ``{"error": "<message>"}``.

Views translate domain errors they expect.  Whatever reaches this handler
is either a DRF ``APIException`` (malformed JSON, unsupported media type,
method not allowed, ...) or an unclassified failure.  Unclassified
failures are logged with the correlation id and answered with a generic
500 so internal detail (driver errors, stack traces) never leaves the
process.
"""

from __future__ import annotations

from typing import Any

import structlog
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from shared.domain.errors import DomainError, ErrorKind

logger = structlog.get_logger(__name__)

INVALID_BODY_MESSAGE = "invalid request body"
INTERNAL_ERROR_MESSAGE = "internal error"

HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UPSTREAM_REJECTED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UPSTREAM_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(message: str, status_code: int) -> Response:
    return Response({"error": message}, status=status_code)


def domain_error_response(exc: DomainError) -> Response:
    """Map a classified error onto its HTTP status.

    ``INTERNAL`` never exposes the exception text.
    """
    status_code = HTTP_STATUS_BY_KIND[exc.kind]
    if exc.kind == ErrorKind.INTERNAL:
        return error_response(INTERNAL_ERROR_MESSAGE, status_code)
    return error_response(exc.message, status_code)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else ""

    if isinstance(exc, ParseError):
        logger.info("request.invalid_body", view=view_name, detail=str(exc.detail))
        return error_response(INVALID_BODY_MESSAGE, exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        data = response.data
        if isinstance(data, dict) and isinstance(data.get("detail"), str):
            response.data = {"error": str(data["detail"])}
        else:
            response.data = {"error": INVALID_BODY_MESSAGE}
        return response

    if isinstance(exc, DomainError) and exc.kind != ErrorKind.INTERNAL:
        logger.info("request.domain_error", view=view_name, kind=exc.kind)
        return domain_error_response(exc)

    set_rollback()
    logger.error("request.unhandled_error", view=view_name, exc_info=exc)
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
