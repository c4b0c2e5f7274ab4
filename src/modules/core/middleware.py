import math
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.conf import settings
from django.http import HttpRequest, HttpResponse

from modules.core.deadline import Deadline

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Middleware that extracts or generates a correlation ID for each request.

    Reads X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is stored in a ContextVar so structlog
    processors can inject it into every log line and the customer RPC
    client can forward it, and is returned to the client via the
    X-Request-ID response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
        )

        response["X-Request-ID"] = cid
        return response


class RequestDeadlineMiddleware:
    """Attach a ``Deadline`` to every request as ``request.deadline``.

    The budget is ``REQUEST_TIMEOUT_SECONDS``, shortened to the caller's
    ``X-Request-Timeout`` (seconds) when an upstream service forwards one.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        budget = settings.REQUEST_TIMEOUT_SECONDS
        forwarded = self._parse_timeout(request.META.get("HTTP_X_REQUEST_TIMEOUT"))
        if forwarded is not None:
            budget = min(budget, forwarded)

        request.deadline = Deadline.after(budget)
        return self.get_response(request)

    @staticmethod
    def _parse_timeout(raw: str | None) -> float | None:
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            logger.warning("request_timeout_header_ignored", value=raw)
            return None
        if math.isnan(value) or value < 0:
            logger.warning("request_timeout_header_ignored", value=raw)
            return None
        return value
