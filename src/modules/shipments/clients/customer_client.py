"""HTTP client for the customer service RPC endpoints.

Every call is a single JSON POST.  Nothing is retried and nothing is
cached: the remote outcome is returned or translated, never guessed.

Translation of failures:

- ``INVALID_ARGUMENT`` -> ``UpstreamRejected`` (remote message kept)
- ``NOT_FOUND`` -> ``NotFound``
- ``UNAVAILABLE`` / ``DEADLINE_EXCEEDED``, connection errors, timeouts and
  gateway errors without an RPC body -> ``UpstreamUnavailable``
- anything else -> ``Internal``
"""

from __future__ import annotations

from typing import Any, Optional

import requests
import structlog
from django.conf import settings
from pydantic import ValidationError as PydanticValidationError

from modules.core.deadline import Deadline
from modules.core.middleware import correlation_id_var
from modules.shipments.clients.interfaces import ICustomerClient
from shared.contracts.customers import (
    CORRELATION_ID_HEADER,
    REQUEST_TIMEOUT_HEADER,
    UPSERT_CUSTOMER_PATH,
    CustomerResponse,
    RpcError,
    RpcStatus,
    UpsertCustomerRequest,
)
from shared.domain.errors import (
    DeadlineExceeded,
    DomainError,
    Internal,
    NotFound,
    UpstreamRejected,
    UpstreamUnavailable,
)

logger = structlog.get_logger(__name__)

GATEWAY_STATUSES = frozenset({502, 503, 504})


def error_for_rpc_status(code: RpcStatus, message: str) -> DomainError:
    """Translate a remote status into the local taxonomy."""
    if code == RpcStatus.INVALID_ARGUMENT:
        return UpstreamRejected(message or None)
    if code == RpcStatus.NOT_FOUND:
        return NotFound(message or None)
    if code in (RpcStatus.UNAVAILABLE, RpcStatus.DEADLINE_EXCEEDED):
        return UpstreamUnavailable()
    return Internal()


class HttpCustomerClient(ICustomerClient):
    """``ICustomerClient`` speaking JSON over HTTP with ``requests``."""

    def __init__(
        self,
        base_url: str,
        timeout: float,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls) -> HttpCustomerClient:
        return cls(
            base_url=settings.CUSTOMER_SERVICE_URL,
            timeout=settings.CUSTOMER_RPC_TIMEOUT_SECONDS,
        )

    def upsert_by_idn(
        self, idn: str, deadline: Optional[Deadline] = None
    ) -> CustomerResponse:
        payload = UpsertCustomerRequest(idn=idn).model_dump()
        return self._call(UPSERT_CUSTOMER_PATH, payload, deadline)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _call(
        self,
        path: str,
        payload: dict[str, Any],
        deadline: Optional[Deadline],
    ) -> CustomerResponse:
        timeout = self._timeout
        headers = {}
        if deadline is not None:
            # one clock read: a zero timeout must never reach the transport
            timeout = deadline.bound(timeout)
            if timeout <= 0:
                logger.warning("deadline.exceeded", operation=f"customer_rpc{path}")
                raise DeadlineExceeded()
            headers[REQUEST_TIMEOUT_HEADER] = f"{timeout:.3f}"

        correlation_id = correlation_id_var.get()
        if correlation_id:
            headers[CORRELATION_ID_HEADER] = correlation_id

        url = f"{self._base_url}{path}"
        try:
            response = self._session.post(
                url, json=payload, headers=headers, timeout=timeout
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.warning("customer_rpc.unavailable", path=path, error=str(exc))
            raise UpstreamUnavailable() from exc
        except requests.RequestException as exc:
            logger.error("customer_rpc.failed", path=path, exc_info=exc)
            raise Internal() from exc

        if response.ok:
            try:
                return CustomerResponse.model_validate(response.json())
            except (ValueError, PydanticValidationError) as exc:
                logger.error("customer_rpc.invalid_response", path=path, exc_info=exc)
                raise Internal() from exc

        raise self._error_from_response(path, response)

    def _error_from_response(
        self, path: str, response: requests.Response
    ) -> DomainError:
        try:
            rpc_error = RpcError.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            rpc_error = None

        if rpc_error is None:
            logger.warning(
                "customer_rpc.unexpected_status",
                path=path,
                status_code=response.status_code,
            )
            if response.status_code in GATEWAY_STATUSES:
                return UpstreamUnavailable()
            return Internal()

        logger.info(
            "customer_rpc.error",
            path=path,
            code=rpc_error.code,
            status_code=response.status_code,
        )
        return error_for_rpc_status(rpc_error.code, rpc_error.message)
