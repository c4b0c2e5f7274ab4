"""Customer RPC endpoints.

Exposes ``CustomerService`` to the shipment service as two remote
procedures (JSON over HTTP POST).  Domain exceptions are translated into
the closed ``RpcStatus`` set from ``shared.contracts.customers``:

- ``InvalidInput`` (and malformed request bodies) -> ``INVALID_ARGUMENT``
- ``NotFound`` -> ``NOT_FOUND``
- ``DeadlineExceeded`` -> ``DEADLINE_EXCEEDED``
- anything else -> ``INTERNAL`` with a generic message
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework.exceptions import APIException, ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView, set_rollback

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from shared.contracts.customers import (
    HTTP_STATUS_BY_RPC_STATUS,
    CustomerResponse,
    GetCustomerRequest,
    RpcError,
    RpcStatus,
    UpsertCustomerRequest,
)
from shared.domain.errors import DeadlineExceeded, InvalidInput, NotFound

if TYPE_CHECKING:
    from modules.core.deadline import Deadline
    from modules.customers.models import Customer

logger = structlog.get_logger(__name__)

INVALID_REQUEST_MESSAGE = "request is required"
INTERNAL_ERROR_MESSAGE = "internal error"


def rpc_status_for(exc: Exception) -> tuple[RpcStatus, str]:
    """Classify *exc* into an RPC status and the message sent to the caller."""
    if isinstance(exc, (ParseError, PydanticValidationError)):
        return RpcStatus.INVALID_ARGUMENT, INVALID_REQUEST_MESSAGE
    if isinstance(exc, InvalidInput):
        return RpcStatus.INVALID_ARGUMENT, exc.message
    if isinstance(exc, NotFound):
        return RpcStatus.NOT_FOUND, exc.message
    if isinstance(exc, DeadlineExceeded):
        return RpcStatus.DEADLINE_EXCEEDED, exc.message
    return RpcStatus.INTERNAL, INTERNAL_ERROR_MESSAGE


def rpc_error_response(code: RpcStatus, message: str) -> Response:
    body = RpcError(code=code, message=message)
    return Response(body.model_dump(mode="json"), status=HTTP_STATUS_BY_RPC_STATUS[code])


class CustomerRpcView(APIView):
    """Base view for a single customer remote procedure.

    Subclasses declare the request model and implement ``call``.
    """

    request_model: type[BaseModel]
    operation: str

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    def post(self, request: Request) -> Response:
        rpc_request = self.request_model.model_validate(request.data)
        customer = self.call(rpc_request, deadline=getattr(request, "deadline", None))

        logger.info(self.operation, customer_id=str(customer.id))

        body = CustomerResponse(
            id=customer.id,
            idn=customer.idn,
            created_at=customer.created_at,
        )
        return Response(body.model_dump(mode="json", by_alias=True))

    def call(self, rpc_request, deadline: Optional[Deadline]) -> Customer:
        raise NotImplementedError

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, APIException) and not isinstance(exc, ParseError):
            return super().handle_exception(exc)

        code, message = rpc_status_for(exc)
        if code == RpcStatus.INTERNAL:
            set_rollback()
            logger.error(f"{self.operation}.failed", exc_info=exc)
        else:
            logger.info(f"{self.operation}.rejected", code=code)
        return rpc_error_response(code, message)


class UpsertCustomerView(CustomerRpcView):
    """POST /rpc/v1/customers/upsert"""

    request_model = UpsertCustomerRequest
    operation = "customer_rpc.upsert"

    def call(
        self, rpc_request: UpsertCustomerRequest, deadline: Optional[Deadline]
    ) -> Customer:
        return self._service.upsert_by_idn(rpc_request.idn, deadline=deadline)


class GetCustomerView(CustomerRpcView):
    """POST /rpc/v1/customers/get"""

    request_model = GetCustomerRequest
    operation = "customer_rpc.get"

    def call(
        self, rpc_request: GetCustomerRequest, deadline: Optional[Deadline]
    ) -> Customer:
        return self._service.get_by_idn(rpc_request.idn, deadline=deadline)
