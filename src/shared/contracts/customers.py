"""Customer RPC contract.

The customer service exposes two remote procedures over JSON/HTTP.  Both
sides of the boundary import this module, so request/response shapes and
the closed set of status codes cannot drift apart.

- ``UpsertCustomerRequest`` / ``GetCustomerRequest``: request bodies.
- ``CustomerResponse``: success body (``createdAt`` is RFC 3339 UTC).
- ``RpcError``: failure body, ``code`` is always an ``RpcStatus``.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer

from shared.formatting import to_rfc3339

UPSERT_CUSTOMER_PATH = "/rpc/v1/customers/upsert"
GET_CUSTOMER_PATH = "/rpc/v1/customers/get"

# Headers forwarded from caller to callee
CORRELATION_ID_HEADER = "X-Request-ID"
REQUEST_TIMEOUT_HEADER = "X-Request-Timeout"


class RpcStatus(StrEnum):
    """Status codes carried across the customer RPC boundary."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    DEADLINE_EXCEEDED = "DEADLINE_EXCEEDED"
    UNAVAILABLE = "UNAVAILABLE"
    INTERNAL = "INTERNAL"


HTTP_STATUS_BY_RPC_STATUS: dict[RpcStatus, int] = {
    RpcStatus.INVALID_ARGUMENT: 400,
    RpcStatus.NOT_FOUND: 404,
    RpcStatus.DEADLINE_EXCEEDED: 504,
    RpcStatus.UNAVAILABLE: 503,
    RpcStatus.INTERNAL: 500,
}


class UpsertCustomerRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    idn: StrictStr


class GetCustomerRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    idn: StrictStr


class CustomerResponse(BaseModel):
    """Customer record as seen by remote callers."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID
    idn: str
    created_at: datetime = Field(alias="createdAt")

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return to_rfc3339(value)


class RpcError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: RpcStatus
    message: str = ""
