"""Error taxonomy shared by every module.

Each domain exception carries an :class:`ErrorKind`.  Transport adapters
(HTTP views, RPC views, the RPC client) translate between kinds and their
own status codes, so the classification survives every process boundary.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of error classes understood at every boundary."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    UPSTREAM_REJECTED = "UPSTREAM_REJECTED"
    INTERNAL = "INTERNAL"


class DomainError(Exception):
    """Base class for classified errors.

    ``default_message`` is short and machine-stable; it is what clients see.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "internal error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidInput(DomainError):
    """Malformed route, price, IDN or identifier."""

    kind = ErrorKind.INVALID_INPUT
    default_message = "invalid input"


class NotFound(DomainError):
    kind = ErrorKind.NOT_FOUND
    default_message = "not found"


class UpstreamUnavailable(DomainError):
    """The remote call could not be completed (transport-level failure)."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE
    default_message = "customer service unavailable"


class UpstreamRejected(DomainError):
    """The remote call completed but reported the request as invalid."""

    kind = ErrorKind.UPSTREAM_REJECTED
    default_message = "customer rejected by customer service"


class Internal(DomainError):
    kind = ErrorKind.INTERNAL
    default_message = "internal error"


class DeadlineExceeded(UpstreamUnavailable):
    """The request ran out of time before a blocking call could complete."""

    default_message = "request deadline exceeded"
