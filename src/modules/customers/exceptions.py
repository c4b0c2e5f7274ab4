"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The RPC views catch these and translate them into RPC status codes.
"""

from __future__ import annotations

from shared.domain.errors import InvalidInput, NotFound


class InvalidIDN(InvalidInput):
    """The IDN is not exactly 12 decimal digits."""

    default_message = "invalid idn"


class CustomerNotFound(NotFound):
    """No customer is registered under the given IDN."""

    default_message = "customer not found"
