"""Customer directory client interface.

The shipment workflow only needs the remote customer record; how it is
fetched (HTTP, in-process, fake) is an adapter concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.core.deadline import Deadline
    from shared.contracts.customers import CustomerResponse


class ICustomerClient(ABC):
    """Remote access to the customer service.

    Implementations raise only ``shared.domain.errors`` exceptions:
    ``UpstreamRejected``, ``NotFound``, ``UpstreamUnavailable`` (including
    ``DeadlineExceeded``) or ``Internal``.
    """

    @abstractmethod
    def upsert_by_idn(
        self, idn: str, deadline: Optional[Deadline] = None
    ) -> CustomerResponse:
        """Find or create the customer registered under *idn*."""
