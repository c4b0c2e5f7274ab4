"""Per-request deadlines.

A ``Deadline`` is created once per inbound request (see
``RequestDeadlineMiddleware``) and handed down to every blocking call.
Callers check it *before* blocking and size their timeouts from
``remaining()`` so the call is also bounded while it runs.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import structlog

from shared.domain.errors import DeadlineExceeded

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Deadline:
    """Absolute point on the monotonic clock after which work must stop."""

    expires_at: float

    @classmethod
    def after(cls, seconds: float) -> Deadline:
        return cls(expires_at=time.monotonic() + max(0.0, seconds))

    def remaining(self) -> float:
        """Seconds left, never negative."""
        return max(0.0, self.expires_at - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def check(self, operation: str) -> None:
        """Raise ``DeadlineExceeded`` if no time is left for *operation*."""
        if self.expired:
            logger.warning("deadline.exceeded", operation=operation)
            raise DeadlineExceeded()

    def bound(self, timeout: float) -> float:
        """Clamp *timeout* to the time left."""
        return min(timeout, self.remaining())
