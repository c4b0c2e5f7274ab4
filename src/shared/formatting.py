"""Wire formatting helpers shared by both services."""

from __future__ import annotations

from datetime import datetime, timezone

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def to_rfc3339(value: datetime) -> str:
    """Render an aware datetime as RFC 3339 in UTC, second precision."""
    return value.astimezone(timezone.utc).strftime(RFC3339_FORMAT)
