"""IDN format check used by the customer registry.

The shipment service runs the same check before calling us; the registry
re-validates because it cannot trust what crosses the RPC boundary.
"""

from __future__ import annotations

import re

IDN_PATTERN = re.compile(r"\d{12}", re.ASCII)


def is_valid_idn(value: str) -> bool:
    """Return ``True`` when *value* is exactly 12 decimal digits."""
    return isinstance(value, str) and IDN_PATTERN.fullmatch(value) is not None
