"""Database helpers shared by the Django repositories."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

from django.db import connection, transaction

if TYPE_CHECKING:
    from modules.core.deadline import Deadline


@contextmanager
def bounded_atomic(deadline: Optional[Deadline], operation: str) -> Iterator[None]:
    """``transaction.atomic()`` whose statements respect *deadline*.

    The deadline is checked before the transaction opens.  On PostgreSQL the
    remaining budget also becomes the transaction-local ``statement_timeout``
    so a slow statement is cancelled by the server instead of outliving the
    request.
    """
    if deadline is not None:
        deadline.check(operation)

    with transaction.atomic():
        if deadline is not None and connection.vendor == "postgresql":
            timeout_ms = max(1, int(deadline.remaining() * 1000))
            with connection.cursor() as cursor:
                cursor.execute(
                    "SELECT set_config('statement_timeout', %s, true)",
                    [str(timeout_ms)],
                )
        yield
