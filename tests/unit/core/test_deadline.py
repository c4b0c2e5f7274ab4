"""Unit tests for Deadline and bounded_atomic."""

from __future__ import annotations

import pytest

from modules.core.db import bounded_atomic
from modules.core.deadline import Deadline
from shared.domain.errors import DeadlineExceeded, ErrorKind

pytestmark = pytest.mark.unit


class TestDeadline:
    def test_remaining_is_bounded_by_budget(self):
        deadline = Deadline.after(5)
        assert 0 < deadline.remaining() <= 5

    def test_zero_budget_is_expired(self):
        deadline = Deadline.after(0)
        assert deadline.expired
        assert deadline.remaining() == 0.0

    def test_negative_budget_is_clamped(self):
        deadline = Deadline.after(-3)
        assert deadline.remaining() == 0.0

    def test_check_passes_with_time_left(self):
        Deadline.after(5).check("op")

    def test_check_raises_when_expired(self):
        with pytest.raises(DeadlineExceeded) as exc_info:
            Deadline.after(0).check("op")
        assert exc_info.value.kind == ErrorKind.UPSTREAM_UNAVAILABLE

    def test_bound_clamps_timeout(self):
        deadline = Deadline.after(1)
        assert deadline.bound(30) <= 1
        assert deadline.bound(0.5) == 0.5


class TestBoundedAtomic:
    def test_runs_body_when_time_left(self):
        ran = []
        with bounded_atomic(Deadline.after(5), "op"):
            ran.append(True)
        assert ran == [True]

    def test_runs_body_without_deadline(self):
        ran = []
        with bounded_atomic(None, "op"):
            ran.append(True)
        assert ran == [True]

    def test_expired_deadline_aborts_before_transaction(self):
        ran = []
        with pytest.raises(DeadlineExceeded):
            with bounded_atomic(Deadline.after(0), "op"):
                ran.append(True)
        assert ran == []
