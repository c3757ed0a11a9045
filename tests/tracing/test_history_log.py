"""Tests for BoundedHistoryLog.

Why these tests exist:
- The log must never grow past its capacity
- recent() is the only view consumers get; it must be newest first and bounded
- Reading must never mutate
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stableorder.tracing import (
    DEFAULT_DISPLAY_LIMIT,
    DEFAULT_HISTORY_CAPACITY,
    BoundedHistoryLog,
    HistoryKind,
    HistoryStore,
)


class Ticker:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        self.now += 1.0
        return self.now


@pytest.fixture
def log():
    return BoundedHistoryLog(capacity=3, display_limit=2, clock=Ticker())


def test_log_is_history_store(log):
    assert isinstance(log, HistoryStore)


def test_defaults_are_named_constants():
    log = BoundedHistoryLog()
    assert log.capacity == DEFAULT_HISTORY_CAPACITY
    assert log.display_limit == DEFAULT_DISPLAY_LIMIT


def test_record_stamps_entry(log):
    entry = log.record(HistoryKind.DELETE, "Deleted B", warning=True, source="wrong")
    assert entry.time == 1.0
    assert entry.warning
    assert entry.source == "wrong"
    assert log.entry_count == 1


def test_recent_is_newest_first(log):
    for message in ["one", "two", "three"]:
        log.record(HistoryKind.MOVE, message)
    assert [e.message for e in log.recent(3)] == ["three", "two", "one"]


def test_recent_defaults_to_display_limit(log):
    for message in ["one", "two", "three"]:
        log.record(HistoryKind.MOVE, message)
    assert [e.message for e in log.recent()] == ["three", "two"]


def test_recent_returns_fewer_when_log_is_short(log):
    log.record(HistoryKind.INSERT, "only")
    assert len(log.recent(10)) == 1
    assert log.recent(0) == []


def test_recent_rejects_negative_count(log):
    with pytest.raises(ValueError):
        log.recent(-1)


def test_oldest_evicted_past_capacity(log):
    """CRITICAL: after C+1 records, the first is gone for good."""
    for i in range(4):
        log.record(HistoryKind.MOVE, f"m{i}")
    assert len(log) == 3
    assert "m0" not in [e.message for e in log.recent(10)]
    assert [e.message for e in log] == ["m1", "m2", "m3"]


def test_recent_does_not_mutate(log):
    log.record(HistoryKind.MOVE, "a")
    log.record(HistoryKind.MOVE, "b")
    log.recent(1)
    log.recent()
    assert [e.message for e in log] == ["a", "b"]


def test_clear_empties(log):
    log.record(HistoryKind.MOVE, "a")
    log.clear()
    assert log.entry_count == 0
    assert log.recent() == []


@pytest.mark.parametrize(("capacity", "limit"), [(0, 5), (5, 0), (-1, 1)])
def test_non_positive_parameters_rejected(capacity, limit):
    with pytest.raises(ValueError, match="must be positive"):
        BoundedHistoryLog(capacity=capacity, display_limit=limit)


@given(
    capacity=st.integers(min_value=1, max_value=20),
    records=st.integers(min_value=0, max_value=60),
    n=st.integers(min_value=0, max_value=30),
)
def test_recent_bounds(capacity, records, n):
    """PROPERTY: recent(n) <= n, <= log size, and strictly newest first."""
    log = BoundedHistoryLog(capacity=capacity, clock=Ticker())
    for i in range(records):
        log.record(HistoryKind.MOVE, str(i))

    recent = log.recent(n)
    assert len(recent) <= n
    assert len(recent) <= len(log) <= capacity
    times = [e.time for e in recent]
    assert times == sorted(times, reverse=True)
    assert len(set(times)) == len(times)
