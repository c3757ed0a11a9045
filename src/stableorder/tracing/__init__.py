"""Action history: a bounded, recency-ordered record of accepted and rejected mutations.

Usage:
    from stableorder.tracing import BoundedHistoryLog, HistoryKind

    log = BoundedHistoryLog(capacity=20, display_limit=5)
    log.record(HistoryKind.DELETE, 'Deleted "Item B"')
    for entry in log.recent():
        print(entry.clock_time, entry.message)
"""

from stableorder.tracing.log import (
    DEFAULT_DISPLAY_LIMIT,
    DEFAULT_HISTORY_CAPACITY,
    BoundedHistoryLog,
)
from stableorder.tracing.models import HistoryEntry, HistoryKind
from stableorder.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "HistoryEntry",
    "HistoryKind",
    "BoundedHistoryLog",
    "DEFAULT_HISTORY_CAPACITY",
    "DEFAULT_DISPLAY_LIMIT",
]
