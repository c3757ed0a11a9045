"""Protocols for history storage.

The coordinator records through this interface, so a log that also mirrors
entries elsewhere can replace the default bounded buffer.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stableorder.tracing.models import HistoryEntry, HistoryKind


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for recording and reading back the action history.

    Usage:
        log = BoundedHistoryLog(capacity=50)
        log.record(HistoryKind.MOVE, "Moved item-4 onto item-1")
        latest = log.recent(5)

    Thread Safety:
        None. A log belongs to exactly one collection and its owning thread.
    """

    def record(
        self,
        kind: HistoryKind,
        message: str,
        warning: bool = False,
        source: str | None = None,
    ) -> HistoryEntry:
        """Append an entry stamped with the current time.

        Note:
            Storage is bounded; the oldest entry is evicted once capacity is exceeded.
        """
        ...

    def recent(self, n: int | None = None) -> list[HistoryEntry]:
        """Last n entries, newest first. Never mutates the log."""
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...

    def __iter__(self) -> Iterator[HistoryEntry]:
        """Iterate entries oldest first."""
        ...

    @property
    def entry_count(self) -> int:
        """Number of entries currently stored."""
        ...
