"""Bounded in-memory history log."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable, Iterator
from itertools import islice

from stableorder.tracing.models import HistoryEntry, HistoryKind

DEFAULT_HISTORY_CAPACITY = 50
"""Entries retained before the oldest is evicted."""

DEFAULT_DISPLAY_LIMIT = 5
"""Entries returned by recent() when no explicit count is given."""


class BoundedHistoryLog:
    """Ring buffer of history entries.

    Args:
        capacity: Maximum number of entries kept.
        display_limit: Default window size for recent().
        clock: Returns the current Unix time (default time.time).

    Raises:
        ValueError: If capacity or display_limit is not positive.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_HISTORY_CAPACITY,
        display_limit: int = DEFAULT_DISPLAY_LIMIT,
        clock: Callable[[], float] = time.time,
    ):
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        if display_limit < 1:
            raise ValueError(f"Display limit must be positive, got {display_limit}")
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)
        self._display_limit = display_limit
        self._clock = clock

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    @property
    def display_limit(self) -> int:
        return self._display_limit

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def record(
        self,
        kind: HistoryKind,
        message: str,
        warning: bool = False,
        source: str | None = None,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            kind=kind,
            message=message,
            time=self._clock(),
            warning=warning,
            source=source,
        )
        # deque(maxlen=...) drops the leftmost entry on overflow
        self._entries.append(entry)
        return entry

    def recent(self, n: int | None = None) -> list[HistoryEntry]:
        """Most recent entries, newest first.

        Args:
            n: Maximum number of entries; the display limit when None.

        Returns:
            At most n entries, fewer if the log holds fewer.

        Raises:
            ValueError: If n is negative.
        """
        if n is None:
            n = self._display_limit
        if n < 0:
            raise ValueError(f"Entry count must not be negative, got {n}")
        return list(islice(reversed(self._entries), n))

    def clear(self) -> None:
        self._entries.clear()
