"""Data models for the action history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class HistoryKind(Enum):
    """Kind of mutation a history entry describes."""

    MOVE = "move"
    DELETE = "delete"
    INSERT = "insert"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One recorded action.

    Attributes:
        kind: What kind of mutation was attempted.
        message: Human-readable description.
        time: Unix timestamp when the entry was recorded.
        warning: True for rejected requests and unsafe (index mode) actions.
        source: Optional name of the collection that produced the entry.

    Example:
        entry = HistoryEntry(
            kind=HistoryKind.DELETE,
            message='Deleted "Item B" (id item-2)',
            time=1704067200.0,
        )
    """

    kind: HistoryKind
    message: str
    time: float
    warning: bool = False
    source: str | None = None

    @property
    def clock_time(self) -> str:
        """Local wall-clock time, HH:MM:SS, for display."""
        return datetime.fromtimestamp(self.time).strftime("%H:%M:%S")
