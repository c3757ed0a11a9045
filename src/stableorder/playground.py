"""Playground: the same seed list under several reference configurations.

Runs the index-based anti-pattern next to the identity-based variants so the
difference after a deletion can be observed directly.

Usage:
    playground = Playground()
    wrong = playground["wrong"]
    wrong.submit_delete(1)
    wrong.submit_reorder(ReorderRequest(active=2, over=0))  # moves the wrong item

    for entry in playground.recent_history():
        print(entry.source, entry.message)
"""

from __future__ import annotations

import heapq
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import islice

from stableorder.config import DEFAULT_SEED_VALUES
from stableorder.coordination import ReorderCoordinator
from stableorder.core.identity import IdStrategy, create_generator
from stableorder.core.references import ReferenceMode
from stableorder.tracing import DEFAULT_DISPLAY_LIMIT, DEFAULT_HISTORY_CAPACITY, HistoryEntry


@dataclass(frozen=True, slots=True)
class VariantPreset:
    """Named reference-mode and id-strategy combination."""

    name: str
    mode: ReferenceMode
    id_strategy: IdStrategy


VARIANTS: tuple[VariantPreset, ...] = (
    VariantPreset("wrong", ReferenceMode.INDEX, IdStrategy.INCREMENTAL),
    VariantPreset("generated", ReferenceMode.IDENTITY, IdStrategy.RANDOM),
    VariantPreset("correct", ReferenceMode.IDENTITY, IdStrategy.INCREMENTAL),
)


class Playground:
    """Set of independent coordinators sharing one seed list.

    Each variant owns its collection and its history log; nothing is shared
    between them except the seed values.

    Args:
        seed_values: Values every variant starts from.
        presets: Variants to build (default VARIANTS).
        history_capacity: Capacity of each variant's log.
        display_limit: Default window of recent_history().
        clock: Time source for every log.

    Raises:
        ValueError: If two presets share a name.
    """

    def __init__(
        self,
        seed_values: Iterable[str] = DEFAULT_SEED_VALUES,
        *,
        presets: Iterable[VariantPreset] = VARIANTS,
        history_capacity: int = DEFAULT_HISTORY_CAPACITY,
        display_limit: int = DEFAULT_DISPLAY_LIMIT,
        clock: Callable[[], float] = time.time,
    ):
        seed = tuple(seed_values)
        self._display_limit = display_limit
        self._variants: dict[str, ReorderCoordinator] = {}
        for preset in presets:
            if preset.name in self._variants:
                raise ValueError(f"Duplicate variant name: {preset.name!r}")
            self._variants[preset.name] = ReorderCoordinator(
                seed,
                mode=preset.mode,
                generator=create_generator(preset.id_strategy),
                history_capacity=history_capacity,
                display_limit=display_limit,
                label=preset.name,
                clock=clock,
            )

    @property
    def names(self) -> list[str]:
        return list(self._variants)

    def variant(self, name: str) -> ReorderCoordinator:
        """Get the coordinator of one variant.

        Raises:
            KeyError: If no variant has that name.
        """
        try:
            return self._variants[name]
        except KeyError:
            raise KeyError(f"Unknown variant {name!r}; expected one of {self.names}") from None

    def __getitem__(self, name: str) -> ReorderCoordinator:
        return self.variant(name)

    def __iter__(self) -> Iterator[ReorderCoordinator]:
        return iter(self._variants.values())

    def __len__(self) -> int:
        return len(self._variants)

    def reset(self) -> None:
        """Reset every variant: fresh ids, seed order, empty logs."""
        for coordinator in self._variants.values():
            coordinator.reset_collection()

    def recent_history(self, n: int | None = None) -> list[HistoryEntry]:
        """Entries of all variants merged, newest first.

        Args:
            n: Maximum number of entries; the display limit when None.
        """
        if n is None:
            n = self._display_limit
        if n < 0:
            raise ValueError(f"Entry count must not be negative, got {n}")
        streams = [list(coordinator.history)[::-1] for coordinator in self._variants.values()]
        merged = heapq.merge(*streams, key=lambda entry: entry.time, reverse=True)
        return list(islice(merged, n))
