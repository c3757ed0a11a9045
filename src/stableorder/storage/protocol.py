"""Storage protocol for ordered collections.

The coordinator only talks to this interface. A pre-built backend can be
passed to it, provided the backend uses the coordinator's reference mode.

Usage:
    store: CollectionStore = OrderedCollection(entities, mode=ReferenceMode.IDENTITY)
    coordinator = ReorderCoordinator(["A", "B"], store=store)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Protocol

from stableorder.core.models import Entity, MoveResult, Reference

if TYPE_CHECKING:
    from stableorder.core.references import ReferenceMode


class CollectionStore(Protocol):
    """Abstract ordered collection. Implementations own their sequence."""

    @property
    def mode(self) -> ReferenceMode:
        """Reference mode used by remove()."""
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Entity]: ...

    def __contains__(self, entity_id: object) -> bool: ...

    def index_of(self, entity_id: str) -> int | None:
        """Current position of the entity with this id, None if absent."""
        ...

    def at(self, index: int) -> Entity:
        """Entity at a position. Raises OutOfRangeError."""
        ...

    def get(self, entity_id: str) -> Entity | None:
        """Entity with this id, None if absent."""
        ...

    def snapshot(self) -> tuple[Entity, ...]:
        """Immutable copy of the current order."""
        ...

    def move(self, old_index: int, new_index: int) -> MoveResult | None:
        """Move entity at old_index to new_index. None when indices are equal."""
        ...

    def insert(self, entity: Entity) -> None:
        """Append entity. Raises DuplicateIdError."""
        ...

    def remove(self, ref: Reference) -> Entity:
        """Remove by id or position depending on mode. Raises NotFoundError."""
        ...

    def reset(self, seed: Iterable[Entity]) -> None:
        """Replace the whole sequence. Raises DuplicateIdError."""
        ...
