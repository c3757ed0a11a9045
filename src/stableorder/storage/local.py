"""Local in-memory ordered collection.

A plain list holds the order; a set of ids enforces uniqueness. Lookups by
id are a linear scan, which is fine for the collection sizes a drag-and-drop
list ever reaches.

Usage:
    store = OrderedCollection(seed_entities(["A", "B", "C"], generator))
    store.move(0, 2)
    store.remove("item-2")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from stableorder.core.errors import DuplicateIdError, NotFoundError, OutOfRangeError
from stableorder.core.models import Entity, MoveResult, Reference
from stableorder.core.references import ReferenceMode, ReferenceResolver, resolver_for


class OrderedCollection:
    """In-memory ordered collection of entities with unique ids.

    Structure:
        _entities: display order, the only source of truth for position
        _ids: ids currently present

    Every mutator validates before touching state, so a failed call leaves
    the collection exactly as it was.

    Args:
        entities: Initial contents, in order.
        mode: Reference mode used by remove() (default identity).
    """

    def __init__(
        self,
        entities: Iterable[Entity] = (),
        mode: ReferenceMode | str = ReferenceMode.IDENTITY,
    ):
        self._resolver: ReferenceResolver = resolver_for(mode)
        self._entities: list[Entity] = []
        self._ids: set[str] = set()
        self.reset(entities)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entities):
            raise OutOfRangeError(index, len(self._entities))

    @property
    def mode(self) -> ReferenceMode:
        return self._resolver.mode

    @property
    def resolver(self) -> ReferenceResolver:
        """Reference resolver for this collection's mode."""
        return self._resolver

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(tuple(self._entities))

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._ids

    def __repr__(self) -> str:
        values = ", ".join(repr(e.value) for e in self._entities)
        return f"OrderedCollection(mode={self.mode.value}, [{values}])"

    def index_of(self, entity_id: str) -> int | None:
        """Find the current position of an id.

        Args:
            entity_id: Id to look for.

        Returns:
            Position of the entity, or None if no entity has that id.
        """
        if entity_id not in self._ids:
            return None
        for index, entity in enumerate(self._entities):
            if entity.id == entity_id:
                return index
        return None

    def at(self, index: int) -> Entity:
        """Get the entity at a position.

        Raises:
            OutOfRangeError: If index is outside [0, len).
        """
        self._check_index(index)
        return self._entities[index]

    def get(self, entity_id: str) -> Entity | None:
        index = self.index_of(entity_id)
        return None if index is None else self._entities[index]

    def ids(self) -> list[str]:
        """Ids in display order."""
        return [e.id for e in self._entities]

    def snapshot(self) -> tuple[Entity, ...]:
        """Immutable view of the current order, safe to hand to renderers."""
        return tuple(self._entities)

    def move(self, old_index: int, new_index: int) -> MoveResult | None:
        """Move an entity, shifting the ones in between by one position.

        Args:
            old_index: Current position of the entity to move.
            new_index: Position the entity should end up at.

        Returns:
            MoveResult describing the move, or None when the indices are equal.

        Raises:
            OutOfRangeError: If either index is outside [0, len).
        """
        self._check_index(old_index)
        self._check_index(new_index)
        if old_index == new_index:
            return None

        entity = self._entities.pop(old_index)
        self._entities.insert(new_index, entity)
        return MoveResult(old_index=old_index, new_index=new_index, entity=entity)

    def insert(self, entity: Entity) -> None:
        """Append an entity at the end.

        Raises:
            DuplicateIdError: If an entity with the same id is present.
        """
        if entity.id in self._ids:
            raise DuplicateIdError(entity.id)
        self._entities.append(entity)
        self._ids.add(entity.id)

    def remove(self, ref: Reference) -> Entity:
        """Remove the entity a reference denotes in this collection's mode.

        Args:
            ref: Entity id (identity mode) or position (index mode).

        Returns:
            The removed entity.

        Raises:
            NotFoundError: If no entity matches ref.
        """
        index = self._resolver.locate(self, ref)
        if index is None:
            raise NotFoundError(ref)
        entity = self._entities.pop(index)
        self._ids.discard(entity.id)
        return entity

    def reset(self, seed: Iterable[Entity]) -> None:
        """Replace the entire sequence.

        Raises:
            DuplicateIdError: If seed repeats an id. The previous contents are kept.
        """
        entities = list(seed)
        ids: set[str] = set()
        for entity in entities:
            if entity.id in ids:
                raise DuplicateIdError(entity.id)
            ids.add(entity.id)
        self._entities = entities
        self._ids = ids
