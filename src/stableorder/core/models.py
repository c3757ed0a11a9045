"""Entity and request models.

Usage:
    entity = Entity(id="item-1", value="Item A")
    renamed = entity.with_value("Item A (edited)")
    request = ReorderRequest(active="item-4", over="item-1")
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TypeAlias

Reference: TypeAlias = str | int
"""Either a stable entity id (str) or a raw position (int)."""


@dataclass(frozen=True, slots=True)
class Entity:
    """One item of an ordered collection.

    The id is opaque and fixed for the lifetime of the entity. The value is
    the only field callers are expected to change, through with_value().
    """

    id: str
    value: str

    def with_value(self, value: str) -> Entity:
        """Return a copy carrying a new value and the same id."""
        return dataclasses.replace(self, value=value)


@dataclass(frozen=True, slots=True)
class ReorderRequest:
    """Request to place the entity at `active` where `over` currently sits.

    References are ids in identity mode and positions in index mode.
    """

    active: Reference
    over: Reference


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a successful move.

    Attributes:
        old_index: Position the entity occupied before the move.
        new_index: Position the entity occupies after the move.
        entity: The entity that was moved.
        active_ref: Raw active reference of the originating request, if any.
        over_ref: Raw over reference of the originating request, if any.
    """

    old_index: int
    new_index: int
    entity: Entity
    active_ref: Reference | None = None
    over_ref: Reference | None = None

    def with_refs(self, active_ref: Reference, over_ref: Reference) -> MoveResult:
        """Attach the request references the move was resolved from."""
        return dataclasses.replace(self, active_ref=active_ref, over_ref=over_ref)
