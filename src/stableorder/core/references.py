"""Reference modes: how requests address entities.

A reference mode is a small strategy object. The store and the coordinator
ask it to validate and resolve references and never branch on the mode
themselves, so the index-based anti-pattern is just another configuration.

Usage:
    resolver = resolver_for(ReferenceMode.IDENTITY)
    index = resolver.resolve(store, "item-3")
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from stableorder.core.errors import MalformedRequestError, ReferenceStaleError
from stableorder.core.models import Reference

if TYPE_CHECKING:
    from stableorder.storage.protocol import CollectionStore


class ReferenceMode(Enum):
    """Whether entities are addressed by stable id or by raw position."""

    INDEX = "index"
    """Raw positions. Valid only until the next structural change."""

    IDENTITY = "identity"
    """Stable ids, resolved to positions right before each mutation."""


@runtime_checkable
class ReferenceResolver(Protocol):
    """Strategy for validating and resolving references in one mode."""

    mode: ReferenceMode
    stable: bool
    """False when a reference can silently change meaning after a structural change."""

    def validate(self, ref: object) -> Reference:
        """Check the reference type for this mode.

        Raises:
            MalformedRequestError: If ref is None or of the wrong type.
        """
        ...

    def locate(self, store: CollectionStore, ref: Reference) -> int | None:
        """Current position of the entity ref denotes, or None when nothing matches."""
        ...

    def resolve(self, store: CollectionStore, ref: Reference) -> int:
        """Position to hand to move(). Raises when the mode can tell ref is unusable."""
        ...

    def reference_for(self, store: CollectionStore, index: int) -> Reference:
        """Reference this mode would hand out for the entity at index."""
        ...


def _require(ref: object, expected: type, mode: ReferenceMode) -> None:
    if ref is None:
        raise MalformedRequestError(f"{mode.value} mode received a null reference")
    # bool is an int subclass but never a meaningful position
    if isinstance(ref, bool) or not isinstance(ref, expected):
        raise MalformedRequestError(
            f"{mode.value} mode expects {expected.__name__} references, "
            f"got {type(ref).__name__}: {ref!r}"
        )


class IndexReferences:
    """Positions as references.

    Resolution is a pass-through. A position captured before a deletion
    silently addresses whichever entity has shifted into that slot; this
    mode has no way to tell a stale index from a fresh one.
    """

    mode = ReferenceMode.INDEX
    stable = False

    def validate(self, ref: object) -> Reference:
        _require(ref, int, self.mode)
        return ref  # type: ignore[return-value]

    def locate(self, store: CollectionStore, ref: Reference) -> int | None:
        index = int(ref)
        return index if 0 <= index < len(store) else None

    def resolve(self, store: CollectionStore, ref: Reference) -> int:
        return int(ref)

    def reference_for(self, store: CollectionStore, index: int) -> Reference:
        return index


class IdentityReferences:
    """Entity ids as references, looked up immediately before use."""

    mode = ReferenceMode.IDENTITY
    stable = True

    def validate(self, ref: object) -> Reference:
        _require(ref, str, self.mode)
        return ref  # type: ignore[return-value]

    def locate(self, store: CollectionStore, ref: Reference) -> int | None:
        return store.index_of(str(ref))

    def resolve(self, store: CollectionStore, ref: Reference) -> int:
        index = self.locate(store, ref)
        if index is None:
            raise ReferenceStaleError(ref)
        return index

    def reference_for(self, store: CollectionStore, index: int) -> Reference:
        return store.at(index).id


_RESOLVERS: dict[ReferenceMode, ReferenceResolver] = {
    ReferenceMode.INDEX: IndexReferences(),
    ReferenceMode.IDENTITY: IdentityReferences(),
}


def resolver_for(mode: ReferenceMode | str) -> ReferenceResolver:
    """Get the resolver for a reference mode (enum member or its value).

    Raises:
        ValueError: If mode names no known reference mode.
    """
    return _RESOLVERS[ReferenceMode(mode)]
