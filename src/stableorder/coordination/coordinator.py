"""ReorderCoordinator: the entry point the gesture layer talks to.

Usage:
    coordinator = ReorderCoordinator(["Item A", "Item B", "Item C", "Item D"])
    a, b, c, d = (entity.id for entity in coordinator.items)

    coordinator.submit_delete(b)
    result = coordinator.submit_reorder(ReorderRequest(active=d, over=a))
    # result.old_index == 2, result.new_index == 0

    for entry in coordinator.recent_history():
        print(entry.kind, entry.message)
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from stableorder.config import DEFAULT_SEED_VALUES, CollectionSettings
from stableorder.core.errors import CollectionError, MalformedRequestError
from stableorder.core.identity import (
    CounterIdGenerator,
    IdGenerator,
    create_entity,
    create_generator,
    seed_entities,
)
from stableorder.core.models import Entity, MoveResult, Reference, ReorderRequest
from stableorder.core.references import ReferenceMode, ReferenceResolver, resolver_for
from stableorder.storage.local import OrderedCollection
from stableorder.storage.protocol import CollectionStore
from stableorder.tracing import (
    DEFAULT_DISPLAY_LIMIT,
    DEFAULT_HISTORY_CAPACITY,
    BoundedHistoryLog,
    HistoryEntry,
    HistoryKind,
    HistoryStore,
)


class ReorderCoordinator:
    """Translates reorder, delete and insert requests into store mutations.

    Owns one collection and one history log. References are validated and
    resolved through the collection's ReferenceResolver, so index mode and
    identity mode share every code path below.

    Recoverable failures (CollectionError) never escape the submit and reset
    methods: they are recorded as warning entries and the collection is left
    untouched. Malformed requests raise MalformedRequestError.

    Args:
        seed_values: Initial values, restored by reset_collection().
        mode: Reference mode (default identity).
        store: Pre-built collection used as-is instead of seeding from
            seed_values. Its mode must match mode.
        generator: Identity generator; a fresh CounterIdGenerator when omitted.
        history: History store; a BoundedHistoryLog when omitted.
        history_capacity: Capacity of the default history log.
        display_limit: Default window of recent_history().
        label: Name stamped on history entries as their source.
        clock: Time source for the default history log.

    Raises:
        ValueError: If store was built for a different reference mode.
        DuplicateIdError: If generator cannot produce distinct seed ids.
    """

    def __init__(
        self,
        seed_values: Iterable[str] = DEFAULT_SEED_VALUES,
        *,
        mode: ReferenceMode | str = ReferenceMode.IDENTITY,
        store: CollectionStore | None = None,
        generator: IdGenerator | None = None,
        history: HistoryStore | None = None,
        history_capacity: int = DEFAULT_HISTORY_CAPACITY,
        display_limit: int = DEFAULT_DISPLAY_LIMIT,
        label: str | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._seed_values = tuple(seed_values)
        self._generator = generator or CounterIdGenerator()
        self._resolver: ReferenceResolver = resolver_for(mode)
        if store is None:
            store = OrderedCollection(
                seed_entities(self._seed_values, self._generator), mode=self._resolver.mode
            )
        elif store.mode is not self._resolver.mode:
            raise ValueError(
                f"Store uses {store.mode.value} references, coordinator expects {self.mode.value}"
            )
        self._store: CollectionStore = store
        if history is None:
            history = BoundedHistoryLog(history_capacity, display_limit, clock=clock)
        self._history = history
        self._label = label

    @classmethod
    def from_settings(
        cls,
        settings: CollectionSettings,
        *,
        label: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> ReorderCoordinator:
        """Build a coordinator from explicit settings."""
        return cls(
            settings.seed_values,
            mode=settings.reference_mode,
            generator=create_generator(settings.id_strategy, **settings.generator_options()),
            history_capacity=settings.history_capacity,
            display_limit=settings.history_display_limit,
            label=label,
            clock=clock,
        )

    # Read side

    @property
    def mode(self) -> ReferenceMode:
        return self._resolver.mode

    @property
    def label(self) -> str | None:
        return self._label

    @property
    def store(self) -> CollectionStore:
        return self._store

    @property
    def history(self) -> HistoryStore:
        return self._history

    @property
    def items(self) -> tuple[Entity, ...]:
        """Read-only snapshot of the current order."""
        return self._store.snapshot()

    def references(self) -> list[Reference]:
        """References the UI should attach to each rendered row, in display order.

        Index mode hands out positions, identity mode hands out ids.
        """
        return [self._resolver.reference_for(self._store, i) for i in range(len(self._store))]

    def recent_history(self, n: int | None = None) -> list[HistoryEntry]:
        """Most recent history entries, newest first."""
        return self._history.recent(n)

    # Entry points

    def submit_reorder(self, request: ReorderRequest) -> MoveResult | None:
        """Place the entity at request.active where request.over currently sits.

        Args:
            request: Pair of references in this coordinator's mode.

        Returns:
            MoveResult with both raw references attached, or None when the
            request was a no-op or was rejected.

        Raises:
            MalformedRequestError: If the request or either reference is malformed.
        """
        if not isinstance(request, ReorderRequest):
            raise MalformedRequestError(f"Expected ReorderRequest, got {type(request).__name__}")
        active = self._resolver.validate(request.active)
        over = self._resolver.validate(request.over)
        try:
            old_index = self._resolver.resolve(self._store, active)
            new_index = self._resolver.resolve(self._store, over)
            result = self._store.move(old_index, new_index)
        except CollectionError as exc:
            self._reject(HistoryKind.MOVE, f"Move {active!r} -> {over!r} rejected: {exc}")
            return None
        if result is None:
            return None

        result = result.with_refs(active, over)
        self._record(
            HistoryKind.MOVE,
            f'Moved "{result.entity.value}" from position {result.old_index} '
            f"to {result.new_index} (active={active!r}, over={over!r})",
        )
        return result

    def submit_delete(self, ref: Reference) -> Entity | None:
        """Delete the entity ref denotes.

        Returns:
            The removed entity, or None when nothing matched.

        Raises:
            MalformedRequestError: If ref is malformed for this mode.
        """
        ref = self._resolver.validate(ref)
        try:
            entity = self._store.remove(ref)
        except CollectionError as exc:
            self._reject(HistoryKind.DELETE, f"Delete {ref!r} rejected: {exc}")
            return None

        self._record(
            HistoryKind.DELETE,
            f'Deleted "{entity.value}" (id {entity.id}, {self.mode.value} ref {ref!r})',
            warning=not self._resolver.stable,
        )
        return entity

    def submit_insert(self, value: str | None = None) -> Entity | None:
        """Append a new entity with a freshly generated id.

        Args:
            value: Value of the new entity; "New item <n>" when omitted.

        Returns:
            The inserted entity, or None if its id collided.

        Raises:
            MalformedRequestError: If value is not a string.
        """
        if value is None:
            value = f"New item {len(self._store) + 1}"
        if not isinstance(value, str):
            raise MalformedRequestError(f"Entity values must be str, got {type(value).__name__}")

        try:
            entity = create_entity(value, self._generator, taken=self._store)
            self._store.insert(entity)
        except CollectionError as exc:
            self._reject(HistoryKind.INSERT, f'Insert "{value}" rejected: {exc}')
            return None

        self._record(HistoryKind.INSERT, f'Added "{value}" (id {entity.id})')
        return entity

    def reset_collection(self) -> None:
        """Reseed with fresh ids, original values and order, and clear the history.

        If fresh ids cannot be generated the collection and its history are
        kept, and a RESET warning is recorded.
        """
        try:
            self._store.reset(seed_entities(self._seed_values, self._generator))
        except CollectionError as exc:
            self._reject(HistoryKind.RESET, f"Reset rejected: {exc}")
            return
        self._history.clear()

    def _record(self, kind: HistoryKind, message: str, warning: bool = False) -> None:
        self._history.record(kind, message, warning=warning, source=self._label)

    def _reject(self, kind: HistoryKind, message: str) -> None:
        self._record(kind, message, warning=True)
