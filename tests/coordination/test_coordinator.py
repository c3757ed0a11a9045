"""Tests for ReorderCoordinator.

Critical Invariants:
- Identity mode resolves ids right before each move, so deletions never misdirect a move
- Recoverable failures become warning entries and never mutate
- Malformed requests fail loudly
- reset restores values and order with fresh ids, and empties the log
- reset that cannot produce fresh ids keeps the collection and warns
"""

import pytest

from stableorder import (
    BoundedHistoryLog,
    CounterIdGenerator,
    Entity,
    HistoryKind,
    MalformedRequestError,
    ReferenceMode,
    ReorderCoordinator,
    ReorderRequest,
)
from stableorder.core.errors import DuplicateIdError
from stableorder.storage import OrderedCollection


def values(coordinator: ReorderCoordinator) -> list[str]:
    return [e.value for e in coordinator.items]


class Scripted:
    """Generator replaying fixed tokens, then repeating the last one forever."""

    def __init__(self, *tokens: str) -> None:
        self._tokens = list(tokens)

    def generate(self) -> str:
        if len(self._tokens) > 1:
            return self._tokens.pop(0)
        return self._tokens[0]


# Identity mode


def test_reorder_by_id(coordinator):
    result = coordinator.submit_reorder(ReorderRequest(active="item-1", over="item-3"))

    assert values(coordinator) == ["B", "C", "A", "D"]
    assert result is not None
    assert (result.old_index, result.new_index) == (0, 2)
    assert (result.active_ref, result.over_ref) == ("item-1", "item-3")
    assert result.entity == Entity("item-1", "A")


def test_move_entry_carries_both_references(coordinator):
    coordinator.submit_reorder(ReorderRequest(active="item-4", over="item-2"))

    entry = coordinator.recent_history()[0]
    assert entry.kind is HistoryKind.MOVE
    assert "'item-4'" in entry.message and "'item-2'" in entry.message
    assert not entry.warning
    assert entry.source == "correct"


def test_reorder_onto_itself_is_noop(coordinator):
    assert coordinator.submit_reorder(ReorderRequest("item-2", "item-2")) is None
    assert values(coordinator) == ["A", "B", "C", "D"]
    assert coordinator.recent_history() == []


def test_deleted_id_onto_itself_records_stale_warning(coordinator):
    """A deleted id is reported as stale even when active and over are equal."""
    coordinator.submit_delete("item-2")

    assert coordinator.submit_reorder(ReorderRequest("item-2", "item-2")) is None

    entry = coordinator.recent_history()[0]
    assert entry.kind is HistoryKind.MOVE
    assert entry.warning
    assert "stale" in entry.message


def test_stale_id_is_rejected_with_warning(coordinator):
    """CRITICAL: a deleted id aborts the move instead of moving something else."""
    coordinator.submit_delete("item-2")

    assert coordinator.submit_reorder(ReorderRequest("item-2", "item-1")) is None

    assert values(coordinator) == ["A", "C", "D"]
    entry = coordinator.recent_history()[0]
    assert entry.kind is HistoryKind.MOVE
    assert entry.warning
    assert "stale" in entry.message


def test_stale_over_reference_is_rejected(coordinator):
    coordinator.submit_delete("item-1")
    assert coordinator.submit_reorder(ReorderRequest("item-3", "item-1")) is None
    assert values(coordinator) == ["B", "C", "D"]


def test_ids_resolve_correctly_after_any_deletion(coordinator):
    """CRITICAL: after deleting any entity, every other id maps to its current index."""
    for position in range(4):
        coordinator.reset_collection()
        before = coordinator.items
        survivors = before[:position] + before[position + 1 :]

        coordinator.submit_delete(before[position].id)

        for expected_index, entity in enumerate(survivors):
            assert coordinator.store.index_of(entity.id) == expected_index
            assert coordinator.store.get(entity.id) == entity


def test_delete_by_id(coordinator):
    removed = coordinator.submit_delete("item-3")

    assert removed == Entity("item-3", "C")
    assert values(coordinator) == ["A", "B", "D"]
    entry = coordinator.recent_history()[0]
    assert entry.kind is HistoryKind.DELETE
    assert '"C"' in entry.message
    assert not entry.warning


def test_delete_unknown_id_is_recoverable(coordinator):
    assert coordinator.submit_delete("item-42") is None
    assert values(coordinator) == ["A", "B", "C", "D"]
    entry = coordinator.recent_history()[0]
    assert entry.kind is HistoryKind.DELETE
    assert entry.warning


def test_insert_appends_with_fresh_id(coordinator):
    entity = coordinator.submit_insert("E")

    assert entity == Entity("item-5", "E")
    assert values(coordinator) == ["A", "B", "C", "D", "E"]
    assert coordinator.recent_history()[0].kind is HistoryKind.INSERT


def test_insert_default_value(coordinator):
    coordinator.submit_delete("item-1")
    entity = coordinator.submit_insert()
    assert entity is not None
    assert entity.value == "New item 4"


def test_insert_id_collision_is_recoverable():
    class Stuck:
        def generate(self) -> str:
            return "same"

    coordinator = ReorderCoordinator(["A"], generator=Stuck())
    assert coordinator.submit_insert("B") is None
    assert values(coordinator) == ["A"]
    assert coordinator.recent_history()[0].warning


def test_insert_draws_again_when_id_is_taken():
    coordinator = ReorderCoordinator(["A", "B"], generator=Scripted("a", "b", "a", "c"))
    entity = coordinator.submit_insert("C")
    assert entity == Entity("c", "C")
    assert not coordinator.recent_history()[0].warning


def test_insert_rejects_non_string_value(coordinator):
    with pytest.raises(MalformedRequestError):
        coordinator.submit_insert(42)  # type: ignore[arg-type]


# Malformed requests


@pytest.mark.parametrize(
    "request_",
    [
        None,
        ReorderRequest(None, "item-1"),  # type: ignore[arg-type]
        ReorderRequest("item-1", None),  # type: ignore[arg-type]
        ReorderRequest(0, 1),
        ("item-1", "item-2"),
    ],
)
def test_malformed_reorder_fails_loudly(coordinator, request_):
    with pytest.raises(MalformedRequestError):
        coordinator.submit_reorder(request_)
    assert values(coordinator) == ["A", "B", "C", "D"]
    assert coordinator.recent_history() == []


def test_malformed_delete_fails_loudly(coordinator, index_coordinator):
    with pytest.raises(MalformedRequestError):
        coordinator.submit_delete(None)  # type: ignore[arg-type]
    with pytest.raises(MalformedRequestError):
        index_coordinator.submit_delete("item-1")


# Index mode


def test_index_mode_passes_positions_through(index_coordinator):
    result = index_coordinator.submit_reorder(ReorderRequest(active=3, over=0))
    assert values(index_coordinator) == ["D", "A", "B", "C"]
    assert result is not None
    assert (result.active_ref, result.over_ref) == (3, 0)


def test_index_mode_out_of_range_is_recoverable(index_coordinator):
    assert index_coordinator.submit_reorder(ReorderRequest(active=7, over=0)) is None
    assert values(index_coordinator) == ["A", "B", "C", "D"]
    entry = index_coordinator.recent_history()[0]
    assert entry.warning
    assert "out of range" in entry.message


def test_index_mode_delete_is_flagged_as_warning(index_coordinator):
    removed = index_coordinator.submit_delete(1)
    assert removed is not None and removed.value == "B"
    entry = index_coordinator.recent_history()[0]
    assert entry.kind is HistoryKind.DELETE
    assert entry.warning


def test_index_mode_stale_position_moves_wrong_entity(index_coordinator):
    """CRITICAL: the defining negative example.

    The user means to drag C (index 2 before the delete) to the top. After B
    at index 1 is deleted, the same index addresses D, and nothing can tell.
    """
    intended = index_coordinator.items[2]
    assert intended.value == "C"

    index_coordinator.submit_delete(1)
    result = index_coordinator.submit_reorder(ReorderRequest(active=2, over=0))

    assert result is not None
    assert result.entity.value == "D"
    assert result.entity.id != intended.id
    assert values(index_coordinator) == ["D", "A", "C"]
    # No warning on the move itself: a stale index is indistinguishable from a fresh one
    assert not index_coordinator.recent_history()[0].warning


def test_references_follow_mode(coordinator, index_coordinator):
    assert coordinator.references() == ["item-1", "item-2", "item-3", "item-4"]
    assert index_coordinator.references() == [0, 1, 2, 3]
    index_coordinator.submit_delete(0)
    assert index_coordinator.references() == [0, 1, 2]


# Reset and construction


def test_reset_restores_collection_with_fresh_ids(coordinator):
    original_ids = {e.id for e in coordinator.items}
    coordinator.submit_delete("item-2")
    coordinator.submit_reorder(ReorderRequest("item-4", "item-1"))
    coordinator.submit_insert("E")

    coordinator.reset_collection()

    assert values(coordinator) == ["A", "B", "C", "D"]
    assert original_ids.isdisjoint(e.id for e in coordinator.items)
    assert coordinator.recent_history() == []
    assert coordinator.history.entry_count == 0


def test_reset_does_not_record(coordinator):
    coordinator.reset_collection()
    assert coordinator.recent_history() == []


def test_history_capacity_is_constructor_supplied(clock):
    coordinator = ReorderCoordinator(
        ["A", "B"], generator=CounterIdGenerator(), history_capacity=2, display_limit=1, clock=clock
    )
    for _ in range(3):
        coordinator.submit_insert()

    assert coordinator.history.entry_count == 2
    assert len(coordinator.recent_history()) == 1
    assert len(coordinator.recent_history(10)) == 2


def test_custom_history_store_is_used(clock):
    history = BoundedHistoryLog(capacity=10, clock=clock)
    coordinator = ReorderCoordinator(["A"], history=history)
    coordinator.submit_insert("B")
    assert history.entry_count == 1
    assert coordinator.history is history


def test_mode_accepts_string():
    coordinator = ReorderCoordinator(["A"], mode="index")
    assert coordinator.mode is ReferenceMode.INDEX
    assert coordinator.store.mode is ReferenceMode.INDEX


def test_default_seed_values():
    coordinator = ReorderCoordinator()
    assert values(coordinator) == ["Item A", "Item B", "Item C", "Item D"]


def test_reset_with_repeating_generator_keeps_collection(clock):
    """CRITICAL: a generator stuck on one id does not crash reset.

    Why: Short random ids are reachable through settings; a collision during
    reseeding must become a warning, with the collection left as it was.
    """
    coordinator = ReorderCoordinator(["A", "B"], generator=Scripted("x", "y", "z"), clock=clock)
    coordinator.submit_delete("x")

    coordinator.reset_collection()

    assert coordinator.items == (Entity("y", "B"),)
    history = coordinator.recent_history()
    assert [e.kind for e in history] == [HistoryKind.RESET, HistoryKind.DELETE]
    assert history[0].warning
    assert "'z'" in history[0].message


def test_reset_draws_again_on_colliding_id():
    coordinator = ReorderCoordinator(["A", "B"], generator=Scripted("a", "b", "c", "c", "d"))
    coordinator.reset_collection()
    assert coordinator.items == (Entity("c", "A"), Entity("d", "B"))
    assert coordinator.recent_history() == []


def test_construction_with_stuck_generator_raises():
    class Stuck:
        def generate(self) -> str:
            return "same"

    with pytest.raises(DuplicateIdError):
        ReorderCoordinator(["A", "B"], generator=Stuck())


def test_prebuilt_store_is_used():
    store = OrderedCollection([Entity("k1", "X"), Entity("k2", "Y")])
    coordinator = ReorderCoordinator(["A"], store=store)

    assert coordinator.store is store
    coordinator.submit_reorder(ReorderRequest("k2", "k1"))
    assert values(coordinator) == ["Y", "X"]

    coordinator.reset_collection()
    assert values(coordinator) == ["A"]


def test_prebuilt_store_mode_must_match():
    store = OrderedCollection(mode=ReferenceMode.INDEX)
    with pytest.raises(ValueError, match="index"):
        ReorderCoordinator(["A"], store=store)
