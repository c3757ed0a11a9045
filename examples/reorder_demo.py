from stableorder import Playground, ReorderRequest


def show(playground: Playground, title: str) -> None:
    print(f"\n== {title}")
    for coordinator in playground:
        values = [entity.value for entity in coordinator.items]
        print(f"{coordinator.label:>10}: {values}  refs={coordinator.references()}")


def main() -> None:
    playground = Playground()
    show(playground, "Initial state")

    # The user wants to drag "Item C" to the top. Each variant captured its
    # reference for "Item C" before anything changed.
    captured = {
        coordinator.label: coordinator.references()[2] for coordinator in playground
    }
    tops = {coordinator.label: coordinator.references()[0] for coordinator in playground}

    # Then "Item B" is deleted through each variant's own reference.
    for coordinator in playground:
        coordinator.submit_delete(coordinator.references()[1])
    show(playground, 'After deleting "Item B"')

    # Replaying the captured references: index mode now drags "Item D".
    for coordinator in playground:
        result = coordinator.submit_reorder(
            ReorderRequest(active=captured[coordinator.label], over=tops[coordinator.label])
        )
        moved = result.entity.value if result else "nothing"
        print(f"{coordinator.label:>10}: moved {moved}")
    show(playground, "After dragging the captured reference to the top")

    print("\n== History (newest first)")
    for entry in playground.recent_history(10):
        flag = "!" if entry.warning else " "
        print(f"{flag} {entry.clock_time} [{entry.source}] {entry.message}")


if __name__ == "__main__":
    main()
