"""Request coordination between the gesture layer, the store and the history log."""

from stableorder.coordination.coordinator import ReorderCoordinator

__all__ = [
    "ReorderCoordinator",
]
