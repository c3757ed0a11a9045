"""Storage backends."""

from stableorder.storage.local import OrderedCollection
from stableorder.storage.protocol import CollectionStore

__all__ = [
    "CollectionStore",
    "OrderedCollection",
]
