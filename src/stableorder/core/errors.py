"""Error taxonomy for collection mutations.

Every CollectionError is a recoverable, expected outcome: the coordinator
turns it into a warning-flagged history entry and leaves the collection as
it was. MalformedRequestError is different - it means the caller handed in
a request that could never be valid, and it propagates.
"""


class CollectionError(Exception):
    """Base class for recoverable collection failures."""

    pass


class OutOfRangeError(CollectionError, IndexError):
    """Raised when a position lies outside [0, len)."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} out of range for collection of length {length}")
        self.index = index
        self.length = length


class DuplicateIdError(CollectionError):
    """Raised when an entity id is already present in the collection."""

    def __init__(self, entity_id: str):
        super().__init__(f"Entity id {entity_id!r} already exists in collection")
        self.entity_id = entity_id


class NotFoundError(CollectionError, LookupError):
    """Raised when a reference matches no entity."""

    def __init__(self, ref: object):
        super().__init__(f"No entity matches reference {ref!r}")
        self.ref = ref


class ReferenceStaleError(CollectionError):
    """Raised when an id reference no longer resolves to a live entity."""

    def __init__(self, ref: object):
        super().__init__(f"Reference {ref!r} is stale: no entity with that id")
        self.ref = ref


class MalformedRequestError(TypeError):
    """Raised when a request violates the caller contract (null or mistyped reference)."""

    pass
