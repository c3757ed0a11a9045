"""stableorder: identity-preserving reordering with a bounded action history.

Usage:
    from stableorder import ReorderCoordinator, ReorderRequest

    coordinator = ReorderCoordinator(["Item A", "Item B", "Item C", "Item D"])
    a, b, c, d = (entity.id for entity in coordinator.items)

    coordinator.submit_delete(b)
    coordinator.submit_reorder(ReorderRequest(active=d, over=a))

    [e.value for e in coordinator.items]     # ["Item D", "Item A", "Item C"]
    coordinator.recent_history()[0].kind     # HistoryKind.MOVE
"""

__version__ = "0.1.0"

# Configuration
from stableorder.config import CollectionSettings

# Coordination
from stableorder.coordination import ReorderCoordinator

# Core primitives
from stableorder.core import (
    CollectionError,
    CounterIdGenerator,
    DuplicateIdError,
    Entity,
    IdentityReferences,
    IdGenerator,
    IdStrategy,
    IndexReferences,
    MalformedRequestError,
    MoveResult,
    NotFoundError,
    OutOfRangeError,
    RandomStringIdGenerator,
    Reference,
    ReferenceMode,
    ReferenceResolver,
    ReferenceStaleError,
    ReorderRequest,
    TimestampIdGenerator,
    UuidIdGenerator,
    create_entity,
    create_generator,
    resolver_for,
    seed_entities,
)

# Playground
from stableorder.playground import VARIANTS, Playground, VariantPreset

# Storage
from stableorder.storage import CollectionStore, OrderedCollection

# Tracing
from stableorder.tracing import (
    DEFAULT_DISPLAY_LIMIT,
    DEFAULT_HISTORY_CAPACITY,
    BoundedHistoryLog,
    HistoryEntry,
    HistoryKind,
    HistoryStore,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Entity",
    "Reference",
    "ReorderRequest",
    "MoveResult",
    "ReferenceMode",
    "ReferenceResolver",
    "IndexReferences",
    "IdentityReferences",
    "resolver_for",
    "IdGenerator",
    "IdStrategy",
    "CounterIdGenerator",
    "RandomStringIdGenerator",
    "TimestampIdGenerator",
    "UuidIdGenerator",
    "create_generator",
    "create_entity",
    "seed_entities",
    # Errors
    "CollectionError",
    "OutOfRangeError",
    "DuplicateIdError",
    "NotFoundError",
    "ReferenceStaleError",
    "MalformedRequestError",
    # Storage
    "CollectionStore",
    "OrderedCollection",
    # Tracing
    "HistoryStore",
    "HistoryEntry",
    "HistoryKind",
    "BoundedHistoryLog",
    "DEFAULT_HISTORY_CAPACITY",
    "DEFAULT_DISPLAY_LIMIT",
    # Coordination
    "ReorderCoordinator",
    # Playground
    "Playground",
    "VariantPreset",
    "VARIANTS",
    # Configuration
    "CollectionSettings",
]
