"""Core primitives: entities, references, identity generation, errors."""

from stableorder.core.errors import (
    CollectionError,
    DuplicateIdError,
    MalformedRequestError,
    NotFoundError,
    OutOfRangeError,
    ReferenceStaleError,
)
from stableorder.core.identity import (
    CounterIdGenerator,
    IdGenerator,
    IdStrategy,
    RandomStringIdGenerator,
    TimestampIdGenerator,
    UuidIdGenerator,
    create_entity,
    create_generator,
    seed_entities,
)
from stableorder.core.models import Entity, MoveResult, Reference, ReorderRequest
from stableorder.core.references import (
    IdentityReferences,
    IndexReferences,
    ReferenceMode,
    ReferenceResolver,
    resolver_for,
)

__all__ = [
    # Models
    "Entity",
    "MoveResult",
    "Reference",
    "ReorderRequest",
    # References
    "ReferenceMode",
    "ReferenceResolver",
    "IndexReferences",
    "IdentityReferences",
    "resolver_for",
    # Identity
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
]
