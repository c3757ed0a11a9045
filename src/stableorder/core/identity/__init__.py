"""Entity identity: token generation strategies."""

from stableorder.core.identity.generators import (
    MAX_ID_ATTEMPTS,
    CounterIdGenerator,
    RandomStringIdGenerator,
    TimestampIdGenerator,
    UuidIdGenerator,
    create_entity,
    create_generator,
    seed_entities,
)
from stableorder.core.identity.models import (
    DEFAULT_ID_LENGTH,
    ID_ALPHABET,
    IdGenerator,
    IdStrategy,
)

__all__ = [
    "IdGenerator",
    "IdStrategy",
    "DEFAULT_ID_LENGTH",
    "ID_ALPHABET",
    "MAX_ID_ATTEMPTS",
    "CounterIdGenerator",
    "RandomStringIdGenerator",
    "TimestampIdGenerator",
    "UuidIdGenerator",
    "create_generator",
    "create_entity",
    "seed_entities",
]
