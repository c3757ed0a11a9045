"""Identity generators.

Each generator is an owned, stateful (counter) or stateless (random) service.
Nothing here keeps process-wide state, so two collections never share a
counter.

Usage:
    generator = create_generator("incremental")
    entities = seed_entities(["Item A", "Item B"], generator)
"""

from __future__ import annotations

import random
import time
import uuid
import warnings
from collections.abc import Callable, Container, Iterable

from stableorder.core.errors import DuplicateIdError
from stableorder.core.identity.models import (
    DEFAULT_ID_LENGTH,
    ID_ALPHABET,
    IdGenerator,
    IdStrategy,
)
from stableorder.core.models import Entity

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_TIMESTAMP_SUFFIX_LENGTH = 9

MAX_ID_ATTEMPTS = 16
"""Draws per entity before a repeating generator is reported as a collision."""


class CounterIdGenerator:
    """Monotonic counter tokens: item-1, item-2, ...

    Tokens are never reused, including after reset of the collection that
    owns the generator.

    Args:
        prefix: Text placed before the counter value.
        start: First counter value handed out.
    """

    def __init__(self, prefix: str = "item-", start: int = 1):
        self._prefix = prefix
        self._next = start

    def generate(self) -> str:
        """Hand out the next counter token."""
        token = f"{self._prefix}{self._next}"
        self._next += 1
        return token

    @property
    def issued(self) -> int:
        """Number of tokens handed out so far."""
        return self._next - 1


class RandomStringIdGenerator:
    """Fixed-alphabet random tokens, nanoid style.

    Args:
        size: Token length (default 8).
        alphabet: Characters to draw from.
        rng: Random source; a private random.Random when omitted.
    """

    def __init__(
        self,
        size: int = DEFAULT_ID_LENGTH,
        alphabet: str = ID_ALPHABET,
        rng: random.Random | None = None,
    ):
        if size < 1:
            raise ValueError(f"Token size must be positive, got {size}")
        if not alphabet:
            raise ValueError("Alphabet must not be empty")
        self._size = size
        self._alphabet = alphabet
        self._rng = rng or random.Random()

    def generate(self) -> str:
        return "".join(self._rng.choice(self._alphabet) for _ in range(self._size))


class TimestampIdGenerator:
    """Millisecond timestamp joined with a random base-36 suffix.

    Survives counter resets across reloads: two tokens only collide if they
    share both the millisecond and the suffix.

    Args:
        clock: Returns seconds since the epoch (default time.time).
        rng: Random source for the suffix.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
    ):
        self._clock = clock
        self._rng = rng or random.Random()

    def generate(self) -> str:
        millis = int(self._clock() * 1000)
        suffix = "".join(self._rng.choice(_BASE36) for _ in range(_TIMESTAMP_SUFFIX_LENGTH))
        return f"{millis}-{suffix}"


class UuidIdGenerator:
    """RFC 4122 version-4 tokens from the OS cryptographic source.

    Falls back to `fallback` when the platform has no strong random source.

    Args:
        fallback: Generator used when uuid4() cannot be produced.
        factory: uuid.UUID factory (default uuid.uuid4).
    """

    def __init__(
        self,
        fallback: IdGenerator | None = None,
        factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ):
        self._fallback = fallback or RandomStringIdGenerator()
        self._factory = factory
        self._degraded = False

    @property
    def degraded(self) -> bool:
        """True once the generator has switched to its fallback."""
        return self._degraded

    def generate(self) -> str:
        if not self._degraded:
            try:
                return str(self._factory())
            except NotImplementedError:
                # os.urandom raises this when no entropy source exists
                self._degraded = True
                warnings.warn(
                    "No cryptographically strong random source available; "
                    "falling back to random-string ids.",
                    RuntimeWarning,
                    stacklevel=2,
                )
        return self._fallback.generate()


def create_generator(strategy: IdStrategy | str, **options: object) -> IdGenerator:
    """Build a generator by strategy name.

    Args:
        strategy: IdStrategy member or name ("incremental", "random"/"nanoid",
            "timestamp", "uuid").
        **options: Passed to the generator constructor (e.g. size=12).

    Returns:
        A fresh generator instance owning its own state.

    Raises:
        ValueError: If strategy names no known strategy.
    """
    try:
        resolved = IdStrategy(strategy)
    except ValueError:
        known = ", ".join(s.value for s in IdStrategy)
        raise ValueError(f"Unknown id strategy {strategy!r}; expected one of: {known}") from None

    factories: dict[IdStrategy, Callable[..., IdGenerator]] = {
        IdStrategy.INCREMENTAL: CounterIdGenerator,
        IdStrategy.RANDOM: RandomStringIdGenerator,
        IdStrategy.TIMESTAMP: TimestampIdGenerator,
        IdStrategy.UUID: UuidIdGenerator,
    }
    return factories[resolved](**options)


def create_entity(value: str, generator: IdGenerator, taken: Container[str] = ()) -> Entity:
    """Wrap a value in an Entity with a freshly generated id.

    Tokens found in `taken` are drawn again, up to MAX_ID_ATTEMPTS times.

    Raises:
        DuplicateIdError: If every attempt produced a taken token.
    """
    token = generator.generate()
    for _ in range(MAX_ID_ATTEMPTS - 1):
        if token not in taken:
            break
        token = generator.generate()
    else:
        if token in taken:
            raise DuplicateIdError(token)
    return Entity(id=token, value=value)


def seed_entities(values: Iterable[str], generator: IdGenerator) -> list[Entity]:
    """Assign fresh, mutually distinct ids to raw values, preserving their order.

    Raises:
        DuplicateIdError: If the generator keeps repeating a token.
    """
    entities: list[Entity] = []
    seen: set[str] = set()
    for value in values:
        entity = create_entity(value, generator, taken=seen)
        seen.add(entity.id)
        entities.append(entity)
    return entities
