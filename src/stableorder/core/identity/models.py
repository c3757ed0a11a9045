"""Identity strategy names and the generator contract.

Usage:
    strategy = IdStrategy("nanoid")  # -> IdStrategy.RANDOM
    token = generator.generate()
"""

from enum import Enum
from typing import Protocol, runtime_checkable

DEFAULT_ID_LENGTH = 8
ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


class IdStrategy(Enum):
    """Named identity generation strategies."""

    INCREMENTAL = "incremental"
    RANDOM = "random"
    TIMESTAMP = "timestamp"
    UUID = "uuid"

    @classmethod
    def _missing_(cls, value: object) -> "IdStrategy | None":
        if isinstance(value, str):
            lowered = value.lower()
            if lowered == "nanoid":
                return cls.RANDOM
            for member in cls:
                if member.value == lowered:
                    return member
        return None


@runtime_checkable
class IdGenerator(Protocol):
    """Produces unique opaque tokens for one collection."""

    def generate(self) -> str:
        """Return a fresh token, distinct from every token returned before."""
        ...
