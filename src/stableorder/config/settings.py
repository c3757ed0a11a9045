"""Configuration settings using Pydantic Settings.

Provides typed construction parameters for a collection, with optional
environment variable overrides. Nothing reads these implicitly: build the
settings object and hand it to ReorderCoordinator.from_settings().

Usage:
    from stableorder.config import CollectionSettings

    # Load from environment variables (STABLEORDER_*)
    settings = CollectionSettings()

    # Or override with explicit values
    settings = CollectionSettings(reference_mode="index", history_capacity=10)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stableorder.core.identity import DEFAULT_ID_LENGTH, IdStrategy
from stableorder.core.references import ReferenceMode
from stableorder.tracing import DEFAULT_DISPLAY_LIMIT, DEFAULT_HISTORY_CAPACITY

DEFAULT_SEED_VALUES = ("Item A", "Item B", "Item C", "Item D")


class CollectionSettings(BaseSettings):  # type: ignore[misc]
    """Construction parameters for one reorderable collection.

    Attributes:
        reference_mode: How requests address entities (identity or index).
        id_strategy: Identity generator (incremental, random, timestamp, uuid).
        id_length: Token length for the random strategy.
        history_capacity: Entries kept by the history log.
        history_display_limit: Entries returned by recent_history() by default.
        seed_values: Initial values, restored by reset.

    Environment Variables:
        STABLEORDER_REFERENCE_MODE
        STABLEORDER_ID_STRATEGY
        STABLEORDER_ID_LENGTH
        STABLEORDER_HISTORY_CAPACITY
        STABLEORDER_HISTORY_DISPLAY_LIMIT
        STABLEORDER_SEED_VALUES (JSON list)
    """

    model_config = SettingsConfigDict(
        env_prefix="STABLEORDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reference_mode: ReferenceMode = ReferenceMode.IDENTITY
    id_strategy: IdStrategy = IdStrategy.RANDOM
    id_length: int = Field(default=DEFAULT_ID_LENGTH, ge=1)
    history_capacity: int = Field(default=DEFAULT_HISTORY_CAPACITY, ge=1)
    history_display_limit: int = Field(default=DEFAULT_DISPLAY_LIMIT, ge=1)
    seed_values: list[str] = Field(default_factory=lambda: list(DEFAULT_SEED_VALUES))

    def generator_options(self) -> dict[str, object]:
        """Constructor options for the configured id strategy."""
        if self.id_strategy is IdStrategy.RANDOM:
            return {"size": self.id_length}
        return {}
