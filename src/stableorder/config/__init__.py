"""Configuration module using Pydantic Settings.

Usage:
    from stableorder.config import CollectionSettings

    settings = CollectionSettings(reference_mode="index")
"""

from stableorder.config.settings import DEFAULT_SEED_VALUES, CollectionSettings

__all__ = [
    "CollectionSettings",
    "DEFAULT_SEED_VALUES",
]
