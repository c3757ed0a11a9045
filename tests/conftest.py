"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from stableorder import CounterIdGenerator, ReferenceMode, ReorderCoordinator

SEED = ("A", "B", "C", "D")


class FakeClock:
    """Deterministic clock: each call advances one second."""

    def __init__(self, start: float = 1704067200.0) -> None:
        self.now = start

    def __call__(self) -> float:
        self.now += 1.0
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def seed_values():
    return SEED


@pytest.fixture
def coordinator(clock):
    """Identity-mode coordinator over A, B, C, D with ids item-1..item-4."""
    return ReorderCoordinator(
        SEED,
        mode=ReferenceMode.IDENTITY,
        generator=CounterIdGenerator(),
        clock=clock,
        label="correct",
    )


@pytest.fixture
def index_coordinator(clock):
    """Index-mode coordinator over A, B, C, D."""
    return ReorderCoordinator(
        SEED,
        mode=ReferenceMode.INDEX,
        generator=CounterIdGenerator(),
        clock=clock,
        label="wrong",
    )
