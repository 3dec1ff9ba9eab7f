"""Shared fixtures for the colony simulation tests."""

from __future__ import annotations

import random

import pytest

from antdefense.simulation.colony import Colony
from antdefense.simulation.hive import Hive
from antdefense.units.base import Ant


class FixedChooser:
    """Deterministic stand-in for random.Random.

    ``randrange`` returns the queued indices in order (cycling), and
    ``random`` returns the queued rolls in order (cycling).
    """

    def __init__(self, indices: list[int] | None = None,
                 rolls: list[float] | None = None) -> None:
        self._indices = list(indices or [0])
        self._rolls = list(rolls or [0.0])
        self._i = 0
        self._r = 0
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        value = self._indices[self._i % len(self._indices)]
        self._i += 1
        self.calls.append(stop)
        return value % stop

    def random(self) -> float:
        value = self._rolls[self._r % len(self._rolls)]
        self._r += 1
        return value


class WorkerAnt(Ant):
    """Test ant: costs 2 food and does nothing."""

    type_id = "worker"
    display_name = "Worker"
    icon = "W"
    food_cost = 2
    starting_armor = 1


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def colony() -> Colony:
    return Colony(10, 2, 3, 0, rng=FixedChooser(rolls=[0.99]))


@pytest.fixture
def hive() -> Hive:
    return Hive(1, 1, rng=FixedChooser(indices=[0]))
