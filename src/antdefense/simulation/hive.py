"""Hive — the off-board spawner that schedules and releases bee waves.

Waves are manufactured up front by ``schedule_wave``: every bee of every
scheduled wave sits in the hive's own bee list until its turn comes.
``invade`` then moves exactly that wave onto the board, choosing one
colony entrance per bee uniformly at random.

The random source is injected (any object with ``randrange``, usually a
``random.Random``) so tests can pin the entrance sequence.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

from loguru import logger

from antdefense.simulation.location import Location
from antdefense.units.base import Bee

if TYPE_CHECKING:
    from antdefense.simulation.colony import Colony


class IndexChooser(Protocol):
    def randrange(self, stop: int) -> int: ...


class Hive(Location):
    """Manufactures bees in scheduled waves and releases them into a colony."""

    def __init__(self, bee_armor: int, bee_damage: int,
                 rng: IndexChooser | None = None) -> None:
        super().__init__("Hive")
        self.bee_armor = bee_armor
        self.bee_damage = bee_damage
        self._rng: IndexChooser = rng if rng is not None else random.Random()
        self._waves: dict[int, list[Bee]] = {}

    @property
    def waves(self) -> dict[int, list[Bee]]:
        return self._waves

    def schedule_wave(self, attack_turn: int, num_bees: int) -> Hive:
        """Schedule *num_bees* new bees to invade on *attack_turn*.

        Scheduling the same turn twice replaces the earlier wave in the
        schedule; the earlier bees stay in the hive.
        """
        wave: list[Bee] = []
        for _ in range(num_bees):
            bee = Bee(self.bee_armor, self.bee_damage, self)
            self.add_attacker(bee)
            wave.append(bee)
        self._waves[attack_turn] = wave
        return self

    def invade(self, colony: Colony, current_turn: int) -> list[Bee]:
        """Release the wave scheduled for *current_turn*; returns the bees moved."""
        wave = self._waves.get(current_turn)
        if wave is None:
            return []
        entrances = colony.get_entrances()
        moved: list[Bee] = []
        for bee in wave:
            if bee.place is not self:
                continue
            self.remove_attacker(bee)
            entrance = entrances[self._rng.randrange(len(entrances))]
            entrance.add_attacker(bee)
            moved.append(bee)
        if moved:
            logger.info(f"Turn {current_turn}: {len(moved)} bees invade the colony")
        return moved
