from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from antdefense.simulation.location import Location
from antdefense.units.base import Ant

if TYPE_CHECKING:
    from antdefense.simulation.colony import Colony

# Turns spent chewing before a swallowed bee is gone for good
DIGEST_TURNS = 3


class EaterAnt(Ant):
    """Swallows a bee in its own location and digests it over several turns.

    While the bee is still fresh (first turn of eating) any damage makes
    the eater cough it back up; dying early in the meal releases it too.
    """

    type_id = "eater"
    display_name = "Eater"
    icon = "E"
    food_cost = 4
    starting_armor = 2

    def __init__(self, place: Location | None = None) -> None:
        self.turns_eating = 0
        self.stomach = Location("stomach")
        super().__init__(place)

    @property
    def place(self) -> Location | None:
        return self._place

    @place.setter
    def place(self, place: Location | None) -> None:
        # Leaving the board mid-meal abandons whatever is still in the stomach
        if place is None and self.is_full():
            undigested = len(self.stomach.get_attackers())
            logger.debug(f"{self} leaves the board with {undigested} bee(s) undigested")
            self.stomach.remove_all_attackers()
            self.turns_eating = 0
        self._place = place

    def is_full(self) -> bool:
        return len(self.stomach.get_attackers()) > 0

    def act(self, colony: Colony | None = None) -> None:
        if self.turns_eating == 0:
            if self.place is None:
                return
            target = self.place.get_closest_attacker(0)
            if target is not None:
                logger.debug(f"{self} eats {target}!")
                self.place.remove_attacker(target)
                self.stomach.add_attacker(target)
                self.turns_eating = 1
        elif self.turns_eating > DIGEST_TURNS:
            self.stomach.remove_all_attackers()
            self.turns_eating = 0
        else:
            self.turns_eating += 1

    def reduce_armor(self, amount: int) -> bool:
        if self.armor - amount > 0:
            self.armor -= amount
            if self.turns_eating == 1:
                self._cough_up()
                self.turns_eating = DIGEST_TURNS
            return False
        if 0 < self.turns_eating <= 2:
            self._cough_up()
        return super().reduce_armor(amount)

    def _cough_up(self) -> None:
        if not self.is_full() or self.place is None:
            return
        eaten = self.stomach.get_attackers()[0]
        self.stomach.remove_attacker(eaten)
        self.place.add_attacker(eaten)
        logger.debug(f"{self} coughs up {eaten}!")
