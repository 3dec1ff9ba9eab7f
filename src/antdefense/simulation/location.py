"""Location — a single node in the tunnel board graph.

Architecture
------------
A Location holds at most one regular ant, at most one guard, and any
number of bees.  The guard and regular slots are independent: a guard
shadows the regular ant for every targeting and combat purpose
(``get_defender`` returns the guard first) but never evicts it.

Links between locations are *non-owning*.  The Colony owns every
Location through its tunnel grid; ``exit`` (toward the queen) and
``entrance`` (toward the board edge) are weak references so the shared
queen location, which every tunnel points back to, is never kept alive
by the chain itself.

Environmental effects run once per turn via ``act()``: a water location
drowns any guard and any regular ant that cannot submerge.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

from loguru import logger

from antdefense.units.base import UnitRole

if TYPE_CHECKING:
    from antdefense.units.base import Ant, Bee, Insect


class Location:
    """A tunnel location that ants defend and bees pass through."""

    def __init__(
        self,
        name: str,
        water: bool = False,
        exit_place: Location | None = None,
        entrance_place: Location | None = None,
    ) -> None:
        self.name = name
        self._water = water
        self._ant: Ant | None = None
        self._guard: Ant | None = None
        self._bees: list[Bee] = []
        self._exit: weakref.ReferenceType[Location] | None = None
        self._entrance: weakref.ReferenceType[Location] | None = None
        if exit_place is not None:
            self.set_exit(exit_place)
        if entrance_place is not None:
            self.set_entrance(entrance_place)

    # -- Links ---------------------------------------------------------------

    @property
    def exit(self) -> Location | None:
        """The neighbour one step closer to the queen."""
        return self._exit() if self._exit is not None else None

    @property
    def entrance(self) -> Location | None:
        """The neighbour one step closer to the board edge."""
        return self._entrance() if self._entrance is not None else None

    def set_exit(self, place: Location | None) -> None:
        self._exit = weakref.ref(place) if place is not None else None

    def set_entrance(self, place: Location | None) -> None:
        self._entrance = weakref.ref(place) if place is not None else None

    def is_water(self) -> bool:
        return self._water

    # -- Ants ----------------------------------------------------------------

    def get_defender(self) -> Ant | None:
        """Return the guard if present, else the regular ant."""
        if self._guard is not None:
            return self._guard
        return self._ant

    def get_guarded_defender(self) -> Ant | None:
        """Return the regular ant, whether or not a guard shadows it."""
        return self._ant

    def get_guard(self) -> Ant | None:
        return self._guard

    def place_defender(self, ant: Ant) -> bool:
        """Put *ant* in its slot. Returns False if that slot is taken."""
        if ant.role is UnitRole.GUARD:
            if self._guard is not None:
                return False
            self._guard = ant
        else:
            if self._ant is not None:
                return False
            self._ant = ant
        ant.place = self
        return True

    def remove_defender(self, ant: Ant | None = None) -> Ant | None:
        """Remove and return a defender.

        With no argument the guard goes first, then the regular ant.  When
        *ant* is given, only that unit is removed from whichever slot holds
        it; ``None`` is returned if it is not here.
        """
        if ant is None:
            ant = self._guard if self._guard is not None else self._ant
        if ant is None:
            return None
        if ant is self._guard:
            self._guard = None
        elif ant is self._ant:
            self._ant = None
        else:
            return None
        ant.place = None
        return ant

    # -- Bees ----------------------------------------------------------------

    def get_attackers(self) -> list[Bee]:
        return self._bees

    def add_attacker(self, bee: Bee) -> None:
        if any(b is bee for b in self._bees):
            return
        self._bees.append(bee)
        bee.place = self

    def remove_attacker(self, bee: Bee) -> None:
        for index, current in enumerate(self._bees):
            if current is bee:
                del self._bees[index]
                bee.place = None
                return

    def remove_all_attackers(self) -> None:
        for bee in self._bees:
            bee.place = None
        self._bees = []

    def exit_attacker(self, bee: Bee) -> None:
        """Move *bee* one step toward the queen."""
        destination = self.exit
        self.remove_attacker(bee)
        if destination is not None:
            destination.add_attacker(bee)
            logger.debug(f"{bee} moves to {destination.name}")

    def remove_insect(self, insect: Insect) -> None:
        """Remove any insect, dispatching on its role."""
        if insect.role is UnitRole.ATTACKER:
            self.remove_attacker(insect)
        else:
            self.remove_defender(insect)

    # -- Targeting -----------------------------------------------------------

    def get_closest_attacker(self, max_distance: int, min_distance: int = 0) -> Bee | None:
        """Walk toward the board edge and return the first bee in range.

        Distance 0 is this location.  Locations closer than *min_distance*
        are skipped; the walk stops once distance exceeds *max_distance*
        or the tunnel ends.
        """
        place: Location | None = self
        distance = 0
        while place is not None and distance <= max_distance:
            if distance >= min_distance and place._bees:
                return place._bees[0]
            place = place.entrance
            distance += 1
        return None

    # -- Environment ---------------------------------------------------------

    def act(self) -> None:
        """Apply environmental effects: water drowns non-submersible ants."""
        if not self._water:
            return
        if self._guard is not None:
            drowned = self.remove_defender(self._guard)
            logger.info(f"{drowned.name} drowned in {self.name}")
        if self._ant is not None and not self._ant.can_submerge:
            drowned = self.remove_defender(self._ant)
            logger.info(f"{drowned.name} drowned in {self.name}")

    def __repr__(self) -> str:
        return f"<Location {self.name} bees={len(self._bees)}>"
