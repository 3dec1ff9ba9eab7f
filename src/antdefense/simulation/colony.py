"""Colony — the tunnel board, the food supply, and the boost inventory.

Board construction
------------------
The board is ``num_tunnels`` independent tunnels of ``tunnel_length``
locations each.  Every tunnel starts at the shared queen location:
step 0 exits into the queen, step ``n`` exits into step ``n - 1``, and
the last step of each tunnel is recorded as a bee entrance.  When
``moat_frequency`` is nonzero, every step whose 1-based index it divides
is a water location.

Turn phases
-----------
Game.take_turn() calls the three sweeps in order:

  defenders_act() -- every front-line ant acts; a guard's shadowed ant
                     acts just before the guard itself
  attackers_act() -- every bee on the board acts
  locations_act() -- every location applies its environmental effect

All sweeps traverse tunnel index ascending, then step ascending, over a
snapshot taken at the start of the sweep, so a bee that moves toward the
queen during ``attackers_act`` never acts twice in one turn.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol

from loguru import logger

from antdefense.simulation.errors import Failure
from antdefense.simulation.location import Location
from antdefense.units.base import UnitRole

if TYPE_CHECKING:
    from antdefense.units.base import Ant, Bee

# Boosts every colony starts with (name -> count)
INITIAL_BOOSTS: dict[str, int] = {
    "FlyingLeaf": 1,
    "StickyLeaf": 1,
    "IcyLeaf": 1,
    "BugSpray": 0,
}


class RollSource(Protocol):
    def random(self) -> float: ...


class Colony:
    """Owns the tunnel grid and mediates every placement on it."""

    def __init__(
        self,
        starting_food: int,
        num_tunnels: int,
        tunnel_length: int,
        moat_frequency: int = 0,
        rng: RollSource | None = None,
    ) -> None:
        if num_tunnels < 1:
            raise ValueError(f"num_tunnels must be at least 1, got {num_tunnels}")
        if tunnel_length < 1:
            raise ValueError(f"tunnel_length must be at least 1, got {tunnel_length}")
        if moat_frequency < 0:
            raise ValueError(f"moat_frequency must be non-negative, got {moat_frequency}")

        self._food = starting_food
        self.rng: RollSource = rng if rng is not None else random.Random()
        self._places: list[list[Location]] = []
        self._entrances: list[Location] = []
        self._queen_place = Location("Ant Queen")
        self._boosts: dict[str, int] = dict(INITIAL_BOOSTS)

        for tunnel in range(num_tunnels):
            row: list[Location] = []
            prev = self._queen_place
            for step in range(tunnel_length):
                water = moat_frequency != 0 and (step + 1) % moat_frequency == 0
                kind = "water" if water else "tunnel"
                curr = Location(f"{kind}[{tunnel},{step}]", water=water, exit_place=prev)
                prev.set_entrance(curr)
                row.append(curr)
                prev = curr
            self._places.append(row)
            self._entrances.append(prev)

    # -- Queries --------------------------------------------------------------

    def get_food(self) -> int:
        return self._food

    def increase_food(self, amount: int) -> None:
        self._food += amount

    def get_places(self) -> list[list[Location]]:
        return self._places

    def get_entrances(self) -> list[Location]:
        return self._entrances

    def get_queen_place(self) -> Location:
        return self._queen_place

    def goal_is_breached(self) -> bool:
        """True once any bee has reached the queen."""
        return len(self._queen_place.get_attackers()) > 0

    def get_boosts(self) -> dict[str, int]:
        return self._boosts

    def location_at(self, tunnel: int, step: int) -> Location:
        """Return the location at (*tunnel*, *step*); IndexError if off the board."""
        if tunnel < 0 or step < 0:
            raise IndexError(f"negative board index ({tunnel}, {step})")
        return self._places[tunnel][step]

    def get_all_defenders(self) -> list[Ant]:
        """Front-line ant of every location (the guard where one stands)."""
        ants: list[Ant] = []
        for row in self._places:
            for place in row:
                ant = place.get_defender()
                if ant is not None:
                    ants.append(ant)
        return ants

    def get_all_attackers(self) -> list[Bee]:
        bees: list[Bee] = []
        for row in self._places:
            for place in row:
                bees.extend(place.get_attackers())
        return bees

    # -- Commands -------------------------------------------------------------

    def collect_boost(self, boost: str) -> None:
        self._boosts[boost] = self._boosts.get(boost, 0) + 1
        logger.info(f"Found a {boost}!")

    def deploy_defender(self, ant: Ant, place: Location) -> Failure | None:
        """Spend food to put *ant* on *place*. Returns a failure reason or None."""
        cost = ant.get_food_cost()
        if cost > self._food:
            return Failure.INSUFFICIENT_RESOURCES
        if not place.place_defender(ant):
            return Failure.LOCATION_OCCUPIED
        self._food -= cost
        logger.info(f"Deployed {ant} for {cost} food ({self._food} left)")
        return None

    def remove_defender(self, place: Location) -> Ant | None:
        removed = place.remove_defender()
        if removed is not None:
            logger.info(f"Removed {removed.name} from {place.name}")
        return removed

    def apply_boost(self, boost: str, place: Location) -> Failure | None:
        """Give *boost* to the front-line ant at *place*.

        The inventory count is checked but not spent, so a collected boost
        can be applied again and again.
        """
        if self._boosts.get(boost, 0) < 1:
            return Failure.UNKNOWN_BOOST
        ant = place.get_defender()
        if ant is None:
            return Failure.NO_DEFENDER
        ant.set_boost(boost)
        return None

    # -- Turn phases ----------------------------------------------------------

    def defenders_act(self) -> None:
        for ant in self.get_all_defenders():
            if ant.role is UnitRole.GUARD and ant.place is not None:
                guarded = ant.place.get_guarded_defender()
                if guarded is not None:
                    guarded.act(self)
            ant.act(self)

    def attackers_act(self) -> None:
        for bee in self.get_all_attackers():
            bee.act(self)

    def locations_act(self) -> None:
        for row in self._places:
            for place in row:
                place.act()
