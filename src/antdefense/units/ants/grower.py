from __future__ import annotations

from typing import TYPE_CHECKING

from antdefense.units.base import Ant

if TYPE_CHECKING:
    from antdefense.simulation.colony import Colony

# (roll upper bound, boost found) -- a roll below 0.6 grows food instead
_BOOST_TABLE: tuple[tuple[float, str], ...] = (
    (0.7, "FlyingLeaf"),
    (0.8, "StickyLeaf"),
    (0.9, "IcyLeaf"),
    (0.95, "BugSpray"),
)


class GrowerAnt(Ant):
    type_id = "grower"
    display_name = "Grower"
    icon = "G"
    food_cost = 1
    starting_armor = 1

    def act(self, colony: Colony | None = None) -> None:
        if colony is None:
            return
        roll = colony.rng.random()
        if roll < 0.6:
            colony.increase_food(1)
            return
        for bound, boost in _BOOST_TABLE:
            if roll < bound:
                colony.collect_boost(boost)
                return
