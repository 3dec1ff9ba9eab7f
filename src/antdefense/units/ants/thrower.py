from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from antdefense.units.base import Ant, Bee

if TYPE_CHECKING:
    from antdefense.simulation.colony import Colony

BASE_RANGE = 3
FLYING_LEAF_RANGE = 5
BUG_SPRAY_DAMAGE = 10


class ThrowerAnt(Ant):
    """Throws a leaf at the closest bee within range.

    Boosts change the throw: FlyingLeaf extends the range, StickyLeaf
    and IcyLeaf leave the target stuck or cold for its next action, and
    BugSpray sacrifices the thrower to hit every bee in its own tunnel
    location.  A leaf boost is used up by the throw that carries it.
    """

    type_id = "thrower"
    display_name = "Thrower"
    icon = "T"
    food_cost = 4
    starting_armor = 1
    damage = 1

    def act(self, colony: Colony | None = None) -> None:
        if self.place is None:
            return
        if self.boost == "BugSpray":
            self._spray()
            return

        max_range = FLYING_LEAF_RANGE if self.boost == "FlyingLeaf" else BASE_RANGE
        target = self.place.get_closest_attacker(max_range)
        if target is None:
            return
        logger.debug(f"{self} throws a leaf at {target}")
        target.reduce_armor(self.damage)
        self._apply_leaf(target)
        self.boost = None

    def _apply_leaf(self, target: Bee) -> None:
        if self.boost == "StickyLeaf":
            target.set_status(Bee.STUCK)
            logger.debug(f"{target} is stuck!")
        elif self.boost == "IcyLeaf":
            target.set_status(Bee.COLD)
            logger.debug(f"{target} is cold!")

    def _spray(self) -> None:
        logger.info(f"{self} sprays bug repellant everywhere!")
        for bee in list(self.place.get_attackers()):
            bee.reduce_armor(BUG_SPRAY_DAMAGE)
        self.reduce_armor(BUG_SPRAY_DAMAGE)
