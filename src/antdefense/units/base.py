"""Base classes for the insect unit system.

UnitRole -- explicit role tag every unit carries (defender, guard, attacker)
Insect   -- armor + location back-reference shared by ants and bees
Ant      -- abstract base every concrete ant type subclasses
Bee      -- the attacker unit manufactured by the hive
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from loguru import logger

if TYPE_CHECKING:
    from antdefense.simulation.colony import Colony
    from antdefense.simulation.location import Location


class UnitRole(Enum):
    """How a unit occupies a location."""
    DEFENDER = "defender"
    GUARD = "guard"
    ATTACKER = "attacker"


class Insect:
    """Anything that can stand in a location and lose armor."""

    role: ClassVar[UnitRole]

    def __init__(self, armor: int, place: Location | None = None) -> None:
        self.armor = armor
        self.place = place

    def reduce_armor(self, amount: int) -> bool:
        """Apply *amount* damage. Returns True if this insect expired."""
        self.armor -= amount
        if self.armor <= 0:
            logger.info(f"{self} ran out of armor and expired")
            if self.place is not None:
                self.place.remove_insect(self)
            return True
        return False

    def act(self, colony: Colony | None = None) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        where = self.place.name if self.place is not None else ""
        return f"{self.name}({where})"


class Ant(Insect):
    """Abstract base for every ant type definition.

    Subclasses MUST set the identity and cost ClassVars.  The registry
    discovers concrete subclasses automatically at import time.
    """

    # -- identity --
    type_id: ClassVar[str]
    display_name: ClassVar[str]
    icon: ClassVar[str]
    role: ClassVar[UnitRole] = UnitRole.DEFENDER

    # -- economy --
    food_cost: ClassVar[int] = 0
    starting_armor: ClassVar[int] = 1

    # -- environment --
    can_submerge: ClassVar[bool] = False

    def __init__(self, place: Location | None = None) -> None:
        super().__init__(self.starting_armor, place)
        self.boost: str | None = None

    @property
    def name(self) -> str:
        return self.display_name

    def get_food_cost(self) -> int:
        return self.food_cost

    def set_boost(self, boost: str) -> None:
        self.boost = boost
        logger.info(f"{self} is given a {boost}")

    def act(self, colony: Colony | None = None) -> None:
        """Ants without a behaviour simply hold their ground."""

    def __repr__(self) -> str:
        return f"<Ant {self.type_id} armor={self.armor}>"


class Bee(Insect):
    """Attacker that stings whatever blocks it, otherwise advances."""

    name: ClassVar[str] = "Bee"
    role: ClassVar[UnitRole] = UnitRole.ATTACKER

    STUCK = "stuck"
    COLD = "cold"

    def __init__(self, armor: int, damage: int, place: Location | None = None) -> None:
        super().__init__(armor, place)
        self.damage = damage
        self.status: str | None = None

    def sting(self, ant: Ant) -> bool:
        logger.debug(f"{self} stings {ant}!")
        return ant.reduce_armor(self.damage)

    def is_blocked(self) -> bool:
        return self.place is not None and self.place.get_defender() is not None

    def set_status(self, status: str | None) -> None:
        self.status = status

    def act(self, colony: Colony | None = None) -> None:
        if self.place is None:
            return
        if self.is_blocked():
            if self.status != self.COLD:
                self.sting(self.place.get_defender())
        elif self.armor > 0 and self.status != self.STUCK:
            self.place.exit_attacker(self)
        self.status = None

    def __repr__(self) -> str:
        return f"<Bee armor={self.armor} damage={self.damage}>"
