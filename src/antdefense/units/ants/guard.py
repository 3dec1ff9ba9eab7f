from __future__ import annotations

from antdefense.units.base import Ant, UnitRole


class GuardAnt(Ant):
    """Shields the regular ant sharing its location.

    A guard occupies the separate guard slot, so bees sting it first and
    the guarded ant keeps acting underneath it.
    """

    type_id = "guard"
    display_name = "Guard"
    icon = "D"
    role = UnitRole.GUARD
    food_cost = 4
    starting_armor = 2

    @property
    def guarded(self) -> Ant | None:
        """The regular ant this guard is shadowing, if any."""
        if self.place is None:
            return None
        return self.place.get_guarded_defender()
