from antdefense.units.ants.thrower import ThrowerAnt


class ScubaAnt(ThrowerAnt):
    """A thrower that survives in flooded tunnel locations."""

    type_id = "scuba"
    display_name = "Scuba"
    icon = "S"
    food_cost = 5
    starting_armor = 1
    can_submerge = True
