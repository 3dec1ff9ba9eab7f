"""Unit tests for Colony — board construction, deployment, boosts, sweeps."""

from __future__ import annotations

import pytest

from antdefense.simulation.colony import INITIAL_BOOSTS, Colony
from antdefense.simulation.errors import Failure
from antdefense.units.ants.guard import GuardAnt
from antdefense.units.ants.thrower import ThrowerAnt
from antdefense.units.base import Ant, Bee
from conftest import WorkerAnt

pytestmark = pytest.mark.unit


class RecordingAnt(Ant):
    """Appends its label to a shared log whenever it acts."""

    type_id = "recording"
    display_name = "Recording"
    icon = "R"

    def __init__(self, label: str, log: list[str]) -> None:
        super().__init__()
        self.label = label
        self.log = log

    def act(self, colony=None) -> None:
        self.log.append(self.label)


class RecordingGuard(RecordingAnt):
    role = GuardAnt.role


class RecordingBee(Bee):
    def __init__(self, label: str, log: list[str]) -> None:
        super().__init__(3, 1)
        self.label = label
        self.log = log

    def act(self, colony=None) -> None:
        self.log.append(self.label)


# --------------------------------------------------------------------------
# Construction
# --------------------------------------------------------------------------

class TestBoardConstruction:
    def test_dimensions(self):
        colony = Colony(10, 2, 3)
        places = colony.get_places()
        assert len(places) == 2
        assert all(len(row) == 3 for row in places)
        assert colony.get_food() == 10

    def test_names(self):
        colony = Colony(0, 2, 2)
        assert colony.get_places()[1][0].name == "tunnel[1,0]"
        assert colony.get_queen_place().name == "Ant Queen"

    def test_every_tunnel_exits_to_queen(self):
        colony = Colony(0, 3, 4)
        queen = colony.get_queen_place()
        for row in colony.get_places():
            assert row[0].exit is queen
            for step in range(1, len(row)):
                assert row[step].exit is row[step - 1]
                assert row[step - 1].entrance is row[step]

    def test_entrances_are_tunnel_tails(self):
        colony = Colony(0, 3, 4)
        assert colony.get_entrances() == [row[-1] for row in colony.get_places()]
        assert all(e.entrance is None for e in colony.get_entrances())

    def test_no_water_by_default(self):
        colony = Colony(0, 2, 6)
        assert not any(p.is_water() for row in colony.get_places() for p in row)

    def test_moat_frequency(self):
        colony = Colony(0, 2, 6, moat_frequency=3)
        for row in colony.get_places():
            assert [p.is_water() for p in row] == [False, False, True, False, False, True]
        assert colony.get_places()[0][2].name == "water[0,2]"

    def test_moat_every_location(self):
        colony = Colony(0, 1, 3, moat_frequency=1)
        assert all(p.is_water() for p in colony.get_places()[0])

    @pytest.mark.parametrize("args", [(0, 0, 3), (0, 2, 0), (0, 2, 3, -1)])
    def test_invalid_dimensions(self, args):
        with pytest.raises(ValueError):
            Colony(*args)

    def test_location_at(self, colony: Colony):
        assert colony.location_at(1, 2) is colony.get_places()[1][2]
        with pytest.raises(IndexError):
            colony.location_at(2, 0)
        with pytest.raises(IndexError):
            colony.location_at(-1, 0)


# --------------------------------------------------------------------------
# Deployment
# --------------------------------------------------------------------------

class TestDeployDefender:
    def test_success_spends_food(self, colony: Colony):
        place = colony.location_at(0, 0)
        assert colony.deploy_defender(WorkerAnt(), place) is None
        assert colony.get_food() == 8
        assert place.get_defender() is not None

    def test_occupied_keeps_food(self, colony: Colony):
        place = colony.location_at(0, 0)
        colony.deploy_defender(WorkerAnt(), place)
        assert colony.deploy_defender(WorkerAnt(), place) == Failure.LOCATION_OCCUPIED
        assert colony.get_food() == 8

    def test_unaffordable_leaves_board(self):
        colony = Colony(3, 1, 2)
        place = colony.location_at(0, 0)
        result = colony.deploy_defender(ThrowerAnt(), place)
        assert result == "insufficient resources"
        assert place.get_defender() is None
        assert colony.get_food() == 3

    def test_exact_food_is_enough(self):
        colony = Colony(4, 1, 2)
        assert colony.deploy_defender(ThrowerAnt(), colony.location_at(0, 1)) is None
        assert colony.get_food() == 0

    def test_unaffordable_reported_before_occupancy(self):
        colony = Colony(2, 1, 1)
        place = colony.location_at(0, 0)
        colony.deploy_defender(WorkerAnt(), place)
        assert colony.deploy_defender(WorkerAnt(), place) == Failure.INSUFFICIENT_RESOURCES

    def test_guard_over_regular(self, colony: Colony):
        place = colony.location_at(0, 0)
        colony.deploy_defender(WorkerAnt(), place)
        assert colony.deploy_defender(GuardAnt(), place) is None
        assert colony.get_food() == 4

    def test_remove_defender(self, colony: Colony):
        place = colony.location_at(1, 1)
        ant = WorkerAnt()
        colony.deploy_defender(ant, place)
        assert colony.remove_defender(place) is ant
        assert place.get_defender() is None
        assert colony.remove_defender(place) is None


# --------------------------------------------------------------------------
# Boosts
# --------------------------------------------------------------------------

class TestBoosts:
    def test_initial_inventory(self, colony: Colony):
        assert colony.get_boosts() == INITIAL_BOOSTS
        assert colony.get_boosts() is not INITIAL_BOOSTS

    def test_collect_known_boost(self, colony: Colony):
        colony.collect_boost("BugSpray")
        assert colony.get_boosts()["BugSpray"] == 1

    def test_collect_new_boost(self, colony: Colony):
        colony.collect_boost("Mystery")
        colony.collect_boost("Mystery")
        assert colony.get_boosts()["Mystery"] == 2

    def test_apply_unknown_boost(self, colony: Colony):
        place = colony.location_at(0, 0)
        colony.deploy_defender(WorkerAnt(), place)
        assert colony.apply_boost("Nope", place) == Failure.UNKNOWN_BOOST

    def test_apply_empty_boost(self, colony: Colony):
        place = colony.location_at(0, 0)
        colony.deploy_defender(WorkerAnt(), place)
        assert colony.apply_boost("BugSpray", place) == Failure.UNKNOWN_BOOST

    def test_apply_without_defender(self, colony: Colony):
        assert colony.apply_boost("IcyLeaf", colony.location_at(0, 0)) == Failure.NO_DEFENDER

    def test_apply_attaches_to_front_line(self, colony: Colony):
        place = colony.location_at(0, 0)
        ant, guard = WorkerAnt(), GuardAnt()
        colony.deploy_defender(ant, place)
        colony.deploy_defender(guard, place)
        assert colony.apply_boost("StickyLeaf", place) is None
        assert guard.boost == "StickyLeaf"
        assert ant.boost is None

    def test_apply_does_not_spend_inventory(self, colony: Colony):
        # Observed behaviour: applying a boost never decrements its count,
        # so one collected boost can be reused indefinitely.
        first, second = colony.location_at(0, 0), colony.location_at(1, 0)
        colony.deploy_defender(WorkerAnt(), first)
        colony.deploy_defender(WorkerAnt(), second)
        assert colony.apply_boost("FlyingLeaf", first) is None
        assert colony.apply_boost("FlyingLeaf", second) is None
        assert colony.get_boosts()["FlyingLeaf"] == 1


# --------------------------------------------------------------------------
# Sweeps
# --------------------------------------------------------------------------

class TestSweeps:
    def test_defender_order_is_board_order(self, colony: Colony):
        log: list[str] = []
        colony.location_at(1, 0).place_defender(RecordingAnt("1,0", log))
        colony.location_at(0, 2).place_defender(RecordingAnt("0,2", log))
        colony.location_at(0, 0).place_defender(RecordingAnt("0,0", log))
        colony.defenders_act()
        assert log == ["0,0", "0,2", "1,0"]

    def test_guarded_ant_acts_before_guard(self, colony: Colony):
        log: list[str] = []
        place = colony.location_at(0, 1)
        place.place_defender(RecordingAnt("ant", log))
        place.place_defender(RecordingGuard("guard", log))
        colony.defenders_act()
        assert log == ["ant", "guard"]

    def test_lone_guard_acts(self, colony: Colony):
        log: list[str] = []
        colony.location_at(0, 1).place_defender(RecordingGuard("guard", log))
        colony.defenders_act()
        assert log == ["guard"]

    def test_attacker_order(self, colony: Colony):
        log: list[str] = []
        colony.location_at(1, 1).add_attacker(RecordingBee("c", log))
        colony.location_at(0, 2).add_attacker(RecordingBee("a", log))
        colony.location_at(0, 2).add_attacker(RecordingBee("b", log))
        colony.attackers_act()
        assert log == ["a", "b", "c"]

    def test_bee_moves_one_step_per_turn(self, colony: Colony):
        bee = Bee(3, 1)
        colony.location_at(0, 2).add_attacker(bee)
        colony.attackers_act()
        assert bee.place is colony.location_at(0, 1)
        colony.attackers_act()
        assert bee.place is colony.location_at(0, 0)
        colony.attackers_act()
        assert bee.place is colony.get_queen_place()
        assert colony.goal_is_breached()

    def test_locations_act_floods(self):
        colony = Colony(20, 1, 2, moat_frequency=2)
        water = colony.location_at(0, 1)
        colony.deploy_defender(WorkerAnt(), water)
        colony.deploy_defender(GuardAnt(), water)
        colony.locations_act()
        assert water.get_defender() is None

    def test_all_defenders_lists_front_line(self, colony: Colony):
        place = colony.location_at(0, 0)
        ant, guard = WorkerAnt(), GuardAnt()
        place.place_defender(ant)
        place.place_defender(guard)
        assert colony.get_all_defenders() == [guard]


class TestGoal:
    def test_not_breached_initially(self, colony: Colony):
        assert colony.goal_is_breached() is False

    def test_breached_with_bee(self, colony: Colony):
        colony.get_queen_place().add_attacker(Bee(1, 1))
        assert colony.goal_is_breached() is True

    def test_queen_bees_not_counted_on_board(self, colony: Colony):
        colony.get_queen_place().add_attacker(Bee(1, 1))
        assert colony.get_all_attackers() == []

