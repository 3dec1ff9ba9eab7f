"""Game — turn orchestration, the command surface, and the win condition.

Architecture
------------
Game owns one Colony and one Hive.  The hive is not part of the colony;
they are siblings and ``take_turn`` tells the hive which colony to
invade.  A turn runs, in strict order:

  colony.defenders_act -> colony.attackers_act -> colony.locations_act
  -> hive.invade(colony, turn) -> turn += 1

Commands (``deploy_unit``, ``remove_unit``, ``apply_boost``) take board
coordinates as ``"tunnel,step"`` strings and never raise for bad user
input: they return a ``Failure`` reason, or ``None`` on success.

Outcome:
  - LOST as soon as any bee stands in the queen location
  - WON when no bee is left on the board or in the hive
  - UNDECIDED otherwise

Events published on the optional EventBus:
  - ``wave_start``: a scheduled wave entered the board
  - ``turn_complete``: end of every turn
  - ``game_over``: first turn after which the outcome is decided
"""

from __future__ import annotations

import random
import re
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from antdefense.simulation.colony import Colony
from antdefense.simulation.errors import Failure, IllegalLocation
from antdefense.simulation.hive import Hive
from antdefense.simulation.snapshot import GameSnapshot, LocationState
from antdefense.simulation.waves import WAVE_CONFIGS, schedule_waves
from antdefense.units import get_type

if TYPE_CHECKING:
    from antdefense.comms.event_bus import EventBus
    from antdefense.config import Settings
    from antdefense.simulation.location import Location


# Plain ASCII indices, no sign, padding or leading zeros
_COORDINATES = re.compile(r"(0|[1-9][0-9]*),(0|[1-9][0-9]*)")


class Outcome(str, Enum):
    LOST = "lost"
    WON = "won"
    UNDECIDED = "undecided"


def parse_coordinates(coordinates: str) -> tuple[int, int]:
    """Parse ``"tunnel,step"`` into a pair of non-negative ints."""
    match = _COORDINATES.fullmatch(coordinates)
    if match is None:
        raise IllegalLocation(f"expected 'tunnel,step', got {coordinates!r}")
    return int(match.group(1)), int(match.group(2))


class Game:
    """Advances a Colony/Hive pair one turn at a time."""

    def __init__(self, colony: Colony, hive: Hive,
                 event_bus: EventBus | None = None) -> None:
        self._colony = colony
        self._hive = hive
        self._event_bus = event_bus
        self.turn: int = 0
        self._game_over_published = False

    @property
    def colony(self) -> Colony:
        return self._colony

    @property
    def hive(self) -> Hive:
        return self._hive

    # -- Turn -----------------------------------------------------------------

    def take_turn(self) -> None:
        """Run one full turn: ants, bees, environment, invasion."""
        self._colony.defenders_act()
        self._colony.attackers_act()
        self._colony.locations_act()
        invaders = self._hive.invade(self._colony, self.turn)
        if invaders:
            self._publish("wave_start", {
                "turn": self.turn,
                "count": len(invaders),
                "entrances": sorted({b.place.name for b in invaders if b.place is not None}),
            })
        self.turn += 1

        self._publish("turn_complete", {
            "turn": self.turn,
            "food": self._colony.get_food(),
            "hive_bees": self.hive_bee_count(),
            "board_bees": len(self._colony.get_all_attackers()),
        })
        outcome = self.evaluate_outcome()
        if outcome is not Outcome.UNDECIDED and not self._game_over_published:
            self._game_over_published = True
            logger.info(f"Game over after turn {self.turn}: colony {outcome.value}")
            self._publish("game_over", {"result": outcome.value, "turn": self.turn})

    def evaluate_outcome(self) -> Outcome:
        if self._colony.goal_is_breached():
            return Outcome.LOST
        if len(self._colony.get_all_attackers()) + self.hive_bee_count() == 0:
            return Outcome.WON
        return Outcome.UNDECIDED

    # -- Commands -------------------------------------------------------------

    def deploy_unit(self, ant_type: str, coordinates: str) -> Failure | None:
        """Deploy a new *ant_type* ant at *coordinates*."""
        ant_cls = get_type(ant_type)
        if ant_cls is None:
            return Failure.UNKNOWN_ANT_TYPE
        try:
            place = self._resolve(coordinates)
        except IllegalLocation:
            return Failure.ILLEGAL_LOCATION
        return self._colony.deploy_defender(ant_cls(), place)

    def remove_unit(self, coordinates: str) -> Failure | None:
        """Remove the front-line ant at *coordinates* (a guard goes first)."""
        try:
            place = self._resolve(coordinates)
        except IllegalLocation:
            return Failure.ILLEGAL_LOCATION
        self._colony.remove_defender(place)
        return None

    def apply_boost(self, boost: str, coordinates: str) -> Failure | None:
        try:
            place = self._resolve(coordinates)
        except IllegalLocation:
            return Failure.ILLEGAL_LOCATION
        return self._colony.apply_boost(boost, place)

    def _resolve(self, coordinates: str) -> Location:
        tunnel, step = parse_coordinates(coordinates)
        try:
            return self._colony.location_at(tunnel, step)
        except IndexError as e:
            raise IllegalLocation(f"{coordinates!r} is off the board") from e

    # -- Queries --------------------------------------------------------------

    def get_places(self) -> list[list[Location]]:
        return self._colony.get_places()

    def get_food(self) -> int:
        return self._colony.get_food()

    def hive_bee_count(self) -> int:
        return len(self._hive.get_attackers())

    def get_boost_names(self) -> list[str]:
        """Names of boosts with at least one available."""
        return [name for name, count in self._colony.get_boosts().items() if count > 0]

    def snapshot(self) -> GameSnapshot:
        tunnels = [
            [_location_state(place) for place in row]
            for row in self._colony.get_places()
        ]
        return GameSnapshot(
            turn=self.turn,
            food=self.get_food(),
            hive_bees=self.hive_bee_count(),
            outcome=self.evaluate_outcome().value,
            boosts=self.get_boost_names(),
            queen_bees=len(self._colony.get_queen_place().get_attackers()),
            tunnels=tunnels,
        )

    def _publish(self, event_type: str, data: dict) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event_type, data)


def _location_state(place: Location) -> LocationState:
    ant = place.get_guarded_defender()
    guard = place.get_guard()
    return LocationState(
        name=place.name,
        water=place.is_water(),
        ant=ant.type_id if ant is not None else None,
        guard=guard.type_id if guard is not None else None,
        bees=len(place.get_attackers()),
    )


def create_default_game(
    settings: Settings | None = None,
    rng: random.Random | None = None,
    event_bus: EventBus | None = None,
) -> Game:
    """Build a Game from *settings* with the default wave schedule."""
    if settings is None:
        from antdefense.config import settings as default_settings
        settings = default_settings
    if rng is None:
        rng = random.Random(settings.seed)

    colony = Colony(
        settings.starting_food,
        settings.num_tunnels,
        settings.tunnel_length,
        settings.moat_frequency,
        rng=rng,
    )
    hive = schedule_waves(Hive(settings.bee_armor, settings.bee_damage, rng=rng), WAVE_CONFIGS)
    logger.info(
        f"New game: {settings.num_tunnels} tunnels x {settings.tunnel_length}, "
        f"{settings.starting_food} food, {len(hive.get_attackers())} bees in {len(hive.waves)} waves"
    )
    return Game(colony, hive, event_bus=event_bus)