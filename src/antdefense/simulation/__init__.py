"""Turn-based tunnel defense simulation.

Package layout:
  location.py  — Location (tunnel node, occupancy rules, water effect)
  hive.py      — Hive (bee waves, random-entrance invasion)
  colony.py    — Colony (board construction, food, boosts, turn sweeps)
  game.py      — Game (turn order, commands, outcome) + create_default_game
  waves.py     — WaveConfig and the default wave schedule
  snapshot.py  — pydantic board snapshot models
  errors.py    — Failure reasons returned by commands
"""

from .colony import Colony
from .errors import Failure, IllegalLocation
from .game import Game, Outcome, create_default_game, parse_coordinates
from .hive import Hive
from .location import Location
from .snapshot import GameSnapshot, LocationState
from .waves import WAVE_CONFIGS, WaveConfig, schedule_waves

__all__ = [
    "Colony",
    "Failure",
    "Game",
    "GameSnapshot",
    "Hive",
    "IllegalLocation",
    "Location",
    "LocationState",
    "Outcome",
    "WAVE_CONFIGS",
    "WaveConfig",
    "create_default_game",
    "parse_coordinates",
    "schedule_waves",
]
