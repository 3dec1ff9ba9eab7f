"""Ant colony tunnel defense: a turn-based tower-defense simulation core."""

from .simulation import (
    Colony,
    Failure,
    Game,
    Hive,
    Location,
    Outcome,
    create_default_game,
)

__all__ = [
    "Colony",
    "Failure",
    "Game",
    "Hive",
    "Location",
    "Outcome",
    "create_default_game",
]
