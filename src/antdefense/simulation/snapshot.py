"""Serializable board snapshot returned by ``Game.snapshot()``."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class LocationState(BaseModel):
    """What stands in one tunnel location."""
    name: str
    water: bool
    ant: Optional[str] = None     # type_id of the regular ant
    guard: Optional[str] = None   # type_id of the guard
    bees: int = 0


class GameSnapshot(BaseModel):
    """Full game state for display or logging."""
    turn: int
    food: int
    hive_bees: int
    outcome: str
    boosts: list[str]
    queen_bees: int
    tunnels: list[list[LocationState]]
