"""Default bee wave schedule used by ``create_default_game``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .hive import Hive


@dataclass(frozen=True)
class WaveConfig:
    """A batch of bees that enters the board on a given turn."""

    name: str
    turn: int
    count: int


# Waves of increasing size; the first arrives after two quiet turns
WAVE_CONFIGS: list[WaveConfig] = [
    WaveConfig("Scout",         turn=2,  count=1),
    WaveConfig("Second Scout",  turn=3,  count=1),
    WaveConfig("Patrol",        turn=4,  count=1),
    WaveConfig("Forager Party", turn=5,  count=1),
    WaveConfig("Raid",          turn=7,  count=2),
    WaveConfig("Heavy Raid",    turn=9,  count=2),
    WaveConfig("Swarm",         turn=12, count=3),
    WaveConfig("Queen's Guard", turn=15, count=4),
]


def schedule_waves(hive: Hive, waves: Iterable[WaveConfig] = WAVE_CONFIGS) -> Hive:
    """Schedule every wave in *waves* on *hive*."""
    for wave in waves:
        hive.schedule_wave(wave.turn, wave.count)
    return hive
