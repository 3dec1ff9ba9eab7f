"""Recoverable failure reasons returned by the public command surface."""

from __future__ import annotations

from enum import Enum


class Failure(str, Enum):
    """Why a user command was refused.

    Members compare equal to their message text, so callers can treat
    them as plain strings.
    """
    INSUFFICIENT_RESOURCES = "insufficient resources"
    LOCATION_OCCUPIED = "location occupied"
    ILLEGAL_LOCATION = "illegal location"
    UNKNOWN_ANT_TYPE = "unknown ant type"
    UNKNOWN_BOOST = "unknown boost"
    NO_DEFENDER = "no defender present"

    def __str__(self) -> str:
        return self.value


class IllegalLocation(ValueError):
    """Coordinates that do not name a board location."""
