"""Internal messaging for game events."""

from .event_bus import EventBus

__all__ = ["EventBus"]
