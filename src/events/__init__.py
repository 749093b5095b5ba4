"""
Farkle Game Events.

Notifications emitted by the rules engine for drivers to react to.
"""

from src.events.events import EventCallback, EventDispatcher, EventPayload, GameEvent

__all__ = [
    "EventCallback",
    "EventDispatcher",
    "EventPayload",
    "GameEvent",
]
