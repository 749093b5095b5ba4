"""
Farkle - Game Event Definitions

Event types and payloads emitted by the rules engine so a driver can react
(animate a roll, announce a bank) without polling every query.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Events that can occur during a game."""

    DICE_ROLLED = auto()
    DICE_USED = auto()
    HOT_DICE = auto()
    TURN_BANKED = auto()
    TURN_FORFEITED = auto()
    TURN_ADVANCED = auto()


@dataclass
class EventPayload:
    """Wrapper for game event data."""

    event: GameEvent
    player_id: str
    data: dict[str, Any] = field(default_factory=dict)


EventCallback = Callable[[EventPayload], None]


class EventDispatcher:
    """Fans events out to registered callbacks.

    A failing callback is logged and skipped; it never interrupts the
    engine or the remaining callbacks.
    """

    def __init__(self) -> None:
        self._callbacks: list[EventCallback] = []

    def subscribe(self, callback: EventCallback) -> None:
        if callback in self._callbacks:
            logger.warning("Callback %r already subscribed", callback)
            return
        self._callbacks.append(callback)

    def unsubscribe(self, callback: EventCallback) -> None:
        try:
            self._callbacks.remove(callback)
        except ValueError:
            logger.warning("Callback %r was not subscribed", callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def emit(self, payload: EventPayload) -> None:
        for callback in list(self._callbacks):
            try:
                callback(payload)
            except Exception:
                logger.exception("Error handling event %s", payload.event.name)
