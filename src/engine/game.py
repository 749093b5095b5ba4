"""
Farkle - Game Orchestration

Owns the fixed list of players and the single live turn. Turns rotate
round-robin; a player's total only changes when their turn ends.
"""

import logging
from typing import Sequence

from src.engine.dice import DiceRoll
from src.engine.errors import UseDiceError
from src.engine.player import Player
from src.engine.snapshot import GameSnapshot, PlayerView
from src.engine.turn import Turn
from src.engine.validators import validate_player_count
from src.events import EventCallback, EventDispatcher, EventPayload, GameEvent

logger = logging.getLogger(__name__)


class FarkleGame:
    """
    A game of Farkle between two or more players.

    Args:
        players: Players in turn order; fixed for the whole game

    Raises:
        NotEnoughPlayersError: If fewer than two players are given
    """

    def __init__(self, players: Sequence[Player]) -> None:
        validate_player_count(len(players))
        self._players = list(players)
        self._turn = Turn(self._players[0].dice(), 0)
        self._events = EventDispatcher()
        logger.info(
            "New game with players %s", [player.id for player in self._players]
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def current_player_index(self) -> int:
        return self._turn.player_index

    def get_current_player(self) -> Player:
        return self._players[self._turn.player_index]

    def _get_next_player_index(self) -> int:
        return (self._turn.player_index + 1) % len(self._players)

    def get_next_player(self) -> Player:
        return self._players[self._get_next_player_index()]

    def get_last_roll_result(self) -> DiceRoll | None:
        return self._turn.get_last_roll_result()

    def is_waiting_for_roll(self) -> bool:
        return self._turn.is_waiting_for_roll()

    def has_any_combination(self) -> bool:
        """False means the pending roll is a bust."""
        return self._turn.has_any_combination()

    def get_turn_actions(self) -> tuple[int, ...]:
        """Scores locked in so far this turn."""
        return self._turn.actions_score

    def get_turn_score(self) -> int:
        return self._turn.total_score()

    def get_remaining_dice_count(self) -> int:
        return self._turn.remaining_dice_count

    def snapshot(self) -> GameSnapshot:
        """Detached view of the whole observable state."""
        roll = self._turn.get_last_roll_result()
        return GameSnapshot(
            players=[PlayerView(id=p.id, score=p.score) for p in self._players],
            current_player_index=self._turn.player_index,
            next_player_index=self._get_next_player_index(),
            is_waiting_for_roll=self._turn.is_waiting_for_roll(),
            last_roll=roll.as_ints() if roll is not None else None,
            turn_actions=list(self._turn.actions_score),
            turn_score=self._turn.total_score(),
            remaining_dice=self._turn.remaining_dice_count,
        )

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def subscribe(self, callback: EventCallback) -> None:
        """Receive an EventPayload for every state change."""
        self._events.subscribe(callback)

    def unsubscribe(self, callback: EventCallback) -> None:
        self._events.unsubscribe(callback)

    def _emit(self, event: GameEvent, player: Player, **data) -> None:
        self._events.emit(EventPayload(event=event, player_id=player.id, data=data))

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def roll(self) -> DiceRoll:
        """
        Roll the current player's remaining dice.

        Raises:
            RollInvalidStateError: If a roll result is still pending
        """
        roll = self._turn.roll()
        self._emit(GameEvent.DICE_ROLLED, self.get_current_player(), dice=roll.as_ints())
        return roll

    def use_dice(self, dice_indexes: Sequence[int]) -> int:
        """
        Score dice from the pending roll.

        When this uses up the last die the turn total is credited and play
        passes to the next player.

        Raises:
            UseDiceError: Any failure reported by the turn, unchanged
        """
        player = self.get_current_player()
        score = self._turn.use_dice(dice_indexes)
        self._emit(
            GameEvent.DICE_USED, player,
            points=score, turn_score=self._turn.total_score(),
        )

        if self._turn.is_finished():
            self._emit(GameEvent.HOT_DICE, player, turn_score=self._turn.total_score())
            self._bank_turn()
            self._advance()

        return score

    def try_use_dice(self, dice_indexes: Sequence[int]) -> int:
        """
        Dry run of ``use_dice`` on a copy of the turn.

        Returns:
            The score the selection would yield

        Raises:
            UseDiceError: Exactly what ``use_dice`` would raise
        """
        return self._turn.clone().use_dice(dice_indexes)

    def can_use_dice(self, dice_indexes: Sequence[int]) -> bool:
        """Whether ``use_dice`` would accept the selection."""
        try:
            self.try_use_dice(dice_indexes)
        except UseDiceError:
            return False
        return True

    def next_turn(self) -> None:
        """
        End the current turn and pass play to the next player.

        Banks the turn total when the player stopped between rolls. With a
        roll still pending nothing is credited: the turn's points are
        forfeited, which is also how a bust ends a turn.
        """
        if self._turn.is_waiting_for_roll():
            self._bank_turn()
        else:
            player = self.get_current_player()
            logger.info(
                "%s forfeits %d points", player.id, self._turn.total_score()
            )
            self._emit(
                GameEvent.TURN_FORFEITED, player, turn_score=self._turn.total_score()
            )
        self._advance()

    def _bank_turn(self) -> None:
        player = self.get_current_player()
        points = self._turn.total_score()
        player.add_score(points)
        logger.info("%s banks %d points (total %d)", player.id, points, player.score)
        self._emit(GameEvent.TURN_BANKED, player, points=points, total=player.score)

    def _advance(self) -> None:
        next_index = self._get_next_player_index()
        next_player = self._players[next_index]
        self._turn = Turn(next_player.dice(), next_index)
        logger.info("Turn passes to %s", next_player.id)
        self._emit(GameEvent.TURN_ADVANCED, next_player, player_index=next_index)
