"""
Farkle - Turn State Machine

A turn is either waiting for a roll or holding a roll result the player must
act on. Scored dice are locked in and leave the pool; once the pool is empty
(hot dice) the turn is finished.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, TypeVar, Union

from src.engine.dice import DiceRoll, Die
from src.engine.errors import (
    EmptySelectionError,
    InvalidDiceCombinationError,
    RollInvalidStateError,
    UseDiceInvalidStateError,
)
from src.engine.scoring import calculate_score
from src.engine.validators import validate_dice_indexes

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class AwaitingRoll:
    """The player must roll the remaining dice."""


@dataclass(frozen=True)
class HaveRollResult:
    """The player must pick scoring dice from this roll."""
    roll: DiceRoll


TurnState = Union[AwaitingRoll, HaveRollResult]


def remove_indexes(items: Sequence[T], indexes: Sequence[int]) -> list[T]:
    """Drop the items at ``indexes``, keeping survivors in their order."""
    dropped = set(indexes)
    return [item for position, item in enumerate(items) if position not in dropped]


class Turn:
    """
    A single player's turn.

    Args:
        dice: The player's dice; every one of them is rolled at first
        player_index: Position of the owning player in the game
    """

    def __init__(self, dice: Sequence[Die], player_index: int) -> None:
        self._dice: list[Die] = list(dice)
        self._player_index = player_index
        self._actions_score: list[int] = []
        self._state: TurnState = AwaitingRoll()

    @property
    def player_index(self) -> int:
        return self._player_index

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def remaining_dice_count(self) -> int:
        return len(self._dice)

    @property
    def actions_score(self) -> tuple[int, ...]:
        """Score of every successful selection this turn, in order."""
        return tuple(self._actions_score)

    def total_score(self) -> int:
        return sum(self._actions_score)

    def is_waiting_for_roll(self) -> bool:
        return isinstance(self._state, AwaitingRoll)

    def is_finished(self) -> bool:
        return not self._dice

    def get_last_roll_result(self) -> DiceRoll | None:
        if isinstance(self._state, HaveRollResult):
            return self._state.roll
        return None

    def roll(self) -> DiceRoll:
        """
        Roll every remaining die.

        Raises:
            RollInvalidStateError: If a roll result is still pending
        """
        if not self.is_waiting_for_roll():
            raise RollInvalidStateError()

        roll = DiceRoll(values=tuple(die.roll() for die in self._dice))
        self._state = HaveRollResult(roll)
        logger.debug("Player %d rolled %s", self._player_index, roll.as_ints())
        return roll

    def has_any_combination(self) -> bool:
        """
        Check whether the pending roll holds any scoring dice.

        Returns False while waiting for a roll. A roll where only some dice
        score still counts; a roll without any is a bust.
        """
        roll = self.get_last_roll_result()
        if roll is None:
            return False
        return calculate_score(roll).has_combination

    def use_dice(self, dice_indexes: Sequence[int]) -> int:
        """
        Lock in dice from the pending roll and score them.

        Args:
            dice_indexes: Positions in the current roll result

        Returns:
            Points scored by the selection

        Raises:
            UseDiceInvalidStateError: If there is no pending roll
            WrongDiceIndexesError: If an index is out of range or repeated
            EmptySelectionError: If no dice were selected
            InvalidDiceCombinationError: If the selection does not fully score
        """
        roll = self.get_last_roll_result()
        if roll is None:
            raise UseDiceInvalidStateError()

        indexes = validate_dice_indexes(dice_indexes, len(roll))
        result = calculate_score([roll[i] for i in indexes])

        if result.is_empty:
            raise EmptySelectionError()
        if not result.is_valid:
            raise InvalidDiceCombinationError(result.leftover)

        self._dice = remove_indexes(self._dice, indexes)
        self._state = AwaitingRoll()
        self._actions_score.append(result.points)

        logger.debug(
            "Player %d scored %d with %s, %d dice left",
            self._player_index, result.points, [roll[i] for i in indexes], len(self._dice),
        )
        return result.points

    def clone(self) -> "Turn":
        """Independent copy for dry runs. Die objects are shared."""
        copy = Turn(self._dice, self._player_index)
        copy._actions_score = list(self._actions_score)
        copy._state = self._state
        return copy

    def __repr__(self) -> str:
        return (
            f"Turn(player_index={self._player_index}, state={self._state!r}, "
            f"remaining={len(self._dice)}, actions={self._actions_score})"
        )
