"""
Farkle - Player

A player owns exactly six dice and a running total score.
"""

from typing import Sequence

from src.engine.dice import DiceRoll, Die
from src.engine.validators import validate_dice_count, validate_score


class Player:
    """
    A participant in a game.

    The score only grows, and only the game credits it when a turn ends.

    Args:
        player_id: Display identity; uniqueness is up to the caller
        dice: Exactly six dice

    Raises:
        InvalidDiceCountError: If not given exactly six dice
    """

    def __init__(self, player_id: str, dice: Sequence[Die]) -> None:
        validate_dice_count(len(dice))
        self._id = player_id
        self._dice = list(dice)
        self._score = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def score(self) -> int:
        return self._score

    def dice(self) -> list[Die]:
        """A fresh list of this player's dice. The die objects are shared."""
        return list(self._dice)

    def roll(self) -> DiceRoll:
        """Roll all six dice."""
        return DiceRoll(values=tuple(die.roll() for die in self._dice))

    def add_score(self, points: int) -> None:
        """Credit points at the end of a turn."""
        self._score += validate_score(points)

    def __repr__(self) -> str:
        return f"Player(id={self._id!r}, score={self._score})"
