"""
Farkle - Input Validation Utilities

Validation functions for rules engine inputs. All validators either return
normalised data or raise a descriptive error.
"""

from typing import Sequence

from src.engine.dice import NUM_DICE, FaceValue
from src.engine.errors import (
    DuplicateDiceIndexesError,
    InvalidDiceCountError,
    NotEnoughPlayersError,
    WrongDiceIndexesError,
)

MIN_PLAYERS = 2


def validate_dice_values(values: Sequence[int]) -> tuple[FaceValue, ...]:
    """
    Validate and normalise dice values.

    Args:
        values: Sequence of face values; may be empty

    Returns:
        Validated values as a tuple of FaceValue

    Raises:
        ValueError: If any value is not an integer between 1 and 6
    """
    faces: list[FaceValue] = []
    for i, value in enumerate(values):
        try:
            faces.append(FaceValue(value))
        except ValueError as exc:
            raise ValueError(f"Die value at index {i} is invalid: {exc}") from exc
    return tuple(faces)


def validate_dice_indexes(indexes: Sequence[int], dice_count: int) -> tuple[int, ...]:
    """
    Validate positions into the current roll.

    Args:
        indexes: Selected positions, in the order the driver supplied them
        dice_count: Number of dice in the current roll

    Returns:
        Validated indexes as a tuple, order preserved

    Raises:
        WrongDiceIndexesError: If an index is not an integer or out of range
        DuplicateDiceIndexesError: If the same position is selected twice
    """
    indexes_tuple = tuple(indexes)

    for idx in indexes_tuple:
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise WrongDiceIndexesError(indexes_tuple)
        if not (0 <= idx < dice_count):
            raise WrongDiceIndexesError(indexes_tuple)

    if len(set(indexes_tuple)) != len(indexes_tuple):
        raise DuplicateDiceIndexesError(indexes_tuple)

    return indexes_tuple


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Raises:
        NotEnoughPlayersError: If fewer than two players were supplied
    """
    if count < MIN_PLAYERS:
        raise NotEnoughPlayersError(count)
    return count


def validate_dice_count(count: int) -> int:
    """
    Validate the number of dice handed to a player.

    Raises:
        InvalidDiceCountError: If the count is not exactly six
    """
    if count != NUM_DICE:
        raise InvalidDiceCountError(count)
    return count


def validate_score(score: int) -> int:
    """
    Validate a score value.

    Raises:
        ValueError: If the score is not a non-negative integer
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score
