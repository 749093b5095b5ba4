"""
Farkle - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Iterable

import pytest

from src.engine.dice import Die, FaceValue
from src.engine.game import FarkleGame
from src.engine.player import Player


class ScriptedDie(Die):
    """Die that returns queued faces in order, for deterministic rolls."""

    def __init__(self, faces: Iterable[int] = ()) -> None:
        self.faces = [FaceValue(face) for face in faces]

    def push(self, *faces: int) -> None:
        self.faces.extend(FaceValue(face) for face in faces)

    def roll(self) -> FaceValue:
        if not self.faces:
            raise AssertionError("ScriptedDie has no faces left to roll")
        return self.faces.pop(0)


class ScriptedDiceSet:
    """Six scripted dice; each ``queue`` call scripts one roll of the set."""

    def __init__(self) -> None:
        self.dice = [ScriptedDie() for _ in range(6)]
        self._in_play = list(self.dice)

    def queue(self, *faces: int) -> None:
        """Script the next roll of the dice still in play, in order."""
        assert len(faces) == len(self._in_play), "one face per die in play"
        for die, face in zip(self._in_play, faces):
            die.push(face)

    def lock(self, *indexes: int) -> None:
        """Mirror dice being scored so later queues address the survivors."""
        dropped = set(indexes)
        self._in_play = [d for i, d in enumerate(self._in_play) if i not in dropped]

    def reset(self) -> None:
        self._in_play = list(self.dice)


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def valid_scoring_rolls() -> dict[str, tuple[tuple[int, ...], int]]:
    """
    Selections that fully score.

    Returns:
        Dict mapping name to (dice_values, expected_points)
    """
    return {
        "single_one": ((1,), 100),
        "single_five": ((5,), 50),
        "two_ones": ((1, 1), 200),
        "one_and_five": ((1, 5), 150),
        "three_ones": ((1, 1, 1), 1000),
        "four_ones": ((1, 1, 1, 1), 1100),
        "five_ones": ((1, 1, 1, 1, 1), 1200),
        "six_ones": ((1, 1, 1, 1, 1, 1), 2000),
        "three_fours": ((4, 4, 4), 400),
        "three_fours_plus_five": ((4, 4, 4, 5), 450),
        "ones_and_fives": ((1, 1, 1, 5, 5, 5), 1500),
        "six_twos": ((2, 2, 2, 2, 2, 2), 400),
        "two_triplets": ((3, 6, 3, 6, 3, 6), 900),
    }


@pytest.fixture
def invalid_scoring_rolls() -> dict[str, tuple[tuple[int, ...], tuple[int, ...]]]:
    """
    Selections that do not fully score.

    Returns:
        Dict mapping name to (dice_values, expected_leftover)
    """
    return {
        "single_four": ((4,), (4,)),
        "pair_of_fours": ((4, 4), (4, 4)),
        "four_fours": ((4, 4, 4, 4), (4,)),
        "triplets_plus_six": ((1, 1, 1, 5, 5, 6), (6,)),
        "two_and_three": ((2, 3), (2, 3)),
        "bust_roll": ((2, 3, 4, 6), (2, 3, 4, 6)),
    }


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def dice_sets() -> list[ScriptedDiceSet]:
    """One scripted dice set per player in ``game``."""
    return [ScriptedDiceSet(), ScriptedDiceSet()]


@pytest.fixture
def players(dice_sets) -> list[Player]:
    return [
        Player("Player 1", dice_sets[0].dice),
        Player("Player 2", dice_sets[1].dice),
    ]


@pytest.fixture
def game(players) -> FarkleGame:
    return FarkleGame(players)


@pytest.fixture
def make_die() -> Callable[..., ScriptedDie]:
    """Factory for scripted dice: ``make_die(3, 5)`` rolls a 3, then a 5."""
    def _make(*faces: int) -> ScriptedDie:
        return ScriptedDie(faces)
    return _make


@pytest.fixture
def make_dice(make_die) -> Callable[..., list[ScriptedDie]]:
    """Six scripted dice whose first roll shows ``faces``."""
    def _make(*faces: int) -> list[ScriptedDie]:
        assert len(faces) == 6
        return [make_die(face) for face in faces]
    return _make
