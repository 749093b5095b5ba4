"""
Farkle - Dice

Face values, roll results and the die capability. A die only knows how to
produce a face value; swapping the roll mechanism (real randomness or a
scripted test double) never changes the call sites.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Sequence

# Constants
NUM_DICE = 6
MIN_FACE = 1
MAX_FACE = 6


class FaceValue(int):
    """A single die face, always between 1 and 6."""

    def __new__(cls, value: int) -> "FaceValue":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value must be an integer, got {type(value).__name__}.")
        if not (MIN_FACE <= value <= MAX_FACE):
            raise ValueError(
                f"Invalid die value {value}. Must be between {MIN_FACE} and {MAX_FACE}."
            )
        return super().__new__(cls, value)

    @classmethod
    def all(cls) -> tuple["FaceValue", ...]:
        """Every face in ascending order."""
        return tuple(cls(v) for v in range(MIN_FACE, MAX_FACE + 1))


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable, ordered result of rolling a set of dice.

    Attributes:
        values: Face values in the order the dice were rolled
    """
    values: tuple[FaceValue, ...]

    def __post_init__(self) -> None:
        # Normalise plain ints so every stored value is a FaceValue
        object.__setattr__(self, "values", tuple(FaceValue(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> FaceValue:
        return self.values[index]

    def __iter__(self) -> Iterator[FaceValue]:
        return iter(self.values)

    def as_ints(self) -> list[int]:
        return [int(v) for v in self.values]

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))


class Die(ABC):
    """Anything that produces a face value on demand."""

    @abstractmethod
    def roll(self) -> FaceValue:
        """Roll the die once."""


class RegularDie(Die):
    """
    A fair six-sided die.

    Args:
        rng: Optional random generator, e.g. a seeded ``random.Random``
            shared between all dice of a game. Defaults to the module-level
            generator.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def roll(self) -> FaceValue:
        randint = self._rng.randint if self._rng is not None else random.randint
        return FaceValue(randint(MIN_FACE, MAX_FACE))

    def __repr__(self) -> str:
        return "RegularDie()"


def standard_dice(rng: random.Random | None = None) -> list[Die]:
    """Build the six regular dice a player starts with."""
    return [RegularDie(rng) for _ in range(NUM_DICE)]
