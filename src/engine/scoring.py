"""
Farkle - Scoring Engine

Classifies a collection of dice into the classic scoring combinations.
Scoring is a pure function: the same multiset of faces always yields the
same result regardless of order.

Scoring Rules:
    - Three 1s: 1,000 points
    - Three of X (2-6): X × 100 points
    - Single 1: 100 points
    - Single 5: 50 points

Every die of a selection must belong to a combination. Dice that do not are
reported back as the leftover.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence

from src.engine.dice import DiceRoll, FaceValue
from src.engine.validators import validate_dice_values

# Scoring values
THREE_ONES_POINTS = 1000
TRIPLE_MULTIPLIER = 100
SINGLE_ONE_POINTS = 100
SINGLE_FIVE_POINTS = 50


class ScoringCategory(Enum):
    """Categories of scoring combinations."""
    THREE_OF_A_KIND = auto()
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a selection.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice that contributed to this score
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[FaceValue, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a selection of dice.

    Attributes:
        points: Points of every extracted combination. Only a real score
            when ``is_valid``; otherwise it is what the partial
            decomposition found.
        leftover: Dice not attributed to any combination, in input order
        breakdown: Extracted combinations in extraction order
        dice_count: Number of dice that were scored
    """
    points: int
    leftover: tuple[FaceValue, ...]
    breakdown: tuple[ScoringBreakdown, ...]
    dice_count: int

    @property
    def is_empty(self) -> bool:
        """True if no dice were given. A precondition bug, not a bust."""
        return self.dice_count == 0

    @property
    def is_valid(self) -> bool:
        """True if every die belongs to a scoring combination."""
        return not self.is_empty and not self.leftover

    @property
    def has_combination(self) -> bool:
        """True if at least one combination could be extracted."""
        return len(self.leftover) < self.dice_count

    def __str__(self) -> str:
        if self.is_empty:
            return "No dice."
        if not self.is_valid:
            return f"Invalid combination, unused dice: {[int(v) for v in self.leftover]}"
        lines = [f"Total: {self.points} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


def calculate_score(dice: Sequence[int] | DiceRoll) -> ScoringResult:
    """
    Score a selection of dice.

    Triplets are taken first, lowest face first, restarting the scan after
    each one so that six equal dice yield two triplets. Remaining 1s and 5s
    are then taken as singles.

    Args:
        dice: Face values to score (sequence or DiceRoll)

    Returns:
        ScoringResult; check ``is_valid`` before trusting ``points``

    Raises:
        ValueError: If a value is not a valid face
    """
    if isinstance(dice, DiceRoll):
        remaining = list(dice.values)
    else:
        remaining = list(validate_dice_values(dice))

    dice_count = len(remaining)
    breakdown: list[ScoringBreakdown] = []

    if remaining:
        breakdown.extend(_take_triplets(remaining))
        breakdown.extend(_take_singles(remaining))

    return ScoringResult(
        points=sum(item.points for item in breakdown),
        leftover=tuple(remaining),
        breakdown=tuple(breakdown),
        dice_count=dice_count,
    )


def has_any_combination(dice: Sequence[int] | DiceRoll) -> bool:
    """
    Check whether a roll contains anything worth keeping.

    Partial scoring counts: a roll where only some dice score still has a
    combination. A roll without one is a bust.
    """
    return calculate_score(dice).has_combination


def _take_triplets(remaining: list[FaceValue]) -> list[ScoringBreakdown]:
    """Remove triplets from ``remaining`` until a full scan finds none."""
    breakdown: list[ScoringBreakdown] = []

    found = True
    while found:
        found = False
        for face in FaceValue.all():
            if _take(remaining, face, 3):
                points = THREE_ONES_POINTS if face == 1 else face * TRIPLE_MULTIPLIER
                breakdown.append(ScoringBreakdown(
                    category=ScoringCategory.THREE_OF_A_KIND,
                    dice_values=(face,) * 3,
                    points=points,
                    description=f"Three {face}s",
                ))
                found = True
                break

    return breakdown


def _take_singles(remaining: list[FaceValue]) -> list[ScoringBreakdown]:
    """Remove single 1s and 5s from ``remaining``."""
    breakdown: list[ScoringBreakdown] = []

    progress = True
    while progress:
        progress = False
        if _take(remaining, FaceValue(1), 1):
            breakdown.append(ScoringBreakdown(
                category=ScoringCategory.SINGLE_ONE,
                dice_values=(FaceValue(1),),
                points=SINGLE_ONE_POINTS,
                description="Single 1",
            ))
            progress = True
        if _take(remaining, FaceValue(5), 1):
            breakdown.append(ScoringBreakdown(
                category=ScoringCategory.SINGLE_FIVE,
                dice_values=(FaceValue(5),),
                points=SINGLE_FIVE_POINTS,
                description="Single 5",
            ))
            progress = True

    return breakdown


def _take(remaining: list[FaceValue], face: FaceValue, amount: int) -> bool:
    """
    Remove ``amount`` occurrences of ``face`` in place.

    Nothing is removed unless all of them are present. Survivors keep their
    relative order.
    """
    if remaining.count(face) < amount:
        return False

    found = 0
    kept: list[FaceValue] = []
    for value in remaining:
        if value == face and found < amount:
            found += 1
        else:
            kept.append(value)

    remaining[:] = kept
    return True
