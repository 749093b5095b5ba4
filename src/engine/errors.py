"""
Farkle - Engine Errors

Every failure the rules engine reports to its driver. All errors are
recoverable: the engine state is left untouched when one is raised.
"""

from typing import Sequence


class FarkleError(Exception):
    """Base class for all rules engine errors."""


# =============================================================================
# SETUP
# =============================================================================

class GameCreationError(FarkleError):
    """A game could not be created."""


class NotEnoughPlayersError(GameCreationError):
    def __init__(self, player_count: int) -> None:
        self.player_count = player_count
        super().__init__(
            f"There must be at least 2 players, but only {player_count} were provided."
        )


class PlayerCreationError(FarkleError):
    """A player could not be created."""


class InvalidDiceCountError(PlayerCreationError):
    def __init__(self, dice_count: int) -> None:
        self.dice_count = dice_count
        super().__init__(f"Expected 6 dice, but got {dice_count}.")


# =============================================================================
# ROLLING
# =============================================================================

class RollError(FarkleError):
    """Rolling the dice failed."""


class RollInvalidStateError(RollError):
    def __init__(self) -> None:
        super().__init__("The turn is in an invalid state to roll.")


# =============================================================================
# USING DICE
# =============================================================================

class UseDiceError(FarkleError):
    """Selecting dice from the current roll failed."""


class UseDiceInvalidStateError(UseDiceError):
    def __init__(self) -> None:
        super().__init__("The turn is in an invalid state to use dice.")


class WrongDiceIndexesError(UseDiceError):
    def __init__(self, indexes: Sequence[object], message: str = "Wrong dice indexes.") -> None:
        self.indexes = tuple(indexes)
        super().__init__(message)


class DuplicateDiceIndexesError(WrongDiceIndexesError):
    def __init__(self, indexes: Sequence[object]) -> None:
        super().__init__(indexes, f"Dice indexes must be unique, got {list(indexes)}.")


class InvalidDiceCombinationError(UseDiceError):
    """
    The selected dice do not form a valid scoring combination.

    Attributes:
        unused: Face values that could not be attributed to any combination
    """

    def __init__(self, unused: Sequence[int], message: str | None = None) -> None:
        self.unused = tuple(unused)
        if message is None:
            message = f"Invalid dice combination, unused dice: {[int(v) for v in self.unused]}."
        super().__init__(message)


class EmptySelectionError(InvalidDiceCombinationError):
    """No dice were selected. Always a driver bug, never a bust."""

    def __init__(self) -> None:
        super().__init__((), "No dice were selected.")
