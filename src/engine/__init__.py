"""
Farkle Game Engine.

Pure Python rules engine with zero UI dependencies.
Handles dice rolling, scoring, turn progression and player rotation.
"""

from src.engine.dice import DiceRoll, Die, FaceValue, RegularDie, standard_dice
from src.engine.errors import (
    DuplicateDiceIndexesError,
    EmptySelectionError,
    FarkleError,
    GameCreationError,
    InvalidDiceCombinationError,
    InvalidDiceCountError,
    NotEnoughPlayersError,
    PlayerCreationError,
    RollError,
    RollInvalidStateError,
    UseDiceError,
    UseDiceInvalidStateError,
    WrongDiceIndexesError,
)
from src.engine.game import FarkleGame
from src.engine.player import Player
from src.engine.scoring import (
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    calculate_score,
    has_any_combination,
)
from src.engine.snapshot import GameSnapshot, PlayerView
from src.engine.turn import AwaitingRoll, HaveRollResult, Turn, TurnState

__all__ = [
    # Dice
    "DiceRoll",
    "Die",
    "FaceValue",
    "RegularDie",
    "standard_dice",
    # Scoring
    "ScoringBreakdown",
    "ScoringCategory",
    "ScoringResult",
    "calculate_score",
    "has_any_combination",
    # Turn and game
    "AwaitingRoll",
    "FarkleGame",
    "GameSnapshot",
    "HaveRollResult",
    "Player",
    "PlayerView",
    "Turn",
    "TurnState",
    # Errors
    "DuplicateDiceIndexesError",
    "EmptySelectionError",
    "FarkleError",
    "GameCreationError",
    "InvalidDiceCombinationError",
    "InvalidDiceCountError",
    "NotEnoughPlayersError",
    "PlayerCreationError",
    "RollError",
    "RollInvalidStateError",
    "UseDiceError",
    "UseDiceInvalidStateError",
    "WrongDiceIndexesError",
]
