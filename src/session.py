"""
Farkle - Game Session Factory

Builds a ready-to-play game for a driver: logging configured, every player
holding six regular dice that share one random generator.
"""

import logging
import random
from typing import Sequence

from src.config import Settings, configure_logging, get_settings
from src.engine.dice import standard_dice
from src.engine.game import FarkleGame
from src.engine.player import Player

logger = logging.getLogger(__name__)


def create_game(
    player_ids: Sequence[str] | None = None,
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> FarkleGame:
    """
    Create a new game.

    Args:
        player_ids: Players in turn order (default: ``settings.player_names``)
        settings: Settings to use (default: environment settings)
        rng: Random generator for all dice (default: seeded from
            ``settings.dice_seed``, or unseeded)

    Returns:
        A FarkleGame waiting for the first player's roll

    Raises:
        NotEnoughPlayersError: If fewer than two players are given
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if player_ids is None:
        player_ids = settings.player_names
    if rng is None:
        rng = random.Random(settings.dice_seed)
        if settings.dice_seed is not None:
            logger.debug("Dice seeded with %d", settings.dice_seed)

    players = [Player(player_id, standard_dice(rng)) for player_id in player_ids]
    return FarkleGame(players)
