"""
Farkle - Game Snapshots

Pydantic models describing everything a driver needs to render a game.
Snapshots are detached copies; changing one never touches the engine.
"""

from pydantic import BaseModel, Field


class PlayerView(BaseModel):
    """A player's identity and banked total."""

    id: str
    score: int = Field(ge=0)


class GameSnapshot(BaseModel):
    """Observable state of a game at one moment."""

    players: list[PlayerView]
    current_player_index: int = Field(ge=0)
    next_player_index: int = Field(ge=0)
    is_waiting_for_roll: bool
    last_roll: list[int] | None = None
    turn_actions: list[int] = Field(default_factory=list)
    turn_score: int = 0
    remaining_dice: int = Field(ge=0, le=6)

    model_config = {"frozen": True}

    @property
    def current_player(self) -> PlayerView:
        return self.players[self.current_player_index]
