"""
Farkle - Application Settings

Loads configuration from environment variables using Pydantic Settings and
sets up logging for the engine and its driver.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from FARKLE_* environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Game setup
    dice_seed: int | None = None
    player_names: list[str] = ["Player 1", "Player 2"]

    model_config = {
        "env_prefix": "FARKLE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level and format to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.effective_log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.effective_log_level)
