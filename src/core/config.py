"""
Environment-level configuration.

Keeps values that a host may want to tune per deployment (delays, move budget, log verbosity)
out of the game logic itself.
"""

import logging
import os
from dataclasses import dataclass

from src.core.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class GameSettings:
    """Settings for a single game controller."""

    computer_move_delay: float = 1.0
    default_max_move: int = 40
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.computer_move_delay < 0:
            raise ConfigurationError(
                f"Computer move delay cannot be negative: {self.computer_move_delay}"
            )
        if self.default_max_move <= 0:
            raise ConfigurationError(
                f"Move budget must be a positive number: {self.default_max_move}"
            )
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "GameSettings":
        """Build settings from environment variables (falling back on the defaults above)."""
        delay = os.getenv("CHESS_COMPUTER_MOVE_DELAY", "1.0")
        max_move = os.getenv("CHESS_MAX_MOVES", "40")
        log_level = os.getenv("CHESS_LOG_LEVEL", "INFO")
        try:
            return cls(
                computer_move_delay=float(delay),
                default_max_move=int(max_move),
                log_level=log_level.upper(),
            )
        except ValueError as e:
            raise ConfigurationError(f"Cannot parse game settings: {e}") from e


def get_settings() -> GameSettings:
    """Convenience accessor for environment settings."""
    return GameSettings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Called once by the host application. Library modules only create their own loggers."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
