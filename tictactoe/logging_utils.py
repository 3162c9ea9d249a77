"""
Logging set-up for the TicTacToe front ends.
"""

import logging
import os
from typing import Optional

from .config import GameConfig


def resolve_log_level(level: Optional[str] = None) -> str:
    """Pick the log level: explicit argument, then environment, then default."""

    if level is None:
        level = os.getenv(GameConfig.LOG_LEVEL_ENV, GameConfig.DEFAULT_LOG_LEVEL)
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        return GameConfig.DEFAULT_LOG_LEVEL
    return level


def configure_logging(*, level: Optional[str] = None) -> None:
    """Configure root logging for the front ends."""

    level = resolve_log_level(level)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=GameConfig.LOG_FORMAT)
    root_logger.setLevel(level)
