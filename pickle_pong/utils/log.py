"""
Logging setup shared by the game application and the command line launcher
"""

import logging
import sys

from pickle_pong.utils.config import game_config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the package logger with a single console handler

    Args:
        level: Log level name, defaults to game_config.LOG_LEVEL

    Returns:
        The configured "pickle_pong" logger
    """
    logger = logging.getLogger("pickle_pong")
    logger.setLevel((level or game_config.LOG_LEVEL).upper())

    # Avoid duplicate handlers when called more than once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
