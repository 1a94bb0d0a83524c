"""
Pickle Pong utilities: configuration and logging
"""

from pickle_pong.utils.config import GameConfig
from pickle_pong.utils.config import game_config
from pickle_pong.utils.log import setup_logging

__all__ = ["game_config", "GameConfig", "setup_logging"]
