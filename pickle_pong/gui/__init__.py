"""
GUI module for Pickle Pong - PyGame interface
"""

from pickle_pong.gui.game_app import PicklePongApp, main
from pickle_pong.gui.human_player import HumanPlayer, InputManager, PointerPlayer
from pickle_pong.gui.human_player import create_human_players
from pickle_pong.gui.pygame_renderer import PygameRenderer, start_button_label

__all__ = [
    "PygameRenderer",
    "HumanPlayer",
    "PointerPlayer",
    "InputManager",
    "create_human_players",
    "PicklePongApp",
    "main",
    "start_button_label",
]
