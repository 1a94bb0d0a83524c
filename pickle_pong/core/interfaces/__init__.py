"""
Protocols between the match engine and its collaborators
"""

from pickle_pong.core.interfaces.physics import MatchBackend
from pickle_pong.core.interfaces.player import InputAdapter
from pickle_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["MatchBackend", "InputAdapter", "RendererProtocol"]
