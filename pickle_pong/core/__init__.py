"""
Core module of Pickle Pong game
"""

from pickle_pong.core.entities import Court
from pickle_pong.core.entities import MatchSnapshot
from pickle_pong.core.entities import MatchState
from pickle_pong.core.entities import MatchStatus
from pickle_pong.core.entities import Score
from pickle_pong.core.entities import Side
from pickle_pong.core.entities import Vector2D
from pickle_pong.core.physics import MatchEngine

__all__ = [
    "Court",
    "MatchEngine",
    "MatchSnapshot",
    "MatchState",
    "MatchStatus",
    "Score",
    "Side",
    "Vector2D",
]
