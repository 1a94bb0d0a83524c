"""
Match backend protocol - defines interface for match engines
"""

from typing import Any
from typing import Protocol

from pickle_pong.core.entities import Court
from pickle_pong.core.entities import MatchSnapshot
from pickle_pong.core.entities import Side


class MatchBackend(Protocol):
    """
    Protocol for match engine implementations.

    Frame drivers and input adapters only talk to the engine through these
    calls, so another engine (a pure reducer, a networked proxy...) can be
    dropped in without changing them.
    """

    court: Court
    tick_count: int

    def start_match(self) -> None:
        """
        Reset the score and the ball and start playing.

        Also used to replay once a match is finished.
        """
        ...

    def tick(self) -> dict[str, Any]:
        """
        Advance the match by exactly one frame.

        Returns:
            Dictionary with events that occurred:
            {
                "paddle_hits": [...],
                "wall_bounces": [...],
                "goals": [...]
            }
        """
        ...

    def set_paddle_position(self, side: Side, y: float) -> bool:
        """
        Move a paddle to a vertical position in court coordinates.

        Returns:
            False if the position was ignored
        """
        ...

    def snapshot(self) -> MatchSnapshot:
        """Read-only state for rendering"""
        ...

    def is_match_over(self) -> bool:
        """Check if a side reached the win score"""
        ...

    def get_winner(self) -> Side | None:
        """Get the winning side, or None"""
        ...
