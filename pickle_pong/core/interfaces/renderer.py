"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from pickle_pong.core.entities import MatchSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Enables multiple rendering backends: Pygame, terminal, web, etc.
    """

    def render_snapshot(self, snapshot: MatchSnapshot) -> None:
        """
        Render a single frame of the match.

        Args:
            snapshot: Read-only match state (ball, paddles, score, winner)
        """
        ...

    def is_start_button_hit(self, screen_pos: tuple[int, int]) -> bool:
        """Check if a click landed on the start/replay control"""
        ...

    def present(self) -> None:
        """Show the rendered frame"""
        ...

    def update(self, fps: int | None = None) -> None:
        """Wait for the next frame"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
