"""
Input adapter protocol - defines interface for anything that moves a paddle
"""

from typing import Protocol

from pickle_pong.core.entities import Side


class InputAdapter(Protocol):
    """
    Protocol that all paddle controllers (keyboard, pointer, touch...) implement.

    The match runner asks every adapter once per frame for the new position of
    its paddle and forwards it to the engine.
    """

    name: str
    side: Side

    def get_paddle_position(self, current_y: float) -> float | None:
        """
        Get the paddle position wanted for this frame.

        Args:
            current_y: Current paddle position in court coordinates

        Returns:
            New position, or None to leave the paddle where it is

        Example:
            >>> y = controller.get_paddle_position(400.0)
        """
        ...
