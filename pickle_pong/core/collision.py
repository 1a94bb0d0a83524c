"""
Collision detection system for Pickle Pong

Every check runs on the ball position read at the start of a tick, before
the ball is moved. A paddle hit is therefore detected one frame before the
ball would cross the paddle.
"""

from pickle_pong.core.entities import Court
from pickle_pong.core.entities import Side
from pickle_pong.core.entities import Vector2D


def within_paddle_span(y: float, paddle_y: float, paddle_height: float) -> bool:
    """Checks if a height lies within a paddle centered on paddle_y (bounds included)"""
    half_height = paddle_height / 2
    return paddle_y - half_height <= y <= paddle_y + half_height


class CollisionDetector:
    """Paddle, wall and goal line checks for one court"""

    def __init__(self, court: Court, paddle_width: float, paddle_height: float) -> None:
        self.court = court
        self.paddle_width = paddle_width
        self.paddle_height = paddle_height

    def check_ball_paddles(
        self, position: Vector2D, dog_paddle_y: float, cat_paddle_y: float
    ) -> Side | None:
        """Returns the side whose paddle the ball touches, or None"""
        # Dog paddle sits on the left edge
        if position.x <= self.paddle_width and within_paddle_span(
            position.y, dog_paddle_y, self.paddle_height
        ):
            return Side.DOG

        # Cat paddle sits on the right edge
        if position.x >= self.court.width - self.paddle_width and within_paddle_span(
            position.y, cat_paddle_y, self.paddle_height
        ):
            return Side.CAT

        return None

    def check_ball_walls(self, position: Vector2D) -> str | None:
        """Checks top and bottom walls. Returns "top", "bottom" or None."""
        if position.y <= 0:
            return "top"
        if position.y >= self.court.height:
            return "bottom"
        return None

    def check_goal_lines(self, position: Vector2D) -> Side | None:
        """Returns the side that scores when the ball reached a goal line"""
        # Left line is the dog's goal
        if position.x <= 0:
            return Side.CAT
        if position.x >= self.court.width:
            return Side.DOG
        return None
