"""
Match engine for Pickle Pong
"""

import logging
import math
from typing import Any

import numpy as np

from pickle_pong.core.collision import CollisionDetector
from pickle_pong.core.entities import Court
from pickle_pong.core.entities import MatchSnapshot
from pickle_pong.core.entities import MatchState
from pickle_pong.core.entities import MatchStatus
from pickle_pong.core.entities import Score
from pickle_pong.core.entities import Side
from pickle_pong.core.entities import Vector2D
from pickle_pong.utils.config import GameConfig
from pickle_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class MatchEngine:
    """
    Owns the state of one match and advances it one frame per tick()

    The engine holds no timer. A frame driver calls tick() at its own pace and
    an input adapter calls set_paddle_position(); both must run on the same
    thread.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        config = config or game_config

        # Constants are copied so later config changes do not affect this match
        self.court = Court(float(config.COURT_WIDTH), float(config.COURT_HEIGHT))
        self.paddle_width = config.PADDLE_WIDTH
        self.paddle_height = config.PADDLE_HEIGHT
        self.ball_size = config.BALL_SIZE
        self.initial_speed = config.INITIAL_SPEED
        self.win_score = config.WIN_SCORE

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.collision_detector = CollisionDetector(
            self.court, self.paddle_width, self.paddle_height
        )
        self.tick_count = 0

        # Idle until the first start_match(): everything centered
        center = self.court.center
        self.state = MatchState(
            ball_position=center,
            ball_velocity=Vector2D(self.initial_speed, self.initial_speed),
            cat_paddle_y=center.y,
            dog_paddle_y=center.y,
        )

    @property
    def status(self) -> MatchStatus:
        return self.state.status

    def random_velocity(self) -> Vector2D:
        """Fixed speed on both axes, each sign drawn independently"""
        signs = self.rng.choice([-1.0, 1.0], size=2)
        return Vector2D(self.initial_speed * float(signs[0]), self.initial_speed * float(signs[1]))

    def reset_ball(self) -> None:
        """Puts the ball back at the center with a random direction"""
        self.state.ball_position = self.court.center
        self.state.ball_velocity = self.random_velocity()

    def start_match(self) -> None:
        """Starts a new match, or replays after a finished one"""
        self.state.score = Score()
        self.state.winner = None
        self.reset_ball()
        self.state.running = True
        self.tick_count = 0
        logger.info(
            "Match started, first to %d on a %gx%g court",
            self.win_score,
            self.court.width,
            self.court.height,
        )

    def set_paddle_position(self, side: Side, y: float) -> bool:
        """
        Moves a paddle to a new vertical position

        No range check is applied, the paddle may leave the court.

        Returns:
            bool: False if the value was ignored because it is not finite
        """
        if not math.isfinite(y):
            logger.debug("Ignoring non-finite %s paddle position: %r", side.value, y)
            return False
        self.state.set_paddle_y(side, float(y))
        return True

    def tick(self) -> dict[str, list[Any]]:
        """
        Advances the match by one frame

        Collisions, walls and goal lines are checked against the ball position
        read at the start of the tick, then the ball moves with the resulting
        velocity (from the center if a point was scored).

        Returns:
            Dictionary with the events of this frame:
            {"paddle_hits": [...], "wall_bounces": [...], "goals": [...]}
        """
        events: dict[str, list[Any]] = {"paddle_hits": [], "wall_bounces": [], "goals": []}
        if not self.state.running:
            return events

        state = self.state
        position = state.ball_position.copy()

        paddle_side = self.collision_detector.check_ball_paddles(
            position, state.dog_paddle_y, state.cat_paddle_y
        )
        if paddle_side is not None:
            state.ball_velocity.x = -state.ball_velocity.x
            events["paddle_hits"].append({"side": paddle_side})

        wall = self.collision_detector.check_ball_walls(position)
        if wall is not None:
            state.ball_velocity.y = -state.ball_velocity.y
            events["wall_bounces"].append(wall)

        scorer = self.collision_detector.check_goal_lines(position)
        if scorer is not None:
            self._score_point(scorer)
            events["goals"].append(
                {"side": scorer, "score": state.score.to_dict(), "winner": state.winner}
            )

        state.ball_position = state.ball_position + state.ball_velocity
        self.tick_count += 1
        return events

    def _score_point(self, side: Side) -> None:
        """Awards a point, ends the match at the win score and resets the ball"""
        score = self.state.score
        score.add_point(side)
        logger.info("%s scores (dog %d - cat %d)", side.value, score.dog, score.cat)

        if score.highest() >= self.win_score:
            self.state.winner = side
            self.state.running = False
            logger.info("%s wins the match after %d ticks", side.value, self.tick_count + 1)

        self.reset_ball()

    def snapshot(self) -> MatchSnapshot:
        """Returns a read-only copy of the match for rendering"""
        return self.state.snapshot(self.court)

    def is_match_over(self) -> bool:
        """Checks if the match has a winner"""
        return self.state.winner is not None

    def get_winner(self) -> Side | None:
        """Returns the winning side, or None while there is no winner"""
        return self.state.winner
