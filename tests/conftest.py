"""
Shared fixtures for Pickle Pong tests
"""

import os

# No real window or sound card during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from collections.abc import Callable, Iterator

import pytest

from pickle_pong.core.entities import Vector2D
from pickle_pong.core.physics import MatchEngine
from pickle_pong.utils.config import GameConfig, game_config


@pytest.fixture
def engine() -> MatchEngine:
    """Idle engine on the default 400x800 court, paddles 10x60, speed 5"""
    return MatchEngine(GameConfig(), seed=1234)


@pytest.fixture
def running_engine(engine: MatchEngine) -> MatchEngine:
    engine.start_match()
    return engine


@pytest.fixture
def place_ball() -> Callable[[MatchEngine, float, float, float, float], None]:
    """Puts the ball at (x, y) with velocity (dx, dy)"""

    def _place(engine: MatchEngine, x: float, y: float, dx: float, dy: float) -> None:
        engine.state.ball_position = Vector2D(x, y)
        engine.state.ball_velocity = Vector2D(dx, dy)

    return _place


@pytest.fixture
def restore_game_config() -> Iterator[None]:
    """Puts the global configuration back to defaults after the test"""
    yield
    game_config.reset_to_defaults()
