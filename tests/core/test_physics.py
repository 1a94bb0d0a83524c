"""
Unit tests for the match engine

Covers the state machine, the order of checks inside tick(), ball resets,
scoring and the win threshold.
"""

import math

import numpy as np
import pytest

from pickle_pong.core.entities import MatchStatus, Side, Vector2D
from pickle_pong.core.physics import MatchEngine
from pickle_pong.utils.config import GameConfig


class TestIdleEngine:
    """Engine before the first start_match()"""

    def test_initial_state(self, engine):
        """Test implicit idle state with everything centered"""
        snapshot = engine.snapshot()
        assert snapshot.status is MatchStatus.IDLE
        assert snapshot.running is False
        assert snapshot.winner is None
        assert snapshot.ball_position == (200.0, 400.0)
        assert snapshot.ball_velocity == (5.0, 5.0)
        assert snapshot.cat_paddle_y == 400.0
        assert snapshot.dog_paddle_y == 400.0
        assert (snapshot.cat_score, snapshot.dog_score) == (0, 0)

    def test_tick_is_noop(self, engine):
        """Test ticking an idle engine changes nothing"""
        before = engine.snapshot()
        events = engine.tick()
        assert engine.snapshot() == before
        assert engine.tick_count == 0
        assert events == {"paddle_hits": [], "wall_bounces": [], "goals": []}

    def test_paddles_move_while_idle(self, engine):
        """Test input is accepted before the match starts"""
        assert engine.set_paddle_position(Side.DOG, 120.0) is True
        assert engine.snapshot().dog_paddle_y == 120.0


class TestStartMatch:
    """Test start_match() and ball resets"""

    def test_start_resets_everything(self, engine):
        """Test score, winner and ball after start"""
        engine.start_match()
        snapshot = engine.snapshot()

        assert snapshot.status is MatchStatus.RUNNING
        assert snapshot.running is True
        assert snapshot.winner is None
        assert (snapshot.cat_score, snapshot.dog_score) == (0, 0)
        assert snapshot.ball_position == (200.0, 400.0)
        assert abs(snapshot.ball_velocity[0]) == 5.0
        assert abs(snapshot.ball_velocity[1]) == 5.0

    def test_start_keeps_paddles(self, engine):
        """Test paddles are not re-centered by a new match"""
        engine.set_paddle_position(Side.CAT, 42.0)
        engine.start_match()
        assert engine.snapshot().cat_paddle_y == 42.0

    def test_direction_signs_are_independent(self):
        """Test every sign combination shows up over many resets"""
        engine = MatchEngine(GameConfig(), seed=7)
        seen = set()
        for _ in range(200):
            engine.reset_ball()
            velocity = engine.state.ball_velocity
            assert engine.state.ball_position == Vector2D(200.0, 400.0)
            assert abs(velocity.x) == abs(velocity.y) == 5.0
            seen.add((velocity.x > 0, velocity.y > 0))
        assert seen == {(True, True), (True, False), (False, True), (False, False)}

    def test_same_seed_same_directions(self):
        """Test matches are reproducible with a seed"""
        first = MatchEngine(GameConfig(), seed=99)
        second = MatchEngine(GameConfig(), rng=np.random.default_rng(99))
        for _ in range(5):
            first.start_match()
            second.start_match()
            assert first.snapshot().ball_velocity == second.snapshot().ball_velocity

    def test_configured_speed(self):
        """Test the speed constant comes from the configuration"""
        engine = MatchEngine(GameConfig(INITIAL_SPEED=3.0), seed=1)
        engine.start_match()
        dx, dy = engine.snapshot().ball_velocity
        assert abs(dx) == abs(dy) == 3.0

    def test_constants_fixed_at_construction(self):
        """Test later config changes do not affect an existing engine"""
        config = GameConfig()
        engine = MatchEngine(config, seed=1)
        config.COURT_WIDTH = 1000
        config.WIN_SCORE = 3
        assert engine.court.width == 400.0
        assert engine.win_score == 11


class TestTick:
    """Test one frame of simulation"""

    def test_free_flight(self, running_engine, place_ball):
        """Test ball moves by its velocity"""
        place_ball(running_engine, 200.0, 300.0, 5.0, -5.0)
        events = running_engine.tick()
        assert running_engine.state.ball_position == Vector2D(205.0, 295.0)
        assert running_engine.state.ball_velocity == Vector2D(5.0, -5.0)
        assert events == {"paddle_hits": [], "wall_bounces": [], "goals": []}
        assert running_engine.tick_count == 1

    def test_dog_paddle_bounce_before_move(self, running_engine, place_ball):
        """Test collision detected pre-move, then moved with flipped velocity"""
        running_engine.set_paddle_position(Side.DOG, 400.0)
        place_ball(running_engine, 8.0, 400.0, -5.0, 5.0)

        events = running_engine.tick()

        assert running_engine.state.ball_velocity == Vector2D(5.0, 5.0)
        assert running_engine.state.ball_position == Vector2D(13.0, 405.0)
        assert events["paddle_hits"] == [{"side": Side.DOG}]

    def test_reflection_at_paddle_edge(self, running_engine, place_ball):
        """Test ball at x == paddle width on the paddle center bounces"""
        running_engine.set_paddle_position(Side.DOG, 250.0)
        place_ball(running_engine, 10.0, 250.0, -5.0, 5.0)
        running_engine.tick()
        assert running_engine.state.ball_velocity.x > 0

    def test_cat_paddle_bounce(self, running_engine, place_ball):
        """Test bounce on the right paddle"""
        running_engine.set_paddle_position(Side.CAT, 400.0)
        place_ball(running_engine, 392.0, 400.0, 5.0, -5.0)

        events = running_engine.tick()

        assert running_engine.state.ball_velocity == Vector2D(-5.0, -5.0)
        assert running_engine.state.ball_position == Vector2D(387.0, 395.0)
        assert events["paddle_hits"] == [{"side": Side.CAT}]

    def test_top_wall_bounce(self, running_engine, place_ball):
        """Test ball at y == 0 moving up reflects"""
        place_ball(running_engine, 200.0, 0.0, 5.0, -5.0)
        events = running_engine.tick()
        assert running_engine.state.ball_velocity == Vector2D(5.0, 5.0)
        assert running_engine.state.ball_position == Vector2D(205.0, 5.0)
        assert events["wall_bounces"] == ["top"]

    def test_bottom_wall_bounce(self, running_engine, place_ball):
        """Test ball at the bottom edge reflects"""
        place_ball(running_engine, 200.0, 800.0, -5.0, 5.0)
        events = running_engine.tick()
        assert running_engine.state.ball_velocity == Vector2D(-5.0, -5.0)
        assert events["wall_bounces"] == ["bottom"]

    def test_corner_flips_both_axes(self, running_engine, place_ball):
        """Test paddle and wall on the same tick"""
        running_engine.set_paddle_position(Side.DOG, 0.0)
        place_ball(running_engine, 5.0, 0.0, -5.0, -5.0)
        running_engine.tick()
        assert running_engine.state.ball_velocity == Vector2D(5.0, 5.0)
        assert running_engine.state.ball_position == Vector2D(10.0, 5.0)

    def test_miss_then_score(self, running_engine, place_ball):
        """Test ball slips past the paddle, then scores on the next tick"""
        running_engine.set_paddle_position(Side.DOG, 100.0)
        place_ball(running_engine, 2.0, 300.0, -5.0, 0.0)

        events = running_engine.tick()
        assert events["goals"] == []
        assert running_engine.state.ball_position == Vector2D(-3.0, 300.0)
        assert running_engine.snapshot().cat_score == 0

        events = running_engine.tick()
        snapshot = running_engine.snapshot()
        assert snapshot.cat_score == 1
        assert snapshot.dog_score == 0
        assert events["goals"][0]["side"] is Side.CAT
        assert events["goals"][0]["score"] == {"cat": 1, "dog": 0}

        # Reset to center, then moved once with the new direction
        x, y = snapshot.ball_position
        dx, dy = snapshot.ball_velocity
        assert abs(dx) == abs(dy) == 5.0
        assert (x, y) == (200.0 + dx, 400.0 + dy)

    def test_dog_scores_on_right_line(self, running_engine, place_ball):
        """Test reaching the right line is a point for the dog"""
        place_ball(running_engine, 401.0, 300.0, 5.0, 0.0)
        events = running_engine.tick()
        assert running_engine.snapshot().dog_score == 1
        assert events["goals"][0]["side"] is Side.DOG

    def test_paddle_hit_and_score_same_tick(self, running_engine, place_ball):
        """Test a goal still counts when the paddle also touched the ball"""
        running_engine.set_paddle_position(Side.DOG, 400.0)
        place_ball(running_engine, 0.0, 400.0, -5.0, 5.0)

        events = running_engine.tick()

        assert events["paddle_hits"] == [{"side": Side.DOG}]
        assert events["goals"][0]["side"] is Side.CAT
        assert running_engine.snapshot().cat_score == 1

    def test_ball_can_stick_behind_paddle(self, running_engine, place_ball):
        """Test pre-move checks flip again while the ball stays in the paddle column"""
        running_engine.set_paddle_position(Side.DOG, 400.0)
        place_ball(running_engine, 3.0, 400.0, 5.0, 0.0)
        running_engine.tick()
        assert running_engine.state.ball_position == Vector2D(-2.0, 400.0)
        assert running_engine.state.ball_velocity == Vector2D(-5.0, 0.0)


class TestPaddleInput:
    """Test set_paddle_position()"""

    @pytest.mark.parametrize("y", [-500.0, 0.0, 799.0, 5000.0])
    def test_no_range_validation(self, running_engine, y):
        """Test out-of-court values are accepted as is"""
        assert running_engine.set_paddle_position(Side.CAT, y) is True
        assert running_engine.snapshot().cat_paddle_y == y

    @pytest.mark.parametrize("y", [math.nan, math.inf, -math.inf])
    def test_non_finite_ignored(self, running_engine, y):
        """Test NaN and infinities leave the paddle unchanged"""
        assert running_engine.set_paddle_position(Side.DOG, y) is False
        assert running_engine.snapshot().dog_paddle_y == 400.0

    def test_used_on_next_tick(self, running_engine, place_ball):
        """Test a moved paddle blocks the ball on the next frame"""
        place_ball(running_engine, 5.0, 100.0, -5.0, 0.0)
        running_engine.set_paddle_position(Side.DOG, 100.0)
        running_engine.tick()
        assert running_engine.state.ball_velocity.x == 5.0


class TestWinCondition:
    """Test the 11 point win threshold"""

    def test_win_at_eleven(self, running_engine, place_ball):
        """Test reaching the win score ends the match"""
        running_engine.state.score.cat = 10
        running_engine.set_paddle_position(Side.DOG, -1000.0)
        place_ball(running_engine, -1.0, 300.0, -5.0, 0.0)

        events = running_engine.tick()
        snapshot = running_engine.snapshot()

        assert snapshot.cat_score == 11
        assert snapshot.winner is Side.CAT
        assert snapshot.running is False
        assert snapshot.status is MatchStatus.FINISHED
        assert running_engine.is_match_over() is True
        assert running_engine.get_winner() is Side.CAT
        assert events["goals"][0]["winner"] is Side.CAT

    def test_no_state_change_after_win(self, running_engine, place_ball):
        """Test ticks are ignored until the next start_match()"""
        running_engine.state.score.dog = 10
        place_ball(running_engine, 400.0, 300.0, 5.0, 0.0)
        running_engine.tick()

        frozen = running_engine.snapshot()
        ticks = running_engine.tick_count
        for _ in range(10):
            assert running_engine.tick()["goals"] == []
        assert running_engine.snapshot() == frozen
        assert running_engine.tick_count == ticks

    def test_replay_after_win(self, running_engine, place_ball):
        """Test start_match() starts over after a finished match"""
        running_engine.state.score.dog = 10
        place_ball(running_engine, 400.0, 300.0, 5.0, 0.0)
        running_engine.tick()

        running_engine.start_match()
        snapshot = running_engine.snapshot()
        assert snapshot.status is MatchStatus.RUNNING
        assert snapshot.winner is None
        assert (snapshot.cat_score, snapshot.dog_score) == (0, 0)
        assert snapshot.ball_position == (200.0, 400.0)

    def test_configured_win_score(self, place_ball):
        """Test a shorter match"""
        engine = MatchEngine(GameConfig(WIN_SCORE=1), seed=3)
        engine.start_match()
        place_ball(engine, 401.0, 300.0, 5.0, 0.0)
        engine.tick()
        assert engine.get_winner() is Side.DOG


class TestLongRun:
    """Properties over many random frames"""

    def test_scores_never_decrease(self):
        """Test scores are monotonic and never both move on one tick"""
        engine = MatchEngine(GameConfig(), seed=2024)
        inputs = np.random.default_rng(11)
        engine.start_match()

        previous = (0, 0)
        for _ in range(20_000):
            if not engine.snapshot().running:
                engine.start_match()
                previous = (0, 0)

            engine.set_paddle_position(Side.DOG, float(inputs.uniform(-100, 900)))
            engine.set_paddle_position(Side.CAT, float(inputs.uniform(-100, 900)))
            engine.tick()

            snapshot = engine.snapshot()
            current = (snapshot.cat_score, snapshot.dog_score)
            assert current[0] >= previous[0]
            assert current[1] >= previous[1]
            assert (current[0] - previous[0]) + (current[1] - previous[1]) <= 1
            if snapshot.winner is not None:
                assert snapshot.running is False
                assert max(current) == 11
            previous = current
