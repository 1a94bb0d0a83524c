"""
Pickle Pong match runner: ties input adapters to the match engine
"""

import logging
from typing import Any

from pickle_pong.core.entities import MatchSnapshot
from pickle_pong.core.entities import Side
from pickle_pong.core.interfaces.physics import MatchBackend
from pickle_pong.core.interfaces.player import InputAdapter

logger = logging.getLogger(__name__)


def _empty_stats() -> dict[str, Any]:
    return {
        "matches_played": 0,
        "cat_wins": 0,
        "dog_wins": 0,
        "total_ticks": 0,
        "average_match_length": 0.0,
    }


class MatchRunner:
    """Runs one frame at a time on behalf of a frame driver"""

    def __init__(self, engine: MatchBackend, players: list[InputAdapter] | None = None):
        self.engine = engine
        self.players: list[InputAdapter] = list(players or [])
        self.match_recorded = False
        self.game_stats = _empty_stats()

    def set_players(self, players: list[InputAdapter]) -> None:
        """Replaces the paddle controllers"""
        self.players = list(players)

    def start_match(self) -> None:
        """Starts a new match (or a replay)"""
        self.engine.start_match()
        self.match_recorded = False

    def is_running(self) -> bool:
        return self.engine.snapshot().running

    def apply_inputs(self) -> None:
        """Forwards each controller's wanted position to the engine"""
        snapshot = self.engine.snapshot()
        for player in self.players:
            y = player.get_paddle_position(snapshot.paddle_y(player.side))
            if y is not None:
                self.engine.set_paddle_position(player.side, y)

    def update(self) -> dict[str, Any]:
        """
        Updates the match by one frame

        Paddles always follow their controllers, the ball only moves while the
        match is running.

        Returns:
            Dict containing the frame events, the snapshot and a done flag
        """
        self.apply_inputs()

        events: dict[str, Any] = {}
        if self.is_running():
            events = self.engine.tick()

        done = self.engine.is_match_over()
        if done and not self.match_recorded:
            self._handle_match_end()

        return {"events": events, "snapshot": self.engine.snapshot(), "done": done}

    def _handle_match_end(self) -> None:
        """Records a finished match in the statistics"""
        winner = self.engine.get_winner()
        self.match_recorded = True

        self.game_stats["matches_played"] += 1
        if winner is Side.CAT:
            self.game_stats["cat_wins"] += 1
        elif winner is Side.DOG:
            self.game_stats["dog_wins"] += 1

        self.game_stats["total_ticks"] += self.engine.tick_count
        self.game_stats["average_match_length"] = (
            self.game_stats["total_ticks"] / self.game_stats["matches_played"]
        )
        logger.info(
            "Match over: %s wins (%d matches played)",
            winner.value if winner else "nobody",
            self.game_stats["matches_played"],
        )

    def play_match(self, max_ticks: int = 100_000) -> dict[str, Any]:
        """
        Plays a complete match without a display

        Args:
            max_ticks: Maximum number of frames before giving up

        Returns:
            Dict: Match statistics
        """
        if not self.is_running():
            self.start_match()

        match_stats: dict[str, Any] = {"ticks": 0, "winner": None, "goals": []}

        while self.is_running() and match_stats["ticks"] < max_ticks:
            result = self.update()
            match_stats["ticks"] += 1
            match_stats["goals"].extend(result["events"].get("goals", []))
            if result["done"]:
                break

        snapshot: MatchSnapshot = self.engine.snapshot()
        match_stats["winner"] = snapshot.winner
        match_stats["score"] = {"cat": snapshot.cat_score, "dog": snapshot.dog_score}
        return match_stats

    def get_stats(self) -> dict[str, Any]:
        """Returns statistics over every finished match"""
        return self.game_stats.copy()

    def reset_stats(self) -> None:
        """Resets statistics to zero"""
        self.game_stats = _empty_stats()
