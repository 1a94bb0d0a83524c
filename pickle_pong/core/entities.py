"""
Pickle Pong game entities: sides, court, score and match state
"""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any


class Side(Enum):
    """A player, its paddle and its scoring direction"""

    CAT = "CAT"
    DOG = "DOG"

    @property
    def score_key(self) -> str:
        return self.value.lower()


class MatchStatus(Enum):
    """Lifecycle of a match"""

    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass(frozen=True)
class Court:
    """Rectangular play area, read-only during a match"""

    width: float
    height: float

    @property
    def center(self) -> Vector2D:
        """Returns a fresh vector at the middle of the court"""
        return Vector2D(self.width / 2, self.height / 2)


@dataclass
class Score:
    """Points of both sides"""

    cat: int = 0
    dog: int = 0

    def get(self, side: Side) -> int:
        return int(getattr(self, side.score_key))

    def add_point(self, side: Side) -> int:
        """Adds one point to the side and returns its new total"""
        points = self.get(side) + 1
        setattr(self, side.score_key, points)
        return points

    def highest(self) -> int:
        return max(self.cat, self.dog)

    def to_dict(self) -> dict[str, int]:
        return {"cat": self.cat, "dog": self.dog}


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only view of a match, handed to the presentation layer"""

    ball_position: tuple[float, float]
    ball_velocity: tuple[float, float]
    cat_paddle_y: float
    dog_paddle_y: float
    cat_score: int
    dog_score: int
    winner: Side | None
    running: bool
    status: MatchStatus
    court: tuple[float, float]

    def paddle_y(self, side: Side) -> float:
        return self.cat_paddle_y if side is Side.CAT else self.dog_paddle_y

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary form, enums replaced by their values"""
        return {
            "ball_position": self.ball_position,
            "ball_velocity": self.ball_velocity,
            "cat_paddle_y": self.cat_paddle_y,
            "dog_paddle_y": self.dog_paddle_y,
            "score": {"cat": self.cat_score, "dog": self.dog_score},
            "winner": self.winner.value if self.winner else None,
            "running": self.running,
            "status": self.status.value,
            "court": self.court,
        }


@dataclass
class MatchState:
    """Complete mutable state of one match"""

    ball_position: Vector2D
    ball_velocity: Vector2D
    cat_paddle_y: float
    dog_paddle_y: float
    score: Score = field(default_factory=Score)
    winner: Side | None = None
    running: bool = False

    @property
    def status(self) -> MatchStatus:
        if self.running:
            return MatchStatus.RUNNING
        if self.winner is not None:
            return MatchStatus.FINISHED
        return MatchStatus.IDLE

    def paddle_y(self, side: Side) -> float:
        return self.cat_paddle_y if side is Side.CAT else self.dog_paddle_y

    def set_paddle_y(self, side: Side, y: float) -> None:
        if side is Side.CAT:
            self.cat_paddle_y = y
        else:
            self.dog_paddle_y = y

    def snapshot(self, court: Court) -> MatchSnapshot:
        return MatchSnapshot(
            ball_position=self.ball_position.to_tuple(),
            ball_velocity=self.ball_velocity.to_tuple(),
            cat_paddle_y=self.cat_paddle_y,
            dog_paddle_y=self.dog_paddle_y,
            cat_score=self.score.cat,
            dog_score=self.score.dog,
            winner=self.winner,
            running=self.running,
            status=self.status,
            court=(court.width, court.height),
        )
