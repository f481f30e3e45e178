"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class Phase(Enum):
    """Session phases."""
    NOT_STARTED = auto()
    RUNNING = auto()
    OVER = auto()


@dataclass
class Actor:
    """The bird. (x, y) is the center of its bounding box; only y moves."""
    x: float
    y: float
    width: float
    height: float
    velocity: float = 0.0
    gliding: bool = False   # Was the last step taken while descending?

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2


@dataclass
class Obstacle:
    """One pipe pair. x is the leading (left) edge."""
    x: float
    width: float
    gap_top: float
    gap_bottom: float
    passed: bool = False

    def __post_init__(self):
        if self.gap_bottom - self.gap_top <= 0:
            raise ValueError(
                f"gap must have positive height, got top={self.gap_top} "
                f"bottom={self.gap_bottom}")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def gap_height(self) -> float:
        return self.gap_bottom - self.gap_top


@dataclass(frozen=True)
class ActorView:
    """Read-only actor state handed to the renderer."""
    x: float
    y: float
    width: float
    height: float
    velocity: float
    angle: float
    gliding: bool


@dataclass(frozen=True)
class ObstacleView:
    """Read-only obstacle geometry handed to the renderer."""
    x: float
    width: float
    gap_top: float
    gap_bottom: float
    passed: bool


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the renderer may read after a tick."""
    phase: Phase
    score: int
    high_score: int
    actor: ActorView
    obstacles: Tuple[ObstacleView, ...]

    def as_dict(self) -> dict:
        """Plain dictionary form, logged at DEBUG on every phase change."""
        return {
            "phase": self.phase.name,
            "score": self.score,
            "high_score": self.high_score,
            "x": round(self.actor.x, 2),
            "y": round(self.actor.y, 2),
            "v": round(self.actor.velocity, 2),
            "angle": round(self.actor.angle, 4),
            "pipes": [
                {"x": round(o.x, 2), "gap_top": round(o.gap_top, 2),
                 "gap_bottom": round(o.gap_bottom, 2), "passed": o.passed}
                for o in self.obstacles
            ],
        }
