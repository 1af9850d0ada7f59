from __future__ import annotations

from collections import namedtuple
from enum import Enum

Coord = tuple[int, int]

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, raw) -> Difficulty:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError as e:
            raise ValueError(f"invalid difficulty: {raw!r}") from e


class GameStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


Snapshot = namedtuple(
    "Snapshot",
    ["snake", "food", "obstacles", "score", "high_score", "status", "difficulty", "death_reason"],
)
# snake: tuple[(x, y)], head is first element.
# food: (x, y) or None when no free cell could be found.
# obstacles: frozenset[(x, y)]
# score / high_score: int
# status: GameStatus
# difficulty: Difficulty
# death_reason: "wall" | "self" | "obstacle" | None


def add_vectors(a: Coord, b: Coord) -> Coord:
    return (a[0] + b[0], a[1] + b[1])


def same_axis(a: Coord, b: Coord) -> bool:
    """True when both directions move along x, or both along y."""
    return (a[0] == 0) == (b[0] == 0)
