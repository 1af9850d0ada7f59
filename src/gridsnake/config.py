from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .state import Difficulty

GRID_SIZE = 20
MIN_GRID_SIZE = 8
CELL = 24
HUD_HEIGHT = 40

START_DIRECTION = (1, 0)

FOOD_MAX_ATTEMPTS = 1000

TICK_MS = 150
MIN_TICK_MS = 50
# Upper bound on ticks replayed after a long frame.
MAX_CATCHUP_TICKS = 5
FPS = 60

SPEEDS = {
    "slow": 200,
    "normal": 150,
    "fast": 100,
    "insane": 70,
}

THEMES = {
    "classic": {
        "background": (20, 20, 20),
        "grid": (32, 32, 32),
        "snake": (0, 200, 0),
        "head": (120, 255, 120),
        "food": (220, 40, 40),
        "obstacle": (78, 42, 58),
        "text": (235, 235, 235),
    },
    "neon": {
        "background": (8, 0, 20),
        "grid": (24, 8, 48),
        "snake": (0, 255, 200),
        "head": (200, 255, 250),
        "food": (255, 0, 170),
        "obstacle": (90, 40, 160),
        "text": (255, 255, 255),
    },
    "retro": {
        "background": (155, 188, 15),
        "grid": (139, 172, 15),
        "snake": (48, 98, 48),
        "head": (15, 56, 15),
        "food": (15, 56, 15),
        "obstacle": (48, 98, 48),
        "text": (15, 56, 15),
    },
}
DEFAULT_THEME = "classic"

DEFAULT_HIGH_SCORE_FILE = Path.home() / ".gridsnake_highscore"


def start_cell(grid_size: int = GRID_SIZE) -> tuple[int, int]:
    return (grid_size // 2, grid_size // 2)


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass
class Settings:
    """Options read once at startup. CLI flags override the environment."""

    difficulty: Difficulty = Difficulty.EASY
    tick_ms: int = TICK_MS
    theme: str = DEFAULT_THEME
    grid_size: int = GRID_SIZE
    high_score_file: Path = DEFAULT_HIGH_SCORE_FILE

    def __post_init__(self) -> None:
        self.difficulty = Difficulty.parse(self.difficulty)
        if self.theme not in THEMES:
            raise ValueError(f"unknown theme: {self.theme!r} (expected one of {sorted(THEMES)})")
        if self.tick_ms < MIN_TICK_MS:
            raise ValueError(f"tick interval must be >= {MIN_TICK_MS} ms, got {self.tick_ms}")
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid size must be >= {MIN_GRID_SIZE}, got {self.grid_size}")
        self.high_score_file = Path(self.high_score_file).expanduser()

    @classmethod
    def from_env(cls, dotenv: bool = True) -> Settings:
        if dotenv:
            load_dotenv()
        return cls(
            difficulty=os.getenv("SNAKE_DIFFICULTY", "easy"),
            tick_ms=_int_env("SNAKE_TICK_MS", TICK_MS, MIN_TICK_MS),
            theme=os.getenv("SNAKE_THEME", DEFAULT_THEME),
            grid_size=_int_env("SNAKE_GRID_SIZE", GRID_SIZE, MIN_GRID_SIZE),
            high_score_file=Path(os.getenv("SNAKE_HIGH_SCORE_FILE", str(DEFAULT_HIGH_SCORE_FILE))),
        )
