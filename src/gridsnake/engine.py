"""The simulation engine.

``Engine`` owns every piece of mutable game state. Hosts drive it through
``start``, ``tick``, ``set_direction``, ``pause`` and ``resume`` and observe
it through ``snapshot`` or by subscribing a listener. It has no notion of
time: a scheduler decides when ``tick`` runs.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Callable

from . import config, food, obstacles
from .highscore import MemoryHighScoreStore
from .logic import check_collisions, move_snake, next_head
from .state import DIRECTIONS, Coord, Difficulty, GameStatus, Snapshot, same_axis

logger = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class Engine:
    def __init__(self, grid_size: int = config.GRID_SIZE, high_scores=None, rng: random.Random | None = None):
        self.grid_size = grid_size
        self.high_scores = high_scores if high_scores is not None else MemoryHighScoreStore()
        self.rng = rng or random.Random()
        self.high_score = self._read_high_score()

        self.status = GameStatus.IDLE
        self.session = 0
        self.difficulty = Difficulty.EASY

        self.snake: deque[Coord] = deque([config.start_cell(grid_size)])
        self.direction: Coord = config.START_DIRECTION
        self.pending: Coord | None = None
        self.food: Coord | None = None
        self.obstacles: frozenset[Coord] = frozenset()
        self.score = 0
        self.death_reason: str | None = None

        self._listeners: list[Listener] = []

    # --- observers ---

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            obstacles=self.obstacles,
            score=self.score,
            high_score=self.high_score,
            status=self.status,
            difficulty=self.difficulty,
            death_reason=self.death_reason,
        )

    def _emit(self) -> Snapshot:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
        return snap

    # --- commands ---

    def start(self, difficulty=None) -> int:
        """Reset everything and begin a new session. Returns the session id."""
        if difficulty is not None:
            self.difficulty = Difficulty.parse(difficulty)

        self.snake = deque([config.start_cell(self.grid_size)])
        self.direction = config.START_DIRECTION
        self.pending = None
        self.score = 0
        self.death_reason = None
        self.obstacles = obstacles.generate(self.difficulty, self.grid_size)
        self.food = food.place(self.snake, self.obstacles, self.grid_size, rng=self.rng)

        self.session += 1
        self.status = GameStatus.RUNNING
        logger.info(
            "Game %d started: difficulty=%s obstacles=%d",
            self.session,
            self.difficulty.value,
            len(self.obstacles),
        )
        self._emit()
        return self.session

    def set_direction(self, direction: Coord) -> bool:
        """Request a turn for the next tick.

        Only turns onto the other axis are accepted. The last accepted request
        before a tick wins; nothing is queued beyond it. A turn made while
        paused is held and applies on the first tick after resume.
        """
        direction = tuple(direction)
        if direction not in DIRECTIONS:
            raise ValueError(f"not a cardinal direction: {direction!r}")
        if self.status not in (GameStatus.RUNNING, GameStatus.PAUSED):
            return False
        if same_axis(direction, self.direction):
            logger.debug("Ignoring turn %s while moving %s", direction, self.direction)
            return False
        self.pending = direction
        return True

    def pause(self) -> bool:
        if self.status is not GameStatus.RUNNING:
            return False
        self.status = GameStatus.PAUSED
        self._emit()
        return True

    def resume(self) -> bool:
        if self.status is not GameStatus.PAUSED:
            return False
        self.status = GameStatus.RUNNING
        self._emit()
        return True

    def toggle_pause(self) -> bool:
        if self.status is GameStatus.RUNNING:
            return self.pause()
        return self.resume()

    # --- simulation ---

    def tick(self, session: int | None = None) -> Snapshot:
        """Advance one step. Ticks from an older session are dropped."""
        if session is not None and session != self.session:
            logger.debug("Dropping stale tick from session %d (active %d)", session, self.session)
            return self.snapshot()
        if self.status is not GameStatus.RUNNING:
            return self.snapshot()

        if self.pending is not None:
            self.direction = self.pending
            self.pending = None

        head = next_head(self.snake, self.direction)
        reason = check_collisions(head, self.snake, self.obstacles, self.grid_size)
        if reason is not None:
            self.status = GameStatus.GAME_OVER
            self.death_reason = reason
            logger.info("Game %d over (%s) at %s, score %d", self.session, reason, head, self.score)
            return self._emit()

        ate = self.food is not None and head == self.food
        move_snake(self.snake, head, grow=ate)
        if ate:
            self.score += 1
            self._record_score()
        if ate or self.food is None:
            self.food = food.place(self.snake, self.obstacles, self.grid_size, rng=self.rng)
        return self._emit()

    # --- high score ---

    def _read_high_score(self) -> int:
        try:
            return int(self.high_scores.read())
        except (OSError, ValueError) as e:
            logger.warning("High score unavailable, starting from 0: %s", e)
            return 0

    def _record_score(self) -> None:
        if self.score <= self.high_score:
            return
        self.high_score = self.score
        logger.info("New high score: %d", self.high_score)
        try:
            self.high_scores.write(self.high_score)
        except OSError as e:
            logger.warning("Could not persist high score %d: %s", self.high_score, e)
