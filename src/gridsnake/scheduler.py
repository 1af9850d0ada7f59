from __future__ import annotations

import logging

from . import config
from .state import GameStatus

logger = logging.getLogger(__name__)


class Ticker:
    """Fixed-interval driver for ``Engine.tick``.

    The host feeds it elapsed wall time every frame. A ticker is bound to the
    engine session that was active when it was armed; once a new session
    starts, ticks from the old binding are refused by the engine.
    """

    def __init__(self, engine, interval_ms: int = config.TICK_MS, max_catchup: int = config.MAX_CATCHUP_TICKS):
        self.engine = engine
        self.interval_ms = interval_ms
        self.max_catchup = max_catchup
        self.session: int | None = None
        self._elapsed = 0.0

    @property
    def armed(self) -> bool:
        return self.session is not None

    def arm(self, interval_ms: int | None = None) -> None:
        if interval_ms is not None:
            self.interval_ms = interval_ms
        self.session = self.engine.session
        self._elapsed = 0.0

    def disarm(self) -> None:
        self.session = None
        self._elapsed = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Add elapsed time and run every tick that is due. Returns ticks run."""
        if self.session is None:
            return 0
        if self.session != self.engine.session or self.engine.status is GameStatus.GAME_OVER:
            self.disarm()
            return 0
        if self.engine.status is not GameStatus.RUNNING:
            # Time spent paused never turns into ticks.
            self._elapsed = 0.0
            return 0

        self._elapsed += elapsed_ms
        ran = 0
        while self._elapsed >= self.interval_ms:
            if ran >= self.max_catchup:
                logger.debug("Dropping %.0f ms of backlog", self._elapsed)
                self._elapsed = 0.0
                break
            self._elapsed -= self.interval_ms
            self.engine.tick(session=self.session)
            ran += 1
            if self.engine.status is GameStatus.GAME_OVER:
                self.disarm()
                break
        return ran
