"""High score persistence.

The only thing ever stored is a single integer. A missing or corrupt file
reads as 0. Any other storage error is raised as OSError for the engine to
log; the session carries on with its in-memory value.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path: Path | str = config.DEFAULT_HIGH_SCORE_FILE):
        self.path = Path(path)

    def read(self) -> int:
        try:
            raw = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return 0
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Ignoring corrupt high score file %s: %r", self.path, raw[:32])
            return 0
        return max(0, value)

    def write(self, value: int) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".highscore-")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(f"{int(value)}\n")
            os.replace(tmp_name, self.path)
            tmp_name = None
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)


class MemoryHighScoreStore:
    """In-process store for tests and for running without a writable home."""

    def __init__(self, value: int = 0):
        self.value = value
        self.writes: list[int] = []

    def read(self) -> int:
        return self.value

    def write(self, value: int) -> None:
        self.value = value
        self.writes.append(value)
