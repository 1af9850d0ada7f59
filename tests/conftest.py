import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.engine import Engine  # noqa: E402
from gridsnake.highscore import MemoryHighScoreStore  # noqa: E402


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def engine(store):
    return Engine(high_scores=store, rng=random.Random(1234))
