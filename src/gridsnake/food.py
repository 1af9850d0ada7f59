from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from . import config
from .grid import cells
from .state import Coord

logger = logging.getLogger(__name__)


def place(
    snake: Iterable[Coord],
    obstacles: Iterable[Coord],
    grid_size: int = config.GRID_SIZE,
    max_attempts: int = config.FOOD_MAX_ATTEMPTS,
    rng: random.Random | None = None,
) -> Coord | None:
    """Pick a random cell that is free of snake and obstacles.

    Samples uniformly up to ``max_attempts`` times; ``max_attempts`` bounds
    only that random phase. When every sample misses, the remaining free
    cells are enumerated and one is chosen from those, so None means the
    board really is full.
    """
    rng = rng or random
    blocked = set(snake) | set(obstacles)
    for _ in range(max_attempts):
        pos = (rng.randrange(grid_size), rng.randrange(grid_size))
        if pos not in blocked:
            return pos

    free = [c for c in cells(grid_size) if c not in blocked]
    if not free:
        logger.warning("Could not place food: no free cell on a %dx%d board", grid_size, grid_size)
        return None
    logger.debug("Random placement missed %d times, picking from %d free cells", max_attempts, len(free))
    return rng.choice(free)
