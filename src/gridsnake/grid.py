from __future__ import annotations

from . import config
from .state import Coord


def in_bounds(coord: Coord, grid_size: int = config.GRID_SIZE) -> bool:
    x, y = coord
    return 0 <= x < grid_size and 0 <= y < grid_size


def perimeter(grid_size: int = config.GRID_SIZE) -> set[Coord]:
    """Outermost ring of cells."""
    last = grid_size - 1
    ring: set[Coord] = set()
    for i in range(grid_size):
        ring.update({(i, 0), (i, last), (0, i), (last, i)})
    return ring


def cells(grid_size: int = config.GRID_SIZE):
    for y in range(grid_size):
        for x in range(grid_size):
            yield (x, y)


def on_edge(coord: Coord, grid_size: int = config.GRID_SIZE) -> bool:
    x, y = coord
    return x in (0, grid_size - 1) or y in (0, grid_size - 1)
