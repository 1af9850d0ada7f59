"""Difficulty-dependent wall layouts.

Every layout is the perimeter ring plus fixed interior walls. Interior walls
always leave a two-cell gap through their middle so no region of the board
is sealed off. On the default 20x20 board the layouts are:

    normal: rows 4 and 15, columns 2..17, gap at columns 9 and 10
    hard:   columns 5 and 14, rows 3..16, gap at rows 9 and 10,
            plus row 8 columns 4..7 and row 11 columns 12..15

Other board sizes use the same proportions.
"""

from __future__ import annotations

from . import config
from .grid import perimeter
from .state import Coord, Difficulty


def gap(grid_size: int = config.GRID_SIZE) -> tuple[int, int]:
    mid = grid_size // 2
    return (mid - 1, mid)


def _normal(n: int) -> set[Coord]:
    walls: set[Coord] = set()
    rows = (n // 5, n - 1 - n // 5)
    skip = gap(n)
    for x in range(2, n - 2):
        if x in skip:
            continue
        for y in rows:
            walls.add((x, y))
    return walls


def _hard(n: int) -> set[Coord]:
    walls: set[Coord] = set()
    cols = (n // 4, n - 1 - n // 4)
    skip = gap(n)
    for y in range(3, n - 3):
        if y in skip:
            continue
        for x in cols:
            walls.add((x, y))

    mid = n // 2
    left = n // 5
    right = n - 1 - n // 5
    for x in range(left, left + 4):
        walls.add((x, mid - 2))
    for x in range(right - 3, right + 1):
        walls.add((x, mid + 1))
    return walls


_LAYOUTS = {
    Difficulty.EASY: lambda n: set(),
    Difficulty.NORMAL: _normal,
    Difficulty.HARD: _hard,
}


def generate(level, grid_size: int = config.GRID_SIZE) -> frozenset[Coord]:
    level = Difficulty.parse(level)
    return frozenset(perimeter(grid_size) | _LAYOUTS[level](grid_size))
