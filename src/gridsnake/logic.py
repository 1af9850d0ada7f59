from __future__ import annotations

from collections import deque
from collections.abc import Collection

from .grid import in_bounds, on_edge
from .state import Coord, add_vectors


def next_head(snake: deque[Coord], direction: Coord) -> Coord:
    return add_vectors(snake[0], direction)


def check_collisions(
    head: Coord,
    snake: Collection[Coord],
    obstacles: Collection[Coord],
    grid_size: int,
) -> str | None:
    """Return why moving onto ``head`` ends the game, or None if it is safe.

    The current tail counts as occupied even though it is about to move.
    """
    if not in_bounds(head, grid_size):
        return "wall"
    if head in snake:
        return "self"
    if head in obstacles:
        return "wall" if on_edge(head, grid_size) else "obstacle"
    return None


def move_snake(snake: deque[Coord], head: Coord, grow: bool) -> None:
    snake.appendleft(head)
    if not grow:
        snake.pop()
