"""Tests for food placement."""

import logging
import random

from gridsnake.food import place
from gridsnake.grid import cells, perimeter


class TestPlace:
    def test_never_inside_snake_or_obstacles(self):
        rng = random.Random(7)
        snake = [(x, 10) for x in range(3, 15)]
        walls = perimeter(20)
        for _ in range(200):
            pos = place(snake, walls, 20, rng=rng)
            assert pos not in walls
            assert pos not in snake
            assert 0 <= pos[0] < 20 and 0 <= pos[1] < 20

    def test_single_free_cell_is_found(self):
        """With one free cell left, that cell is returned."""
        walls = {c for c in cells(20) if c != (7, 7)}
        assert place([], walls, 20) == (7, 7)

    def test_single_free_cell_after_sampling_misses(self):
        walls = {c for c in cells(20) if c != (3, 12)}
        assert place([(1, 1)], walls, 20, max_attempts=1, rng=random.Random(0)) == (3, 12)

    def test_attempts_only_bound_random_sampling(self):
        """With no random tries allowed, a free cell still comes back."""
        walls = perimeter(20)
        pos = place([], walls, 20, max_attempts=0, rng=random.Random(4))
        assert pos is not None
        assert pos not in walls

    def test_full_board_with_no_attempts(self):
        assert place([], set(cells(5)), 5, max_attempts=0) is None

    def test_full_board_returns_none(self, caplog):
        snake = [(0, 0), (1, 0)]
        walls = {c for c in cells(4)} - set(snake)
        with caplog.at_level(logging.WARNING, logger="gridsnake.food"):
            assert place(snake, walls, 4) is None
        assert "no free cell" in caplog.text

    def test_seeded_rng_is_repeatable(self):
        a = place([], perimeter(20), 20, rng=random.Random(99))
        b = place([], perimeter(20), 20, rng=random.Random(99))
        assert a == b
