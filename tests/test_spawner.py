"""
Tests for snake.spawner - food placement.
"""

import logging
import random

import pytest
from pygame.math import Vector2

from snake.config import ARENA
from snake.entities import Entity, FoodKind
from snake.spawner import SpawnError, place_food, spawn_bounds, spawn_food


def lattice(step=20):
    x_lo, x_hi, y_lo, y_hi = spawn_bounds(ARENA)
    return [
        (x, y)
        for y in range(y_lo, y_hi + 1, step)
        for x in range(x_lo, x_hi + 1, step)
    ]


def snake_on(points):
    return [Entity(Vector2(p)) for p in points]


class TestBounds:
    def test_default_arena(self):
        assert spawn_bounds(ARENA) == (100, 700, 100, 500)


class TestRejectionSampling:
    """Random placement that keeps clear of the snake."""

    def test_positions_are_integers_inside_bounds(self):
        rng = random.Random(3)
        snake = snake_on([(400, 300)])
        x_lo, x_hi, y_lo, y_hi = spawn_bounds(ARENA)
        for _ in range(200):
            pos = spawn_food(snake, rng)
            assert x_lo <= pos.x <= x_hi
            assert y_lo <= pos.y <= y_hi
            assert pos.x == int(pos.x) and pos.y == int(pos.y)

    def test_never_within_square_size_of_snake(self):
        rng = random.Random(11)
        # a horizontal band and a vertical band of segments across the spawn box
        points = [(x * 2.5, 300) for x in range(40, 290)]
        points += [(400, y * 2.5) for y in range(40, 210)]
        snake = snake_on(points)
        for _ in range(300):
            pos = spawn_food(snake, rng)
            assert all(pos.distance_to(s.position) >= ARENA.square_size for s in snake)

    def test_custom_clearance(self):
        rng = random.Random(5)
        snake = snake_on([(x * 2.5, 300) for x in range(40, 290)])
        for _ in range(100):
            pos = spawn_food(snake, rng, clearance=40)
            assert all(pos.distance_to(s.position) >= 40 for s in snake)

    def test_same_seed_same_sequence(self):
        snake = snake_on([(400, 300)])
        a = [spawn_food(snake, random.Random(9)) for _ in range(3)]
        b = [spawn_food(snake, random.Random(9)) for _ in range(3)]
        assert a == b


class TestFallbackScan:
    """Bounded sampling falls back to a deterministic lattice scan."""

    def test_scan_finds_the_only_free_point(self, caplog):
        hole = (300, 300)
        snake = snake_on([p for p in lattice() if p != hole])
        with caplog.at_level(logging.WARNING, logger="snake.spawner"):
            pos = spawn_food(snake, random.Random(0), attempts=5)
        assert pos == Vector2(hole)
        assert "scanning" in caplog.text

    def test_scan_is_row_major(self):
        free = {(100, 100), (300, 300)}
        snake = snake_on([p for p in lattice() if p not in free])
        pos = spawn_food(snake, random.Random(0), attempts=1)
        assert pos == Vector2(100, 100)

    def test_full_arena_raises(self):
        snake = snake_on(lattice())
        with pytest.raises(SpawnError):
            spawn_food(snake, random.Random(0), attempts=5)

    def test_stacked_duplicates_are_handled(self):
        hole = (500, 400)
        points = [p for p in lattice() if p != hole]
        snake = snake_on(points + [points[0]] * 200)
        assert spawn_food(snake, random.Random(1), attempts=2) == Vector2(hole)


class TestPlaceFood:
    """Writing spawned food into the game state."""

    def test_small_slot_updated_and_logged(self, state, caplog):
        with caplog.at_level(logging.INFO, logger="snake.spawner"):
            pos = place_food(state, FoodKind.SMALL)
        assert state.small_food.position == pos
        assert "Small food spawned at" in caplog.text

    def test_big_food_gets_double_clearance(self, state):
        state.snake = snake_on([(x * 2.5, 300) for x in range(40, 290)])
        for _ in range(50):
            pos = place_food(state, FoodKind.BIG)
            assert state.big_food.position == pos
            assert all(pos.distance_to(s.position) >= 2 * ARENA.square_size for s in state.snake)

    def test_flags_untouched(self, state):
        place_food(state, FoodKind.BIG)
        assert state.big_food.on_screen is False
        assert state.small_food.on_screen is True
