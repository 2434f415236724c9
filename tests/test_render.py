"""
Tests for snake.render - drawing the snapshot onto a surface.
"""

import pygame
import pytest

from snake.config import ARENA, BG, EYE, HEAD, TEXT, WALL, UP, DOWN, LEFT, RIGHT
from snake.entities import Renderable
from snake.render import ANGLES, Sprites, draw_entities, draw_game_over, draw_walls, to_screen


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


class RecordingFont:
    """Stands in for pygame.font.Font and remembers what was rendered."""

    def __init__(self):
        self.calls = []

    def render(self, text, antialias, color):
        self.calls.append((text, color))
        return pygame.Surface((10, 10))


@pytest.fixture
def screen():
    surface = pygame.Surface((int(ARENA.width), int(ARENA.height)))
    surface.fill(BG)
    return surface


class TestGeometry:
    def test_y_axis_is_flipped(self):
        assert to_screen((400.0, 300.0)) == (400, 300)
        assert to_screen((100.0, 550.0)) == (100, 50)

    def test_angles_per_direction(self):
        assert ANGLES == {RIGHT: 0.0, UP: 90.0, LEFT: 180.0, DOWN: 270.0}


class TestSprites:
    def test_big_food_is_twice_the_size(self):
        sprites = Sprites(ARENA)
        assert sprites.get("small_food", RIGHT).get_size() == (20, 20)
        assert sprites.get("big_food", RIGHT).get_size() == (40, 40)

    def test_every_kind_has_every_heading(self):
        sprites = Sprites(ARENA)
        for kind in ("head", "body", "small_food", "big_food"):
            for direction in (UP, DOWN, LEFT, RIGHT):
                assert sprites.get(kind, direction) is not None


class TestDraw:
    def test_head_drawn_at_position(self, screen):
        items = [Renderable("head", (400.0, 300.0), UP)]
        draw_entities(screen, Sprites(ARENA), items)
        assert rgb(screen, (400, 300)) == HEAD
        assert rgb(screen, (450, 300)) == BG

    def test_bottom_wall_is_thinner(self, screen):
        draw_walls(screen)
        assert rgb(screen, (400, 59)) == WALL
        assert rgb(screen, (400, 60)) == BG
        bottom = int(ARENA.wall - ARENA.bottom_offset)
        assert rgb(screen, (400, 600 - bottom)) == WALL
        assert rgb(screen, (400, 600 - bottom - 1)) == BG

    def test_game_over_overlay_uses_palette(self, screen):
        font = RecordingFont()
        draw_game_over(screen, font, 7)
        assert font.calls == [
            ("GAME OVER", EYE),
            ("Your Score: 7", TEXT),
            ("Press any key to exit", TEXT),
        ]
        assert rgb(screen, (5, 590)) != BG
