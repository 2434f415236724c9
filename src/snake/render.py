# render.py
from typing import Dict, Iterable, Tuple

import pygame  # type: ignore

from .config import (
    ARENA, Arena,
    BG, WALL, GREEN, HEAD, EYE, RED, TEXT,
    UP, DOWN, LEFT, RIGHT,
)
from .entities import Direction, Renderable

# Degrees counter-clockwise; sprites are drawn facing RIGHT
ANGLES: Dict[Direction, float] = {RIGHT: 0.0, UP: 90.0, LEFT: 180.0, DOWN: 270.0}

# ---------- Helpers ----------
def to_screen(position: Tuple[float, float], arena: Arena = ARENA) -> Tuple[int, int]:
    """World space has y growing upward; pygame surfaces grow downward."""
    x, y = position
    return int(round(x)), int(round(arena.height - y))

def _square(size: int, color) -> pygame.Surface:
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    surface.fill(color)
    return surface

def _head(size: int) -> pygame.Surface:
    surface = _square(size, HEAD)
    # eye on the leading edge so the heading is readable after rotation
    eye = max(size // 5, 2)
    pygame.draw.rect(surface, EYE, pygame.Rect(size - 2 * eye, eye, eye, eye))
    pygame.draw.rect(surface, EYE, pygame.Rect(size - 2 * eye, size - 2 * eye, eye, eye))
    return surface

def _food(size: int) -> pygame.Surface:
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(surface, RED, (size // 2, size // 2), size // 2)
    return surface

class Sprites:
    """Surfaces for every renderable kind, pre-rotated for every heading."""

    def __init__(self, arena: Arena = ARENA):
        size = int(arena.square_size)
        base = {
            "head": _head(size),
            "body": _square(size, GREEN),
            "small_food": _food(size),
            "big_food": _food(2 * size),
        }
        self._rotated = {
            (kind, direction): pygame.transform.rotate(surface, angle)
            for kind, surface in base.items()
            for direction, angle in ANGLES.items()
        }

    def get(self, kind: str, direction: Direction) -> pygame.Surface:
        return self._rotated[(kind, direction)]

# ---------- Draw ----------
def draw_walls(screen: pygame.Surface, arena: Arena = ARENA) -> None:
    w, h = int(arena.width), int(arena.height)
    wall = int(arena.wall)
    bottom = int(arena.wall - arena.bottom_offset)
    pygame.draw.rect(screen, WALL, pygame.Rect(0, 0, w, wall))                 # top
    pygame.draw.rect(screen, WALL, pygame.Rect(0, h - bottom, w, bottom))      # bottom
    pygame.draw.rect(screen, WALL, pygame.Rect(0, 0, wall, h))                 # left
    pygame.draw.rect(screen, WALL, pygame.Rect(w - wall, 0, wall, h))          # right

def draw_entities(screen: pygame.Surface, sprites: Sprites, items: Iterable[Renderable],
                  arena: Arena = ARENA) -> None:
    # tail first so the head ends up on top
    for item in reversed(list(items)):
        image = sprites.get(item.kind, item.direction)
        screen.blit(image, image.get_rect(center=to_screen(item.position, arena)))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, sprites: Sprites,
              items: Iterable[Renderable], score: int, speed: float,
              arena: Arena = ARENA) -> None:
    screen.fill(BG)
    draw_walls(screen, arena)
    draw_entities(screen, sprites, items, arena)
    txt = font.render(f"Score: {score}   Tick: {speed * 1000:.0f} ms", True, TEXT)
    screen.blit(txt, (8, 6))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int,
                   arena: Arena = ARENA) -> None:
    width, height = int(arena.width), int(arena.height)
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("GAME OVER", True, EYE)
    sco   = font.render(f"Your Score: {score}", True, TEXT)
    sub   = font.render("Press any key to exit", True, TEXT)

    screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 16)))
    screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 16)))
    screen.blit(sub, sub.get_rect(center=(width // 2, height // 2 + 44)))
