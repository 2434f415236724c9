# spawner.py
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

import numpy as np  # type: ignore
from pygame.math import Vector2  # type: ignore

from .config import ARENA, CFG, Arena
from .entities import Entity, FoodKind

if TYPE_CHECKING:
    from .game import GameState

logger = logging.getLogger(__name__)


class SpawnError(RuntimeError):
    """Raised when no food position is left that keeps clear of the snake."""


def spawn_bounds(arena: Arena = ARENA) -> Tuple[int, int, int, int]:
    """
    Integer box (x_lo, x_hi, y_lo, y_hi), inclusive, inside which food may appear.
    The inset keeps a big food (2 * square_size wide) fully off the walls.
    """
    inset = int(arena.wall + 2 * arena.square_size)
    x_span = int(arena.width) - 2 * inset
    y_span = int(arena.height) - 2 * inset
    return inset, inset + x_span, inset, inset + y_span


def _is_clear(candidate: Vector2, snake: Iterable[Entity], clearance: float) -> bool:
    for segment in snake:
        if segment.position.distance_to(candidate) < clearance:
            return False
    return True


def _scan_lattice(snake, arena: Arena, clearance: float) -> Optional[Vector2]:
    """
    Deterministic fallback: walk a square_size lattice over the spawn box in
    row-major order and return the first point clear of every segment.
    """
    x_lo, x_hi, y_lo, y_hi = spawn_bounds(arena)
    step = max(int(arena.square_size), 1)
    xs = np.arange(x_lo, x_hi + 1, step, dtype=np.float64)
    ys = np.arange(y_lo, y_hi + 1, step, dtype=np.float64)
    gy, gx = np.meshgrid(ys, xs, indexing="ij")
    candidates = np.stack([gx.ravel(), gy.ravel()], axis=1)   # (M, 2)

    # Freshly grown tails stack many identical segments on one point
    body = np.unique(
        np.array([(s.position.x, s.position.y) for s in snake], dtype=np.float64),
        axis=0,
    )
    free = np.ones(len(candidates), dtype=bool)
    for start in range(0, len(body), 1024):
        chunk = body[start:start + 1024]
        d = np.linalg.norm(candidates[:, None, :] - chunk[None, :, :], axis=2)
        free &= (d >= clearance).all(axis=1)

    hits = np.flatnonzero(free)
    if hits.size == 0:
        return None
    x, y = candidates[hits[0]]
    return Vector2(float(x), float(y))


def spawn_food(
    snake,
    rng: random.Random,
    arena: Arena = ARENA,
    attempts: int = CFG.spawn_attempts,
    clearance: Optional[float] = None,
) -> Vector2:
    """
    Pick a random integer position inside the spawn box that is at least
    `clearance` (square_size by default) away from every snake segment.

    Rejection-samples up to `attempts` times, then falls back to a lattice
    scan. Raises SpawnError when the snake leaves no room at all.
    """
    if clearance is None:
        clearance = arena.square_size
    x_lo, x_hi, y_lo, y_hi = spawn_bounds(arena)
    for _ in range(attempts):
        candidate = Vector2(rng.randint(x_lo, x_hi), rng.randint(y_lo, y_hi))
        if _is_clear(candidate, snake, clearance):
            return candidate

    logger.warning(f"No free food position after {attempts} samples, scanning the arena")
    found = _scan_lattice(snake, arena, clearance)
    if found is None:
        raise SpawnError(f"No free food position left for a snake of length {len(snake)}")
    return found


def place_food(state: "GameState", kind: FoodKind) -> Vector2:
    """Spawn food of the given kind and store it in the matching slot of `state`."""
    arena = state.arena
    # big food is eaten within 2 * square_size, so it needs that much room
    clearance = arena.square_size * (2 if kind is FoodKind.BIG else 1)
    position = spawn_food(state.snake, state.rng, arena, state.config.spawn_attempts, clearance)
    slot = state.big_food if kind is FoodKind.BIG else state.small_food
    slot.position = position
    logger.info(f"{kind.value.capitalize()} food spawned at ({position.x:g}, {position.y:g})")
    return position
