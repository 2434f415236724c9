# game.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import random

from pygame.math import Vector2  # type: ignore

from .config import ARENA, CFG, RIGHT, Arena, Config
from .entities import Direction, Entity, Food, FoodKind, Renderable, as_renderable, make_food
from .spawner import place_food

logger = logging.getLogger(__name__)

BIG_FOOD_EVERY = 3   # small foods eaten before a big one appears

# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Entity]            # head at index 0
    direction: Direction           # committed heading
    pending: Direction             # buffered input, committed on the next tick
    small_food: Food
    big_food: Food
    score: int
    small_eaten: int               # small foods eaten since the last big one
    speed: float                   # current tick interval (seconds)
    base_speed: float              # interval captured at startup
    last_move: float               # clock time of the last tick
    game_over: bool = False
    config: Config = field(default_factory=Config)
    arena: Arena = ARENA
    rng: random.Random = field(default_factory=random.Random)
    boost_speed: Optional[float] = None   # interval boost applies while its key is down

    @property
    def head(self) -> Entity:
        return self.snake[0]

@dataclass
class TickResult:
    head: Tuple[float, float]
    direction: Direction
    eaten: Optional[FoodKind] = None
    grown: int = 0
    collision: Optional[str] = None   # "wall" or "self"
    score: int = 0

def new_game_state(now: float = 0.0, config: Config = CFG, arena: Arena = ARENA) -> GameState:
    """One segment in the middle of the arena heading right, one small food on screen."""
    cx, cy = arena.center
    state = GameState(
        snake=[Entity(Vector2(cx, cy), RIGHT)],
        direction=RIGHT,
        pending=RIGHT,
        small_food=make_food(FoodKind.SMALL),
        big_food=make_food(FoodKind.BIG),
        score=0,
        small_eaten=0,
        speed=config.speed,
        base_speed=config.speed,
        last_move=now,
        config=config,
        arena=arena,
        rng=random.Random(config.seed),
    )
    place_food(state, FoodKind.SMALL)
    state.small_food.on_screen = True
    return state

# ---------- Tick ----------
def _move_head(head: Entity, direction: Direction, stride: float) -> None:
    head.direction = direction
    dx, dy = direction
    head.position += Vector2(dx * stride, dy * stride)

def hits_wall(position: Vector2, arena: Arena) -> bool:
    return (
        position.x < arena.wall
        or position.x >= arena.width - arena.wall
        or position.y < arena.wall - arena.bottom_offset
        or position.y >= arena.height - arena.wall
    )

def _hits_self(snake: List[Entity], stride: float) -> bool:
    head = snake[0]
    for segment in snake[1:]:
        if head.distance_to(segment) < stride:
            return True
    return False

def _grow(snake: List[Entity], count: int) -> None:
    # Duplicates of the tail; propagation unspools them over the next ticks
    tail = snake[-1]
    snake.extend(tail.copy() for _ in range(count))

def _eat_small(state: GameState) -> int:
    _grow(state.snake, state.config.small_growth)
    state.score += 1
    state.small_eaten += 1
    if state.small_eaten == BIG_FOOD_EVERY:
        place_food(state, FoodKind.BIG)
        state.big_food.on_screen = True
        state.small_food.on_screen = False
        state.small_eaten = 0
    else:
        place_food(state, FoodKind.SMALL)
        state.small_food.on_screen = True
    return state.config.small_growth

def _eat_big(state: GameState) -> int:
    _grow(state.snake, state.config.big_growth)
    state.score += 2
    place_food(state, FoodKind.SMALL)
    state.small_food.on_screen = True
    state.big_food.on_screen = False
    return state.config.big_growth

def advance(state: GameState, now: float) -> Optional[TickResult]:
    """
    Advance the game by one tick if one is due.

    A tick fires only when the game is still running and at least
    `state.speed` seconds have passed since the previous one; otherwise
    nothing changes and None is returned.
    """
    if state.game_over or now - state.last_move < state.speed:
        return None

    # Commit direction once per tick
    state.direction = state.pending
    state.last_move = now

    snake = state.snake
    # Shift register: tail first so no predecessor is overwritten before it is read
    for i in range(len(snake) - 1, 0, -1):
        snake[i].position = Vector2(snake[i - 1].position)
        snake[i].direction = snake[i - 1].direction

    arena = state.arena
    head = snake[0]
    _move_head(head, state.direction, arena.stride)
    result = TickResult(head=(head.position.x, head.position.y), direction=head.direction)

    if hits_wall(head.position, arena):
        result.collision = "wall"
    elif _hits_self(snake, arena.stride):
        result.collision = "self"
    if result.collision is not None:
        state.game_over = True
        result.score = state.score
        logger.info(f"Game over ({result.collision}) at ({head.position.x:g}, {head.position.y:g}), score {state.score}")
        return result

    radius = arena.square_size
    if state.small_food.on_screen and head.distance_to(state.small_food) < radius:
        result.grown += _eat_small(state)
        result.eaten = FoodKind.SMALL
    if state.big_food.on_screen and head.distance_to(state.big_food) < 2 * radius:
        result.grown += _eat_big(state)
        result.eaten = FoodKind.BIG

    result.score = state.score
    return result

# ---------- Render snapshot ----------
def snapshot(state: GameState) -> List[Renderable]:
    """Copy of everything the renderer needs; mutating it never touches the game."""
    items = [as_renderable("head", state.head)]
    items.extend(as_renderable("body", segment) for segment in state.snake[1:])
    if state.small_food.on_screen:
        items.append(as_renderable("small_food", state.small_food))
    if state.big_food.on_screen:
        items.append(as_renderable("big_food", state.big_food))
    return items
