# controls.py
from dataclasses import dataclass, field
from typing import Optional
import logging

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .entities import Direction
from .game import GameState, is_opposite

logger = logging.getLogger(__name__)

# Checked in this order; the first usable key wins
DIRECTION_KEYS = (("up", UP), ("down", DOWN), ("left", LEFT), ("right", RIGHT))

@dataclass(frozen=True)
class KeyState:
    """Raw pressed/released state of every key the game reads, for one frame."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    hold: bool = False    # fixed interval while held
    boost: bool = False   # shortens the interval once per press

@dataclass
class InputState:
    previous: KeyState = field(default_factory=KeyState)
    current: KeyState = field(default_factory=KeyState)

    def update(self, keys: KeyState) -> None:
        self.previous, self.current = self.current, keys

    def held(self, name: str) -> bool:
        return getattr(self.current, name)

    def pressed(self, name: str) -> bool:
        return getattr(self.current, name) and not getattr(self.previous, name)

    def released(self, name: str) -> bool:
        return getattr(self.previous, name) and not getattr(self.current, name)

def read_keys() -> KeyState:
    """Sample the keyboard through pygame. Needs an initialised display."""
    pressed = pygame.key.get_pressed()
    return KeyState(
        up=bool(pressed[pygame.K_UP]),
        down=bool(pressed[pygame.K_DOWN]),
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
        hold=bool(pressed[pygame.K_LCTRL]),
        boost=bool(pressed[pygame.K_SPACE]),
    )

def poll_quit() -> bool:
    """Drain the event queue. Return True when the window was closed or Escape pressed."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
    return False

# ---------- Direction ----------
def choose_direction(keys: KeyState, current: Direction) -> Optional[Direction]:
    for name, direction in DIRECTION_KEYS:
        if getattr(keys, name) and not is_opposite(direction, current):
            return direction
    return None

# ---------- Speed ----------
def _set_speed(state: GameState, speed: float) -> None:
    if speed != state.speed:
        logger.debug(f"Tick interval {state.speed:.3f}s -> {speed:.3f}s")
    state.speed = speed

def _boosted(speed: float, cfg) -> float:
    if speed <= cfg.speed_floor:
        return speed
    return max(cfg.speed_floor, speed - cfg.boost_step)

def _apply_speed_keys(state: GameState, inputs: InputState) -> None:
    cfg = state.config

    if inputs.pressed("boost"):
        if inputs.held("hold"):
            # hold stays in force; keep the interval boost alone would give
            state.boost_speed = _boosted(state.base_speed, cfg)
            _set_speed(state, _boosted(state.speed, cfg))
        else:
            _set_speed(state, _boosted(state.speed, cfg))
            state.boost_speed = state.speed
    elif inputs.released("boost"):
        state.boost_speed = None
        _set_speed(state, cfg.hold_speed if inputs.held("hold") else state.base_speed)

    if inputs.pressed("hold"):
        _set_speed(state, cfg.hold_speed)
    elif inputs.released("hold"):
        if inputs.held("boost") and state.boost_speed is not None:
            _set_speed(state, state.boost_speed)
        else:
            _set_speed(state, state.base_speed)

def handle_input(state: GameState, inputs: InputState) -> None:
    """
    Fold one frame of key state into the game: buffer a new heading
    (never the reverse of the committed one) and adjust the tick interval.
    Call once per frame after InputState.update().
    """
    if state.game_over:
        return
    direction = choose_direction(inputs.current, state.direction)
    if direction is not None:
        state.pending = direction
    _apply_speed_keys(state, inputs)
