"""Shared fixtures. pygame is driven headless for the whole suite."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from snake.config import Config
from snake.game import new_game_state


@pytest.fixture
def cfg():
    return Config(seed=1234)


@pytest.fixture
def state(cfg):
    """Fresh game at t=0 with the default 800x600 arena."""
    return new_game_state(0.0, cfg)
