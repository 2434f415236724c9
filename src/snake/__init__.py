# src/snake/__init__.py
"""Snake arcade game: fixed-tick simulation core plus a pygame front end."""

from snake.game import GameState, TickResult, advance, new_game_state, snapshot
from snake.spawner import SpawnError, spawn_food

__all__ = ["GameState", "TickResult", "advance", "new_game_state", "snapshot", "SpawnError", "spawn_food"]
