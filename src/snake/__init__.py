"""Grid snake game: rules, tick engine and pygame front end."""

from snake.config import CFG, Config, ConfigError, UP, DOWN, LEFT, RIGHT
from snake.game import Phase, SnakeGame, Snapshot, TickResult
from snake.rules import Collision

__all__ = [
    "CFG", "Config", "ConfigError", "UP", "DOWN", "LEFT", "RIGHT",
    "Phase", "SnakeGame", "Snapshot", "TickResult", "Collision",
]
