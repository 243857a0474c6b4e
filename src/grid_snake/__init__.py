"""Grid Snake — tick-driven snake game engine."""

from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine, GameStatus
from grid_snake.session import GameSession
from grid_snake.snake import Direction, Snake

__all__ = [
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameSession",
    "GameStatus",
    "Snake",
]
