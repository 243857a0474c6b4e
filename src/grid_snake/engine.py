"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.food import FoodPlacer
from grid_snake.grid import Grid
from grid_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

START_LENGTH = 3


class GameStatus(str, enum.Enum):
    """Coarse engine status derived from the pause and collision flags."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns all mutable game state and performs no I/O: a caller
    drives :meth:`tick` on a timer using :attr:`tick_interval_ms`, reads
    :meth:`get_state` to render, and forwards input through
    :meth:`set_direction` and :meth:`toggle`.

    Collisions pause the engine and raise :attr:`game_over`. The pause flag
    is the only gate on :meth:`tick`, so resuming after a collision
    continues from the pre-collision position.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        best_score: int = 0,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.grid_size)
        self.rng = np.random.default_rng(seed)
        self.food_placer = FoodPlacer(self.grid, rng=self.rng)
        self.best_score = best_score
        self.reset()

    def reset(self) -> None:
        """Restore the starting configuration and place fresh food."""
        size = self.config.grid_size
        self.snake = Snake(
            size * 3 // 10, size // 2, Direction.RIGHT, length=START_LENGTH,
        )
        self.current_direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.score = 0
        self.ticks = 0
        self.tick_interval_ms = self.config.base_tick_ms
        self.is_paused = True
        self.game_over = False
        self.food: tuple[int, int] | None = None
        self.place_food()
        logger.debug("Game reset; food at %s.", self.food)

    def place_food(self) -> tuple[int, int] | None:
        """Move the food to a uniformly random cell not under the snake."""
        self.food = self.food_placer.place(self.snake.body)
        return self.food

    def set_direction(self, direction: Direction | tuple[int, int]) -> bool:
        """Buffer a direction change for the next tick.

        Reversals of the direction currently in flight are ignored. Returns
        whether the request was accepted.
        """
        if not isinstance(direction, Direction):
            direction = Direction.from_vector(*direction)
        if direction == self.current_direction.opposite:
            return False
        self.pending_direction = direction
        return True

    def toggle(self) -> bool:
        """Flip between paused and running. Returns the new pause flag."""
        self.is_paused = not self.is_paused
        if not self.is_paused:
            self.game_over = False
        logger.debug("Engine %s.", "paused" if self.is_paused else "resumed")
        return self.is_paused

    def tick(self) -> dict:
        """Advance the game by one cell.

        Returns the full game state; the caller reschedules using
        :attr:`tick_interval_ms`, which may have just changed.
        """
        if self.is_paused:
            return self.get_state()

        self.current_direction = self.pending_direction
        next_head = self.snake.next_head(self.current_direction)

        if not self.grid.in_bounds(*next_head):
            self._end_game("wall")
            return self.get_state()

        # The tail has not moved yet, so it counts as an obstacle too.
        if self.snake.occupies(*next_head):
            self._end_game("self")
            return self.get_state()

        ate = next_head == self.food
        self.snake.advance(next_head, grow=ate)
        self.ticks += 1

        if ate:
            self.score += self.config.food_score
            self.best_score = max(self.best_score, self.score)
            self.tick_interval_ms = max(
                self.config.min_tick_ms,
                self.tick_interval_ms - self.config.tick_step_ms,
            )
            self.place_food()
            logger.debug(
                "Food eaten; score %d, interval %d ms.",
                self.score, self.tick_interval_ms,
            )

        return self.get_state()

    @property
    def status(self) -> GameStatus:
        if self.game_over:
            return GameStatus.GAME_OVER
        if self.is_paused:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    @property
    def speed_label(self) -> str:
        """Speed relative to the baseline interval, e.g. ``"2x"``."""
        # Halves round up.
        return f"{int(self.config.base_tick_ms / self.tick_interval_ms + 0.5)}x"

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "grid_size": self.grid.size,
            "snake": self.snake.to_list(),
            "current_direction": list(self.current_direction.value),
            "pending_direction": list(self.pending_direction.value),
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "best_score": self.best_score,
            "tick_interval_ms": self.tick_interval_ms,
            "is_paused": self.is_paused,
            "game_over": self.game_over,
            "status": self.status.value,
            "speed": self.speed_label,
            "ticks": self.ticks,
        }

    def _end_game(self, cause: str) -> None:
        self.is_paused = True
        self.game_over = True
        logger.info(
            "Snake hit %s after %d ticks with score %d.",
            cause, self.ticks, self.score,
        )
