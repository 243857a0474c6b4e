"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from grid_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Places food uniformly at random over the free cells of a grid.

    Free cells are enumerated directly rather than resampled, so placement
    terminates on any board with at least one free cell and every free
    cell is equally likely.
    """

    def __init__(self, grid: Grid, rng: np.random.Generator | None = None) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, occupied: Iterable[tuple[int, int]]) -> tuple[int, int] | None:
        """Pick a free cell, or return ``None`` if the board is full."""
        free = self.grid.free_cells(occupied)
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        return free[int(self.rng.integers(len(free)))]
