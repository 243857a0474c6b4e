"""Square playing field bounds and occupancy."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np


class Grid:
    """Fixed-size square grid.

    Coordinates are ``(x, y)``; the NumPy occupancy mask is indexed
    ``[y, x]`` so rows correspond to screen lines.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def occupancy(self, occupied: Iterable[tuple[int, int]]) -> np.ndarray:
        """Return a boolean ``(size, size)`` mask with *occupied* cells set."""
        mask = np.zeros((self.size, self.size), dtype=bool)
        for x, y in occupied:
            mask[y, x] = True
        return mask

    def free_cells(self, occupied: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
        """Return every cell not in *occupied*, in row-major order."""
        ys, xs = np.nonzero(~self.occupancy(occupied))
        return list(zip(xs.tolist(), ys.tolist(), strict=True))
