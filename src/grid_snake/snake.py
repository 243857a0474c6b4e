"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downward, so ``UP`` decreases it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def from_vector(cls, x: int, y: int) -> Direction:
        """Look up the direction for a unit vector.

        Raises ``ValueError`` for anything that is not one of the four
        cardinal unit vectors.
        """
        try:
            return cls((x, y))
        except ValueError:
            raise ValueError(
                f"({x}, {y}) is not a cardinal unit vector.",
            ) from None


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        head_x: int,
        head_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        self.body: deque[tuple[int, int]] = deque(
            (head_x - dx * i, head_y - dy * i) for i in range(length)
        )

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self, direction: Direction) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def advance(self, new_head: tuple[int, int], grow: bool = False) -> tuple[int, int] | None:
        """Prepend *new_head*, dropping the tail unless growing.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def to_list(self) -> list[list[int]]:
        """Serialize body segments head-first."""
        return [list(seg) for seg in self.body]
