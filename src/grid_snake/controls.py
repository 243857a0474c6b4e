"""Keyboard bindings for direction changes and pause toggling."""

from __future__ import annotations

import enum

from grid_snake.snake import Direction


class Action(enum.Enum):
    """Non-directional controls."""

    TOGGLE = "toggle"
    RESTART = "restart"


# Keys are matched case-insensitively against browser ``KeyboardEvent.key``
# names.
KEY_BINDINGS: dict[str, Direction | Action] = {
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
    " ": Action.TOGGLE,
    "enter": Action.RESTART,
}

DIRECTION_NAMES: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def resolve_key(key: str) -> Direction | Action | None:
    """Map a key name to its control, or ``None`` if unbound."""
    return KEY_BINDINGS.get(key.lower())
