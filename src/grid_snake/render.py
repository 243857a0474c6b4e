"""Read-only renderings of a serialized game state."""

from __future__ import annotations

import enum

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in a rendered frame."""

    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


_GLYPHS: dict[CellType, str] = {
    CellType.EMPTY: ".",
    CellType.BODY: "o",
    CellType.HEAD: "@",
    CellType.FOOD: "*",
}


def render_frame(state: dict) -> np.ndarray:
    """Rasterize *state* into a ``(size, size)`` array indexed ``[y, x]``.

    The head gets its own code so a display can draw it differently.
    """
    size = state["grid_size"]
    frame = np.full((size, size), CellType.EMPTY, dtype=np.int8)
    food = state["food"]
    if food is not None:
        frame[food[1], food[0]] = CellType.FOOD
    snake = state["snake"]
    for x, y in snake[1:]:
        frame[y, x] = CellType.BODY
    if snake:
        head_x, head_y = snake[0]
        frame[head_y, head_x] = CellType.HEAD
    return frame


def render_hud(state: dict) -> str:
    line = f"score {state['score']}  best {state['best_score']}  speed {state['speed']}"
    if state["game_over"]:
        line += "  GAME OVER"
    elif state["is_paused"]:
        line += "  PAUSED"
    return line


def render_text(state: dict) -> str:
    """Render the board as text followed by a HUD line."""
    frame = render_frame(state)
    rows = ["".join(_GLYPHS[CellType(code)] for code in row) for row in frame.tolist()]
    rows.append(render_hud(state))
    return "\n".join(rows)
