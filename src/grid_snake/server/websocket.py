"""WebSocket handler streaming state and accepting live input."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from grid_snake.controls import DIRECTION_NAMES
from grid_snake.server.hub import ConnectionHub, encode_state
from grid_snake.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


async def _apply_message(session: GameSession, msg: dict) -> None:
    key = msg.get("key")
    if isinstance(key, str):
        await session.handle_key(key)
        return

    direction_str = msg.get("direction")
    if isinstance(direction_str, str):
        direction = DIRECTION_NAMES.get(direction_str.lower())
        if direction is not None:
            session.set_direction(direction)
        return

    action = msg.get("action")
    if action == "toggle":
        await session.toggle()
    elif action == "restart":
        await session.restart()


@ws_router.websocket("/game/ws")
async def play(websocket: WebSocket) -> None:
    """Player WebSocket: send input, receive game state on every change."""
    session: GameSession = websocket.app.state.session
    hub: ConnectionHub = websocket.app.state.hub

    await websocket.accept()
    hub.add(websocket)
    logger.info("Client connected.")

    # Send an initial snapshot so the client can draw before the first tick.
    await websocket.send_text(encode_state(session.get_state()))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue
            await _apply_message(session, msg)
    except WebSocketDisconnect:
        logger.info("Client disconnected.")
    finally:
        hub.discard(websocket)
