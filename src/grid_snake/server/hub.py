"""Fan-out of game state to connected WebSocket clients."""

from __future__ import annotations

import json
import logging

from starlette.websockets import WebSocket, WebSocketState

logger = logging.getLogger(__name__)


def encode_state(state: dict) -> str:
    return json.dumps(state, separators=(",", ":"))


class ConnectionHub:
    """Tracks live sockets and broadcasts every published state to them.

    Registered as a session listener; sockets that fail to receive are
    dropped rather than interrupting the tick loop.
    """

    def __init__(self) -> None:
        self.connections: list[WebSocket] = []

    def add(self, ws: WebSocket) -> None:
        self.connections.append(ws)

    def discard(self, ws: WebSocket) -> None:
        if ws in self.connections:
            self.connections.remove(ws)

    async def broadcast(self, state: dict) -> None:
        payload = encode_state(state)
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the
        # live list during the send loop.
        for ws in list(self.connections):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            self.discard(ws)
        if dead:
            logger.info("Dropped %d unreachable client(s).", len(dead))

    async def close_all(self) -> None:
        for ws in list(self.connections):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1001, reason="Server shutting down.")
            except Exception:
                logger.warning("Failed closing client socket.")
        self.connections.clear()
