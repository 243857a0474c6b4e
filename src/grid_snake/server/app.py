"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from grid_snake.config import GameConfig
from grid_snake.server.hub import ConnectionHub
from grid_snake.server.routes import router
from grid_snake.server.websocket import ws_router
from grid_snake.session import GameSession
from grid_snake.store import BestScoreStore, JsonBestScoreStore


def create_app(
    config: GameConfig | None = None,
    store: BestScoreStore | None = None,
) -> FastAPI:
    """Build the application around a single game session.

    Without an explicit *store*, the best score lives in the JSON file
    named by ``config.best_score_path``.
    """
    config = config if config is not None else GameConfig()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        session = GameSession(
            config,
            store if store is not None else JsonBestScoreStore(config.best_score_path),
        )
        hub = ConnectionHub()
        session.add_listener(hub.broadcast)
        session.start()
        app.state.session = session
        app.state.hub = hub
        try:
            yield
        finally:
            try:
                await session.close()
            finally:
                await hub.close_all()

    app = FastAPI(title="Grid Snake", version="0.1.0", lifespan=_lifespan)
    app.include_router(router)
    app.include_router(ws_router)
    return app
