"""REST route handlers for controlling the game."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from grid_snake.server.models import (
    DirectionRequest,
    DirectionResponse,
    KeyRequest,
    KeyResponse,
)
from grid_snake.session import GameSession

router = APIRouter(prefix="/game", tags=["game"])


def _get_session(request: Request) -> GameSession:
    return request.app.state.session


@router.get("")
async def get_game(request: Request) -> dict:
    """Current game state."""
    return _get_session(request).get_state()


@router.post("/toggle")
async def toggle_game(request: Request) -> dict:
    """Pause a running game or resume a paused one."""
    return await _get_session(request).toggle()


@router.post("/restart")
async def restart_game(request: Request) -> dict:
    """Reset the board and start playing immediately."""
    return await _get_session(request).restart()


@router.post("/reset")
async def reset_game(request: Request) -> dict:
    """Reset the board and leave it paused."""
    return await _get_session(request).reset()


@router.post("/direction")
async def set_direction(
    body: DirectionRequest, request: Request,
) -> DirectionResponse:
    """Request a heading change for the next tick."""
    session = _get_session(request)
    try:
        accepted = session.set_direction((body.x, body.y))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return DirectionResponse(
        accepted=accepted,
        pending_direction=list(session.engine.pending_direction.value),
    )


@router.post("/key")
async def press_key(body: KeyRequest, request: Request) -> KeyResponse:
    """Apply a single key press as a keyboard handler would."""
    session = _get_session(request)
    handled = await session.handle_key(body.key)
    return KeyResponse(handled=handled, state=session.get_state())
