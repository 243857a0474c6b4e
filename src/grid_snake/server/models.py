"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DirectionRequest(BaseModel):
    """Request body for POST /game/direction."""

    x: int = Field(ge=-1, le=1)
    y: int = Field(ge=-1, le=1)


class KeyRequest(BaseModel):
    """Request body for POST /game/key."""

    key: str = Field(min_length=1, max_length=32)


class DirectionResponse(BaseModel):
    accepted: bool
    pending_direction: list[int]


class KeyResponse(BaseModel):
    handled: bool
    state: dict
