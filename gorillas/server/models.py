# gorillas/server/models.py
"""Pydantic models for API requests/responses."""

from typing import Any

from pydantic import BaseModel


class FireRequest(BaseModel):
    """Throw parameters; ranges are checked by the route, not the schema."""

    angle: float
    velocity: float


class ExplodeRequest(BaseModel):
    """Detonation requested by the client once its blast animation starts."""

    x: float
    y: float
    radius: float | None = None


class StepResponse(BaseModel):
    hit: bool
    target: int | str | None = None
    hit_x: float | None = None
    hit_y: float | None = None
    state: dict[str, Any]


class ExplodeResponse(BaseModel):
    killed: int | None
    state: dict[str, Any]


class ThrowResponse(BaseModel):
    outcome: dict[str, Any]
    state: dict[str, Any]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    round: int
    uptime_s: float
