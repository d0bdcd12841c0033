# gorillas/server/routes/match.py
"""Match controller endpoints."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, HTTPException

from ...arena.duel import resolve_throw
from ...validation import validate_throw_inputs
from ..config import settings
from ..models import ExplodeRequest, ExplodeResponse, FireRequest, StepResponse, ThrowResponse

if TYPE_CHECKING:
    from ...sim.match import Match

logger = logging.getLogger("gorillas.server")

router = APIRouter(prefix="/api/match", tags=["match"])

# Module-level state set by init_match_routes
_match: Match | None = None


def init_match_routes(match: Match) -> None:
    """Initialize routes with the match instance."""
    global _match
    _match = match


def _require_match() -> Match:
    if _match is None:
        raise HTTPException(503, "Match not initialized")
    return _match


def _check_throw(angle: float, velocity: float) -> None:
    result = validate_throw_inputs(angle, velocity)
    if not result.valid:
        raise HTTPException(status_code=400, detail=result.error)


@router.get("")
def get_state() -> dict[str, Any]:
    """Current match snapshot."""
    return _require_match().state.to_dict()


@router.post("/fire")
def fire(req: FireRequest) -> dict[str, Any]:
    """Launch a banana for the current player (no-op while one is in flight)."""
    match = _require_match()
    _check_throw(req.angle, req.velocity)
    match.fire(req.angle, req.velocity)
    return match.state.to_dict()


@router.post("/step", response_model=StepResponse)
def step():
    """Advance the banana one simulation tick."""
    match = _require_match()
    result = match.step()
    return StepResponse(**result.to_dict(), state=match.state.to_dict())


@router.post("/explode", response_model=ExplodeResponse)
def explode(req: ExplodeRequest):
    """Apply a blast to the skyline; reports the avatar it killed, if any."""
    match = _require_match()
    radius = req.radius if req.radius is not None else settings.EXPLOSION_RADIUS
    if not all(math.isfinite(v) for v in (req.x, req.y, radius)):
        raise HTTPException(status_code=400, detail="Explosion position and radius must be finite")
    if radius <= 0:
        raise HTTPException(status_code=400, detail="Explosion radius must be positive")
    killed = match.apply_explosion_at(req.x, req.y, radius)
    return ExplodeResponse(killed=killed, state=match.state.to_dict())


@router.post("/throw", response_model=ThrowResponse)
def throw(req: FireRequest):
    """Fire and resolve a whole throw, including the blast."""
    match = _require_match()
    _check_throw(req.angle, req.velocity)
    try:
        outcome = resolve_throw(
            match,
            req.angle,
            req.velocity,
            explosion_radius=settings.EXPLOSION_RADIUS,
            max_ticks=settings.MAX_FLIGHT_TICKS,
        )
    except RuntimeError as e:
        logger.error(f"Throw failed to resolve: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return ThrowResponse(outcome=outcome.to_dict(), state=match.state.to_dict())


@router.post("/new-round")
def new_round() -> dict[str, Any]:
    """Regenerate the city for the next round, keeping scores."""
    match = _require_match()
    match.new_round()
    return match.state.to_dict()


@router.post("/reset")
def reset() -> dict[str, Any]:
    """Start over from round 1 with zeroed scores."""
    match = _require_match()
    match.reset()
    return match.state.to_dict()
