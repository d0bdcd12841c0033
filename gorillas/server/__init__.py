# gorillas/server/__init__.py
"""Gorillas match controller - drives a single hot-seat match for a renderer."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..config import MatchConfig, PhysicsConfig
from ..sim.match import Match
from .config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("gorillas.server")

_server_start_time: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    global _server_start_time
    _server_start_time = time.time()
    logger.info(f"Gorillas controller starting on {settings.HOST}:{settings.PORT}")
    yield
    logger.info("Gorillas controller shutting down...")


def create_app(*, match: Match | None = None, seed: int | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        match: Optional pre-built match (tests inject one with a scripted RNG).
        seed: Seed for a fresh match when ``match`` is not given.
    """
    from .models import HealthResponse
    from .routes import match as match_routes

    if match is None:
        config = MatchConfig(physics=PhysicsConfig(time_scale=settings.TIME_SCALE))
        match = Match(config, seed=seed if seed is not None else settings.SEED)

    app = FastAPI(lifespan=lifespan, title="Gorillas Match Controller")

    match_routes.init_match_routes(match)
    app.include_router(match_routes.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="ok",
            round=match.state.round,
            uptime_s=time.time() - _server_start_time,
        )

    return app
