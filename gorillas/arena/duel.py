from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from ..constants import EXPLOSION_RADIUS
from ..sim.collision import NO_HIT, TERRAIN, CollisionResult
from ..sim.match import Match

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 10_000


@dataclass(frozen=True)
class ThrowOutcome:
    thrower: int
    result: CollisionResult
    ticks: int
    killed: int | None = None
    explosion: tuple[float, float, float] | None = None  # (x, y, radius)
    self_kill: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "thrower": self.thrower,
            "result": self.result.to_dict(),
            "ticks": self.ticks,
            "killed": self.killed,
            "explosion": list(self.explosion) if self.explosion is not None else None,
            "self_kill": self.self_kill,
        }


@dataclass(frozen=True)
class RoundOutcome:
    winner: int | None
    scores: tuple[int, int]
    throws: list[ThrowOutcome]


def resolve_throw(
    match: Match,
    angle: float,
    velocity: float,
    *,
    explosion_radius: float = EXPLOSION_RADIUS,
    max_ticks: int = DEFAULT_MAX_TICKS,
) -> ThrowOutcome:
    """
    Run one throw to completion without any animation pacing.

    Mirrors the interactive controller: fire, tick until the banana resolves,
    then detonate where it landed (terrain or avatar). A dropped banana blows up
    on the thrower. Sun and off-screen results end the turn without a blast.
    """
    state = match.state
    thrower = state.current_player
    if state.in_flight or state.game_over:
        return ThrowOutcome(thrower=thrower, result=NO_HIT, ticks=0)

    match.fire(angle, velocity)
    state = match.state
    if state.game_over and not state.in_flight:
        avatar = state.avatar(thrower)
        match.apply_explosion_at(avatar.x, avatar.y, explosion_radius)
        return ThrowOutcome(
            thrower=thrower,
            result=NO_HIT,
            ticks=0,
            killed=thrower,
            explosion=(avatar.x, avatar.y, explosion_radius),
            self_kill=True,
        )

    ticks = 0
    while True:
        result = match.step()
        ticks += 1
        if result.hit:
            break
        if ticks >= max_ticks:
            # Nothing stays in flight after a failed throw.
            match.state = replace(match.state, projectile=None)
            raise RuntimeError(f"Throw did not resolve within {max_ticks} ticks")

    killed: int | None = None
    explosion = None
    if result.target == TERRAIN or result.hit_avatar:
        explosion = (float(result.hit_x), float(result.hit_y), explosion_radius)
        killed = match.apply_explosion_at(*explosion)
        if result.hit_avatar:
            killed = int(result.target)

    logger.debug(f"Throw by player {thrower}: {result.target!r} after {ticks} ticks, killed={killed}")
    return ThrowOutcome(thrower=thrower, result=result, ticks=ticks, killed=killed, explosion=explosion)


def play_round(
    match: Match,
    shots: Iterable[tuple[float, float]],
    *,
    explosion_radius: float = EXPLOSION_RADIUS,
) -> RoundOutcome:
    """Feed (angle, velocity) shots alternately until someone wins or shots run out."""
    throws: list[ThrowOutcome] = []
    for angle, velocity in shots:
        if match.state.game_over:
            break
        throws.append(resolve_throw(match, angle, velocity, explosion_radius=explosion_radius))
    return RoundOutcome(winner=match.state.winner, scores=match.state.scores, throws=throws)
