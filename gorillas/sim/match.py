from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from ..config import MatchConfig
from ..constants import PLAYER_ONE, SELF_KILL_VELOCITY
from ..gen.city import generate_city
from ..gen.placement import place_avatars
from ..gen.recipe import build_recipe
from ..gen.wind import generate_wind
from .collision import NO_HIT, SUN, CollisionResult, check_collisions
from .destruction import apply_explosion
from .projectile import advance, create_projectile
from .rng import RandomSource, make_rng
from .state import MatchState, award_loss, other_player

logger = logging.getLogger(__name__)

StepResult = CollisionResult


# ------------------------------------------------------------------------------
# State transforms: (MatchState, args) -> (MatchState, result)
# ------------------------------------------------------------------------------


def new_state(config: MatchConfig, rng: RandomSource, scores: tuple[int, int] = (0, 0), round_no: int = 1) -> MatchState:
    city = generate_city(config.city, rng)
    avatars = place_avatars(city, config.avatar, rng)
    wind = generate_wind(rng)
    return MatchState(
        city=city,
        avatars=avatars,
        current_player=PLAYER_ONE,
        scores=scores,
        wind=wind,
        round=round_no,
    )


def fire(state: MatchState, angle: float, velocity: float, config: MatchConfig) -> MatchState:
    if state.projectile is not None or state.game_over:
        logger.debug(f"fire ignored: in_flight={state.in_flight} game_over={state.game_over}")
        return state
    if velocity < SELF_KILL_VELOCITY:
        logger.info(f"Player {state.current_player} dropped the banana (velocity={velocity})")
        return award_loss(state, state.current_player)
    projectile = create_projectile(state.shooter, angle, velocity, config.avatar)
    return replace(state, projectile=projectile)


def step(state: MatchState, config: MatchConfig, dt: float | None = None) -> tuple[MatchState, StepResult]:
    if state.projectile is None or state.game_over:
        return state, NO_HIT

    if dt is None:
        dt = config.physics.dt
    projectile = advance(state.projectile, state.wind, dt, config.physics)
    state = replace(state, projectile=projectile)
    result = check_collisions(
        projectile,
        state.city,
        state.opponent,
        state.current_player,
        config.arena,
        config.avatar,
        config.physics,
    )
    if not result.hit:
        return state, result

    logger.debug(f"Player {state.current_player} banana hit {result.target!r} at ({result.hit_x:.1f}, {result.hit_y:.1f})")
    if result.hit_avatar:
        return award_loss(state, int(result.target)), result
    if result.target == SUN:
        # The sun only ends the turn.
        return replace(state, projectile=None), result
    return replace(state, projectile=None, current_player=other_player(state.current_player)), result


def apply_explosion_at(state: MatchState, x: float, y: float, radius: float, config: MatchConfig) -> tuple[MatchState, int | None]:
    state, killed = apply_explosion(state, x, y, radius, config.avatar)
    if killed is not None:
        logger.info(f"Explosion at ({x:.1f}, {y:.1f}) killed player {killed}; player {state.winner} wins")
    return state, killed


def new_round(state: MatchState, config: MatchConfig, rng: RandomSource) -> MatchState:
    return new_state(config, rng, scores=state.scores, round_no=state.round + 1)


def reset(config: MatchConfig, rng: RandomSource) -> MatchState:
    return new_state(config, rng)


# ------------------------------------------------------------------------------
# Holder for controllers
# ------------------------------------------------------------------------------


class Match:
    """Mutable holder around MatchState for a single-threaded controller."""

    def __init__(self, config: MatchConfig | None = None, rng: RandomSource | None = None, seed: int | None = None):
        self.config = config or MatchConfig()
        self.rng: RandomSource = rng if rng is not None else make_rng(seed)
        self.seed = seed
        self.state = reset(self.config, self.rng)
        # Cities drawn from this rng so far; a replay needs this many draws.
        self.cities_drawn = 1

    def snapshot(self) -> MatchState:
        return self.state

    def fire(self, angle: float, velocity: float) -> None:
        self.state = fire(self.state, angle, velocity, self.config)

    def step(self) -> StepResult:
        self.state, result = step(self.state, self.config)
        return result

    def apply_explosion_at(self, x: float, y: float, radius: float) -> int | None:
        self.state, killed = apply_explosion_at(self.state, x, y, radius, self.config)
        return killed

    def new_round(self) -> None:
        self.state = new_round(self.state, self.config, self.rng)
        self.cities_drawn += 1
        logger.info(f"Round {self.state.round} started; scores={self.state.scores}")

    def reset(self) -> None:
        self.state = reset(self.config, self.rng)
        self.cities_drawn += 1
        logger.info("Match reset")

    def recipe(self) -> dict[str, Any]:
        return build_recipe(
            seed=self.seed,
            round_no=self.state.round,
            city_index=self.cities_drawn - 1,
            city_config=self.config.city,
            city=self.state.city,
            avatars=self.state.avatars,
            wind=self.state.wind,
        )
