from __future__ import annotations

from dataclasses import replace

from ..config import AvatarConfig
from .geometry import circle_intersects_rect, point_in_circle
from .state import MatchState, award_loss
from .world import City, Explosion


def blast_city(city: City, x: float, y: float, radius: float) -> City:
    """Punch a hole in every building the blast touches and knock out its windows."""
    explosion = Explosion(x=x, y=y, radius=radius)
    buildings = tuple(
        b.with_explosion(explosion)
        if circle_intersects_rect(x, y, radius, b.x, b.y, b.width, b.height)
        else b
        for b in city.buildings
    )
    return city.with_buildings(buildings)


def avatar_in_blast(state: MatchState, x: float, y: float, radius: float, config: AvatarConfig) -> int | None:
    # Generous reach: the sprite is about one avatar-width wide.
    reach = radius + config.width / 2
    for avatar in state.avatars:
        if point_in_circle(avatar.x, avatar.y, x, y, reach):
            return avatar.player
    return None


def apply_explosion(
    state: MatchState, x: float, y: float, radius: float, config: AvatarConfig
) -> tuple[MatchState, int | None]:
    """
    Apply a circular explosion to the terrain, then check the avatars.

    Returns the new state and the id of the avatar killed by this blast, if the
    blast is what ended the round. An explosion after the round is already over
    still damages terrain but never scores.
    """
    state = replace(state, city=blast_city(state.city, x, y, radius))
    if state.game_over:
        return state, None
    victim = avatar_in_blast(state, x, y, radius, config)
    if victim is None:
        return state, None
    return award_loss(state, victim), victim
