from __future__ import annotations

from ..config import AvatarConfig
from ..constants import PLAYER_ONE, PLAYER_TWO
from ..sim.rng import RandomSource, randint
from ..sim.world import Avatar, Building, City


def select_building_index(num_buildings: int, player: int, rng: RandomSource) -> int:
    """Second or third building in from the player's own edge."""
    offset = randint(rng, 1, 2)
    if player == PLAYER_ONE:
        return min(offset, num_buildings - 1)
    return max(0, num_buildings - 1 - offset)


def avatar_on(building: Building, player: int, config: AvatarConfig) -> Avatar:
    return Avatar(
        x=building.x + building.width / 2 - config.x_adjust,
        y=building.y - config.y_adjust,
        player=player,
    )


def place_avatars(city: City, config: AvatarConfig, rng: RandomSource) -> tuple[Avatar, Avatar]:
    if len(city) == 0:
        raise ValueError("cannot place avatars on an empty city")
    idx1 = select_building_index(len(city), PLAYER_ONE, rng)
    idx2 = select_building_index(len(city), PLAYER_TWO, rng)
    return avatar_on(city[idx1], PLAYER_ONE, config), avatar_on(city[idx2], PLAYER_TWO, config)
