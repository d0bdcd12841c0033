from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..config import ArenaConfig, AvatarConfig, PhysicsConfig
from ..constants import PLAYER_ONE
from .geometry import point_in_circle
from .projectile import Projectile, is_descending
from .world import Avatar, City

TERRAIN = "terrain"
SUN = "sun"

# Player id, "terrain", "sun", or None (left the playfield).
Target = Union[int, str, None]


@dataclass(frozen=True)
class CollisionResult:
    hit: bool
    target: Target = None
    hit_x: float | None = None
    hit_y: float | None = None

    @property
    def hit_avatar(self) -> bool:
        return self.hit and isinstance(self.target, int)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"hit": self.hit, "target": self.target}
        if self.hit_x is not None:
            out["hit_x"] = self.hit_x
            out["hit_y"] = self.hit_y
        return out


NO_HIT = CollisionResult(hit=False)


def _hit(p: Projectile, target: Target) -> CollisionResult:
    return CollisionResult(hit=True, target=target, hit_x=p.x, hit_y=p.y)


def point_in_avatar(px: float, py: float, avatar: Avatar, config: AvatarConfig) -> bool:
    return (
        avatar.x - config.box_left <= px <= avatar.x + config.box_right
        and avatar.y - config.box_top <= py <= avatar.y + config.box_bottom
    )


def below_ground(p: Projectile, arena: ArenaConfig) -> bool:
    return p.y >= arena.height - arena.ground_margin


def off_sides(p: Projectile, arena: ArenaConfig) -> bool:
    return p.x <= arena.left_margin or p.x >= arena.width - arena.right_margin


def in_sun(p: Projectile, arena: ArenaConfig) -> bool:
    return point_in_circle(p.x, p.y, arena.sun_x, arena.sun_y, arena.sun_radius)


def sample_offsets(player: int, arena: ArenaConfig) -> list[tuple[float, float]]:
    """
    Points probed around the banana, relative to its position.

    The horizontal offset starts at base * (2 - player) and moves by one step
    toward the opponent after each probe; probing continues only while the
    offset equals the sentinel. Player 1 probes (+8, 0), (+4, 6); player 2
    probes (0, 0), (+4, 6).
    """
    direction = -arena.look_x_step if player == PLAYER_ONE else arena.look_x_step
    look_x = arena.look_x_base * (2 - player)
    offsets: list[tuple[float, float]] = []
    for i in range(2):
        offsets.append((look_x, i * arena.look_y_step))
        look_x += direction
        if look_x != arena.look_x_sentinel:
            break
    return offsets


def check_collisions(
    p: Projectile,
    city: City,
    opponent: Avatar,
    current_player: int,
    arena: ArenaConfig,
    avatar_cfg: AvatarConfig,
    physics: PhysicsConfig,
) -> CollisionResult:
    if below_ground(p, arena):
        return _hit(p, TERRAIN)

    # Above the playfield: keep flying, nothing to hit up there.
    if p.y <= 0:
        return NO_HIT

    if off_sides(p, arena):
        return _hit(p, None)

    if in_sun(p, arena):
        return _hit(p, SUN)

    descending = is_descending(p, physics)
    for look_x, look_y in sample_offsets(current_player, arena):
        cx = p.x + look_x
        cy = p.y + look_y
        if point_in_avatar(cx, cy, opponent, avatar_cfg):
            return _hit(p, opponent.player)
        if descending and city.solid_at(cx, cy):
            return _hit(p, TERRAIN)

    return NO_HIT
