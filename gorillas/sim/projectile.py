from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any

from ..config import AvatarConfig, PhysicsConfig
from ..constants import PLAYER_TWO
from .world import Avatar


@dataclass(frozen=True)
class Projectile:
    x: float
    y: float
    angle: float  # Radians, already mirrored for player 2
    start_x: float
    start_y: float
    init_vx: float
    init_vy: float  # Positive is up
    time: float = 0.0
    player: int = 1

    @property
    def rotation(self) -> float:
        # Cosmetic spin, ~100 degrees per simulated second.
        return (self.time * 100.0) % 360.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "angle": self.angle,
            "start_x": self.start_x,
            "start_y": self.start_y,
            "init_vx": self.init_vx,
            "init_vy": self.init_vy,
            "time": self.time,
            "rotation": self.rotation,
            "player": self.player,
        }


def throw_position(avatar: Avatar, config: AvatarConfig) -> tuple[float, float]:
    # Each player throws from a different hand.
    return avatar.x + config.hand_offset_x[avatar.player - 1], avatar.y - config.hand_offset_y


def launch_angle(angle_degrees: float, player: int) -> float:
    rad = math.radians(angle_degrees)
    # Player 2 throws toward decreasing x.
    return math.pi - rad if player == PLAYER_TWO else rad


def create_projectile(avatar: Avatar, angle_degrees: float, velocity: float, config: AvatarConfig) -> Projectile:
    x, y = throw_position(avatar, config)
    angle = launch_angle(angle_degrees, avatar.player)
    vx = math.cos(angle) * velocity
    vy = math.sin(angle) * velocity
    return Projectile(
        x=x,
        y=y,
        angle=angle,
        start_x=x,
        start_y=y,
        init_vx=vx,
        init_vy=vy,
        time=0.0,
        player=avatar.player,
    )


def position_at(projectile: Projectile, wind: float, t: float, physics: PhysicsConfig) -> tuple[float, float]:
    """Closed-form banana position at absolute flight time t."""
    x = projectile.start_x + projectile.init_vx * t + 0.5 * (wind / physics.wind_divisor) * t * t
    y = projectile.start_y + (-projectile.init_vy * t + 0.5 * physics.gravity * t * t) * physics.gravity_scale
    return x, y


def advance(projectile: Projectile, wind: float, dt: float, physics: PhysicsConfig) -> Projectile:
    t = projectile.time + dt
    x, y = position_at(projectile, wind, t, physics)
    return replace(projectile, x=x, y=y, time=t)


def current_velocity(projectile: Projectile, wind: float, physics: PhysicsConfig) -> tuple[float, float]:
    """Instantaneous (vx, vy) in screen axes; positive vy points down."""
    vx = projectile.init_vx + (wind / physics.wind_divisor) * projectile.time
    vy = -projectile.init_vy + physics.gravity * projectile.time * physics.gravity_scale
    return vx, vy


def is_descending(projectile: Projectile, physics: PhysicsConfig) -> bool:
    vy = -projectile.init_vy + physics.gravity * projectile.time * physics.gravity_scale
    return vy > 0.0


def arm_raise_angle(player: int) -> float:
    """Throwing arm angle for the animation layer."""
    return 3.0 * math.pi / 4.0 if player == PLAYER_TWO else math.pi / 4.0
