from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    AVATAR_HEIGHT,
    AVATAR_WIDTH,
    BOTTOM_LINE,
    BUILDING_COLORS,
    GAME_HEIGHT,
    GAME_WIDTH,
    GRAVITY,
    GRAVITY_SCALE,
    SUN_RADIUS,
    SUN_X,
    SUN_Y,
    TIME_STEP_S,
    WIND_DIVISOR,
)


@dataclass(frozen=True)
class CityConfig:
    width: int = GAME_WIDTH
    bottom_line: int = BOTTOM_LINE
    start_x: int = 2
    seam: int = 2  # Gap between neighbouring buildings
    default_width: int = 37  # Widths are drawn from [default_width, 2 * default_width]
    height_step: int = 10
    random_height: int = 120
    min_height: int = 10
    max_height: int = 60  # Roof must stay this far (plus an avatar) below the top
    avatar_height: int = AVATAR_HEIGHT
    low_start_height: int = 15
    high_start_height: int = 130
    window_margin: int = 3
    window_spacing_h: int = 10
    window_spacing_v: int = 15
    window_floor: int = 7  # Lowest window row, measured up from the ground line
    window_lit_prob: float = 0.75
    colors: tuple[str, ...] = BUILDING_COLORS

    def __post_init__(self) -> None:
        if self.width <= self.start_x:
            raise ValueError(f"city width ({self.width}) must exceed start_x ({self.start_x})")
        if self.default_width <= 0:
            raise ValueError(f"default_width must be positive, got {self.default_width}")
        if not self.colors:
            raise ValueError("colors must not be empty")


@dataclass(frozen=True)
class AvatarConfig:
    width: int = AVATAR_WIDTH
    height: int = AVATAR_HEIGHT
    x_adjust: float = 0.5
    y_adjust: float = 35.0
    # Throwing hand offset from the avatar anchor, indexed by player - 1.
    hand_offset_x: tuple[float, float] = (-8.0, 8.0)
    hand_offset_y: float = 4.0 + 3.0
    # Hit box margins around the anchor point.
    box_left: float = 15.0
    box_right: float = 14.0
    box_top: float = 1.0
    box_bottom: float = 28.0


@dataclass(frozen=True)
class PhysicsConfig:
    gravity: float = GRAVITY
    gravity_scale: float = GRAVITY_SCALE
    wind_divisor: float = WIND_DIVISOR
    time_step: float = TIME_STEP_S
    time_scale: float = 1.0  # Debug pacing multiplier; the trajectory curve is unchanged

    def __post_init__(self) -> None:
        if self.time_step <= 0.0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.time_scale <= 0.0:
            raise ValueError(f"time_scale must be positive, got {self.time_scale}")
        if self.wind_divisor == 0.0:
            raise ValueError("wind_divisor must be non-zero")

    @property
    def dt(self) -> float:
        return self.time_step * self.time_scale


@dataclass(frozen=True)
class ArenaConfig:
    width: int = GAME_WIDTH
    height: int = GAME_HEIGHT
    ground_margin: float = 7.0
    left_margin: float = 3.0
    right_margin: float = 10.0
    sun_x: float = SUN_X
    sun_y: float = SUN_Y
    sun_radius: float = SUN_RADIUS
    # Collision sampling around the banana.
    look_x_base: float = 8.0
    look_x_step: float = 4.0
    look_y_step: float = 6.0
    look_x_sentinel: float = 4.0


@dataclass(frozen=True)
class MatchConfig:
    city: CityConfig = field(default_factory=CityConfig)
    avatar: AvatarConfig = field(default_factory=AvatarConfig)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
