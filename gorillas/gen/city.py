from __future__ import annotations

import logging
from enum import IntEnum

from ..config import CityConfig
from ..sim.rng import RandomSource, randint
from ..sim.world import Building, City, Window

logger = logging.getLogger(__name__)


class Slope(IntEnum):
    RISING = 1
    FALLING = 2
    V_SHAPE = 3
    V_SHAPE_ALT = 4
    V_SHAPE_WIDE = 5
    INVERTED_V = 6


_V_SHAPES = (Slope.V_SHAPE, Slope.V_SHAPE_ALT, Slope.V_SHAPE_WIDE)


def initial_height(slope: Slope, config: CityConfig) -> int:
    if slope in (Slope.FALLING, Slope.INVERTED_V):
        return config.high_start_height
    return config.low_start_height


def next_height(current: int, slope: Slope, x: float, config: CityConfig) -> int:
    step = config.height_step
    right_half = x > config.width / 2
    if slope == Slope.RISING:
        return current + step
    if slope == Slope.FALLING:
        return current - step
    if slope in _V_SHAPES:
        return current - 2 * step if right_half else current + 2 * step
    # Inverted V
    return current + 2 * step if right_half else current - 2 * step


def building_width(x: int, config: CityConfig, rng: RandomSource) -> int:
    width = randint(rng, config.default_width, 2 * config.default_width)
    return min(width, config.width - x - config.seam)


def building_height(base: int, config: CityConfig, rng: RandomSource) -> int:
    height = randint(rng, 0, config.random_height) + base
    if height < config.min_height:
        height = config.min_height
    # Keep room above the roof for an avatar.
    clearance = config.max_height + config.avatar_height
    if config.bottom_line - height <= clearance:
        height = clearance - 5
    return height


def generate_windows(x: int, width: int, height: int, config: CityConfig, rng: RandomSource) -> tuple[Window, ...]:
    windows: list[Window] = []
    col = x + config.window_margin
    while col < x + width - config.window_margin:
        row = height - config.window_margin
        while row >= config.window_floor:
            lit = rng.random() < config.window_lit_prob
            windows.append(Window(x=float(col), y=float(config.bottom_line - row), lit=bool(lit)))
            row -= config.window_spacing_v
        col += config.window_spacing_h
    return tuple(windows)


def generate_city(config: CityConfig, rng: RandomSource) -> City:
    """
    Build a skyline left to right:
    1. Pick a slope pattern and its starting height.
    2. For each building, move the running height along the slope.
    3. Draw width (clipped to the remaining space), height (floored and capped), color.
    4. Lay out windows.
    Buildings are separated by a fixed seam until the play width is used up.
    """
    slope = Slope(randint(rng, 1, 6))
    running = initial_height(slope, config)
    x = config.start_x
    buildings: list[Building] = []

    while x < config.width:
        running = next_height(running, slope, x, config)
        width = building_width(x, config, rng)
        if width < 1:
            # Sliver left at the right edge; nothing fits.
            break
        height = building_height(running, config, rng)
        color = config.colors[randint(rng, 0, len(config.colors) - 1)]
        windows = generate_windows(x, width, height, config, rng)
        buildings.append(
            Building(
                x=float(x),
                y=float(config.bottom_line - height),
                width=float(width),
                height=float(height),
                color=color,
                windows=windows,
            )
        )
        x += width + config.seam

    logger.debug(f"Generated city: slope={slope.name} buildings={len(buildings)}")
    return City(buildings=tuple(buildings), slope=int(slope), meta={"generator": "skyline_v1"})
