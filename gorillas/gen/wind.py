from __future__ import annotations

from ..sim.rng import RandomSource, randint

WIND_BASE_MIN = -4
WIND_BASE_MAX = 5
WIND_GUST_MAX = 10


def generate_wind(rng: RandomSource) -> int:
    # Base in [-4, 5]; one round in three gets a gust pushing further out.
    wind = randint(rng, 1, 10) - 5
    if randint(rng, 1, 3) == 1:
        gust = randint(rng, 1, WIND_GUST_MAX)
        wind = wind + gust if wind >= 0 else wind - gust
    return wind


def wind_bounds() -> tuple[int, int]:
    return WIND_BASE_MIN - WIND_GUST_MAX, WIND_BASE_MAX + WIND_GUST_MAX
