from .city import Slope, generate_city
from .placement import place_avatars, select_building_index
from .recipe import build_recipe, city_digest
from .wind import generate_wind, wind_bounds

__all__ = [
    "Slope",
    "build_recipe",
    "city_digest",
    "generate_city",
    "generate_wind",
    "place_avatars",
    "select_building_index",
    "wind_bounds",
]
