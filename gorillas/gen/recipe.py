from __future__ import annotations

import dataclasses
import hashlib
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import CityConfig
    from ..sim.world import Avatar, City


def canonical_json_bytes(obj: Any) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def city_digest(city: City) -> str:
    """Hash of the skyline geometry (windows and holes excluded)."""
    layout = {"slope": city.slope, "buildings": [b.layout_dict() for b in city.buildings]}
    return sha256_hex(canonical_json_bytes(layout))


def build_recipe(
    *,
    seed: int | None,
    round_no: int = 1,
    city_index: int = 0,
    city_config: CityConfig,
    city: City,
    avatars: tuple[Avatar, Avatar],
    wind: int,
) -> dict[str, Any]:
    recipe: dict[str, Any] = {
        "schema_version": 1,
        "generator": {
            "id": str(city.meta.get("generator", "unknown")),
            "config": dataclasses.asdict(city_config),
        },
        "seed": int(seed) if seed is not None else None,
        "round": int(round_no),
        "city_index": int(city_index),
        "slope": city.slope,
        "buildings": len(city),
        "avatars": [a.to_dict() for a in avatars],
        "wind": wind,
        "hashes": {},
    }
    recipe_for_hash = {k: v for k, v in recipe.items() if k != "hashes"}
    recipe["hashes"] = {
        "recipe": sha256_hex(canonical_json_bytes(recipe_for_hash)),
        "city": city_digest(city),
    }
    return recipe
