from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .geometry import point_in_circle, point_in_rect


@dataclass(frozen=True)
class Window:
    x: float
    y: float
    lit: bool

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "lit": self.lit}


@dataclass(frozen=True)
class Explosion:
    x: float
    y: float
    radius: float

    def contains(self, px: float, py: float) -> bool:
        return point_in_circle(px, py, self.x, self.y, self.radius)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "radius": self.radius}


@dataclass(frozen=True)
class Building:
    x: float
    y: float  # Roof; the building extends down to y + height
    width: float
    height: float
    color: str
    windows: tuple[Window, ...] = ()
    explosions: tuple[Explosion, ...] = ()

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        return point_in_rect(px, py, self.x, self.y, self.width, self.height)

    def in_destroyed_area(self, px: float, py: float) -> bool:
        return any(e.contains(px, py) for e in self.explosions)

    def is_solid_at(self, px: float, py: float) -> bool:
        return self.contains(px, py) and not self.in_destroyed_area(px, py)

    def with_explosion(self, explosion: Explosion) -> Building:
        windows = tuple(w for w in self.windows if not explosion.contains(w.x, w.y))
        return replace(self, windows=windows, explosions=(*self.explosions, explosion))

    def layout_dict(self) -> dict[str, Any]:
        # Geometry only; windows and holes change during a round.
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height, "color": self.color}

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.layout_dict(),
            "windows": [w.to_dict() for w in self.windows],
            "explosions": [e.to_dict() for e in self.explosions],
        }


@dataclass(frozen=True)
class City:
    buildings: tuple[Building, ...]
    slope: int = 0
    meta: dict[str, Any] = field(default_factory=dict, compare=False)

    def __len__(self) -> int:
        return len(self.buildings)

    def __iter__(self):
        return iter(self.buildings)

    def __getitem__(self, idx: int) -> Building:
        return self.buildings[idx]

    def solid_at(self, px: float, py: float) -> bool:
        return any(b.is_solid_at(px, py) for b in self.buildings)

    def with_buildings(self, buildings: tuple[Building, ...]) -> City:
        return replace(self, buildings=buildings)

    def to_dict(self) -> dict[str, Any]:
        return {"slope": self.slope, "buildings": [b.to_dict() for b in self.buildings]}


@dataclass(frozen=True)
class Avatar:
    x: float
    y: float
    player: int

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "player": self.player}
