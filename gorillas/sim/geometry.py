from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def point_in_circle(px: float, py: float, cx: float, cy: float, radius: float) -> bool:
    # Boundary counts as inside.
    return distance(px, py, cx, cy) <= radius


def point_in_rect(px: float, py: float, rx: float, ry: float, width: float, height: float) -> bool:
    return rx <= px <= rx + width and ry <= py <= ry + height


def clamped_distance(cx: float, cy: float, rx: float, ry: float, width: float, height: float) -> float:
    """Distance from (cx, cy) to the closest point of the rectangle."""
    closest_x = clamp(cx, rx, rx + width)
    closest_y = clamp(cy, ry, ry + height)
    return distance(cx, cy, closest_x, closest_y)


def circle_intersects_rect(
    cx: float, cy: float, radius: float, rx: float, ry: float, width: float, height: float
) -> bool:
    return clamped_distance(cx, cy, rx, ry, width, height) <= radius
