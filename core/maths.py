"""Math utilities for 2D points, sizes, and screen/world rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from pygame.math import Vector2 as _Vector2

# Export Vector2 alias
Vector2 = _Vector2


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]; lo wins when the bounds are inverted."""
    return max(lo, min(hi, value))


def as_vector(pos: Vector2 | tuple[float, float], y: float | None = None) -> Vector2:
    """Accept a Vector2, an (x, y) pair, or two scalars and return a new Vector2."""
    if isinstance(pos, Vector2):
        return Vector2(pos.x, pos.y)
    if y is None:
        px, py = pos
        return Vector2(px, py)
    return Vector2(pos, y)


@dataclass(frozen=True)
class Size2:
    w: float
    h: float

    @property
    def half(self) -> Vector2:
        return Vector2(self.w / 2.0, self.h / 2.0)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_corners(cls, a: Vector2, b: Vector2) -> "Rect":
        min_x, max_x = min(a.x, b.x), max(a.x, b.x)
        min_y, max_y = min(a.y, b.y), max(a.y, b.y)
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.w

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.h

    @property
    def width(self) -> float:
        return self.w

    @property
    def height(self) -> float:
        return self.h
