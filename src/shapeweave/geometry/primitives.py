"""Points, segments and the orientation/intersection predicates."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


# Tolerance for near-parallel segments and inclusive bounds checks.
DEFAULT_EPS = 1e-10

XY = Tuple[float, float]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def _xy(self, other: Union["Point", float]) -> XY:
        if isinstance(other, Point):
            return other.x, other.y
        return float(other), float(other)

    def __add__(self, other: Union["Point", float]) -> "Point":
        ox, oy = self._xy(other)
        return Point(self.x + ox, self.y + oy)

    def __sub__(self, other: Union["Point", float]) -> "Point":
        ox, oy = self._xy(other)
        return Point(self.x - ox, self.y - oy)

    def __mul__(self, other: Union["Point", float]) -> "Point":
        ox, oy = self._xy(other)
        return Point(self.x * ox, self.y * oy)

    def __truediv__(self, other: Union["Point", float]) -> "Point":
        ox, oy = self._xy(other)
        return Point(self.x / ox, self.y / oy)

    __radd__ = __add__
    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def of(cls, value) -> "Point":
        """Coerce a ``Point`` or any 2-sequence to a ``Point``."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


def is_left(px: float, py: float, ax: float, ay: float, bx: float, by: float) -> bool:
    """Return ``True`` when ``(px, py)`` lies strictly left of the line ``a -> b``."""
    return (bx - ax) * (py - ay) - (px - ax) * (by - ay) > 0


def segment_intersection(
    a0: XY, a1: XY, b0: XY, b1: XY, eps: float = DEFAULT_EPS
) -> Optional[XY]:
    """Intersection point of segments ``a0-a1`` and ``b0-b1``.

    Solves the 2x2 system for the infinite lines and keeps the solution only if
    it lies inside both segments' coordinate bounds, inclusive up to ``eps``.
    Returns ``None`` for near-parallel segments (``|det| < eps``).
    """
    a1x = a1[1] - a0[1]
    b1x = a0[0] - a1[0]
    c1 = a1x * a0[0] + b1x * a0[1]

    a2x = b1[1] - b0[1]
    b2x = b0[0] - b1[0]
    c2 = a2x * b0[0] + b2x * b0[1]

    det = a1x * b2x - a2x * b1x
    if abs(det) < eps:
        return None

    x = (b2x * c1 - b1x * c2) / det
    y = (a1x * c2 - a2x * c1) / det
    if _within(x, y, a0, a1, eps) and _within(x, y, b0, b1, eps):
        return x, y
    return None


def _within(x: float, y: float, p: XY, q: XY, eps: float) -> bool:
    return (
        min(p[0], q[0]) - eps <= x <= max(p[0], q[0]) + eps
        and min(p[1], q[1]) - eps <= y <= max(p[1], q[1]) + eps
    )


@dataclass(frozen=True)
class Line:
    """Immutable line segment from ``start`` to ``end``."""

    start: Point
    end: Point

    def __add__(self, vector: Point) -> "Line":
        return Line(self.start + vector, self.end + vector)

    def intersection(self, other: "Line", eps: float = DEFAULT_EPS) -> Optional[Point]:
        hit = segment_intersection(
            (self.start.x, self.start.y),
            (self.end.x, self.end.y),
            (other.start.x, other.start.y),
            (other.end.x, other.end.y),
            eps,
        )
        return None if hit is None else Point(*hit)

    def is_left(self, point: Point) -> bool:
        return is_left(point.x, point.y, self.start.x, self.start.y, self.end.x, self.end.y)


__all__ = ["DEFAULT_EPS", "Point", "Line", "is_left", "segment_intersection"]
