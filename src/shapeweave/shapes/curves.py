"""Curved shapes approximated by circumscribed N-gons for overlap tests."""
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property
from typing import Sequence

import numpy as np

from ..geometry.primitives import Point
from .base import BoundingBox, Shape, cos_sin_degrees
from .polygons import ConvexPolygon

DEFAULT_VERTEX_COUNT = 100


def _check_count(vertex_count: int, minimum: int) -> int:
    vertex_count = int(vertex_count)
    if vertex_count < minimum:
        raise ValueError(f"vertex_count must be >= {minimum}, got {vertex_count}")
    return vertex_count


@dataclass(frozen=True, eq=False)
class Circle(Shape):
    center: Point
    radius: float
    vertex_count: int = DEFAULT_VERTEX_COUNT

    def __post_init__(self):
        object.__setattr__(self, "center", Point.of(self.center))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "vertex_count", _check_count(self.vertex_count, 3))

    @cached_property
    def approximate_hull(self) -> ConvexPolygon:
        # Regular N-gon whose inscribed circle has the requested radius.
        n = self.vertex_count
        a = 2.0 * math.pi / n
        r = self.radius / math.cos(a / 2.0)
        theta = -a * np.arange(n)
        xy = np.stack([self.center.x + r * np.cos(theta), self.center.y + r * np.sin(theta)], axis=1)
        return ConvexPolygon(xy)

    def moved(self, vector: Sequence[float]) -> "Circle":
        return Circle(self.center + Point.of(vector), self.radius, self.vertex_count)

    def scaled(self, factor: float) -> "Circle":
        return Circle(self.center, self.radius * factor, self.vertex_count)

    def rotated(self, degrees: float) -> "Circle":
        return self

    def bounding_box(self) -> BoundingBox:
        return self.approximate_hull.bounding_box()

    def circumscribed_convex_polygon(self) -> ConvexPolygon:
        return self.approximate_hull


@dataclass(frozen=True, eq=False)
class SemiCircle(Shape):
    """Half disc on ``center``; ``orientation`` (degrees) points at the end of its diameter.

    The curved side spans the half turn ending at ``orientation``.
    """

    center: Point
    radius: float
    orientation: float = 0.0
    vertex_count: int = DEFAULT_VERTEX_COUNT

    def __post_init__(self):
        object.__setattr__(self, "center", Point.of(self.center))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "orientation", float(self.orientation))
        object.__setattr__(self, "vertex_count", _check_count(self.vertex_count, 4))

    @property
    def end(self) -> Point:
        cos_o, sin_o = cos_sin_degrees(self.orientation)
        return Point(self.center.x + self.radius * cos_o, self.center.y + self.radius * sin_o)

    @property
    def start(self) -> Point:
        return self.center * 2.0 - self.end

    @cached_property
    def approximate_hull(self) -> ConvexPolygon:
        n = self.vertex_count // 2
        a = math.pi / n
        r = self.radius / math.cos(a)
        theta = math.radians(self.orientation) - math.pi + a * np.arange(n + 1)
        xy = np.stack([self.center.x + r * np.cos(theta), self.center.y + r * np.sin(theta)], axis=1)
        return ConvexPolygon(xy)

    def moved(self, vector: Sequence[float]) -> "SemiCircle":
        return SemiCircle(self.center + Point.of(vector), self.radius, self.orientation, self.vertex_count)

    def scaled(self, factor: float) -> "SemiCircle":
        return SemiCircle(self.center, self.radius * factor, self.orientation, self.vertex_count)

    def rotated(self, degrees: float) -> "SemiCircle":
        return SemiCircle(self.center, self.radius, self.orientation + degrees, self.vertex_count)

    def bounding_box(self) -> BoundingBox:
        return self.approximate_hull.bounding_box()

    def circumscribed_convex_polygon(self) -> ConvexPolygon:
        return self.approximate_hull


@dataclass(frozen=True, eq=False)
class Ellipse(Shape):
    center: Point
    radius_x: float
    radius_y: float
    rotation: float = 0.0
    vertex_count: int = DEFAULT_VERTEX_COUNT

    def __post_init__(self):
        object.__setattr__(self, "center", Point.of(self.center))
        object.__setattr__(self, "radius_x", float(self.radius_x))
        object.__setattr__(self, "radius_y", float(self.radius_y))
        object.__setattr__(self, "rotation", float(self.rotation))
        object.__setattr__(self, "vertex_count", _check_count(self.vertex_count, 3))

    @cached_property
    def approximate_hull(self) -> ConvexPolygon:
        # Circle N-gon on radius_x, squashed along y, then rotated into place.
        n = self.vertex_count
        a = 2.0 * math.pi / n
        r = self.radius_x / math.cos(a / 2.0)
        theta = -a * np.arange(n)
        x = r * np.cos(theta)
        y = r * np.sin(theta) * (self.radius_y / self.radius_x)
        cos_r, sin_r = cos_sin_degrees(self.rotation)
        xy = np.stack(
            [self.center.x + x * cos_r - y * sin_r, self.center.y + x * sin_r + y * cos_r], axis=1
        )
        return ConvexPolygon(xy)

    def moved(self, vector: Sequence[float]) -> "Ellipse":
        return Ellipse(
            self.center + Point.of(vector), self.radius_x, self.radius_y, self.rotation, self.vertex_count
        )

    def scaled(self, factor: float) -> "Ellipse":
        return Ellipse(
            self.center, self.radius_x * factor, self.radius_y * factor, self.rotation, self.vertex_count
        )

    def rotated(self, degrees: float) -> "Ellipse":
        return Ellipse(self.center, self.radius_x, self.radius_y, self.rotation + degrees, self.vertex_count)

    def bounding_box(self) -> BoundingBox:
        return self.approximate_hull.bounding_box()

    def circumscribed_convex_polygon(self) -> ConvexPolygon:
        return self.approximate_hull


__all__ = ["DEFAULT_VERTEX_COUNT", "Circle", "SemiCircle", "Ellipse"]
