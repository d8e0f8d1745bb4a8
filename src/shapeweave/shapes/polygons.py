from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Sequence

import numpy as np

from ..geometry import polygons as geom
from ..geometry.primitives import DEFAULT_EPS
from .base import BoundingBox, Shape, cos_sin_degrees


def _frozen_vertices(vertices) -> np.ndarray:
    arr = geom.as_vertices(vertices).copy()
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False, repr=False)
class Polygon(Shape):
    """Simple polygon given by its ordered vertices.

    ``vertices`` is stored as a read-only ``(N, 2)`` float array.  Scaling and
    rotation pivot on the vertex mean.
    """

    vertices: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "vertices", _frozen_vertices(self.vertices))

    def __len__(self) -> int:
        return int(self.vertices.shape[0])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.vertices.tolist()!r})"

    @cached_property
    def centroid(self) -> np.ndarray:
        return geom.vertex_centroid(self.vertices)

    @cached_property
    def signed_area(self) -> float:
        return geom.signed_area(self.vertices)

    @cached_property
    def area(self) -> float:
        return abs(self.signed_area)

    @cached_property
    def convex_hull(self) -> "ConvexPolygon":
        return ConvexPolygon(geom.convex_hull(self.vertices))

    def contains(self, point: Sequence[float]) -> bool:
        return geom.contains_point(self.vertices, point)

    def moved(self, vector: Sequence[float]) -> "Polygon":
        dx, dy = vector
        return type(self)(self.vertices + np.array([dx, dy], dtype=float))

    def scaled(self, factor: float) -> "Polygon":
        c = self.centroid
        return type(self)(c + (self.vertices - c) * float(factor))

    def rotated(self, degrees: float) -> "Polygon":
        cos_d, sin_d = cos_sin_degrees(degrees)
        c = self.centroid
        rel = self.vertices - c
        rot = np.array([[cos_d, -sin_d], [sin_d, cos_d]], dtype=float)
        return type(self)(c + rel @ rot.T)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(*geom.bounds(self.vertices))

    def circumscribed_convex_polygon(self) -> "ConvexPolygon":
        return self.convex_hull


@dataclass(frozen=True, eq=False, repr=False)
class ConvexPolygon(Polygon):
    """Convex polygon whose vertices are kept sorted by angle around their mean.

    The canonical order lets any two instances be intersected directly.
    """

    def __post_init__(self):
        object.__setattr__(self, "vertices", _frozen_vertices(geom.sort_ccw(self.vertices)))

    @cached_property
    def convex_hull(self) -> "ConvexPolygon":
        return self

    def intersection(self, other: "ConvexPolygon", eps: float = DEFAULT_EPS) -> "ConvexPolygon":
        return ConvexPolygon(geom.convex_intersection_vertices(self.vertices, other.vertices, eps))

    def intersection_ratio(self, other: "ConvexPolygon", eps: float = DEFAULT_EPS) -> float:
        return geom.overlap_ratio(self.vertices, other.vertices, eps)


def regular_polygon(vertex_count: int, radius: float) -> ConvexPolygon:
    """Regular ``vertex_count``-gon of circumradius ``radius`` centred on ``(radius, radius)``."""
    if vertex_count < 3:
        raise ValueError(f"regular polygon needs at least 3 vertices, got {vertex_count}")
    theta = 2.0 * np.pi * np.arange(vertex_count) / vertex_count - np.pi / 2.0
    xy = np.stack([np.cos(theta), np.sin(theta)], axis=1) * radius + radius
    return ConvexPolygon(xy)


__all__ = ["Polygon", "ConvexPolygon", "regular_polygon"]
