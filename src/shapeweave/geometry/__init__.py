"""Geometry kernel: primitives and convex polygon algorithms."""

from .primitives import DEFAULT_EPS, Line, Point, is_left, segment_intersection
from .polygons import (
    area,
    contains_point,
    contains_points,
    convex_hull,
    convex_intersection_vertices,
    edge_intersections,
    overlap_ratio,
    signed_area,
    sort_ccw,
    vertex_centroid,
)

__all__ = [
    "DEFAULT_EPS",
    "Line",
    "Point",
    "is_left",
    "segment_intersection",
    "area",
    "contains_point",
    "contains_points",
    "convex_hull",
    "convex_intersection_vertices",
    "edge_intersections",
    "overlap_ratio",
    "signed_area",
    "sort_ccw",
    "vertex_centroid",
]
