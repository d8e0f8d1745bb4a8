"""Shape variants and their shared interface."""

from .base import BoundingBox, Shape, cos_sin_degrees
from .polygons import ConvexPolygon, Polygon, regular_polygon
from .curves import DEFAULT_VERTEX_COUNT, Circle, Ellipse, SemiCircle

__all__ = [
    "BoundingBox",
    "Shape",
    "cos_sin_degrees",
    "Polygon",
    "ConvexPolygon",
    "regular_polygon",
    "DEFAULT_VERTEX_COUNT",
    "Circle",
    "SemiCircle",
    "Ellipse",
]
