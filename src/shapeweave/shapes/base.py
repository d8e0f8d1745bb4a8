"""Common interface shared by every shape variant."""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, NamedTuple, Optional, Sequence

if TYPE_CHECKING:
    from ..sampling.philox import PhiloxRandom
    from .polygons import ConvexPolygon


class BoundingBox(NamedTuple):
    """Axis-aligned box in canvas coordinates (``top <= bottom``)."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def within(self, width: float, height: float, eps: float = 0.0) -> bool:
        return (
            self.left >= -eps
            and self.top >= -eps
            and self.right <= width + eps
            and self.bottom <= height + eps
        )

    def disjoint(self, other: "BoundingBox") -> bool:
        return (
            self.right < other.left
            or other.right < self.left
            or self.bottom < other.top
            or other.bottom < self.top
        )


_QUARTER_TURNS = ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))


def cos_sin_degrees(degrees: float) -> tuple[float, float]:
    """``(cos, sin)`` of an angle in degrees, exact on quarter turns."""
    d = float(degrees) % 360.0
    if d % 90.0 == 0.0:
        return _QUARTER_TURNS[int(d // 90.0)]
    r = math.radians(degrees)
    return math.cos(r), math.sin(r)


class Shape(ABC):
    """Immutable 2-D shape.

    Transformations return new instances; derived geometry is memoised on first
    access.  The variant set is closed: :class:`~shapeweave.shapes.Polygon`,
    :class:`~shapeweave.shapes.ConvexPolygon`, :class:`~shapeweave.shapes.Circle`,
    :class:`~shapeweave.shapes.SemiCircle` and :class:`~shapeweave.shapes.Ellipse`.
    """

    @abstractmethod
    def moved(self, vector: Sequence[float]) -> "Shape":
        ...

    @abstractmethod
    def scaled(self, factor: float) -> "Shape":
        ...

    @abstractmethod
    def rotated(self, degrees: float) -> "Shape":
        ...

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        ...

    @abstractmethod
    def circumscribed_convex_polygon(self) -> "ConvexPolygon":
        """Convex polygon containing the shape, used for every overlap test."""

    def scaled_to_unit_size(self) -> "Shape":
        box = self.bounding_box()
        return self.scaled(1.0 / max(box.width, box.height))

    def rotated_randomly(self, rotation: tuple[float, float], rng: "PhiloxRandom") -> "Shape":
        lo, hi = rotation
        return self.rotated(rng.uniform(lo, hi))

    def positioned_randomly(
        self, width: float, height: float, rng: "PhiloxRandom"
    ) -> Optional["Shape"]:
        """Translate uniformly so the bounding box lands inside ``[0, width] x [0, height]``.

        Returns ``None`` when the box is wider or taller than the canvas.
        """
        box = self.bounding_box()
        if box.width > width or box.height > height:
            return None
        dx = rng.uniform(-box.left, width - box.right)
        dy = rng.uniform(-box.top, height - box.bottom)
        return self.moved((dx, dy))


__all__ = ["BoundingBox", "Shape", "cos_sin_degrees"]
