"""Shape descriptions: parameter ranges that sample concrete colored shapes.

A description is a frozen pydantic model tagged by ``kind``.  Sampling draws
every dimension from its range (in field order), builds the origin-anchored
base shape, rotates it by an angle drawn from ``rotation`` and finally draws
the color, all from the same :class:`~shapeweave.sampling.PhiloxRandom`.
"""
from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .colors import DEFAULT_COLORS, Color
from .config.ranges import IntRange, PositiveRange, Range
from .sampling.philox import PhiloxRandom
from .shapes import Circle, ConvexPolygon, Ellipse, Polygon, SemiCircle, Shape, regular_polygon
from .shapes.curves import DEFAULT_VERTEX_COUNT

# Unit pentagon with its apex at the top, inscribed in the unit square.
UNIT_PENTAGON = np.array(
    [
        [0.000000, 0.363271],
        [0.190983, 0.951056],
        [0.809017, 0.951056],
        [1.000000, 0.363271],
        [0.500000, 0.000000],
    ],
    dtype=float,
)


def _full_turn() -> Range:
    return Range(lower=0.0, upper=360.0)


class BaseDescription(BaseModel):
    rotation: Range = Field(default_factory=_full_turn)
    allowed_colors: Optional[Tuple[Color, ...]] = None
    caption: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    shape_name: ClassVar[str] = "shape"

    @field_validator("allowed_colors")
    @classmethod
    def _non_empty(cls, v):
        if v is not None and len(v) == 0:
            raise ValueError("allowed_colors must not be empty; omit it to use the default palette")
        return v

    @property
    def colors(self) -> Tuple[Color, ...]:
        return self.allowed_colors if self.allowed_colors is not None else DEFAULT_COLORS

    @property
    def label(self) -> str:
        """Text naming this description in a requested caption."""
        if self.caption:
            return self.caption
        if self.allowed_colors is not None and len(self.allowed_colors) == 1:
            return f"{self.allowed_colors[0].value} {self.shape_name}"
        return self.shape_name

    def restricted_to(self, color: Optional[Color] = None, caption: Optional[str] = None):
        """Copy pinned to a single color and/or carrying a caption override."""
        update = {}
        if color is not None:
            update["allowed_colors"] = (color,)
        if caption is not None:
            update["caption"] = caption
        return self.model_copy(update=update)

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        raise NotImplementedError

    def sample_shape(self, rng: PhiloxRandom) -> Shape:
        return self.base_shape(rng).rotated_randomly(self.rotation.as_tuple(), rng)

    def sample_colored_shape(self, rng: PhiloxRandom) -> Tuple[Shape, Color, str]:
        shape = self.sample_shape(rng)
        color = rng.choice(self.colors)
        caption = self.caption or f"{color.value} {self.shape_name}"
        return shape, color, caption


class TriangleDescription(BaseDescription):
    kind: Literal["triangle"] = "triangle"
    width: PositiveRange
    height: PositiveRange

    shape_name: ClassVar[str] = "triangle"

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        w = self.width.sample(rng)
        h = self.height.sample(rng)
        return ConvexPolygon([(0.0, h), (w, h), (w / 2.0, 0.0)])


class SquareDescription(BaseDescription):
    kind: Literal["square"] = "square"
    size: PositiveRange

    shape_name: ClassVar[str] = "square"

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        s = self.size.sample(rng)
        return ConvexPolygon([(0.0, 0.0), (0.0, s), (s, s), (s, 0.0)])


class RectangleDescription(BaseDescription):
    kind: Literal["rectangle"] = "rectangle"
    width: PositiveRange
    height: PositiveRange

    shape_name: ClassVar[str] = "rectangle"

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        w = self.width.sample(rng)
        h = self.height.sample(rng)
        return ConvexPolygon([(0.0, 0.0), (0.0, h), (w, h), (w, 0.0)])


class PentagonDescription(BaseDescription):
    kind: Literal["pentagon"] = "pentagon"
    size: PositiveRange

    shape_name: ClassVar[str] = "pentagon"

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        s = self.size.sample(rng)
        return ConvexPolygon(UNIT_PENTAGON).scaled(s)


class RegularPolygonDescription(BaseDescription):
    kind: Literal["regular_polygon"] = "regular_polygon"
    vertex_count: IntRange
    radius: PositiveRange

    shape_name: ClassVar[str] = "regular polygon"

    @field_validator("vertex_count")
    @classmethod
    def _at_least_triangle(cls, v: IntRange) -> IntRange:
        if v.lower < 3:
            raise ValueError("a regular polygon needs at least 3 vertices")
        return v

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        k = self.vertex_count.sample(rng)
        r = self.radius.sample(rng)
        return regular_polygon(k, r)


class CrossDescription(BaseDescription):
    kind: Literal["cross"] = "cross"
    width: PositiveRange
    height: PositiveRange
    thickness: PositiveRange

    shape_name: ClassVar[str] = "cross"

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        w = self.width.sample(rng)
        h = self.height.sample(rng)
        # Bars wider than the cross itself collapse into a rectangle outline.
        t = min(self.thickness.sample(rng), w, h)
        x0, x1 = (w - t) / 2.0, (w + t) / 2.0
        y0, y1 = (h - t) / 2.0, (h + t) / 2.0
        return Polygon(
            [
                (x0, 0.0), (x0, y0), (0.0, y0), (0.0, y1),
                (x0, y1), (x0, h), (x1, h), (x1, y1),
                (w, y1), (w, y0), (x1, y0), (x1, 0.0),
            ]
        )


class CircleDescription(BaseDescription):
    kind: Literal["circle"] = "circle"
    radius: PositiveRange
    vertex_count: int = Field(default=DEFAULT_VERTEX_COUNT, ge=3)

    shape_name: ClassVar[str] = "circle"

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        return Circle((0.0, 0.0), self.radius.sample(rng), self.vertex_count)


class SemiCircleDescription(BaseDescription):
    kind: Literal["semicircle"] = "semicircle"
    radius: PositiveRange
    vertex_count: int = Field(default=DEFAULT_VERTEX_COUNT, ge=4)

    shape_name: ClassVar[str] = "semicircle"

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        return SemiCircle((0.0, 0.0), self.radius.sample(rng), 0.0, self.vertex_count)


class EllipseDescription(BaseDescription):
    kind: Literal["ellipse"] = "ellipse"
    radius_x: PositiveRange
    radius_y: PositiveRange
    vertex_count: int = Field(default=DEFAULT_VERTEX_COUNT, ge=3)

    shape_name: ClassVar[str] = "ellipse"

    def base_shape(self, rng: PhiloxRandom) -> Shape:
        rx = self.radius_x.sample(rng)
        ry = self.radius_y.sample(rng)
        return Ellipse((0.0, 0.0), rx, ry, 0.0, self.vertex_count)


Description = Annotated[
    Union[
        TriangleDescription,
        SquareDescription,
        RectangleDescription,
        PentagonDescription,
        RegularPolygonDescription,
        CrossDescription,
        CircleDescription,
        SemiCircleDescription,
        EllipseDescription,
    ],
    Field(discriminator="kind"),
]

DESCRIPTION_TYPES = {
    cls.model_fields["kind"].default: cls
    for cls in (
        TriangleDescription,
        SquareDescription,
        RectangleDescription,
        PentagonDescription,
        RegularPolygonDescription,
        CrossDescription,
        CircleDescription,
        SemiCircleDescription,
        EllipseDescription,
    )
}

description_adapter: TypeAdapter = TypeAdapter(Description)
description_groups_adapter: TypeAdapter = TypeAdapter(list[list[Description]])


__all__ = [
    "BaseDescription",
    "TriangleDescription",
    "SquareDescription",
    "RectangleDescription",
    "PentagonDescription",
    "RegularPolygonDescription",
    "CrossDescription",
    "CircleDescription",
    "SemiCircleDescription",
    "EllipseDescription",
    "Description",
    "DESCRIPTION_TYPES",
    "description_adapter",
    "description_groups_adapter",
]
