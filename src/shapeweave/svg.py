"""SVG markup for generated images."""
from __future__ import annotations

from functools import singledispatch
from typing import Optional

from .colors import Color
from .config.schema import Configuration
from .shapes import Circle, Ellipse, Polygon, SemiCircle, Shape
from .types import GeneratedImage


def _fmt(value: float) -> str:
    return f"{float(value):.6g}"


def _fill(color: Optional[Color]) -> str:
    return f' fill="{color.value}"' if color is not None else ""


@singledispatch
def shape_to_svg(shape: Shape, color: Optional[Color] = None) -> str:
    raise TypeError(f"no SVG template for {type(shape).__name__}")


@shape_to_svg.register
def _(shape: Polygon, color: Optional[Color] = None) -> str:
    commands = [
        f"{'M' if i == 0 else 'L'} {_fmt(x)} {_fmt(y)}" for i, (x, y) in enumerate(shape.vertices)
    ]
    return f'<path d="{" ".join(commands)} Z"{_fill(color)} />'


@shape_to_svg.register
def _(shape: Circle, color: Optional[Color] = None) -> str:
    c = shape.center
    return f'<circle cx="{_fmt(c.x)}" cy="{_fmt(c.y)}" r="{_fmt(shape.radius)}"{_fill(color)} />'


@shape_to_svg.register
def _(shape: SemiCircle, color: Optional[Color] = None) -> str:
    start, end = shape.start, shape.end
    r = _fmt(shape.radius)
    return (
        f'<path d="M {_fmt(start.x)} {_fmt(start.y)} A {r} {r} 0 0 1 {_fmt(end.x)} {_fmt(end.y)} Z"'
        f"{_fill(color)} />"
    )


@shape_to_svg.register
def _(shape: Ellipse, color: Optional[Color] = None) -> str:
    c = shape.center
    cx, cy = _fmt(c.x), _fmt(c.y)
    return (
        f'<ellipse cx="{cx}" cy="{cy}" rx="{_fmt(shape.radius_x)}" ry="{_fmt(shape.radius_y)}" '
        f'transform="rotate({_fmt(shape.rotation)} {cx} {cy})"{_fill(color)} />'
    )


def render_svg(image: GeneratedImage, configuration: Configuration) -> str:
    w, h = _fmt(configuration.width), _fmt(configuration.height)
    body = "\n".join(f"  {shape_to_svg(p.shape, p.color)}" for p in image.shapes)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
        f'viewBox="0 0 {w} {h}" style="background-color: {configuration.background_color.value}">\n'
        f"{body}\n"
        "</svg>\n"
    )


__all__ = ["shape_to_svg", "render_svg"]
