"""Plain records produced by the placement engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .colors import Color
from .shapes import Shape


@dataclass(frozen=True)
class PlacedShape:
    """A positioned shape with its fill color and caption fragment."""

    shape: Shape
    color: Color
    caption: str


@dataclass
class GeneratedImage:
    shapes: List[PlacedShape] = field(default_factory=list)
    requested_caption: str = ""
    full_caption: str = ""
    attempts: int = 1


__all__ = ["PlacedShape", "GeneratedImage"]
