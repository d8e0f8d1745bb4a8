"""Named SVG colors available to shape descriptions."""
from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    WHITE = "white"
    BLACK = "black"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, name: str) -> "Color | None":
        """Return the color called ``name`` (case-insensitive), or ``None``."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


# Colors drawn from when a description does not restrict its palette.
DEFAULT_COLORS: tuple[Color, ...] = (
    Color.RED,
    Color.GREEN,
    Color.BLUE,
    Color.YELLOW,
    Color.MAGENTA,
    Color.CYAN,
    Color.GRAY,
)

__all__ = ["Color", "DEFAULT_COLORS"]
