"""shapeweave top-level API.

External users can simply ``from shapeweave import Generator, load_configuration``.
"""

from .colors import DEFAULT_COLORS, Color
from .config.loader import dump_configuration, load_configuration, load_descriptions
from .config.schema import Configuration
from .descriptions import Description
from .errors import (
    ConfigurationError,
    ExhaustedPlacementBudgetError,
    InvalidRangeError,
    InvalidShapeNameError,
    ShapeweaveError,
    UnplaceableShape,
)
from .generator import Generator
from .batch import generate_batch, write_outputs
from .parser import parse_caption, parse_captions
from .sampling import PhiloxRandom
from .svg import render_svg, shape_to_svg
from .types import GeneratedImage, PlacedShape

__version__ = "0.1.0"

__all__ = [
    "Color",
    "DEFAULT_COLORS",
    "Configuration",
    "Description",
    "ConfigurationError",
    "ExhaustedPlacementBudgetError",
    "InvalidRangeError",
    "InvalidShapeNameError",
    "ShapeweaveError",
    "UnplaceableShape",
    "GeneratedImage",
    "Generator",
    "PhiloxRandom",
    "PlacedShape",
    "dump_configuration",
    "generate_batch",
    "load_configuration",
    "load_descriptions",
    "parse_caption",
    "parse_captions",
    "render_svg",
    "shape_to_svg",
    "write_outputs",
]
