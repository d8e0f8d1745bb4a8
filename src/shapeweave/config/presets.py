"""Default description templates and configuration values."""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List

# One template per shape kind.  Sizes suit the default 128x128 canvas.
DESCRIPTION_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "triangle": {"kind": "triangle", "width": [12, 32], "height": [12, 32]},
    "square": {"kind": "square", "size": [10, 28]},
    "rectangle": {"kind": "rectangle", "width": [14, 40], "height": [8, 20]},
    "pentagon": {"kind": "pentagon", "size": [12, 32]},
    "regular_polygon": {"kind": "regular_polygon", "vertex_count": [6, 8], "radius": [6, 16]},
    "cross": {"kind": "cross", "width": [14, 32], "height": [14, 32], "thickness": [4, 8]},
    "circle": {"kind": "circle", "radius": [5, 15]},
    "semicircle": {"kind": "semicircle", "radius": [6, 16]},
    "ellipse": {"kind": "ellipse", "radius_x": [8, 20], "radius_y": [4, 10]},
}


def default_caption_descriptions() -> Dict[str, Dict[str, Any]]:
    """Keyword -> template mapping used when parsing caption text."""
    return deepcopy(DESCRIPTION_DEFAULTS)


def default_distractor_descriptions() -> List[Dict[str, Any]]:
    """Universe that distractor shapes are drawn from: one template per kind."""
    return [deepcopy(d) for d in DESCRIPTION_DEFAULTS.values()]


__all__ = ["DESCRIPTION_DEFAULTS", "default_caption_descriptions", "default_distractor_descriptions"]
