"""Comma-separated caption text to description lists.

Each non-empty line is one caption and each comma-separated clause one
description, e.g. ``"red triangle, blue circle, square"``.  A clause may start
with a known color name; the remaining words name the shape.  Shape keywords
ignore case, spaces, ``_`` and ``-``, so ``semiCircle``, ``semi-circle`` and
``semicircle`` all select the ``semicircle`` template.
"""
from __future__ import annotations

import re
from typing import List

from .colors import Color
from .config.schema import Configuration
from .descriptions import DESCRIPTION_TYPES, Description
from .errors import InvalidShapeNameError

_SEPARATORS = re.compile(r"[\s_\-]+")

_KEYWORDS = {kind.replace("_", ""): kind for kind in DESCRIPTION_TYPES}


def normalize_keyword(text: str) -> str:
    return _SEPARATORS.sub("", text).lower()


def parse_description(clause: str, configuration: Configuration) -> Description:
    text = clause.strip()
    words = text.split()
    if not words:
        raise InvalidShapeNameError("", clause)

    color = Color.lookup(words[0]) if len(words) > 1 else None
    shape_words = words[1:] if color is not None else words
    keyword = normalize_keyword("".join(shape_words))

    kind = _KEYWORDS.get(keyword)
    template = configuration.caption_descriptions.get(kind) if kind else None
    if template is None:
        raise InvalidShapeNameError(" ".join(shape_words), text)
    return template.restricted_to(color=color, caption=text)


def parse_caption(line: str, configuration: Configuration) -> List[Description]:
    return [parse_description(clause, configuration) for clause in line.split(",")]


def parse_captions(text: str, configuration: Configuration) -> List[List[Description]]:
    """Parse one description group per non-blank line of ``text``."""
    return [
        parse_caption(line, configuration)
        for line in text.splitlines()
        if line.strip()
    ]


__all__ = ["normalize_keyword", "parse_description", "parse_caption", "parse_captions"]
