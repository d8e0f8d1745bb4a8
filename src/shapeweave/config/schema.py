"""Pydantic model for the generator configuration."""
from __future__ import annotations

import math
from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..colors import Color
from ..descriptions import DESCRIPTION_TYPES, Description
from ..geometry.primitives import DEFAULT_EPS
from ..sampling.philox import MASK64
from . import presets
from .ranges import IntRange


def _no_distractors() -> IntRange:
    return IntRange(lower=0, upper=0)


class Configuration(BaseModel):
    width: float = Field(default=128.0, gt=0)
    height: float = Field(default=128.0, gt=0)
    background_color: Color = Color.WHITE
    image_count_per_description: int = Field(default=1, ge=1)
    shuffle_descriptions: bool = True
    max_overlap_ratio: float = Field(default=0.1, ge=0.0, le=1.0)
    distractor_count: IntRange = Field(default_factory=_no_distractors)
    distractor_descriptions: List[Description] = Field(
        default_factory=presets.default_distractor_descriptions, validate_default=True
    )
    caption_descriptions: Dict[str, Description] = Field(
        default_factory=presets.default_caption_descriptions, validate_default=True
    )
    max_placement_attempts: int = Field(default=10_000, ge=1)
    geometry_eps: float = Field(default=DEFAULT_EPS, gt=0)
    seed: int | None = Field(default=None, ge=0, le=MASK64)
    workers: int = Field(default=1, ge=1)
    log_level: Literal["none", "info", "debug"] = "info"

    model_config = ConfigDict(extra="forbid")

    @field_validator("width", "height")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("canvas size must be finite")
        return v

    @field_validator("caption_descriptions", mode="before")
    @classmethod
    def _fill_templates(cls, v):
        # Keywords left out keep their default template.
        if isinstance(v, dict):
            return {**presets.default_caption_descriptions(), **v}
        return v

    @field_validator("caption_descriptions")
    @classmethod
    def _keys_match_kinds(cls, v: Dict[str, Description]) -> Dict[str, Description]:
        for key, description in v.items():
            if key not in DESCRIPTION_TYPES:
                raise ValueError(
                    f"unknown caption keyword {key!r}; expected one of {sorted(DESCRIPTION_TYPES)}"
                )
            if description.kind != key:
                raise ValueError(f"caption template {key!r} has kind {description.kind!r}")
        return v

    @model_validator(mode="after")
    def _check_distractors(self):  # type: ignore[override]
        if self.distractor_count.upper > 0 and not self.distractor_descriptions:
            raise ValueError("distractor_descriptions required when distractor_count allows distractors")
        return self


__all__ = ["Configuration"]
