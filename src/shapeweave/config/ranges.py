"""Closed numeric ranges used by descriptions and the generator configuration."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..errors import InvalidRangeError

if TYPE_CHECKING:
    from ..sampling.philox import PhiloxRandom


class Range(BaseModel):
    """Inclusive ``[lower, upper]`` interval.

    Accepts a mapping, a two-element list ``[lower, upper]`` or a single number
    (a degenerate range).  Bounds must be finite; ``lower > upper`` raises
    :class:`InvalidRangeError`.
    """

    lower: float
    upper: float

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"range needs exactly two values [lower, upper], got {list(data)}")
            return {"lower": data[0], "upper": data[1]}
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return {"lower": data, "upper": data}
        return data

    @model_validator(mode="after")
    def _ordered(self):
        if not self.lower <= self.upper:
            raise InvalidRangeError(self.lower, self.upper)
        return self

    def as_tuple(self) -> tuple:
        return self.lower, self.upper

    def sample(self, rng: "PhiloxRandom") -> float:
        return rng.uniform(self.lower, self.upper)


class PositiveRange(Range):
    """Range of strictly positive lengths."""

    lower: float = Field(gt=0)
    upper: float = Field(gt=0)


class IntRange(Range):
    """Inclusive integer range; ``sample`` can return either bound."""

    lower: int = Field(ge=0)
    upper: int = Field(ge=0)

    def sample(self, rng: "PhiloxRandom") -> int:
        return rng.integers(self.lower, self.upper, endpoint=True)


__all__ = ["Range", "PositiveRange", "IntRange"]
