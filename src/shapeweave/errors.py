"""Exception types raised by shapeweave."""
from __future__ import annotations


class ShapeweaveError(Exception):
    """Base class for every error raised on purpose by this package."""


class ConfigurationError(ShapeweaveError, ValueError):
    """A configuration or description file failed validation."""


class InvalidRangeError(ShapeweaveError, ValueError):
    """A configured range has ``lower > upper``."""

    def __init__(self, lower, upper, name: str | None = None):
        self.lower = lower
        self.upper = upper
        self.name = name
        where = f" for {name!r}" if name else ""
        super().__init__(f"invalid range{where}: lower bound {lower} exceeds upper bound {upper}")

    def __reduce__(self):
        return type(self), (self.lower, self.upper, self.name)


class InvalidShapeNameError(ShapeweaveError, ValueError):
    """Caption text references a shape keyword that has no description template."""

    def __init__(self, name: str, clause: str | None = None):
        self.name = name
        self.clause = clause
        msg = f"unknown shape name {name!r}"
        if clause is not None and clause != name:
            msg += f" in caption clause {clause!r}"
        super().__init__(msg)

    def __reduce__(self):
        return type(self), (self.name, self.clause)


class UnplaceableShape(ShapeweaveError):
    """A sampled shape does not fit inside the canvas.

    Only used as a restart signal inside the placement loop.
    """


class ExhaustedPlacementBudgetError(ShapeweaveError, RuntimeError):
    """The placement loop restarted more often than ``max_placement_attempts`` allows."""

    def __init__(self, attempts: int, shape_count: int):
        self.attempts = attempts
        self.shape_count = shape_count
        super().__init__(
            f"could not place {shape_count} shape(s) within {attempts} attempt(s); "
            "relax max_overlap_ratio or raise max_placement_attempts"
        )

    def __reduce__(self):
        # Keep structured fields when crossing process boundaries.
        return type(self), (self.attempts, self.shape_count)


__all__ = [
    "ShapeweaveError",
    "ConfigurationError",
    "InvalidRangeError",
    "InvalidShapeNameError",
    "UnplaceableShape",
    "ExhaustedPlacementBudgetError",
]
