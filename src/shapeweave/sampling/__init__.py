"""Deterministic random streams."""

from .philox import PhiloxRandom, philox4x32

__all__ = ["PhiloxRandom", "philox4x32"]
