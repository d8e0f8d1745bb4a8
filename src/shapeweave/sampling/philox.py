"""Philox4x32-10 counter-based generator.

Every random decision in shapeweave is drawn from a :class:`PhiloxRandom`
stream.  Each block encryption of the 64-bit counter yields two 64-bit words;
the first is returned immediately and the second is buffered for the next call
before the counter advances, so equal seeds always produce identical streams.
"""
from __future__ import annotations

import secrets
from typing import MutableSequence, Optional, Sequence, Tuple, TypeVar

from ..logging import logger

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

# Round multipliers and Weyl key increments (Salmon et al., SC'11).
PHILOX_M0 = 0xD2511F53
PHILOX_M1 = 0xCD9E8D57
PHILOX_W0 = 0x9E3779B9
PHILOX_W1 = 0xBB67AE85
PHILOX_ROUNDS = 10

# Lane 0 tag for seed derivation blocks; ordinary draws keep lane 0 at zero.
_SPAWN_TAG = 0x53504157

Block = Tuple[int, int, int, int]


def _round(ctr: Block, k0: int, k1: int) -> Block:
    p0 = PHILOX_M0 * ctr[0]
    p1 = PHILOX_M1 * ctr[2]
    hi0, lo0 = p0 >> 32, p0 & MASK32
    hi1, lo1 = p1 >> 32, p1 & MASK32
    return (hi1 ^ ctr[1] ^ k0, lo1, hi0 ^ ctr[3] ^ k1, lo0)


def philox4x32(counter: Sequence[int], key: Sequence[int], rounds: int = PHILOX_ROUNDS) -> Block:
    """Encrypt a 4x32-bit ``counter`` under a 2x32-bit ``key``."""
    ctr: Block = tuple(int(c) & MASK32 for c in counter)  # type: ignore[assignment]
    if len(ctr) != 4:
        raise ValueError("counter must have four 32-bit lanes")
    k0, k1 = (int(k) & MASK32 for k in key)
    for i in range(rounds):
        if i:
            k0 = (k0 + PHILOX_W0) & MASK32
            k1 = (k1 + PHILOX_W1) & MASK32
        ctr = _round(ctr, k0, k1)
    return ctr


def _split64(value: int) -> Tuple[int, int]:
    return (value >> 32) & MASK32, value & MASK32


class PhiloxRandom:
    """Seedable 64-bit stream with derived sampling helpers.

    Parameters
    ----------
    seed:
        64-bit seed split into the ``(hi, lo)`` key.  ``None`` draws a fresh seed
        from the OS and logs it so the run can be reproduced.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = secrets.randbits(64)
            logger.info("no seed given, using %d", seed)
        if seed < 0 or seed > MASK64:
            raise ValueError(f"seed must fit in 64 unsigned bits, got {seed}")
        self.seed = int(seed)
        self.key = _split64(self.seed)
        self.counter = 0
        self._buffered: Optional[int] = None

    def __repr__(self) -> str:
        return f"PhiloxRandom(seed={self.seed}, counter={self.counter})"

    # ------------------------------------------------------------------
    # raw stream
    # ------------------------------------------------------------------
    def next_uint64(self) -> int:
        if self._buffered is not None:
            value, self._buffered = self._buffered, None
            return value
        hi, lo = _split64(self.counter)
        c0, c1, c2, c3 = philox4x32((0, 0, hi, lo), self.key)
        self.counter = (self.counter + 1) & MASK64
        self._buffered = (c2 << 32) | c3
        return (c0 << 32) | c1

    def spawn_seed(self, stream: int) -> int:
        """Seed for an independent child stream; does not consume draws."""
        hi, lo = _split64(int(stream) & MASK64)
        c0, c1, _, _ = philox4x32((_SPAWN_TAG, lo, hi, 0), self.key)
        return (c0 << 32) | c1

    # ------------------------------------------------------------------
    # derived draws
    # ------------------------------------------------------------------
    def random(self) -> float:
        """Uniform float in ``[0, 1)`` with 53 random bits."""
        return (self.next_uint64() >> 11) * (1.0 / (1 << 53))

    def uniform(self, low: float, high: float) -> float:
        low = float(low)
        high = float(high)
        if low > high:
            raise ValueError(f"uniform() needs low <= high, got [{low}, {high}]")
        if low == high:
            return low
        value = low + (high - low) * self.random()
        return min(value, high)

    def _bounded(self, bound: int) -> int:
        # Lemire's multiply-high with rejection of the biased low band.
        product = self.next_uint64() * bound
        low = product & MASK64
        if low < bound:
            threshold = ((1 << 64) - bound) % bound
            while low < threshold:
                product = self.next_uint64() * bound
                low = product & MASK64
        return product >> 64

    def integers(self, low: int, high: int, endpoint: bool = False) -> int:
        """Uniform integer in ``[low, high)`` (``[low, high]`` with ``endpoint``)."""
        span = int(high) - int(low) + (1 if endpoint else 0)
        if span <= 0:
            raise ValueError(f"empty integer range [{low}, {high}{']' if endpoint else ')'}")
        if span > MASK64:
            raise ValueError("integer range wider than 64 bits")
        return int(low) + self._bounded(span)

    def choice(self, seq: Sequence[T]) -> T:
        if len(seq) == 0:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.integers(0, len(seq))]

    def shuffle(self, items: MutableSequence) -> None:
        """In-place Fisher-Yates, walking forward from the first element."""
        amount = len(items)
        current = 0
        while amount > 1:
            offset = self.integers(0, amount)
            amount -= 1
            j = current + offset
            items[current], items[j] = items[j], items[current]
            current += 1


__all__ = [
    "MASK32",
    "MASK64",
    "PHILOX_M0",
    "PHILOX_M1",
    "PHILOX_W0",
    "PHILOX_W1",
    "PHILOX_ROUNDS",
    "philox4x32",
    "PhiloxRandom",
]
