"""Small numeric helpers shared across the engine."""

from __future__ import annotations

import math
from typing import TypeVar

T = TypeVar("T", int, float)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation: returns ``a`` at ``t == 0`` and ``b`` at ``t == 1``."""
    return a + t * (b - a)


def clamp(value: T, lo: T, hi: T) -> T:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def int_floor(x: float) -> int:
    """Floor a float to an int, rounding negative values toward minus infinity."""
    return math.floor(x)


def mod(a: int, b: int) -> int:
    """Modulo whose result is non-negative for a positive divisor.

    The remainder is taken with truncating division, then shifted by ``b``
    when it is negative, so ``mod(-1, 16) == 15``.
    """
    remainder = abs(a) % abs(b)
    if a < 0:
        remainder = -remainder
    return remainder + b if remainder < 0 else remainder