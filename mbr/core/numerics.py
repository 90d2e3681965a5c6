"""Floating-point comparison and rounding helpers."""
from __future__ import annotations

import math
from typing import Optional

from .config import get_config

__all__ = ['nearly_equal', 'round_floor', 'round_half_away']


def nearly_equal(a, b, epsilon: Optional[float] = None) -> bool:
    """Return True when ``a`` and ``b`` differ by less than ``epsilon``.

    Exact equality is tested first so equal infinities compare equal
    (their difference is NaN). ``epsilon`` defaults to the active
    configuration's tolerance.
    """
    if a == b:
        return True
    if epsilon is None:
        epsilon = get_config().epsilon
    return abs(a - b) < epsilon


def round_floor(value: float) -> float:
    """Round to the nearest whole number, halves away from zero."""
    if not math.isfinite(value):
        return value
    return float(math.trunc(value + math.copysign(0.5, value)))


def round_half_away(value: float, digits: int = 0) -> float:
    """Round ``value`` to ``digits`` decimal places, halves away from zero.

    Unlike the builtin ``round`` (half to even), ``round_half_away(2.5) == 3.0``
    and ``round_half_away(-2.5) == -3.0``.
    """
    m = 10.0 ** digits
    return round_floor(value * m) / m
