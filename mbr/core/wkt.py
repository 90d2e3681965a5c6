"""Well-Known Text output for rectangles."""
from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Iterable, Optional

from .config import get_config

__all__ = ['format_coordinate', 'polygon_wkt']


def format_coordinate(value, precision: Optional[int] = None) -> str:
    """Fixed-point text of ``value`` with trailing zeros trimmed.

    ``format_coordinate(2) == '2'``, ``format_coordinate(0.25) == '0.25'``.
    Integers print every digit; fractions are rendered through ``Decimal``.
    """
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Rational):
        value = Decimal(value.numerator) / Decimal(value.denominator)
    if precision is None:
        precision = get_config().wkt_precision
    s = f'{value:.{precision}f}'
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    return s


def polygon_wkt(ring: Iterable, precision: Optional[int] = None) -> str:
    """POLYGON text for a closed ring of (x, y) points."""
    coords = ', '.join(
        f'{format_coordinate(x, precision)} {format_coordinate(y, precision)}' for x, y in ring
    )
    return f'POLYGON (({coords}))'
