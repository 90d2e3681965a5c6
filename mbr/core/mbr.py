"""Minimum bounding rectangle over integer or floating coordinates.

An ``MBR`` stores ``minx, miny, maxx, maxy``. Constructors normalize the
bounds so that ``minx <= maxx`` and ``miny <= maxy`` unless ``raw=True`` is
requested, in which case the values are stored verbatim and derived
quantities (width, height, area, predicates) use them as-is.

The coordinate domain is inferred from the coordinates (or given
explicitly): Python and numpy integers share one unbounded integer
domain, ``Fraction`` and ``Decimal`` keep their own exact domains, and
floats use a numpy floating dtype, where a Python float always counts as
float64 (so ``MBR(np.float32(0), 0, 0.1, 1)`` is a float64 rectangle).
Exact domains compare with ``==``; floating domains compare under the
active tolerance (see ``mbr.core.config``). Operations that mix domains,
or mutations that receive a wider value, promote to the wider domain. Mutating
methods return the receiver for chaining:

    box = MBR(0, 0, 2, 2).expand_to_include_xy(3, -1).expand_by_delta(1, 1)
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .logging_utils import get_logger
from .numerics import nearly_equal
from .point import Pt
from .scalar import Scalar, scalar_for
from .wkt import polygon_wkt

log = get_logger('mbr.rect')

__all__ = ['MBR']


class MBR:
    __slots__ = ('minx', 'miny', 'maxx', 'maxy', '_scalar')

    # tolerance equality is not transitive, so rectangles are not hashable
    __hash__ = None

    def __init__(self, minx=0, miny=0, maxx=0, maxy=0, raw: bool = False, dtype=None):
        s = scalar_for(dtype) if dtype is not None else scalar_for(minx, miny, maxx, maxy)
        x1, y1, x2, y2 = s.coerce(minx), s.coerce(miny), s.coerce(maxx), s.coerce(maxy)
        self._scalar = s
        if raw:
            if x1 > x2 or y1 > y2:
                log.debug('raw bounds are not normalized: (%r, %r, %r, %r)', x1, y1, x2, y2)
            self.minx, self.miny, self.maxx, self.maxy = x1, y1, x2, y2
        else:
            self.minx, self.maxx = s.min(x1, x2), s.max(x1, x2)
            self.miny, self.maxy = s.min(y1, y2), s.max(y1, y2)

    # --- Construction ---
    @classmethod
    def from_corners(cls, x1, y1, x2, y2) -> 'MBR':
        return cls(x1, y1, x2, y2)

    @classmethod
    def from_corners_raw(cls, x1, y1, x2, y2) -> 'MBR':
        """Store the corners verbatim; ``minx > maxx`` is kept as given."""
        return cls(x1, y1, x2, y2, raw=True)

    @classmethod
    def from_bounds(cls, bounds: Iterable, raw: bool = False) -> 'MBR':
        """Build from a ``[minx, miny, maxx, maxy]`` sequence."""
        values = tuple(bounds)
        if len(values) != 4:
            raise ValueError(f'bounds must have 4 values (minx, miny, maxx, maxy), got {len(values)}')
        return cls(*values, raw=raw)

    @classmethod
    def from_bounds_raw(cls, bounds: Iterable) -> 'MBR':
        return cls.from_bounds(bounds, raw=True)

    @classmethod
    def from_point(cls, pt: Pt) -> 'MBR':
        return cls(pt.x, pt.y, pt.x, pt.y)

    @classmethod
    def from_two_points(cls, a: Pt, b: Pt) -> 'MBR':
        return cls(a.x, a.y, b.x, b.y)

    def as_type(self, dtype) -> 'MBR':
        """Convert each coordinate to ``dtype`` without re-sorting."""
        return MBR(self.minx, self.miny, self.maxx, self.maxy, raw=True, dtype=dtype)

    def clone(self) -> 'MBR':
        return MBR(self.minx, self.miny, self.maxx, self.maxy, raw=True, dtype=self._scalar)

    __copy__ = clone

    def bbox(self) -> 'MBR':
        """The rectangle's own bounding box, i.e. the receiver itself."""
        return self

    @property
    def dtype(self):
        """numpy dtype of a floating rectangle, or the Python type of an exact one."""
        s = self._scalar
        return s.type if s.exact else s.dtype

    @property
    def domain(self) -> Scalar:
        return self._scalar

    def _common_scalar(self, other: 'MBR') -> Scalar:
        if other._scalar is self._scalar:
            return self._scalar
        return scalar_for(self._scalar, other._scalar)

    def _bounds_in(self, s: Scalar) -> Tuple:
        if s is self._scalar:
            return self.as_bounds()
        return tuple(s.coerce(v) for v in self.as_bounds())

    def _promote(self, *values) -> Scalar:
        """Widen the receiver's domain so ``values`` fit; never narrows."""
        s = scalar_for(self._scalar, *values)
        if s is not self._scalar:
            self.minx, self.miny, self.maxx, self.maxy = self._bounds_in(s)
            self._scalar = s
        return s

    # --- Derived queries ---
    def width(self):
        return self.maxx - self.minx

    def height(self):
        return self.maxy - self.miny

    def area(self):
        return self.height() * self.width()

    def is_point(self) -> bool:
        """True when both width and height are (nearly) zero."""
        return nearly_equal(self.height(), 0) and nearly_equal(self.width(), 0)

    def center(self) -> Pt:
        """Midpoint of the rectangle.

        The midpoint is the true one in every domain: integer rectangles
        get a float coordinate when the sum of the bounds is odd
        (``MBR(0, 0, 1, 1).center()`` is ``Pt(0.5, 0.5)``), while
        ``Fraction`` and ``Decimal`` rectangles keep their exact type.
        """
        return Pt((self.minx + self.maxx) / 2, (self.miny + self.maxy) / 2)

    def as_bounds(self) -> Tuple:
        return (self.minx, self.miny, self.maxx, self.maxy)

    as_tuple = as_bounds

    def as_array(self) -> np.ndarray:
        # exact domains let numpy infer: int64 when it fits, object otherwise
        s = self._scalar
        return np.array(self.as_bounds(), dtype=None if s.exact else s.dtype)

    def as_polygon_ring(self) -> List[Pt]:
        """Closed ring: lower-left, upper-left, upper-right, lower-right, lower-left."""
        return [
            Pt(self.minx, self.miny),
            Pt(self.minx, self.maxy),
            Pt(self.maxx, self.maxy),
            Pt(self.maxx, self.miny),
            Pt(self.minx, self.miny),
        ]

    def corners(self) -> Tuple[Pt, Pt]:
        """(lower_left, upper_right)."""
        return Pt(self.minx, self.miny), Pt(self.maxx, self.maxy)

    def equals(self, other: 'MBR') -> bool:
        s = self._common_scalar(other)
        ax1, ay1, ax2, ay2 = self._bounds_in(s)
        bx1, by1, bx2, by2 = other._bounds_in(s)
        return (s.eq(ax2, bx2) and
                s.eq(ay2, by2) and
                s.eq(ax1, bx1) and
                s.eq(ay1, by1))

    def __eq__(self, other):
        if not isinstance(other, MBR):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, MBR):
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other):
        # minx first, then miny; rectangles tied on both are order-equivalent
        if not isinstance(other, MBR):
            return NotImplemented
        s = self._common_scalar(other)
        ax, ay = self._bounds_in(s)[:2]
        bx, by = other._bounds_in(s)[:2]
        d = ax - bx
        if nearly_equal(d, 0):
            d = ay - by
        return d < 0

    # --- Predicates ---
    def contains(self, other: 'MBR') -> bool:
        """``other`` lies inside, boundaries may touch."""
        return ((other.minx >= self.minx) and
                (other.miny >= self.miny) and
                (other.maxx <= self.maxx) and
                (other.maxy <= self.maxy))

    def contains_xy(self, x, y) -> bool:
        return ((x >= self.minx) and
                (x <= self.maxx) and
                (y >= self.miny) and
                (y <= self.maxy))

    def completely_contains(self, other: 'MBR') -> bool:
        """``other`` lies inside without touching the boundary."""
        return ((other.minx > self.minx) and
                (other.miny > self.miny) and
                (other.maxx < self.maxx) and
                (other.maxy < self.maxy))

    def completely_contains_xy(self, x, y) -> bool:
        return ((x > self.minx) and
                (x < self.maxx) and
                (y > self.miny) and
                (y < self.maxy))

    def intersects(self, other: 'MBR') -> bool:
        """Not disjoint; touching edges intersect."""
        return not (other.minx > self.maxx or
                    other.maxx < self.minx or
                    other.miny > self.maxy or
                    other.maxy < self.miny)

    def intersects_xy(self, x, y) -> bool:
        return self.contains_xy(x, y)

    def intersects_segment(self, a: Pt, b: Pt) -> bool:
        """Overlap with the bounding box of segment ``a``-``b``.

        This is a bounding-box test: it can be True for a segment that
        passes beside the rectangle without crossing it.
        """
        s = scalar_for(self._scalar, a.x, a.y, b.x, b.y)
        ax, ay, bx, by = s.coerce(a.x), s.coerce(a.y), s.coerce(b.x), s.coerce(b.y)
        lo, hi = s.min(ax, bx), s.max(ax, bx)
        if self.minx > hi or self.maxx < lo:
            return False
        lo, hi = s.min(ay, by), s.max(ay, by)
        return not (self.miny > hi or self.maxy < lo)

    def disjoint(self, other: 'MBR') -> bool:
        return not self.intersects(other)

    # --- Combination ---
    def union(self, other: 'MBR') -> 'MBR':
        s = self._common_scalar(other)
        ax1, ay1, ax2, ay2 = self._bounds_in(s)
        bx1, by1, bx2, by2 = other._bounds_in(s)
        return MBR(s.min(bx1, ax1),
                   s.min(by1, ay1),
                   s.max(bx2, ax2),
                   s.max(by2, ay2),
                   dtype=s)

    def intersection(self, other: 'MBR') -> Optional['MBR']:
        """Overlap of both rectangles, or None when they are disjoint.

        A shared edge or corner yields a degenerate (line or point) rectangle.
        """
        if self.disjoint(other):
            log.debug('intersection of disjoint rectangles %r and %r', self, other)
            return None
        s = self._common_scalar(other)
        ax1, ay1, ax2, ay2 = self._bounds_in(s)
        bx1, by1, bx2, by2 = other._bounds_in(s)
        return MBR(s.max(ax1, bx1),
                   s.max(ay1, by1),
                   s.min(ax2, bx2),
                   s.min(ay2, by2),
                   dtype=s)

    __or__ = union
    __add__ = union
    __and__ = intersection

    # --- Mutation ---
    def _assign(self, other: 'MBR') -> 'MBR':
        self.minx, self.miny, self.maxx, self.maxy = other.as_bounds()
        self._scalar = other._scalar
        return self

    def expand_to_include(self, other: 'MBR') -> 'MBR':
        """Grow in place to cover ``other``."""
        return self._assign(self.union(other))

    def expand_to_include_xy(self, x, y) -> 'MBR':
        """Grow in place so the point ``(x, y)`` is contained."""
        s = self._promote(x, y)
        x, y = s.coerce(x), s.coerce(y)
        if x < self.minx:
            self.minx = x
        elif x > self.maxx:
            self.maxx = x

        if y < self.miny:
            self.miny = y
        elif y > self.maxy:
            self.maxy = y
        return self

    def expand_by_delta(self, dx, dy) -> 'MBR':
        """Grow (or shrink, for negative deltas) each side in place.

        The result is re-sorted, so shrinking past the center flips the
        sides: ``MBR(0, 0, 2, 2).expand_by_delta(-3, -3)`` is ``MBR(-1, -1, 3, 3)``.
        """
        s = self._promote(dx, dy)
        dx, dy = s.coerce(dx), s.coerce(dy)
        minx, miny = s.coerce(self.minx - dx), s.coerce(self.miny - dy)
        maxx, maxy = s.coerce(self.maxx + dx), s.coerce(self.maxy + dy)
        if log.isEnabledFor(logging.DEBUG) and (minx > maxx or miny > maxy):
            log.debug('expand_by_delta(%r, %r) crossed the center of %r', dx, dy, self)

        self.minx, self.maxx = s.min(minx, maxx), s.max(minx, maxx)
        self.miny, self.maxy = s.min(miny, maxy), s.max(miny, maxy)
        return self

    def translate(self, dx, dy) -> 'MBR':
        """New rectangle shifted by ``(dx, dy)``; the receiver is unchanged."""
        s = scalar_for(self._scalar, dx, dy)
        minx, miny, maxx, maxy = self._bounds_in(s)
        dx, dy = s.coerce(dx), s.coerce(dy)
        return MBR(minx + dx, miny + dy, maxx + dx, maxy + dy, dtype=s)

    # --- Distance ---
    def _distance_dxdy(self, other: 'MBR') -> Tuple:
        # gap between the closest edges along each axis, 0 when overlapping
        s = self._common_scalar(other)
        ax1, ay1, ax2, ay2 = self._bounds_in(s)
        bx1, by1, bx2, by2 = other._bounds_in(s)
        dx = max(0, bx1 - ax2, ax1 - bx2)
        dy = max(0, by1 - ay2, ay1 - by2)
        return dx, dy

    def distance(self, other: 'MBR') -> float:
        """Euclidean distance between the closest edges; 0 if they intersect."""
        if self.intersects(other):
            return 0.0
        dx, dy = self._distance_dxdy(other)
        return math.hypot(dx, dy)

    def distance_square(self, other: 'MBR') -> float:
        if self.intersects(other):
            return 0.0
        dx, dy = self._distance_dxdy(other)
        return float((dx * dx) + (dy * dy))

    # --- Text ---
    def to_wkt(self, precision: Optional[int] = None) -> str:
        """``POLYGON ((...))`` text of the closed ring."""
        return polygon_wkt(self.as_polygon_ring(), precision)

    def __str__(self):
        return self.to_wkt()

    def __repr__(self):
        return f'MBR({self.minx!r}, {self.miny!r}, {self.maxx!r}, {self.maxy!r})'
