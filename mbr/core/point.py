"""Planar and spatial point value types."""
from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator, Tuple

import numpy as np

from .numerics import nearly_equal

__all__ = ['Pt', 'Pt3d']


@dataclass(frozen=True, eq=False)
class Pt:
    """Immutable 2D point compared component-wise under tolerance."""
    x: float
    y: float

    # tolerance equality is not transitive, so points are not hashable
    __hash__ = None

    def equals(self, other: 'Pt') -> bool:
        return nearly_equal(self.x, other.x) and nearly_equal(self.y, other.y)

    def __eq__(self, other):
        if not isinstance(other, Pt):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, Pt):
            return NotImplemented
        return not self.equals(other)

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def as_array(self) -> np.ndarray:
        """Coordinates as a length-2 array ``[x, y]``."""
        return np.array(self.as_tuple())


@dataclass(frozen=True, eq=False)
class Pt3d:
    """Immutable 3D point compared component-wise under tolerance."""
    x: float
    y: float
    z: float

    __hash__ = None

    def equals(self, other: 'Pt3d') -> bool:
        return (nearly_equal(self.x, other.x)
                and nearly_equal(self.y, other.y)
                and nearly_equal(self.z, other.z))

    def __eq__(self, other):
        if not isinstance(other, Pt3d):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, Pt3d):
            return NotImplemented
        return not self.equals(other)

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        """Coordinates as a length-3 array ``[x, y, z]``."""
        return np.array(self.as_tuple())
