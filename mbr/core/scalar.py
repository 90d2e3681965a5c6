"""Coordinate domains: comparison capabilities selected by coordinate type.

Exact domains hold Python integers (unbounded; numpy integers are widened
into them), ``fractions.Fraction`` or ``decimal.Decimal``. They compare
with ``==`` and take min/max by plain comparison.

Floating domains are keyed on a numpy floating dtype. They compare under
the active tolerance and take min/max with ``numpy.fmin``/``numpy.fmax``,
which return the non-NaN operand when one side is NaN. A Python float
counts as float64, so it never narrows to a smaller numpy float it is
mixed with.
"""
from __future__ import annotations

import numbers
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache

import numpy as np

from .numerics import nearly_equal

__all__ = ['Scalar', 'ExactScalar', 'FloatScalar', 'INTEGER', 'RATIONAL', 'DECIMAL', 'scalar_for']


class Scalar:
    """Equality and ordering helpers for one coordinate domain.

    Domain objects are shared singletons; copying returns the same object.
    """
    exact = False
    type = None

    def coerce(self, value):
        raise NotImplementedError

    def eq(self, a, b) -> bool:
        raise NotImplementedError

    def min(self, a, b):
        raise NotImplementedError

    def max(self, a, b):
        raise NotImplementedError

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return f'{type(self).__name__}({self.type.__name__})'


class ExactScalar(Scalar):
    exact = True

    def __init__(self, type_, convert):
        self.type = type_
        self._convert = convert

    def coerce(self, value):
        return self._convert(value)

    def eq(self, a, b) -> bool:
        return a == b

    def min(self, a, b):
        return b if b < a else a

    def max(self, a, b):
        return b if b > a else a


class FloatScalar(Scalar):

    def __init__(self, dtype):
        self.dtype = np.dtype(dtype)
        self.type = self.dtype.type

    def coerce(self, value):
        """Convert ``value`` to this dtype, returned as a native Python number."""
        if not isinstance(value, (float, np.generic)):
            value = float(value)
        return self.dtype.type(value).item()

    def eq(self, a, b) -> bool:
        return nearly_equal(a, b)

    def min(self, a, b):
        return self.coerce(np.fmin(a, b))

    def max(self, a, b):
        return self.coerce(np.fmax(a, b))


def _to_int(value):
    return int(value)


def _to_fraction(value):
    if isinstance(value, (numbers.Integral, np.bool_)):
        return Fraction(int(value))
    if isinstance(value, (numbers.Rational, float, Decimal)):
        return Fraction(value)
    return Fraction(float(value))


def _to_decimal(value):
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (numbers.Integral, np.bool_)):
        return Decimal(int(value))
    if isinstance(value, numbers.Rational):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(float(value))


INTEGER = ExactScalar(int, _to_int)
RATIONAL = ExactScalar(Fraction, _to_fraction)
DECIMAL = ExactScalar(Decimal, _to_decimal)


@lru_cache(maxsize=None)
def _float_scalar(dtype: np.dtype) -> FloatScalar:
    return FloatScalar(dtype)


def _domain_of_type(t) -> Scalar:
    if isinstance(t, np.dtype):
        if t.kind in 'biu':
            return INTEGER
        if t.kind == 'f':
            return _float_scalar(t)
        raise TypeError(f'unsupported coordinate dtype: {t}')
    if issubclass(t, (bool, np.bool_, numbers.Integral)):
        return INTEGER
    if issubclass(t, np.floating):
        return _float_scalar(np.dtype(t))
    if issubclass(t, numbers.Rational):
        return RATIONAL
    if issubclass(t, Decimal):
        return DECIMAL
    if issubclass(t, numbers.Real):
        return _float_scalar(np.dtype(np.float64))
    raise TypeError(f'coordinates must be real numbers, got {t.__name__}')


def _domain_of(value) -> Scalar:
    if isinstance(value, Scalar):
        return value
    if isinstance(value, (type, np.dtype)):
        return _domain_of_type(value)
    if isinstance(value, np.generic):
        return _domain_of_type(value.dtype)
    return _domain_of_type(type(value))


def scalar_for(*values) -> Scalar:
    """Return the domain shared by coordinate values, types, dtypes or domains.

    Promotion: integers < rationals / decimals < floats. Rationals mixed
    with decimals fall back to float64 since they do not combine
    arithmetically. Float dtypes promote with ``numpy.result_type``.
    Anything that is not a real number raises TypeError.
    """
    domains = {_domain_of(v) for v in values}
    floats = [d for d in domains if not d.exact]
    if floats:
        return _float_scalar(np.result_type(*(d.dtype for d in floats)))
    exact = domains - {INTEGER}
    if not exact:
        return INTEGER
    if len(exact) == 1:
        return exact.pop()
    return _float_scalar(np.dtype(np.float64))
