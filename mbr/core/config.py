"""Tolerance configuration and the per-context active configuration.

The active configuration is held in a contextvar so concurrent callers
(threads, async tasks) can use different tolerances without interfering.
"""
from __future__ import annotations

import contextvars
import math
from contextlib import contextmanager
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Iterator, Mapping, Optional

from .constants import EPSILON, PRECISION
from .logging_utils import get_logger

log = get_logger('mbr.config')


@dataclass(frozen=True)
class ToleranceConfig:
    """Numeric tolerances used by comparisons and text output.

    Attributes
    ----------
    epsilon : float
        Absolute tolerance for floating-point equality.
    wkt_precision : int
        Decimal places written for each WKT coordinate before trimming.
    """
    epsilon: float = EPSILON
    wkt_precision: int = PRECISION

    def __post_init__(self):
        if not math.isfinite(self.epsilon) or self.epsilon < 0:
            raise ValueError(f"epsilon must be a finite non-negative number, got {self.epsilon!r}")
        if int(self.wkt_precision) != self.wkt_precision or self.wkt_precision < 0:
            raise ValueError(f"wkt_precision must be a non-negative integer, got {self.wkt_precision!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ToleranceConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            log.debug('ignoring unknown tolerance config keys: %s', unknown)
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_DEFAULT = ToleranceConfig()
_CTX: contextvars.ContextVar[ToleranceConfig] = contextvars.ContextVar('mbr_tolerance', default=_DEFAULT)


def get_config() -> ToleranceConfig:
    return _CTX.get()


def set_config(config: ToleranceConfig) -> contextvars.Token:
    """Make ``config`` active in the current context; returns a reset token."""
    log.debug('tolerance config set: %s', config)
    return _CTX.set(config)


def reset_config(token: contextvars.Token) -> None:
    _CTX.reset(token)


@contextmanager
def use_config(config: Optional[ToleranceConfig] = None, **overrides: Any) -> Iterator[ToleranceConfig]:
    """Temporarily activate a configuration.

    ``overrides`` are applied on top of ``config`` (or the currently active
    configuration when none is given).

        with use_config(epsilon=1e-6):
            assert Pt(0.0, 0.0) == Pt(1e-7, 0.0)
    """
    base = config if config is not None else get_config()
    active = replace(base, **overrides) if overrides else base
    token = set_config(active)
    try:
        yield active
    finally:
        reset_config(token)


__all__ = ['ToleranceConfig', 'get_config', 'set_config', 'reset_config', 'use_config']
