"""Logging utilities for the mbr package.

Provides a consistent logger hierarchy under the ``mbr`` namespace without
touching the process root logger. Package modules obtain their loggers via
get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

ROOT_NAME = 'mbr'

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_mbr_root() -> logging.Logger:
    """Give the 'mbr' logger a single stream handler, isolated from the
    process root logger. Returns the 'mbr' logger.
    """
    root = logging.getLogger(ROOT_NAME)
    has_stream = any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    if not has_stream:
        # NullHandler from the package __init__ would otherwise swallow records
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Set the level of the 'mbr' logger family.

    The process root logger is left alone.
    """
    root = _ensure_mbr_root()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'mbr' namespace.

    Names outside the namespace are prefixed with ``mbr.``. Without an
    explicit level the logger is NOTSET and inherits from the 'mbr' parent
    configured via configure_logging().
    """
    _ensure_mbr_root()
    if name != ROOT_NAME and not name.startswith(ROOT_NAME + '.'):
        name = f'{ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging', 'ROOT_NAME']
