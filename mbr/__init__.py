"""Public package API for the mbr toolkit.

A flat import surface over the internal ``mbr.core`` modules: the ``MBR``
rectangle, the ``Pt``/``Pt3d`` value types, tolerance helpers and the
tolerance configuration.

Example
-------
    from mbr import MBR

    a = MBR(0, 0, 2, 2)
    b = MBR(4, 5, 8, 9)
    a.distance(b)        # 3.605551275463989
    a.intersection(b)    # None
    a.to_wkt()           # 'POLYGON ((0 0, 0 2, 2 2, 2 0, 0 0))'

The deeper modules (``mbr.core.*``) are considered internal and may change;
rely on this layer for public symbols.
"""
import logging as _logging
from importlib.metadata import PackageNotFoundError as _NotFound, version as _pkg_version

try:
    __version__ = _pkg_version("mbr")  # populated when installed
except _NotFound:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core import constants
from .core.config import ToleranceConfig, get_config, reset_config, set_config, use_config
from .core.constants import EPSILON, PRECISION
from .core.logging_utils import configure_logging, get_logger
from .core.mbr import MBR
from .core.numerics import nearly_equal, round_floor, round_half_away
from .core.point import Pt, Pt3d
from .core.scalar import DECIMAL, INTEGER, RATIONAL, ExactScalar, FloatScalar, Scalar, scalar_for
from .core.wkt import format_coordinate, polygon_wkt

__all__ = [
    '__version__',
    # rectangle and points
    'MBR', 'Pt', 'Pt3d',
    # tolerances
    'EPSILON', 'PRECISION', 'nearly_equal', 'round_floor', 'round_half_away',
    # coordinate domains
    'Scalar', 'ExactScalar', 'FloatScalar', 'INTEGER', 'RATIONAL', 'DECIMAL', 'scalar_for',
    # configuration and logging
    'ToleranceConfig', 'get_config', 'set_config', 'reset_config', 'use_config',
    'configure_logging', 'get_logger',
    # text output
    'format_coordinate', 'polygon_wkt',
    # namespaces
    'constants',
]
