"""Central numerical tolerances and output precision.

Tiny numeric thresholds used across the package live here so they can be
tuned consistently and referenced without scattering literals.
"""
from __future__ import annotations

# Comparison tolerance
EPSILON: float = 1e-12   # absolute tolerance for floating coordinate equality

# Text output
PRECISION: int = 12      # decimal places emitted for WKT coordinates

__all__ = [
    'EPSILON',
    'PRECISION',
]
