"""
Surfaces Core Module

Numeric policy and the point type every surface is evaluated on.

This module provides:
- Real: Scalar type used for coordinates and field values
- Point: Immutable 2D coordinate
"""

from .real import (
    Real,
    REAL_DTYPE,
    as_real,
    real_errstate,
    divide,
)

from .point import (
    Point,
    ORIGIN,
)

__all__ = [
    # Numeric policy
    'Real',
    'REAL_DTYPE',
    'as_real',
    'real_errstate',
    'divide',

    # Points
    'Point',
    'ORIGIN',
]
