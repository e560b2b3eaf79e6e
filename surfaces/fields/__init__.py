"""
Surfaces over the plane

A surface maps each point of the plane to a real number. This module
provides the Surface type, the base generators and lattice sampling:
- Base patterns: plain, slope, steps, checker, sqr, sin/cos waves
- Periodic patterns: rings, stripes
- Shapes: ellipse, rectangle

Examples
--------
>>> from surfaces import Point
>>> from surfaces.fields import checker, sample_region
>>>
>>> board = checker(2)
>>> board(Point(0, 0))
1.0
>>> values = sample_region(board, width=8, height=8)
"""

from .surface import (
    Surface,
    FunctionSurface,
    as_surface,
)

from .generators import (
    Plain,
    Slope,
    Steps,
    Checker,
    Sqr,
    SinWave,
    CosWave,
    Rings,
    Ellipse,
    Rectangle,
    Stripes,
    plain,
    slope,
    steps,
    checker,
    sqr,
    sin_wave,
    cos_wave,
    rings,
    ellipse,
    rectangle,
    stripes,
)

from .sampling import (
    sample,
    sample_region,
)

__all__ = [
    # Core surface types
    'Surface',
    'FunctionSurface',
    'as_surface',

    # Generator types
    'Plain',
    'Slope',
    'Steps',
    'Checker',
    'Sqr',
    'SinWave',
    'CosWave',
    'Rings',
    'Ellipse',
    'Rectangle',
    'Stripes',

    # Generators
    'plain',
    'slope',
    'steps',
    'checker',
    'sqr',
    'sin_wave',
    'cos_wave',
    'rings',
    'ellipse',
    'rectangle',
    'stripes',

    # Sampling
    'sample',
    'sample_region',
]
