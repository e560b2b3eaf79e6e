"""
Surfaces: an algebra of scalar fields over the plane

A surface is a pure function from a 2D point to a real number. Base
generators (stripes, rings, checkers, ellipses, ...) are reshaped by
transform combinators (rotate, translate, scale, invert, flip, mul, add)
and merged with evaluate and compose.

Examples
--------
>>> from surfaces import Point, checker, rings, rotate, evaluate
>>>
>>> board = rotate(checker(2), 45)
>>> pattern = evaluate(lambda a, b: a * b, board, rings(3))
>>> pattern(Point(0, 0))
1.0
"""

from .core import (
    Real,
    REAL_DTYPE,
    as_real,
    Point,
    ORIGIN,
)

from .fields import (
    Surface,
    FunctionSurface,
    as_surface,
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
    sample,
    sample_region,
)

from .combinators import (
    rotate,
    translate,
    scale,
    invert,
    flip,
    mul,
    add,
    evaluate,
    compose,
    identity,
)

from .utils import (
    SerializationError,
    point_to_text,
    point_from_text,
)

__version__ = '0.1.0'

__all__ = [
    # Core
    'Real',
    'REAL_DTYPE',
    'as_real',
    'Point',
    'ORIGIN',

    # Surfaces
    'Surface',
    'FunctionSurface',
    'as_surface',

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

    # Combinators
    'rotate',
    'translate',
    'scale',
    'invert',
    'flip',
    'mul',
    'add',
    'evaluate',
    'compose',
    'identity',

    # Serialization
    'SerializationError',
    'point_to_text',
    'point_from_text',
]
