"""
Domain transform combinators

Each combinator wraps one surface and returns a new surface. Most remap
the query point and then delegate to the wrapped surface (pre-transform);
``mul`` and ``add`` instead rescale or shift the wrapped surface's value
(post-transform).

Combinators nest freely:

>>> from surfaces import checker, rotate, translate, scale, Point
>>> f = rotate(scale(translate(checker(), Point(0.5, 0.5)), Point(2, 2)), 45)
"""

from typing import Sequence, Union
from dataclasses import dataclass, field as dataclass_field
import warnings

import numpy as np

from ..core.point import Point
from ..core.real import Real, REAL_DTYPE, RealLike, as_real, real_errstate
from ..fields.surface import Surface, SurfaceLike, as_surface


VectorLike = Union[Point, Sequence[RealLike]]


# ============================================================================
# Point remapping (pre-transform)
# ============================================================================

@dataclass(frozen=True)
class Rotate(Surface):
    """
    Surface rotated clockwise by ``degrees``

    Rotating the surface by an angle is the same as sampling the wrapped
    surface at the query point rotated by minus that angle.
    """
    field: Surface
    degrees: Real
    _cos: float = dataclass_field(init=False, repr=False, compare=False)
    _sin: float = dataclass_field(init=False, repr=False, compare=False)

    def __post_init__(self):
        with real_errstate():
            radians = -np.deg2rad(REAL_DTYPE(self.degrees))
            object.__setattr__(self, '_cos', float(np.cos(radians)))
            object.__setattr__(self, '_sin', float(np.sin(radians)))

    def __call__(self, p: Point) -> Real:
        c, s = self._cos, self._sin
        return self.field(Point(p.x * c - p.y * s, p.x * s + p.y * c))


@dataclass(frozen=True)
class Translate(Surface):
    """Surface sampled at p + (|v.x|, |v.y|)"""
    field: Surface
    offset: Point

    def __call__(self, p: Point) -> Real:
        return self.field(Point(p.x + abs(self.offset.x), p.y + abs(self.offset.y)))


@dataclass(frozen=True)
class Scale(Surface):
    """
    Surface sampled at (x / s.x, y / s.y)

    A zero factor is not guarded: the division yields ±inf or nan and the
    wrapped surface sees non-finite coordinates.
    """
    field: Surface
    factors: Point

    def __call__(self, p: Point) -> Real:
        with real_errstate():
            x = np.divide(REAL_DTYPE(p.x), self.factors.x)
            y = np.divide(REAL_DTYPE(p.y), self.factors.y)
        return self.field(Point(x, y))


@dataclass(frozen=True)
class Invert(Surface):
    """Surface reflected across the diagonal y = x"""
    field: Surface

    def __call__(self, p: Point) -> Real:
        return self.field(Point(p.y, p.x))


@dataclass(frozen=True)
class Flip(Surface):
    """Surface mirrored across the y axis"""
    field: Surface

    def __call__(self, p: Point) -> Real:
        return self.field(Point(-p.x, p.y))


# ============================================================================
# Value remapping (post-transform)
# ============================================================================

@dataclass(frozen=True)
class Mul(Surface):
    """Surface value multiplied by c"""
    field: Surface
    c: Real

    def __call__(self, p: Point) -> Real:
        return self.field(p) * self.c


@dataclass(frozen=True)
class Add(Surface):
    """Surface value plus c"""
    field: Surface
    c: Real

    def __call__(self, p: Point) -> Real:
        return self.field(p) + self.c


# ============================================================================
# Factories
# ============================================================================

def rotate(f: SurfaceLike, deg: RealLike) -> Surface:
    """
    Rotate a surface clockwise

    Parameters
    ----------
    f : Surface
        Surface to rotate
    deg : float
        Angle in degrees

    Returns
    -------
    rotated : Surface
        ``rotate(f, 0)`` equals f and ``rotate(f, 360)`` equals f up to
        rounding

    Examples
    --------
    >>> from surfaces import slope
    >>> rotate(slope(), 90)(Point(0, 1))
    1.0
    """
    return Rotate(as_surface(f), as_real(deg))


def translate(f: SurfaceLike, v: VectorLike) -> Surface:
    """
    Shift the sampling point by the absolute value of v

    ``translate(f, v)(p) == f(Point(p.x + |v.x|, p.y + |v.y|))``. The sign
    of each component of v is ignored.

    Parameters
    ----------
    f : Surface
        Surface to translate
    v : Point or (x, y)
        Offset

    Raises
    ------
    TypeError
        If v is not a pair of real numbers
    """
    return Translate(as_surface(f), Point.from_tuple(v))


def scale(f: SurfaceLike, s: VectorLike) -> Surface:
    """
    Stretch a surface by s.x horizontally and s.y vertically

    Parameters
    ----------
    f : Surface
        Surface to scale
    s : Point or (x, y)
        Scale factors

    Warns
    -----
    RuntimeWarning
        If either factor is zero; the resulting surface is non-finite
        (or whatever f makes of infinite coordinates) everywhere

    Examples
    --------
    >>> from surfaces import steps
    >>> scale(steps(), Point(2, 1))(Point(5, 0))
    2.0
    """
    factors = Point.from_tuple(s)
    if factors.x == 0 or factors.y == 0:
        warnings.warn(
            f"scale factor {factors} has a zero component; "
            f"the scaled surface samples non-finite coordinates",
            RuntimeWarning,
            stacklevel=2
        )
    return Scale(as_surface(f), factors)


def invert(f: SurfaceLike) -> Surface:
    """Swap x and y before sampling f"""
    return Invert(as_surface(f))


def flip(f: SurfaceLike) -> Surface:
    """Negate x before sampling f"""
    return Flip(as_surface(f))


def mul(f: SurfaceLike, c: RealLike) -> Surface:
    """Multiply the value of f by c"""
    return Mul(as_surface(f), as_real(c))


def add(f: SurfaceLike, c: RealLike) -> Surface:
    """Add c to the value of f"""
    return Add(as_surface(f), as_real(c))
