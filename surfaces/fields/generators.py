"""
Base surface generators

Each generator is a factory taking numeric parameters and returning a
Surface. Generators do not depend on other surfaces.

Degenerate parameters never raise: a non-positive scale or extent gives
a surface that is 0 everywhere.

Generators
----------
plain     : 0
slope     : x
steps     : floor(x/s)
checker   : (|floor(x/s)| + |floor(y/s) + 1|) mod 2
sqr       : x²
sin_wave  : sin(x)
cos_wave  : cos(x)
rings     : ceil(|p|/s) mod 2, 1 at the origin
ellipse   : 1 inside x²/a² + y²/b² <= 1, else 0
rectangle : 1 inside |x| <= |b|, |y| <= |a|, else 0
stripes   : |ceil(x/s) mod 2|
"""

from typing import Tuple
from dataclasses import dataclass

import numpy as np

from ..core.point import Point
from ..core.real import Real, REAL_DTYPE, RealLike, as_real, real_errstate
from .surface import Surface


def _xy(p: Point) -> Tuple[np.float64, np.float64]:
    """Point coordinates as numpy scalars (IEEE arithmetic without exceptions)"""
    return REAL_DTYPE(p.x), REAL_DTYPE(p.y)


# ============================================================================
# Elementary surfaces
# ============================================================================

@dataclass(frozen=True)
class Plain(Surface):
    """Constant 0"""

    def __call__(self, p: Point) -> Real:
        return 0.0


@dataclass(frozen=True)
class Slope(Surface):
    """Identity on x"""

    def __call__(self, p: Point) -> Real:
        return p.x


@dataclass(frozen=True)
class Sqr(Surface):
    """Square of x"""

    def __call__(self, p: Point) -> Real:
        x, _ = _xy(p)
        with real_errstate():
            return float(x * x)


@dataclass(frozen=True)
class SinWave(Surface):
    """Sine of x"""

    def __call__(self, p: Point) -> Real:
        with real_errstate():
            return float(np.sin(REAL_DTYPE(p.x)))


@dataclass(frozen=True)
class CosWave(Surface):
    """Cosine of x"""

    def __call__(self, p: Point) -> Real:
        with real_errstate():
            return float(np.cos(REAL_DTYPE(p.x)))


# ============================================================================
# Periodic patterns
# ============================================================================

@dataclass(frozen=True)
class Steps(Surface):
    """
    Staircase along x

    Parameters
    ----------
    s : float
        Step width; s <= 0 gives 0 everywhere
    """
    s: Real = 1.0

    def __call__(self, p: Point) -> Real:
        if self.s <= 0:
            return 0.0
        x, _ = _xy(p)
        with real_errstate():
            return float(np.floor(x / self.s))


@dataclass(frozen=True)
class Checker(Surface):
    """
    Checkerboard of 0/1 cells of side s

    The cell containing the origin's upper-right quadrant is 1:
    checker(1) at (0, 0) is 1 and at (1.5, 0) is 0.

    Parameters
    ----------
    s : float
        Cell size; s <= 0 gives 0 everywhere
    """
    s: Real = 1.0

    def __call__(self, p: Point) -> Real:
        if self.s <= 0:
            return 0.0
        x, y = _xy(p)
        with real_errstate():
            column = np.abs(np.floor(x / self.s))
            row = np.abs(np.floor(y / self.s) + 1)
            return float(np.fmod(column + row, 2))


@dataclass(frozen=True)
class Rings(Surface):
    """
    Concentric 0/1 rings of width s around the origin

    Parameters
    ----------
    s : float
        Ring width; s <= 0 gives 0 everywhere

    Notes
    -----
    The origin itself is 1 (ceil(0) would otherwise put it in a 0 ring).
    """
    s: Real = 1.0

    def __call__(self, p: Point) -> Real:
        if self.s <= 0:
            return 0.0
        if p.x == 0 and p.y == 0:
            return 1.0
        x, y = _xy(p)
        with real_errstate():
            radius = np.sqrt(x * x + y * y)
            return float(np.fmod(np.ceil(radius / self.s), 2))


@dataclass(frozen=True)
class Stripes(Surface):
    """
    Vertical 0/1 stripes of width s

    Parameters
    ----------
    s : float
        Stripe width; s <= 0 gives 0 everywhere
    """
    s: Real = 1.0

    def __call__(self, p: Point) -> Real:
        if self.s <= 0:
            return 0.0
        x, _ = _xy(p)
        with real_errstate():
            return float(np.abs(np.fmod(np.ceil(x / self.s), 2)))


# ============================================================================
# Shapes (indicator surfaces)
# ============================================================================

@dataclass(frozen=True)
class Ellipse(Surface):
    """
    Indicator of the ellipse x²/a² + y²/b² <= 1

    Parameters
    ----------
    a : float
        Semi-axis along x
    b : float
        Semi-axis along y
    """
    a: Real = 1.0
    b: Real = 1.0

    def __call__(self, p: Point) -> Real:
        if self.a <= 0 or self.b <= 0:
            return 0.0
        x, y = _xy(p)
        with real_errstate():
            inside = x * x / (self.a * self.a) + y * y / (self.b * self.b) <= 1
        return 1.0 if inside else 0.0


@dataclass(frozen=True)
class Rectangle(Surface):
    """
    Indicator of the axis-aligned rectangle centred at the origin

    Parameters
    ----------
    a : float
        Half-extent along y
    b : float
        Half-extent along x

    Notes
    -----
    ``a`` bounds y and ``b`` bounds x, the opposite of Ellipse.
    """
    a: Real = 1.0
    b: Real = 1.0

    def __call__(self, p: Point) -> Real:
        if self.a <= 0 or self.b <= 0:
            return 0.0
        half_x = abs(self.b)
        half_y = abs(self.a)
        inside = -half_x <= p.x <= half_x and -half_y <= p.y <= half_y
        return 1.0 if inside else 0.0


# ============================================================================
# Factories
# ============================================================================

def plain() -> Surface:
    """Surface that is 0 everywhere"""
    return Plain()


def slope() -> Surface:
    """Surface equal to the x coordinate"""
    return Slope()


def steps(s: RealLike = 1) -> Surface:
    """
    Staircase floor(x/s)

    Examples
    --------
    >>> steps(2)(Point(5, 0))
    2.0
    >>> steps(0)(Point(5, 0))
    0.0
    """
    return Steps(as_real(s))


def checker(s: RealLike = 1) -> Surface:
    """
    Checkerboard with cells of size s

    Examples
    --------
    >>> checker(1)(Point(0, 0))
    1.0
    >>> checker(1)(Point(1.5, 0))
    0.0
    """
    return Checker(as_real(s))


def sqr() -> Surface:
    """Surface equal to x²"""
    return Sqr()


def sin_wave() -> Surface:
    """Surface equal to sin(x)"""
    return SinWave()


def cos_wave() -> Surface:
    """Surface equal to cos(x)"""
    return CosWave()


def rings(s: RealLike = 1) -> Surface:
    """
    Concentric rings of width s, alternating 1 and 0 outwards

    Examples
    --------
    >>> rings(1)(Point(0, 0))
    1.0
    >>> rings(1)(Point(1.5, 0))
    0.0
    """
    return Rings(as_real(s))


def ellipse(a: RealLike = 1, b: RealLike = 1) -> Surface:
    """Indicator of the ellipse with semi-axes a (x) and b (y)"""
    return Ellipse(as_real(a), as_real(b))


def rectangle(a: RealLike = 1, b: RealLike = 1) -> Surface:
    """Indicator of the rectangle |x| <= b, |y| <= a"""
    return Rectangle(as_real(a), as_real(b))


def stripes(s: RealLike = 1) -> Surface:
    """
    Vertical stripes of width s

    Examples
    --------
    >>> stripes(1)(Point(0.5, 0))
    1.0
    >>> stripes(1)(Point(1.5, 0))
    0.0
    """
    return Stripes(as_real(s))
