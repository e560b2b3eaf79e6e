"""
Core surface types

A surface is a scalar field over the plane: a pure function Point -> Real.
Every generator and combinator in this package returns a Surface, an
immutable value object whose attributes are the parameters it was built
with. Plain callables are accepted anywhere a surface is expected and are
wrapped by ``as_surface``.
"""

from typing import Callable, Union
from abc import ABC, abstractmethod
from dataclasses import dataclass
import numbers

from ..core.point import Point
from ..core.real import Real


class Surface(ABC):
    """
    Abstract base class for surfaces

    A surface is evaluated by calling it with a Point and always returns
    a float. Surfaces hold no mutable state, so a surface may be shared
    and evaluated from several threads at once.

    Examples
    --------
    >>> from surfaces import checker, rotate, Point
    >>> f = rotate(checker(2), 30)
    >>> f(Point(1, 1))
    1.0
    >>> g = 0.5 * f + 1     # mul(f, 0.5) then add(..., 1)
    >>> g.at(1, 1)
    1.5
    """

    __slots__ = ()

    @abstractmethod
    def __call__(self, p: Point) -> Real:
        """Evaluate surface at point p"""
        pass

    def at(self, x: Real, y: Real) -> Real:
        """Evaluate surface at (x, y)"""
        return self(Point(x, y))

    def __mul__(self, c):
        if not isinstance(c, numbers.Real):
            return NotImplemented
        from ..combinators.transforms import mul
        return mul(self, c)

    __rmul__ = __mul__

    def __add__(self, c):
        if not isinstance(c, numbers.Real):
            return NotImplemented
        from ..combinators.transforms import add
        return add(self, c)

    __radd__ = __add__


@dataclass(frozen=True)
class FunctionSurface(Surface):
    """
    Surface backed by an arbitrary callable

    Parameters
    ----------
    func : Callable[[Point], Real]
        Function evaluated at each point; its result is converted to float
    """
    func: Callable[[Point], Real]

    def __call__(self, p: Point) -> Real:
        return float(self.func(p))

    def __repr__(self) -> str:
        name = getattr(self.func, '__name__', type(self.func).__name__)
        return f"FunctionSurface({name})"


SurfaceLike = Union[Surface, Callable[[Point], Real]]


def as_surface(f: SurfaceLike) -> Surface:
    """
    Coerce a callable to a Surface

    Parameters
    ----------
    f : Surface or Callable[[Point], Real]
        Surface (returned unchanged) or plain function

    Returns
    -------
    surface : Surface

    Raises
    ------
    TypeError
        If f is not callable

    Examples
    --------
    >>> diagonal = as_surface(lambda p: p.x + p.y)
    >>> diagonal(Point(1, 2))
    3.0
    """
    if isinstance(f, Surface):
        return f
    if not callable(f):
        raise TypeError(f"Expected a Surface or callable, got {type(f).__name__}")
    return FunctionSurface(f)
