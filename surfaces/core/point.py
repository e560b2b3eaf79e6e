"""
Immutable 2D point

A Point is the only input a surface ever sees: two real coordinates
``x`` and ``y``. Points are value objects, so two points with the same
coordinates are interchangeable (equal and with the same hash).

Text form is ``"x y"``: the coordinates separated by a single space,
each in shortest general notation.
"""

from typing import Iterator, Tuple, Sequence

import numpy as np

from .real import Real, REAL_DTYPE, RealLike, as_real


class Point:
    """
    Immutable point in the plane

    Parameters
    ----------
    x : float
        Horizontal coordinate
    y : float
        Vertical coordinate

    Examples
    --------
    >>> p = Point(1.5, -2)
    >>> print(p)
    1.5 -2
    >>> p
    Point(x=1.5, y=-2.0)
    >>> p == Point(1.5, -2.0)
    True
    >>> x, y = p
    """

    __slots__ = ('_x', '_y', '_hash')

    def __init__(self, x: RealLike, y: RealLike):
        """
        Initialize point

        Raises
        ------
        TypeError
            If x or y is not a real number
        """
        x = as_real(x)
        y = as_real(y)
        object.__setattr__(self, '_x', x)
        object.__setattr__(self, '_y', y)
        object.__setattr__(self, '_hash', hash((x, y)))

    @property
    def x(self) -> Real:
        """Horizontal coordinate"""
        return self._x

    @property
    def y(self) -> Real:
        """Vertical coordinate"""
        return self._y

    def __setattr__(self, name, value):
        """Prevent modification (immutable)"""
        raise AttributeError("Point objects are immutable")

    def __delattr__(self, name):
        """Prevent deletion"""
        raise AttributeError("Point objects are immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return self._hash

    def __iter__(self) -> Iterator[Real]:
        yield self._x
        yield self._y

    def __repr__(self) -> str:
        return f"Point(x={self._x!r}, y={self._y!r})"

    def __str__(self) -> str:
        """Text form ``"x y"``"""
        return f"{self._x:g} {self._y:g}"

    def __reduce__(self):
        # __setattr__ is blocked, so pickle/copy must go through __init__
        return (Point, (self._x, self._y))

    def to_tuple(self) -> Tuple[Real, Real]:
        """Return as (x, y) tuple"""
        return (self._x, self._y)

    @classmethod
    def from_tuple(cls, coords: Sequence[RealLike]) -> 'Point':
        """
        Create point from a pair of coordinates

        Parameters
        ----------
        coords : Sequence
            Exactly two real numbers

        Raises
        ------
        TypeError
            If coords is not a pair of real numbers
        """
        if isinstance(coords, Point):
            return coords
        try:
            x, y = coords
        except (TypeError, ValueError):
            raise TypeError(f"Expected a pair of coordinates, got {coords!r}") from None
        return cls(x, y)

    def to_vector(self) -> np.ndarray:
        """
        Convert to 2D vector [x, y]

        Returns
        -------
        vec : np.ndarray
            Array of dtype REAL_DTYPE
        """
        return np.array([self._x, self._y], dtype=REAL_DTYPE)


ORIGIN = Point(0, 0)
