"""
Sampling surfaces on a lattice

Turns a surface into a 2D numpy array by evaluating it at every node of a
rectangular lattice. Rows follow y and columns follow x, so
``out[j, i] == f(Point(xs[i], ys[j]))``.
"""

from typing import Sequence, Union

import numpy as np

from ..core.point import Point, ORIGIN
from ..core.real import REAL_DTYPE, RealLike, as_real
from .surface import SurfaceLike, as_surface


ArrayLike = Union[Sequence[RealLike], np.ndarray]


def _axis(values: ArrayLike, name: str) -> np.ndarray:
    axis = np.asarray(values, dtype=REAL_DTYPE)
    if axis.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional, got shape {axis.shape}")
    return axis


def sample(f: SurfaceLike, xs: ArrayLike, ys: ArrayLike) -> np.ndarray:
    """
    Evaluate a surface on the lattice xs × ys

    Parameters
    ----------
    f : Surface or Callable[[Point], Real]
        Surface to sample
    xs : array-like
        x coordinates (columns)
    ys : array-like
        y coordinates (rows)

    Returns
    -------
    values : np.ndarray
        Array of shape (len(ys), len(xs)) and dtype REAL_DTYPE

    Raises
    ------
    ValueError
        If xs or ys is not 1-dimensional

    Examples
    --------
    >>> from surfaces import stripes
    >>> sample(stripes(), [0.5, 1.5, 2.5], [0.0])
    array([[1., 0., 1.]])
    """
    surface = as_surface(f)
    xs = _axis(xs, "xs")
    ys = _axis(ys, "ys")

    values = np.empty((len(ys), len(xs)), dtype=REAL_DTYPE)
    for j, i in np.ndindex(values.shape):
        values[j, i] = surface(Point(xs[i], ys[j]))

    return values


def sample_region(
    f: SurfaceLike,
    width: int,
    height: int,
    origin: Point = ORIGIN,
    step: RealLike = 1.0
) -> np.ndarray:
    """
    Evaluate a surface on a regular grid

    Parameters
    ----------
    f : Surface or Callable[[Point], Real]
        Surface to sample
    width, height : int
        Number of columns and rows
    origin : Point
        Coordinates of the node at [0, 0]
    step : float
        Spacing between neighbouring nodes

    Returns
    -------
    values : np.ndarray
        Array of shape (height, width)

    Raises
    ------
    ValueError
        If width or height is negative or step is not positive
    """
    for name, n in (("width", width), ("height", height)):
        if not isinstance(n, (int, np.integer)) or isinstance(n, bool) or n < 0:
            raise ValueError(f"{name} must be a non-negative integer, got {n!r}")
    step = as_real(step)
    if not step > 0:
        raise ValueError(f"step must be positive, got {step}")

    origin = Point.from_tuple(origin)
    xs = origin.x + step * np.arange(width, dtype=REAL_DTYPE)
    ys = origin.y + step * np.arange(height, dtype=REAL_DTYPE)
    return sample(f, xs, ys)
