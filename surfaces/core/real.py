"""
Real number policy for surface evaluation

Every coordinate and every field value is a ``Real``: a Python float
(IEEE-754 binary64). Arrays of reals use ``REAL_DTYPE``.

Field formulas go through numpy ufuncs instead of the ``math`` module so
that non-finite inputs behave the IEEE way:
- floor/ceil/fmod/sqrt/sin/cos of inf or nan return nan/inf
- division by zero returns ±inf or nan

``real_errstate`` silences numpy's floating point signals while a field
is evaluated, keeping every field a total function.
"""

import numbers
from typing import Union

import numpy as np


Real = float
REAL_DTYPE = np.float64

RealLike = Union[int, float, np.floating, np.integer]


def as_real(value: RealLike) -> Real:
    """
    Convert a real number to ``Real``

    Parameters
    ----------
    value : int, float or numpy scalar
        Value to convert

    Returns
    -------
    real : float
        The value as a Python float

    Raises
    ------
    TypeError
        If value is not a real number (strings, None, complex, ...)

    Examples
    --------
    >>> as_real(3)
    3.0
    >>> as_real(np.float32(0.5))
    0.5
    """
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}: {value!r}")
    return float(value)


def real_errstate():
    """Context manager ignoring floating point signals (divide, overflow, invalid)"""
    return np.errstate(all='ignore')


def divide(a: Real, b: Real) -> Real:
    """IEEE division: ``divide(1, 0) == inf``, ``divide(0, 0)`` is nan"""
    with real_errstate():
        return float(np.divide(REAL_DTYPE(a), REAL_DTYPE(b)))
