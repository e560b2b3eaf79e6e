"""
Variadic composition of surfaces and functions

Two ways to combine more than one callable:

- evaluate: parallel sampling. Several surfaces are evaluated at the same
  point and a host function merges the results.
- compose: sequential chaining. Each function's output is the sole input
  of the next one (left-to-right, pipeline style).

Examples
--------
>>> from surfaces import checker, rings, Point
>>> blend = evaluate(lambda a, b: 0.5 * (a + b), checker(), rings())
>>> blend(Point(0, 0))
1.0
>>> twice_then_inc = compose(lambda x: 2 * x, lambda x: x + 1)
>>> twice_then_inc(3)
7
"""

from typing import Any, Callable, Tuple
from dataclasses import dataclass
import numbers

from ..core.point import Point
from ..fields.surface import Surface


def _check_callable(f: Any, role: str) -> None:
    if not callable(f):
        raise TypeError(f"{role} must be callable, got {type(f).__name__}")


def _name(f: Callable) -> str:
    return getattr(f, '__name__', type(f).__name__)


@dataclass(frozen=True)
class Evaluate(Surface):
    """
    Surface p -> host(f1(p), ..., fn(p))

    Attributes
    ----------
    host : Callable
        Function merging the sampled values; takes len(fields) arguments
    fields : Tuple[Callable, ...]
        Surfaces sampled at each query point, in order
    """
    host: Callable[..., Any]
    fields: Tuple[Callable[[Point], Any], ...]

    def __call__(self, p: Point):
        result = self.host(*(f(p) for f in self.fields))
        if isinstance(result, numbers.Real):
            return float(result)
        return result

    def __repr__(self) -> str:
        fields = ', '.join(repr(f) if isinstance(f, Surface) else _name(f) for f in self.fields)
        return f"Evaluate({_name(self.host)}; {fields})"


def evaluate(h: Callable[..., Any], *fields: Callable[[Point], Any]) -> Evaluate:
    """
    Sample several surfaces at one point and merge the values with h

    ``evaluate(h, f1, f2)(p) == h(f1(p), f2(p))``

    Parameters
    ----------
    h : Callable
        Host function; must accept as many positional arguments as there
        are fields (a mismatch raises TypeError when the surface is called)
    *fields : Surface or Callable[[Point], Real]
        Surfaces to sample

    Returns
    -------
    merged : Evaluate
        Surface whose value is h's result (as float when it is a real
        number)

    Raises
    ------
    TypeError
        If h or any field is not callable

    Examples
    --------
    >>> from surfaces import slope, sqr
    >>> diff = evaluate(lambda a, b: b - a, slope(), sqr())
    >>> diff(Point(3, 0))
    6.0
    """
    _check_callable(h, "Host function")
    for i, f in enumerate(fields):
        _check_callable(f, f"Field {i}")
    return Evaluate(h, tuple(fields))


def identity(*args):
    """
    Return the arguments unchanged

    A single argument is returned as is; several are returned as a tuple.
    """
    if len(args) == 1:
        return args[0]
    return args


def compose(*functions: Callable) -> Callable:
    """
    Compose functions left-to-right (pipeline style)

    compose(f, g, h)(x) = h(g(f(x)))

    The first function receives every argument passed to the composed
    function; each later function receives the previous result.

    Parameters
    ----------
    *functions : Callable
        Functions to chain; need not be surfaces

    Returns
    -------
    composed : Callable
        Chained function, or ``identity`` when no function is given.
        Exposes the chain as ``composed.stages``.

    Raises
    ------
    TypeError
        If any function is not callable

    Examples
    --------
    >>> from surfaces import rotate, checker, Point
    >>> shade = compose(rotate(checker(), 45), lambda v: 1 - v)
    >>> shade(Point(0, 0))
    0.0
    """
    if not functions:
        return identity

    for i, f in enumerate(functions):
        _check_callable(f, f"Function {i}")

    first, rest = functions[0], functions[1:]

    def composed(*args, **kwargs):
        result = first(*args, **kwargs)
        for f in rest:
            result = f(result)
        return result

    # Set helpful name
    composed.__name__ = ' -> '.join(_name(f) for f in functions)
    composed.stages = tuple(functions)

    return composed
