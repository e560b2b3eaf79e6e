"""
Text serialization for points

A point is written as its two coordinates separated by a single space,
with no trailing delimiter: ``Point(1.5, -2)`` <-> ``"1.5 -2"``. A list of
points is written one point per line.

This is the only interchange format surfaces have; surfaces themselves
are code and are not serialized.
"""

from typing import Iterable, List

from ..core.point import Point


class SerializationError(ValueError):
    """Raised when text cannot be parsed as a point"""
    pass


def point_to_text(p: Point) -> str:
    """
    Convert Point to text

    Parameters
    ----------
    p : Point
        Point to serialize

    Returns
    -------
    text : str
        ``"x y"``
    """
    if not isinstance(p, Point):
        raise SerializationError(f"Expected Point, got {type(p).__name__}")
    return str(p)


def point_from_text(text: str) -> Point:
    """
    Convert text to Point

    Parameters
    ----------
    text : str
        Two real numbers separated by whitespace

    Returns
    -------
    point : Point
        Reconstructed point

    Raises
    ------
    SerializationError
        If text does not hold exactly two real numbers

    Examples
    --------
    >>> point_from_text("1.5 -2")
    Point(x=1.5, y=-2.0)
    """
    if not isinstance(text, str):
        raise SerializationError(f"Expected str, got {type(text).__name__}")

    parts = text.split()
    if len(parts) != 2:
        raise SerializationError(f"Expected two coordinates, got {text!r}")

    try:
        x, y = (float(part) for part in parts)
    except ValueError as e:
        raise SerializationError(f"Invalid coordinate in {text!r}: {e}") from e

    return Point(x, y)


def points_to_text(points: Iterable[Point]) -> str:
    """Convert points to text, one point per line"""
    return '\n'.join(point_to_text(p) for p in points)


def points_from_text(text: str) -> List[Point]:
    """
    Convert text to a list of points

    Blank lines are skipped.

    Raises
    ------
    SerializationError
        If any non-blank line is not a valid point
    """
    return [point_from_text(line) for line in text.splitlines() if line.strip()]
