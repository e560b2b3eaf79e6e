"""
Utilities: point text serialization
"""

from .serialization import (
    SerializationError,
    point_to_text,
    point_from_text,
    points_to_text,
    points_from_text,
)

__all__ = [
    'SerializationError',
    'point_to_text',
    'point_from_text',
    'points_to_text',
    'points_from_text',
]
