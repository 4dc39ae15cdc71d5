"""2D vector value type with geometric helpers."""

import logging

from .errors import DivisionByZeroError
from .vec2 import Vec2, Vector2, down, left, right, top

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DivisionByZeroError",
    "Vec2",
    "Vector2",
    "down",
    "left",
    "right",
    "top",
]
