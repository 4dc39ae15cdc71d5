"""Default values used by the Vector2 value type."""

from __future__ import annotations

DEFAULT_X = 0
DEFAULT_Y = 0

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 0.0

REPR_NAME = "Vector2"
# Decimal-point positions rendered without an exponent.
FIXED_MAX_POINT = 21
FIXED_MIN_POINT = -6

# Screen-style axes: y grows downwards.
TOP = (0, -1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DOWN = (0, 1)
