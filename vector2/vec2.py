"""2D vector value type.

Every arithmetic operation returns a new instance and leaves its operands
untouched. Only the ``set_*`` methods mutate a vector in place.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator

from . import config
from .errors import DivisionByZeroError

logger = logging.getLogger(__name__)


def _format_component(value: float) -> str:
    """Render a component the way JavaScript's ``Number#toString`` does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    # Shortest round-trip digits, with value == 0.<digits> * 10**point.
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    point = len(digit_tuple) + exponent
    if len(digits) <= point <= config.FIXED_MAX_POINT:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= config.FIXED_MAX_POINT:
        return sign + digits[:point] + "." + digits[point:]
    if config.FIXED_MIN_POINT < point <= 0:
        return sign + "0." + "0" * -point + digits
    mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
    power = point - 1
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


class _Direction:
    """Class attribute that builds a fresh vector on every access."""

    def __init__(self, components: tuple[float, float]) -> None:
        self._components = components

    def __get__(self, instance: "Vector2 | None", owner: type | None = None) -> "Vector2":
        if owner is None:
            owner = type(instance)
        return owner(*self._components)


@dataclass(eq=False, repr=False)
class Vector2:
    """Point or direction in 2D space."""

    x: float = config.DEFAULT_X
    y: float = config.DEFAULT_Y

    top = _Direction(config.TOP)
    left = _Direction(config.LEFT)
    right = _Direction(config.RIGHT)
    down = _Direction(config.DOWN)

    def __post_init__(self) -> None:
        # Components are float64; ints beyond its range raise OverflowError here.
        self.x = float(self.x)
        self.y = float(self.y)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector2":
        items = tuple(values)
        if len(items) != 2:
            raise ValueError(f"Expected 2 components, got {len(items)}.")
        return cls(items[0], items[1])

    def set_x(self, x: float) -> None:
        self.x = float(x)

    def set_y(self, y: float) -> None:
        self.y = float(y)

    def set_xy(self, x: float, y: float) -> None:
        self.x, self.y = float(x), float(y)

    def equals(self, v: "Vector2") -> bool:
        """Exact componentwise comparison, no tolerance."""
        return self.x == v.x and self.y == v.y

    def is_close(
        self,
        v: "Vector2",
        rel_tol: float = config.DEFAULT_REL_TOL,
        abs_tol: float = config.DEFAULT_ABS_TOL,
    ) -> bool:
        return math.isclose(self.x, v.x, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.y, v.y, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def clone(self) -> "Vector2":
        return type(self)(self.x, self.y)

    def add(self, v: "Vector2") -> "Vector2":
        return type(self)(self.x + v.x, self.y + v.y)

    def sub(self, v: "Vector2") -> "Vector2":
        return type(self)(self.x - v.x, self.y - v.y)

    def mul(self, scalar: float) -> "Vector2":
        return type(self)(self.x * scalar, self.y * scalar)

    def div(self, scalar: float) -> "Vector2":
        """Divide both components by ``scalar``.

        Raises:
            DivisionByZeroError: if ``scalar`` is zero. Infinities are never
                produced silently.
        """
        if scalar == 0:
            logger.debug("Refusing to divide %r by zero", self)
            raise DivisionByZeroError(f"Cannot divide {self!r} by zero.")
        return type(self)(self.x / scalar, self.y / scalar)

    def dot(self, v: "Vector2") -> float:
        return self.x * v.x + self.y * v.y

    def cross(self, v: "Vector2") -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * v.y - self.y * v.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def sqr_length(self) -> float:
        """Squared length, for comparisons that do not need the square root."""
        return self.x ** 2 + self.y ** 2

    def norm(self) -> "Vector2":
        """Unit vector in the same direction, or the zero vector if length is 0."""
        mag = self.length()
        if mag == 0:
            return type(self)(0, 0)
        return type(self)(self.x / mag, self.y / mag)

    def angle(self) -> float:
        """Signed angle to the positive x-axis in radians, within [-pi, pi]."""
        return math.atan2(self.y, self.x)

    def angle_to(self, v: "Vector2") -> float:
        """Unsigned angle between the two vectors in radians, within [0, pi].

        Returns NaN when either vector has zero length.
        """
        mag_product = self.length() * v.length()
        if mag_product == 0:
            return math.nan
        cos_theta = self.dot(v) / mag_product
        if math.isnan(cos_theta):
            return math.nan
        return math.acos(max(-1.0, min(1.0, cos_theta)))

    def distance(self, v: "Vector2") -> float:
        return self.sub(v).length()

    def max(self, v: "Vector2") -> "Vector2":
        return type(self)(max(self.x, v.x), max(self.y, v.y))

    def min(self, v: "Vector2") -> "Vector2":
        return type(self)(min(self.x, v.x), min(self.y, v.y))

    def reflect(self, normal: "Vector2") -> "Vector2":
        """Reflect across ``normal``, which must already be unit length.

        The normal is not normalized here; a longer normal scales the result.
        """
        return self.sub(normal.mul(2 * self.dot(normal)))

    def lerp(self, v: "Vector2", t: float) -> "Vector2":
        """Linear interpolation towards ``v``. ``t`` is not clamped."""
        return self.add(v.sub(self).mul(t))

    def move_toward(self, target: "Vector2", max_distance_delta: float) -> "Vector2":
        """Step towards ``target`` by at most ``max_distance_delta``.

        Returns a copy of ``target`` once it is within reach. A negative
        delta is not rejected and moves away from the target instead.
        """
        if max_distance_delta < 0:
            logger.debug("move_toward called with negative delta %r", max_distance_delta)
        direction = target.sub(self)
        distance = direction.length()
        if distance <= max_distance_delta or distance == 0:
            return target.clone()
        return self.add(direction.div(distance).mul(max_distance_delta))

    def unpack(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_string(self) -> str:
        return f"{config.REPR_NAME}({_format_component(self.x)}, {_format_component(self.y)})"

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.mul(scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.div(scalar)

    def __neg__(self) -> "Vector2":
        return type(self)(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.equals(other)

    def __bool__(self) -> bool:
        return self.x != 0 or self.y != 0

    def __iter__(self) -> Iterator[float]:
        return iter(self.unpack())

    def __copy__(self) -> "Vector2":
        return self.clone()

    def __str__(self) -> str:
        return self.to_string()

    __repr__ = __str__


Vec2 = Vector2


def top() -> Vector2:
    return Vector2(*config.TOP)


def left() -> Vector2:
    return Vector2(*config.LEFT)


def right() -> Vector2:
    return Vector2(*config.RIGHT)


def down() -> Vector2:
    return Vector2(*config.DOWN)
