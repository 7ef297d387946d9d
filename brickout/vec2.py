"""Two-dimensional vectors over ints or floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

__all__ = ["Vec2"]

Number = Union[int, float]


def _is_int(value: Number) -> bool:
    return isinstance(value, int)


def _divide(a: Number, b: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if _is_int(a) and _is_int(b):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b > 0) else -quotient
    return a / b


def _round_half_away(value: Number) -> Number:
    if _is_int(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector.

    Integer vectors keep integer arithmetic: division truncates toward zero
    and the length is truncated to an integer.
    """

    x: Number
    y: Number

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: Number) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Number) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(_divide(self.x, scalar), _divide(self.y, scalar))

    def rounded(self) -> Vec2:
        """Round each component, halves away from zero."""
        return Vec2(_round_half_away(self.x), _round_half_away(self.y))

    def to_int(self) -> Vec2:
        """Convert to integers, truncating toward zero."""
        return Vec2(int(self.x), int(self.y))

    def to_float(self) -> Vec2:
        return Vec2(float(self.x), float(self.y))

    def length_sq(self) -> Number:
        return self.x * self.x + self.y * self.y

    def length(self) -> Number:
        if _is_int(self.x) and _is_int(self.y):
            return math.isqrt(self.length_sq())
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vec2:
        """Return a unit vector in the same direction; a zero vector is returned unchanged."""
        length = math.hypot(self.x, self.y)
        if length == 0:
            return self
        return Vec2(self.x / length, self.y / length)