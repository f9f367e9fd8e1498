"""Immutable two-dimensional vector used for positions, scales and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

Operand = Union["Vector2D", float, int]


def _pair(value: object) -> Optional[Tuple[float, float]]:
    if isinstance(value, Vector2D):
        return value.x, value.y
    if isinstance(value, (int, float)):
        return value, value
    return None


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass(frozen=True)
class Vector2D:
    """A 2D vector in screen coordinates (y grows downwards).

    Arithmetic works component-wise with another vector or with a scalar,
    which is applied to both components.
    """

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __add__(self, other: Operand) -> Vector2D:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(self.x + pair[0], self.y + pair[1])

    def __sub__(self, other: Operand) -> Vector2D:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(self.x - pair[0], self.y - pair[1])

    def __mul__(self, other: Operand) -> Vector2D:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(self.x * pair[0], self.y * pair[1])

    def __rmul__(self, other: Operand) -> Vector2D:
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> Vector2D:
        pair = _pair(other)
        if pair is None:
            return NotImplemented
        return Vector2D(self.x / pair[0], self.y / pair[1])

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance(self, other: Vector2D) -> float:
        """Distance between this point and ``other``."""
        return (self - other).length()

    def normalized(self) -> Vector2D:
        """Unit vector with the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self / self.length()

    def dot(self, other: Vector2D) -> float:
        """Dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def clamp(self, left: float, right: float, bottom: float, top: float) -> Vector2D:
        """Clamp into a rectangle; ``top`` is the smaller y, as on screen."""
        return Vector2D(_clamp(self.x, left, right), _clamp(self.y, top, bottom))

    def rotated(self, angle: float) -> Vector2D:
        """Return the vector rotated by ``angle`` degrees."""
        radian = math.radians(angle)
        cos_a = math.cos(radian)
        sin_a = math.sin(radian)
        return Vector2D(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)


Vector2D.ZERO = Vector2D(0.0, 0.0)
Vector2D.UP = Vector2D(0.0, -1.0)
Vector2D.DOWN = Vector2D(0.0, 1.0)
Vector2D.LEFT = Vector2D(-1.0, 0.0)
Vector2D.RIGHT = Vector2D(1.0, 0.0)