"""Two-dimensional vectors and transforms."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from typing import Callable, Iterator, Union

Operand = Union["Vector2", float, int]


def _trunc_mod(a: int, b: int) -> int:
    """Integer remainder that keeps the sign of the dividend."""
    if b == 0:
        raise ZeroDivisionError("integer modulo by zero")
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


@dataclass
class Vector2:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vector2 index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def _combine(self, other: Operand, op: Callable[[float, float], float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(op(self.x, other.x), op(self.y, other.y))
        if isinstance(other, (int, float)):
            return Vector2(op(self.x, other), op(self.y, other))
        return NotImplemented

    def __add__(self, other: Operand) -> Vector2:
        return self._combine(other, operator.add)

    def __sub__(self, other: Operand) -> Vector2:
        return self._combine(other, operator.sub)

    def __mul__(self, other: Operand) -> Vector2:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: Operand) -> Vector2:
        return self._combine(other, operator.truediv)

    def __mod__(self, other: Operand) -> Vector2:
        """Component-wise remainder of the truncated integer parts."""
        return self._combine(other, lambda a, b: _trunc_mod(int(a), int(b)))

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def angle(self) -> float:
        """Angle of the vector in radians, measured from the positive x axis."""
        return math.atan2(self.y, self.x)

    def rotate(self, radians: float) -> Vector2:
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return Vector2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def normalized(self) -> Vector2:
        return self / self.length()

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)


@dataclass
class Transform:
    """Position, rotation (radians) and uniform scale of an actor."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: float = 1.0