"""RGBA colours with component values nominally between 0 and 1."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from trigrun.mathutils import clamp

Operand = Union["Color", float, int]


class ColorPreset(Enum):
    YELLOW = "yellow"
    RED = "red"
    BLUE = "blue"
    CYAN = "cyan"
    PINK = "pink"
    GREEN = "green"
    WHITE = "white"
    BLACK = "black"


# Blue shares pink's components; presets leave alpha at zero.
_PRESETS = {
    ColorPreset.RED: (1.0, 0.0, 0.0),
    ColorPreset.GREEN: (0.0, 1.0, 0.0),
    ColorPreset.YELLOW: (1.0, 1.0, 0.0),
    ColorPreset.BLUE: (1.0, 0.0, 1.0),
    ColorPreset.PINK: (1.0, 0.0, 1.0),
    ColorPreset.CYAN: (0.0, 1.0, 1.0),
    ColorPreset.WHITE: (1.0, 1.0, 1.0),
    ColorPreset.BLACK: (0.0, 0.0, 0.0),
}


@dataclass
class Color:
    """An RGBA colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def __post_init__(self) -> None:
        self.r = float(self.r)
        self.g = float(self.g)
        self.b = float(self.b)
        self.a = float(self.a)

    @classmethod
    def from_preset(cls, preset: ColorPreset) -> Color:
        r, g, b = _PRESETS[preset]
        return cls(r, g, b)

    def __getitem__(self, index: int) -> float:
        components = (self.r, self.g, self.b, self.a)
        if not 0 <= index < len(components):
            raise IndexError(f"Color index out of range: {index}")
        return components[index]

    def _combine(self, other: Operand, op: Callable[[float, float], float]) -> Color:
        if isinstance(other, Color):
            return Color(op(self.r, other.r), op(self.g, other.g), op(self.b, other.b), op(self.a, other.a))
        if isinstance(other, (int, float)):
            return Color(op(self.r, other), op(self.g, other), op(self.b, other), op(self.a, other))
        return NotImplemented

    def __add__(self, other: Operand) -> Color:
        return self._combine(other, operator.add)

    def __sub__(self, other: Operand) -> Color:
        return self._combine(other, operator.sub)

    def __mul__(self, other: Operand) -> Color:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: Operand) -> Color:
        return self._combine(other, operator.truediv)

    @staticmethod
    def to_int(value: float) -> int:
        """Convert a component to a byte value."""
        return int(clamp(value, 0.0, 1.0) * 255)

    def to_rgba(self) -> tuple[int, int, int, int]:
        return (self.to_int(self.r), self.to_int(self.g), self.to_int(self.b), self.to_int(self.a))