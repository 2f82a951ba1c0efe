"""Angle conversion, clamping, wrapping and random helpers."""

from __future__ import annotations

import math
import random

from trigrun.vector2 import Vector2

PI = 3.14159265359
TWO_PI = 6.28318530718
HALF_PI = 1.57079632679


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180.0 / PI)


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * (PI / 180.0)


def clamp(value, low, high):
    """Clamp ``value`` against ``low`` and ``high``.

    Anything below ``low`` becomes ``low``; anything above ``low`` saturates
    to ``high``; a value equal to ``low`` is returned unchanged.
    """
    if value < low:
        return low
    if value > low:
        return high
    return value


def wrap(value, maximum):
    """Wrap ``value`` into the range ``[0, maximum]`` using a truncating remainder."""
    if maximum == 0:
        raise ZeroDivisionError("wrap maximum must be non-zero")
    if isinstance(value, int) and isinstance(maximum, int):
        remainder = abs(value) % abs(maximum)
        if value < 0:
            remainder = -remainder
    else:
        remainder = math.fmod(value, maximum)
    return remainder + (maximum if value < 0 else 0)


def rand_int(low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``."""
    if high <= low:
        raise ValueError(f"empty range for rand_int: [{low}, {high})")
    return random.randrange(low, high)


def randf(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random float between ``low`` and ``high``."""
    return (high - low) * random.random() + low


def random_on_unit_circle(start_degree: float = 0.0, end_degree: float = 360.0) -> Vector2:
    """Return a unit vector at a random angle between the given degrees."""
    angle = deg_to_rad(randf(start_degree, end_degree))
    return Vector2(math.cos(angle), math.sin(angle))