"""Built-in shapes for the player and for level pieces."""

from __future__ import annotations

from dataclasses import dataclass, field

from trigrun.color import Color, ColorPreset
from trigrun.vector2 import Vector2

_CUBE0 = (
    ((-25, 25), (25, 25), (25, -25), (-25, -25), (-25, 25)),
    ((-20, 20), (20, 20), (20, -20), (-20, -20), (-20, 20)),
)

_SHIP1 = (
    ((25, 0), (-25, 15), (-15, 0), (-25, -15), (25, 0)),
)

_SHIP2 = (
    ((2.0, 0.9), (-5, 3), (-3, 0), (-5, -3), (2.0, -0.9)),  # body
    ((2.0, 0.9), (4, 0), (2.0, -0.9)),  # head
    ((0, 0), (-2.0, -0.85), (-0.8, 1.1), (-0.8, -1.1), (-2.0, 0.85), (0, 0)),  # star
    ((0.5, 1.4), (-2.5, 6.0), (-2.5, 2.3)),  # right wing
    ((0.5, -1.4), (-2.5, -6.0), (-2.5, -2.3)),  # left wing
    ((2.0, 0.8), (2.0, -0.8)),  # cockpit
    ((-1.7, 5.0), (0.4, 5.0), (0.4, 4.0), (-1.1, 4.0)),  # right gun
    ((-1.7, -5.0), (0.4, -5.0), (0.4, -4.0), (-1.1, -4.0)),  # left gun
    ((0.4, 4.2), (0.6, 4.2), (0.6, 4.8), (0.4, 4.8)),  # right gun middle
    ((0.4, -4.2), (0.6, -4.2), (0.6, -4.8), (0.4, -4.8)),  # left gun middle
    ((0.6, 4.3), (1.2, 4.3), (1.2, 4.7), (0.6, 4.7)),  # right gun tip
    ((0.6, -4.3), (1.2, -4.3), (1.2, -4.7), (0.6, -4.7)),  # left gun tip
)

_SPIKE0 = (
    ((-25, -25), (0, 25), (25, -25), (-25, -25)),
)

Shape = list[Vector2]


def _points(coords) -> Shape:
    return [Vector2(x, y) for x, y in coords]


def _shapes(data) -> list[Shape]:
    return [_points(shape) for shape in data]


@dataclass
class ModelPreset:
    """The shapes, colour and hitbox used to build a player model."""

    model: list[Shape] = field(default_factory=list)
    color: Color = field(default_factory=Color)
    hitbox: Shape = field(default_factory=list)


def get_friendly_model(gamemode: int) -> ModelPreset:
    """Return the player preset for a gamemode: 0 is the cube, 1 the ship.

    Any other gamemode gives an empty model in the default colour; the hitbox
    is always the cube's outer square.
    """
    preset = ModelPreset(hitbox=_points(_CUBE0[0]))
    if gamemode == 0:
        preset.model = _shapes(_CUBE0)
        preset.color = Color.from_preset(ColorPreset.GREEN)
    elif gamemode == 1:
        preset.model = _shapes(_SHIP1)
        preset.color = Color.from_preset(ColorPreset.YELLOW)
    return preset


def get_level_model(model_num: int) -> list[Shape]:
    """Return the shapes of a level piece; every number gives the spike."""
    return _shapes(_SPIKE0)