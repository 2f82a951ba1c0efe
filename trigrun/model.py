"""Line-drawn models with an axis-aligned hitbox."""

from __future__ import annotations

from dataclasses import replace
from itertools import pairwise
from typing import Sequence, Union

from trigrun.color import Color
from trigrun.vector2 import Transform, Vector2

Points = Sequence[Vector2]
Shapes = Sequence[Sequence[Vector2]]

HITBOX_SIZE = 5


def _is_points(geometry: Union[Points, Shapes]) -> bool:
    return bool(geometry) and isinstance(geometry[0], Vector2)


class Model:
    """A single polyline or a set of polylines drawn in one colour.

    The first five points (of the first shape, for multi-shape models) form
    the hitbox; its bounds are kept in ``x_min``, ``x_max``, ``y_min`` and
    ``y_max`` as whole numbers and always include the origin.
    """

    def __init__(self, geometry: Union[Points, Shapes], color: Color) -> None:
        self.color = replace(color)
        self.hitbox_points = [Vector2() for _ in range(HITBOX_SIZE)]
        self.x_min = 0.0
        self.x_max = 0.0
        self.y_min = 0.0
        self.y_max = 0.0
        if _is_points(geometry):
            self.points = [p.copy() for p in geometry]
            self.shapes: list[list[Vector2]] = []
        else:
            self.points = []
            self.shapes = [[p.copy() for p in shape] for shape in geometry]
        self.set_hitbox(geometry)

    def draw(self, renderer, transform: Transform) -> None:
        """Draw the model's polyline or shapes with ``transform`` applied."""
        if not self.shapes and not self.points:
            return
        renderer.set_color(self.color)
        if self.shapes:
            self.draw_shapes(renderer, transform)
        else:
            self.draw_points(self.points, renderer, transform)

    def draw_at(self, renderer, position: Vector2, angle: float, scale: float) -> None:
        """Draw the model's polyline rotated, scaled and moved to ``position``."""
        if not self.points:
            return
        renderer.set_color(self.color)
        for a, b in pairwise(self.points):
            p1 = a.rotate(angle) * scale + position
            p2 = b.rotate(angle) * scale + position
            renderer.draw_line(p1.x, p1.y, p2.x, p2.y)

    def draw_points(self, points: Points, renderer, transform: Transform) -> None:
        """Draw ``points`` as a connected polyline in the model's colour."""
        if not points:
            return
        renderer.set_color(self.color)
        for a, b in pairwise(points):
            p1 = a.rotate(transform.rotation) * transform.scale + transform.position
            p2 = b.rotate(transform.rotation) * transform.scale + transform.position
            renderer.draw_line(p1.x, p1.y, p2.x, p2.y)

    def draw_box(self, renderer, transform: Transform, color: Color) -> None:
        """Fill the hitbox area in ``color``."""
        renderer.set_color(color)
        centre_x = self.x_min + (self.x_max - self.x_min) / 2 + transform.position.x
        centre_y = self.y_min + (self.y_max - self.y_min) / 2 + transform.position.y
        renderer.draw_rect(centre_x, centre_y, self.x_max * 2, self.y_max * 2)

    def draw_shapes(self, renderer, transform: Transform) -> None:
        for shape in self.shapes:
            self.draw_points(shape, renderer, transform)

    def set_hitbox(self, hitbox: Union[Points, Shapes]) -> None:
        """Take the hitbox from five points, or from the first of several shapes."""
        if not hitbox:
            raise IndexError("hitbox needs at least five points")
        corners = hitbox if isinstance(hitbox[0], Vector2) else hitbox[0]
        if len(corners) < HITBOX_SIZE:
            raise IndexError("hitbox needs at least five points")
        for slot, point in enumerate(corners[:HITBOX_SIZE]):
            self.hitbox_points[slot] = point.copy()
            x = int(point.x)
            y = int(point.y)
            self.x_min = float(min(self.x_min, x))
            self.x_max = float(max(self.x_max, x))
            self.y_min = float(min(self.y_min, y))
            self.y_max = float(max(self.y_max, y))