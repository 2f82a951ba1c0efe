import math

import pytest

from trigrun.color import Color
from trigrun.model import Model
from trigrun.vector2 import Transform, Vector2

CUBE = [Vector2(-25, 25), Vector2(25, 25), Vector2(25, -25), Vector2(-25, -25), Vector2(-25, 25)]
INNER = [Vector2(-20, 20), Vector2(20, 20), Vector2(20, -20), Vector2(-20, -20), Vector2(-20, 20)]


class RecordingRenderer:
    def __init__(self):
        self.colors = []
        self.lines = []
        self.rects = []

    def set_color(self, color):
        self.colors.append(color)

    def draw_line(self, x1, y1, x2, y2):
        self.lines.append((x1, y1, x2, y2))

    def draw_rect(self, x, y, w, h):
        self.rects.append((x, y, w, h))


def test_hitbox_bounds_from_points():
    model = Model(CUBE, Color(1, 1, 1))
    assert (model.x_min, model.x_max, model.y_min, model.y_max) == (-25.0, 25.0, -25.0, 25.0)
    assert model.hitbox_points == CUBE


def test_hitbox_from_first_shape():
    model = Model([INNER, CUBE], Color(1, 1, 1))
    assert model.hitbox_points == INNER
    assert model.x_max == 20.0
    assert model.points == []


def test_hitbox_bounds_include_origin():
    square = [Vector2(10, 10), Vector2(20, 10), Vector2(20, 20), Vector2(10, 20), Vector2(10, 10)]
    model = Model(square, Color())
    assert model.x_min == 0.0
    assert model.y_min == 0.0
    assert model.x_max == 20.0


def test_hitbox_truncates_towards_zero():
    points = [Vector2(2.7, -3.9)] * 5
    model = Model(points, Color())
    assert model.x_max == 2.0
    assert model.y_min == -3.0


def test_too_few_points_raise():
    with pytest.raises(IndexError):
        Model([Vector2(0, 0), Vector2(1, 1)], Color())
    with pytest.raises(IndexError):
        Model([], Color())


def test_color_is_copied():
    color = Color(1, 0, 0, 1)
    model = Model(CUBE, color)
    color.r = 0.0
    assert model.color == Color(1, 0, 0, 1)


def test_draw_identity_transform_traces_points():
    renderer = RecordingRenderer()
    model = Model(CUBE, Color(0, 1, 0))
    model.draw(renderer, Transform(Vector2(0, 0), 0.0, 1.0))
    expected = [(a.x, a.y, b.x, b.y) for a, b in zip(CUBE, CUBE[1:])]
    assert renderer.lines == pytest.approx(expected)
    assert renderer.colors[-1] == Color(0, 1, 0)


def test_draw_translation_shifts_every_endpoint():
    renderer = RecordingRenderer()
    model = Model(CUBE, Color())
    model.draw(renderer, Transform(Vector2(100, 50), 0.0, 1.0))
    for (x1, y1, x2, y2), a, b in zip(renderer.lines, CUBE, CUBE[1:]):
        assert (x1 - 100, y1 - 50, x2 - 100, y2 - 50) == pytest.approx((a.x, a.y, b.x, b.y))


def test_draw_rotation_preserves_segment_lengths():
    renderer = RecordingRenderer()
    model = Model(CUBE, Color())
    model.draw(renderer, Transform(Vector2(0, 0), math.pi / 3, 1.0))
    for (x1, y1, x2, y2), a, b in zip(renderer.lines, CUBE, CUBE[1:]):
        assert math.hypot(x2 - x1, y2 - y1) == pytest.approx((b - a).length())


def test_draw_shapes_draws_every_shape():
    renderer = RecordingRenderer()
    model = Model([CUBE, INNER], Color())
    model.draw(renderer, Transform(Vector2(0, 0), 0.0, 1.0))
    assert len(renderer.lines) == (len(CUBE) - 1) + (len(INNER) - 1)


def test_draw_at_without_points_draws_nothing():
    renderer = RecordingRenderer()
    model = Model([CUBE], Color())
    model.draw_at(renderer, Vector2(0, 0), 0.0, 1.0)
    assert renderer.lines == []
    assert renderer.colors == []


def test_draw_at_scales_segments():
    renderer = RecordingRenderer()
    model = Model(CUBE, Color())
    model.draw_at(renderer, Vector2(5, 5), 0.0, 2.0)
    for (x1, y1, x2, y2), a, b in zip(renderer.lines, CUBE, CUBE[1:]):
        assert math.hypot(x2 - x1, y2 - y1) == pytest.approx(2 * (b - a).length())


def test_draw_points_of_hitbox_uses_four_segments():
    renderer = RecordingRenderer()
    model = Model(CUBE, Color())
    model.draw_points(model.hitbox_points, renderer, Transform())
    assert len(renderer.lines) == len(model.hitbox_points) - 1


def test_draw_box_centres_on_position():
    renderer = RecordingRenderer()
    model = Model(CUBE, Color())
    background = Color(0, 1, 0)
    model.draw_box(renderer, Transform(Vector2(100, 50)), background)
    assert renderer.colors == [background]
    assert renderer.rects == [(100.0, 50.0, model.x_max * 2, model.y_max * 2)]