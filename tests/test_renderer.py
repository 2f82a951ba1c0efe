import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"

import pygame
import pytest

from trigrun.color import Color, ColorPreset
from trigrun.renderer import Font, Renderer, RendererError, Text
from trigrun.vector2 import Vector2

BLACK = (0, 0, 0)


def _offscreen(width=20, height=20):
    return Renderer(pygame.Surface((width, height)))


def _lit_pixels(surface, xs, ys):
    return sum(1 for x in xs for y in ys if tuple(surface.get_at((x, y)))[:3] != BLACK)


def test_offscreen_size_taken_from_surface():
    renderer = _offscreen(30, 12)
    assert (renderer.width, renderer.height) == (30, 12)


def test_surface_missing_raises():
    with pytest.raises(RendererError):
        Renderer().surface


def test_set_color_uses_byte_components():
    renderer = _offscreen()
    renderer.set_color(Color(1, 0, 0, 1))
    assert renderer.color == (255, 0, 0, 255)


def test_set_color_rgba_wraps_to_bytes():
    renderer = _offscreen()
    renderer.set_color_rgba(500, 0, 500, 1)
    assert renderer.color == (500 & 0xFF, 0, 500 & 0xFF, 1)


def test_begin_frame_clears_with_draw_color():
    renderer = _offscreen()
    renderer.set_color(Color.from_preset(ColorPreset.GREEN))
    renderer.begin_frame()
    assert tuple(renderer.surface.get_at((0, 0)))[:3] == (0, 255, 0)
    assert tuple(renderer.surface.get_at((19, 19)))[:3] == (0, 255, 0)


def test_draw_rect_is_centred():
    renderer = _offscreen()
    renderer.set_color(Color(1, 0, 0, 1))
    renderer.draw_rect(10, 10, 4, 4)
    surface = renderer.surface
    assert tuple(surface.get_at((10, 10)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((8, 8)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((12, 12)))[:3] == BLACK
    assert tuple(surface.get_at((7, 10)))[:3] == BLACK


def test_draw_rect_accepts_floats():
    renderer = _offscreen()
    renderer.set_color(Color(1, 1, 1, 1))
    renderer.draw_rect(10.0, 10.0, 3.0, 3.0)
    assert _lit_pixels(renderer.surface, range(20), range(20)) == 9


def test_draw_line_and_point():
    renderer = _offscreen()
    renderer.set_color(Color(0, 0, 1, 1))
    renderer.draw_line(0, 5, 9, 5)
    renderer.draw_point(3.7, 15.2)
    surface = renderer.surface
    assert tuple(surface.get_at((4, 5)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((4, 6)))[:3] == BLACK
    assert tuple(surface.get_at((3, 15)))[:3] == (0, 0, 255)


def test_window_lifecycle():
    renderer = Renderer()
    renderer.initialize()
    try:
        renderer.create_window("Test", 64, 48)
        assert (renderer.width, renderer.height) == (64, 48)
        assert renderer.surface.get_size() == (64, 48)
        renderer.begin_frame()
        renderer.end_frame()
        renderer.shutdown()
        with pytest.raises(RendererError):
            renderer.surface
    finally:
        pygame.quit()


def test_font_load_missing_file():
    with pytest.raises(RendererError):
        Font().load("no-such-font-file.ttf", 12)


def test_font_load_default():
    font = Font()
    font.load(None, 20)
    assert font.loaded is True


def test_text_create_without_font():
    with pytest.raises(RendererError):
        Text().create(_offscreen(), "Hello", Color(1, 1, 1, 1))


def test_text_draw_before_create():
    font = Font()
    font.load(None, 20)
    with pytest.raises(RendererError):
        Text(font).draw(_offscreen())


def test_text_default_position():
    assert Text().position == Vector2(40, 40)


def test_text_draws_around_its_position():
    renderer = _offscreen(200, 80)
    font = Font()
    font.load(None, 20)
    text = Text(font)
    text.create(renderer, "Hi", Color(1, 1, 1, 1))
    text.draw(renderer)
    width, height = text.size
    assert width > 0 and height > 0
    assert _lit_pixels(renderer.surface, range(0, 80), range(20, 60)) > 0
    assert _lit_pixels(renderer.surface, range(120, 200), range(0, 80)) == 0


def test_text_draws_at_explicit_point_with_preset():
    renderer = _offscreen(200, 80)
    font = Font()
    font.load(None, 20)
    text = Text(font, Vector2(10, 10))
    text.create(renderer, "Hi", ColorPreset.WHITE)
    text.draw(renderer, 150, 40)
    assert _lit_pixels(renderer.surface, range(120, 180), range(20, 60)) > 0
    assert _lit_pixels(renderer.surface, range(0, 80), range(0, 80)) == 0