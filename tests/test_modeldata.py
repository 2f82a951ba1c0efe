import pytest

from trigrun.color import Color, ColorPreset
from trigrun.modeldata import ModelPreset, get_friendly_model, get_level_model
from trigrun.vector2 import Vector2


def test_cube_preset_is_green():
    preset = get_friendly_model(0)
    assert preset.color == Color.from_preset(ColorPreset.GREEN)


def test_cube_preset_shapes():
    preset = get_friendly_model(0)
    assert len(preset.model) == 2
    assert preset.model[0][0] == Vector2(-25, 25)
    assert all(len(shape) == 5 for shape in preset.model)


def test_cube_hitbox_matches_outer_square():
    preset = get_friendly_model(0)
    assert preset.hitbox == preset.model[0]


def test_ship_preset():
    preset = get_friendly_model(1)
    assert preset.color == Color.from_preset(ColorPreset.YELLOW)
    assert len(preset.model) == 1
    assert preset.model[0][0] == Vector2(25, 0)
    assert preset.model[0][0] == preset.model[0][-1]


def test_ship_hitbox_is_still_cube():
    assert get_friendly_model(1).hitbox == get_friendly_model(0).hitbox


@pytest.mark.parametrize("gamemode", [2, 3, 255])
def test_unknown_gamemode_gives_empty_model(gamemode):
    preset = get_friendly_model(gamemode)
    assert preset.model == []
    assert preset.color == Color()
    assert len(preset.hitbox) == 5


def test_presets_are_independent_copies():
    first = get_friendly_model(0)
    first.model[0][0].x = 999.0
    first.hitbox.clear()
    second = get_friendly_model(0)
    assert second.model[0][0] == Vector2(-25, 25)
    assert len(second.hitbox) == 5


def test_model_preset_defaults():
    preset = ModelPreset()
    assert preset.model == []
    assert preset.hitbox == []
    assert preset.color == Color()


def test_level_model_is_spike():
    shapes = get_level_model(0)
    assert len(shapes) == 1
    assert shapes[0][1] == Vector2(0, 25)
    assert shapes[0][0] == shapes[0][-1]


@pytest.mark.parametrize("model_num", [1, 2, 3, 42])
def test_level_model_ignores_number(model_num):
    assert get_level_model(model_num) == get_level_model(0)