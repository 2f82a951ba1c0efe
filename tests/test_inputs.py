import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"

import pygame
import pytest

from trigrun.inputs import Input
from trigrun.vector2 import Vector2


def test_update_records_current_and_previous_keys():
    state = Input()
    state.update([False, True, False], (0, 0), (False, False, False))
    state.update([True, False, False], (0, 0), (False, False, False))
    assert state.key_down(0) is True
    assert state.key_down(1) is False
    assert state.prev_key_down(1) is True
    assert state.prev_key_down(0) is False


def test_keys_outside_state_are_up():
    state = Input()
    assert state.key_down(5) is False
    state.update([True], (0, 0), (False, False, False))
    assert state.key_down(40) is False


def test_update_copies_keyboard_state():
    state = Input()
    keys = [False, False]
    state.update(keys, (0, 0), (False, False, False))
    keys[0] = True
    assert state.key_down(0) is False


def test_mouse_position_is_float_vector():
    state = Input()
    state.update([], (12, 34), (False, False, False))
    assert state.mouse_position == Vector2(12.0, 34.0)


def test_mouse_buttons_track_previous_frame():
    state = Input()
    state.update([], (0, 0), (True, False, True))
    state.update([], (0, 0), (False, False, True))
    assert state.mouse_button_down(0) is False
    assert state.prev_mouse_button_down(0) is True
    assert state.mouse_button_down(2) is True
    assert state.prev_mouse_button_down(2) is True


def test_mouse_button_out_of_range():
    state = Input()
    with pytest.raises(IndexError):
        state.mouse_button_down(3)


def test_shutdown_forgets_state():
    state = Input()
    state.update([True], (0, 0), (True, True, True))
    state.shutdown()
    assert state.key_down(0) is False
    assert state.mouse_button_down(1) is False


def test_initialize_and_update_from_pygame():
    pygame.display.init()
    try:
        state = Input()
        state.initialize()
        assert state.key_down(pygame.K_a) is False
        assert state.prev_key_down(pygame.K_a) is False
        state.update()
        assert state.mouse_button_down(0) is False
        assert state.prev_key_down(pygame.K_SPACE) is False
    finally:
        pygame.quit()