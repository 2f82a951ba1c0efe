"""Keyboard and mouse state with the previous frame kept for edge detection."""

from __future__ import annotations

from typing import Optional, Sequence

import pygame

from trigrun.vector2 import Vector2

_NO_BUTTONS = (False, False, False)


def _snapshot(state: Sequence) -> tuple:
    # pygame's key wrapper is a tuple that maps key constants itself; keep it as is.
    return state if isinstance(state, tuple) else tuple(state)


class Input:
    """Current and previous keyboard and mouse button state."""

    def __init__(self) -> None:
        self._keyboard: tuple = ()
        self._prev_keyboard: tuple = ()
        self.mouse_position = Vector2(0, 0)
        self._mouse_buttons = _NO_BUTTONS
        self._prev_mouse_buttons = _NO_BUTTONS

    def initialize(self) -> None:
        """Take the current keyboard state as both the current and previous state."""
        state = _snapshot(pygame.key.get_pressed())
        self._keyboard = state
        self._prev_keyboard = state

    def shutdown(self) -> None:
        """Forget all recorded state."""
        self._keyboard = ()
        self._prev_keyboard = ()
        self._mouse_buttons = _NO_BUTTONS
        self._prev_mouse_buttons = _NO_BUTTONS

    def update(
        self,
        keyboard_state: Optional[Sequence] = None,
        mouse_position: Optional[Sequence[float]] = None,
        mouse_buttons: Optional[Sequence[bool]] = None,
    ) -> None:
        """Advance one frame; any state not given is read from pygame."""
        if keyboard_state is None:
            keyboard_state = pygame.key.get_pressed()
        self._prev_keyboard = self._keyboard
        self._keyboard = _snapshot(keyboard_state)

        if mouse_position is None:
            mouse_position = pygame.mouse.get_pos()
        x, y = mouse_position
        self.mouse_position = Vector2(float(x), float(y))

        if mouse_buttons is None:
            mouse_buttons = pygame.mouse.get_pressed(3)
        self._prev_mouse_buttons = self._mouse_buttons
        self._mouse_buttons = (tuple(bool(b) for b in mouse_buttons) + _NO_BUTTONS)[:3]

    @staticmethod
    def _lookup(state: tuple, key: int) -> bool:
        try:
            return bool(state[key])
        except (IndexError, KeyError):
            return False

    def key_down(self, key: int) -> bool:
        return self._lookup(self._keyboard, key)

    def prev_key_down(self, key: int) -> bool:
        return self._lookup(self._prev_keyboard, key)

    def mouse_button_down(self, button: int) -> bool:
        """Whether button 0 (left), 1 (middle) or 2 (right) is held."""
        return self._mouse_buttons[button]

    def prev_mouse_button_down(self, button: int) -> bool:
        return self._prev_mouse_buttons[button]