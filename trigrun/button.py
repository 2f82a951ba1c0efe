"""Clickable on-screen buttons."""

from __future__ import annotations

import logging
from typing import Optional

from trigrun.actor import Actor
from trigrun.audio import Audio, SoundLoadError
from trigrun.color import Color
from trigrun.engine import default_engine
from trigrun.inputs import Input
from trigrun.model import Model
from trigrun.renderer import Text
from trigrun.vector2 import Transform, Vector2

logger = logging.getLogger(__name__)

PRESS_SOUND = "buttonPressSound.wav"


class Button(Actor):
    """A box with a label that reacts to the left mouse button."""

    def __init__(
        self,
        transform: Optional[Transform] = None,
        model: Optional[Model] = None,
        text: Optional[Text] = None,
        bg_color: Optional[Color] = None,
        audio: Optional[Audio] = None,
    ) -> None:
        super().__init__(transform, model)
        self.text = text
        self.bg_color = bg_color if bg_color is not None else Color()
        self.clickable = True
        self.audio = audio if audio is not None else default_engine.audio

    def update(self, dt: float) -> None:
        """Buttons move with the scene like any other actor."""
        super().update(dt)

    def draw(self, renderer) -> None:
        if self.model is not None:
            self.model.draw_box(renderer, self.transform, self.bg_color)
        if self.text is not None:
            self.text.draw(renderer)
        super().draw(renderer)

    def mouse_hovering_over(self, mouse_position: Vector2) -> bool:
        """Whether the point lies strictly inside the button's bounds."""
        if self.model is None:
            return False
        position = self.transform.position
        within_x = self.model.x_min + position.x < mouse_position.x < self.model.x_max + position.x
        within_y = self.model.y_min + position.y < mouse_position.y < self.model.y_max + position.y
        return within_x and within_y

    def button_clicked(self, input_state: Input) -> bool:
        """True on the frame the left button is released over a clickable button.

        The press sound plays on release over the button even when it is not
        clickable.
        """
        hovering = self.mouse_hovering_over(input_state.mouse_position)
        released = not input_state.mouse_button_down(0) and input_state.prev_mouse_button_down(0)
        if released and hovering:
            try:
                self.audio.play_sound(PRESS_SOUND)
            except SoundLoadError as exc:
                logger.warning("%s", exc)
        return hovering and self.clickable and released

    def button_held(self, input_state: Input) -> bool:
        """True while the left button stays down over a clickable button."""
        hovering = self.mouse_hovering_over(input_state.mouse_position)
        return (
            hovering
            and input_state.mouse_button_down(0)
            and input_state.prev_mouse_button_down(0)
            and self.clickable
        )