"""The player: a jumping cube or a zig-zagging ship."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import pygame

from trigrun.actor import Actor
from trigrun.audio import SoundLoadError
from trigrun.engine import Engine, default_engine
from trigrun.mathutils import wrap
from trigrun.model import Model
from trigrun.modeldata import ModelPreset, get_friendly_model
from trigrun.vector2 import Transform, Vector2

logger = logging.getLogger(__name__)

CUBE = 0
SHIP = 1

JUMP_SOUND = "jumpSound.wav"
WAVE_TURN_SOUND = "waveTurnSound.wav"
CHANGE_GAMEMODE_SOUND = "changeGamemodeSound.wav"


class Player(Actor):
    """The actor the user controls.

    In cube mode a click jumps, with extra boosts while the click is held;
    in ship mode the player moves diagonally and a click flips its direction.
    """

    def __init__(
        self,
        jump_speed: float = 100.0,
        transform: Optional[Transform] = None,
        model: Optional[Model] = None,
        hitbox: Optional[Sequence[Vector2]] = None,
        engine: Optional[Engine] = None,
    ) -> None:
        super().__init__(transform, model)
        self._engine = engine or default_engine
        self.gamemode = CUBE
        self.ship_going_up = True
        self.jump_speed = jump_speed
        self.max_fall_speed = 700.0
        self.cube_gravity = 2000.0
        self.wave_speed = jump_speed * 0.7
        self.jump_hold_timer = 0.0
        self.jump_boost1 = False
        self.jump_boost2 = False

    def _play(self, name: str) -> None:
        try:
            self._engine.audio.play_sound(name)
        except SoundLoadError as exc:
            logger.warning("%s", exc)

    def update(self, dt: float) -> None:
        """Steer according to the gamemode, wrap vertically, then move."""
        input_state = self._engine.input
        clicked = input_state.prev_mouse_button_down(0) or input_state.prev_key_down(pygame.K_SPACE)
        if self.gamemode == CUBE:
            self.cube_update(dt, clicked)
        elif self.gamemode == SHIP:
            self.ship_update(dt, clicked)

        height = float(self._engine.renderer.height)
        if height:
            self.transform.position.y = wrap(self.transform.position.y, height)

        super().update(dt)

    def cube_update(self, dt: float, clicked: bool) -> None:
        """Apply jumping, held-jump boosts and gravity."""
        frame_time = self._engine.clock.delta_time
        thrust = 0.0

        if clicked:
            if self.landed and not self.jump_hold_timer:
                self.jump_hold_timer = 0.0
                self.jump_boost1 = False
                self.jump_boost2 = False
                self._play(JUMP_SOUND)
                thrust -= self.jump_speed
                self.jump_hold_timer += frame_time

            if self.jump_hold_timer:
                self.jump_hold_timer += frame_time

            if self.jump_hold_timer > 0.1 and not self.jump_boost1:
                self.jump_boost1 = True
                thrust -= self.jump_speed / 4

            if self.jump_hold_timer > 0.2 and not self.jump_boost2:
                self.jump_boost2 = True
                thrust -= self.jump_speed / 6
        else:
            self.jump_hold_timer = 0.0
            self.jump_boost1 = False
            self.jump_boost2 = False

        acceleration = Vector2(0.0, 1.0) * thrust

        if not self.landed:
            acceleration = acceleration + Vector2(0.0, 1.0) * (self.cube_gravity * frame_time)
            self.velocity = self.velocity + acceleration
            if self.velocity.y > self.max_fall_speed:
                self.velocity.y = self.max_fall_speed
        elif self.velocity.y > 0:
            self.velocity.y = 0.0
        else:
            self.velocity = self.velocity + acceleration

    def ship_update(self, dt: float, clicked: bool) -> None:
        """Fly diagonally; a fresh left-button press flips the direction."""
        if self.ship_going_up:
            self.velocity.y = -self.wave_speed
            self.transform.rotation = -45.0
        else:
            self.velocity.y = self.wave_speed
            self.transform.rotation = 45.0

        input_state = self._engine.input
        if input_state.mouse_button_down(0) and not input_state.prev_mouse_button_down(0):
            self._play(WAVE_TURN_SOUND)
            self.ship_going_up = not self.ship_going_up

    def collided(self, collider: Actor) -> int:
        """Resolve a collision with ``collider``.

        Returns 1 when the player lands on it, -1 when the player dies and 0
        otherwise (no contact, a barrier, or a ceiling bump).
        """
        if self.model is None or collider.model is None:
            return 0

        other = collider.model
        other_pos = collider.transform.position
        collider_y_max = other.y_max + other_pos.y
        collider_y_min = other.y_min + other_pos.y
        collider_x_max = other.x_max + other_pos.x
        collider_x_min = other.x_min + other_pos.x

        pos = self.transform.position
        self_y_min = self.model.y_min + pos.y
        self_y_max = self.model.y_max + pos.y
        self_x_max = self.model.x_max + pos.x
        self_x_min = self.model.x_min + pos.x

        overlapping = (
            collider_x_min < self_x_max
            and collider_x_max > self_x_min
            and collider_y_min < self_y_max
            and collider_y_max > self_y_min
        )
        if not overlapping:
            return 0

        if collider.tag == "Barrier":
            to_gamemode = getattr(collider, "to_gamemode", self.gamemode)
            if to_gamemode != self.gamemode:
                self.change_gamemode(to_gamemode)
            return 0

        if self.gamemode == SHIP:
            self.destroyed = True
            return -1

        bottom_to_top = abs(self_y_max - collider_y_min)
        top_to_bottom = abs(self_y_min - collider_y_max)
        right_to_left = abs(self_x_max - collider_x_min)
        speed_adjustment = 2.0 if abs(self.velocity.y) > 400 else 0.0

        if bottom_to_top < 7 + speed_adjustment or right_to_left > 10:
            self.transform.position.y = collider_y_min - self.model.y_max * 0.98
            return 1
        if top_to_bottom < 5 + speed_adjustment:
            if self.velocity.y < 0:
                self.velocity.y = 2000.0 * self._engine.clock.delta_time
            return 0

        logger.debug("death from %s", bottom_to_top)
        self.destroyed = True
        return -1

    def change_gamemode(self, gamemode: int) -> None:
        """Switch gamemode, taking that gamemode's model and an upright pose."""
        self.gamemode = gamemode
        self.set_model(get_friendly_model(gamemode))
        self.transform.rotation = 0.0
        self._play(CHANGE_GAMEMODE_SOUND)

    def set_model(self, model_preset: ModelPreset) -> None:
        self.model = Model(model_preset.model, model_preset.color)