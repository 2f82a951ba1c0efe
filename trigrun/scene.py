"""A collection of actors, an optional player and on-screen text."""

from __future__ import annotations

from typing import Optional

from trigrun.actor import Actor
from trigrun.color import Color
from trigrun.engine import Engine, default_engine
from trigrun.renderer import Text

_PLAYER_COLOR = Color(1, 1, 0, 1)
_OBJECT_COLOR = Color(1, 1, 1, 1)
_HITBOX_COLOR = Color(1, 0, 0, 1)


class Scene:
    """Scrolls actors past the player and resolves the player's collisions."""

    def __init__(self, engine: Optional[Engine] = None) -> None:
        self._engine = engine or default_engine
        self.player: Optional[Actor] = None
        self.actors: list[Actor] = []
        self.texts: list[Text] = []

    def update(self, dt: float, progress_speed: float) -> None:
        """Update the player and scroll every actor left by ``progress_speed``.

        The player lands when exactly one collision this frame reports a landing.
        """
        player = self.player
        if player is not None and not player.destroyed:
            player.update(dt)

        collision_log = 0
        frame_time = self._engine.clock.delta_time
        for actor in self.actors:
            actor.transform.position.x -= progress_speed * frame_time
            actor.update(dt)
            if self.player is not None:
                collision_log += self.player.collided(actor)

        if self.player is not None:
            self.player.landed = collision_log == 1

    def draw(self, renderer, draw_hitboxes: bool) -> None:
        if self.player is not None:
            renderer.set_color(_PLAYER_COLOR)
            self.player.draw(renderer)
            if draw_hitboxes:
                renderer.set_color(_HITBOX_COLOR)
                self.player.draw_hitbox(renderer)

        for actor in self.actors:
            renderer.set_color(_OBJECT_COLOR)
            actor.draw(renderer)
            if draw_hitboxes:
                renderer.set_color(_HITBOX_COLOR)
                actor.draw_hitbox(renderer)

        for text in self.texts:
            text.draw(renderer)

    def add_actor(self, actor: Actor) -> None:
        self.actors.append(actor)

    def add_text(self, text: Text) -> None:
        self.texts.append(text)

    def clear_all(self) -> None:
        self.actors.clear()
        self.texts.clear()

    def clear_text(self) -> None:
        self.texts.clear()