"""Level pieces: solid objects and gamemode-changing barriers."""

from __future__ import annotations

from typing import Optional, Sequence

from trigrun.actor import Actor
from trigrun.color import Color
from trigrun.model import Model
from trigrun.vector2 import Transform, Vector2


class Object(Actor):
    """A solid level piece; collisions use the bounds of its model."""

    def __init__(
        self,
        transform: Optional[Transform] = None,
        model: Optional[Model] = None,
        hitbox: Optional[Sequence[Vector2]] = None,
    ) -> None:
        # ``hitbox`` is accepted for symmetry with other actors; the model's own
        # hitbox is what collisions are measured against.
        super().__init__(transform, model)


class GamemodeBarrier(Actor):
    """A vertical gate that switches the player to another gamemode."""

    def __init__(
        self,
        transform: Optional[Transform] = None,
        model: Optional[Model] = None,
        bg_color: Optional[Color] = None,
        to_gamemode: int = 1,
    ) -> None:
        super().__init__(transform, model)
        self.bg_color = bg_color if bg_color is not None else Color()
        self.to_gamemode = to_gamemode

    def draw(self, renderer) -> None:
        """Fill the barrier's box in its background colour, then outline it."""
        if self.model is not None:
            self.model.draw_box(renderer, self.transform, self.bg_color)
        super().draw(renderer)