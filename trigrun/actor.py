"""Base class for everything that moves and draws in a scene."""

from __future__ import annotations

from typing import Optional

from trigrun.model import Model
from trigrun.vector2 import Transform, Vector2

_DEFAULT_HITBOX = ((-5, -5), (-5, 5), (5, 5), (5, -5), (-5, -5))


class Actor:
    """An object with a transform, a velocity and an optional model.

    ``lifespan`` of zero means the actor lives until destroyed by other means;
    a positive lifespan counts down each update and marks the actor
    ``destroyed`` when it runs out.
    """

    def __init__(self, transform: Optional[Transform] = None, model: Optional[Model] = None) -> None:
        self.transform = transform if transform is not None else Transform()
        self.model = model
        self.tag = ""
        self.destroyed = False
        self.lifespan = 0.0
        self.landed = False
        self.velocity = Vector2(0, 0)
        self.damping = 0.0
        self.hitbox = [Vector2(x, y) for x, y in _DEFAULT_HITBOX]

    def update(self, dt: float) -> None:
        """Age the actor, move it by its velocity and apply damping."""
        if self.lifespan != 0:
            self.lifespan -= dt
            if self.lifespan <= 0:
                self.destroyed = True

        self.transform.position = self.transform.position + self.velocity * dt
        self.velocity = self.velocity * (1.0 / (1.0 + self.damping * dt))

    def draw(self, renderer) -> None:
        """Draw the actor's model at its transform."""
        if self.model is not None:
            self.model.draw(renderer, self.transform)

    def draw_hitbox(self, renderer) -> None:
        """Draw the outline of the model's hitbox."""
        if self.model is not None:
            self.model.draw_points(self.model.hitbox_points, renderer, self.transform)

    def collided(self, collider: Actor) -> int:
        """Resolve a collision with ``collider``; plain actors never land."""
        return 0