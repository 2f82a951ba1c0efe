"""Short-lived coloured particles."""

from __future__ import annotations

from dataclasses import dataclass, field

from trigrun.color import Color
from trigrun.vector2 import Vector2

PARTICLE_SIZE = 3.0


@dataclass
class Particle:
    """A square dot that drifts with constant velocity until its lifespan ends."""

    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    lifespan: float = 0.0
    color: Color = field(default_factory=lambda: Color(255, 0, 0, 0))
    is_active: bool = True

    def update(self, dt: float) -> None:
        self.position = self.position + self.velocity * dt
        self.lifespan -= dt
        if self.lifespan <= 0.0:
            self.is_active = False

    def draw(self, renderer) -> None:
        renderer.set_color(self.color)
        renderer.draw_rect(self.position.x, self.position.y, PARTICLE_SIZE, PARTICLE_SIZE)