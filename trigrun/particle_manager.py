"""Particle effects for the player's death."""

from __future__ import annotations

from trigrun.color import Color
from trigrun.mathutils import randf, random_on_unit_circle
from trigrun.particle import Particle
from trigrun.vector2 import Vector2

EXPLOSION_PARTICLES = 300


class ParticleManager:
    """Owns the explosion particles and retires them as they expire."""

    def __init__(self) -> None:
        self.particles: list[Particle] = []

    def explode_player(self, position: Vector2) -> None:
        """Burst particles outwards from ``position``."""
        color = Color(255, 255, 255, 0)
        self.particles.extend(
            Particle(
                position.copy(),
                random_on_unit_circle() * randf(600, 1000),
                randf(0.1, 0.3),
                color,
            )
            for _ in range(EXPLOSION_PARTICLES)
        )

    def update(self, dt: float) -> None:
        """Drop particles that expired last frame, then advance the rest."""
        self.particles = [p for p in self.particles if p.is_active]
        for particle in self.particles:
            particle.update(dt)

    def draw(self, renderer) -> None:
        for particle in self.particles:
            particle.draw(renderer)

    def clear_death_particles(self) -> None:
        self.particles.clear()