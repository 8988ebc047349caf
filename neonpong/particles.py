"""
Cosmetic particle bursts for hits, scores and serves.

Particles never collide with anything; they drift, slow down and fade out.
Renderers read ``Particle.alpha`` to draw the fade.
"""
import math

from neonpong.config import (
    MAX_PARTICLES,
    PARTICLE_DAMPING,
    PARTICLE_LIFE,
    PARTICLE_RADIUS,
    PARTICLE_SPEED,
    WHITE,
)
from neonpong.entities import Particle


def particle_count(quality, base):
    if base <= 0:
        return 0
    if quality == "Low":
        return max(1, int(base * 0.5))
    if quality == "High":
        return int(base * 1.8)
    return base


class ParticleSystem:
    def __init__(self, rng, max_particles=MAX_PARTICLES, damping=PARTICLE_DAMPING):
        self.rng = rng
        self.max_particles = max_particles
        self.damping = damping
        self.particles = []

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def spawn(self, x, y, color=WHITE, count=12):
        """Emit ``count`` particles spread evenly around a full circle."""
        rng = self.rng
        for i in range(count):
            angle = math.tau * i / count
            speed = rng.uniform(*PARTICLE_SPEED)
            life = max(1, int(rng.uniform(*PARTICLE_LIFE)))
            radius = rng.uniform(*PARTICLE_RADIUS)
            vel = (math.cos(angle) * speed, math.sin(angle) * speed)
            self.particles.append(Particle((x, y), vel, life, radius, color))
        overflow = len(self.particles) - self.max_particles
        if overflow > 0:
            del self.particles[:overflow]

    def advance(self):
        for p in self.particles:
            p.update(self.damping)
        self.particles = [p for p in self.particles if not p.is_dead()]

    def clear(self):
        self.particles.clear()
