import math
import random
from dataclasses import dataclass
from config import *
from snike.vector import Vector2


@dataclass
class Particle:
    position: Vector2
    velocity: Vector2
    decay: float
    color: str
    life: float = 1.0

    def update(self, step=1.0):
        self.position.add(self.velocity.copy().scale(step))
        self.life -= self.decay * step

    @property
    def alive(self):
        return self.life > 0


class ParticleSystem:
    """Cosmetic bursts spawned on eating and dying. No gameplay effect."""

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.particles = []

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def spawn(self, origin, color, count):
        """Emit ``count`` particles from ``origin`` in random directions."""
        for _ in range(count):
            angle = self.rng.random() * math.pi * 2
            speed = PARTICLE_MIN_SPEED + self.rng.random() * (PARTICLE_MAX_SPEED - PARTICLE_MIN_SPEED)
            decay = PARTICLE_MIN_DECAY + self.rng.random() * (PARTICLE_MAX_DECAY - PARTICLE_MIN_DECAY)
            self.particles.append(Particle(
                position=origin.copy(),
                velocity=Vector2(math.cos(angle) * speed, math.sin(angle) * speed),
                decay=decay,
                color=color,
            ))

    def update(self, step=1.0):
        """Move and age every particle, dropping the expired ones in order."""
        for particle in self.particles:
            particle.update(step)
        self.particles = [p for p in self.particles if p.alive]

    def clear(self):
        self.particles = []
