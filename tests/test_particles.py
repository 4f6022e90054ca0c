import math
import random

from snike.particles import Particle, ParticleSystem
from snike.vector import Vector2


def test_spawn_ranges():
    system = ParticleSystem(rng=random.Random(5))
    origin = Vector2(10, 20)
    system.spawn(origin, "#ff00c8", 200)

    assert len(system) == 200
    for p in system:
        speed = math.hypot(p.velocity.x, p.velocity.y)
        assert 1.0 <= speed < 4.0 + 1e-9
        assert 0.02 <= p.decay < 0.04
        assert p.life == 1.0
        assert p.color == "#ff00c8"
        assert p.position is not origin


def test_all_alive_then_all_expired():
    system = ParticleSystem(rng=random.Random(6))
    system.spawn(Vector2(0, 0), "#00f2ff", 50)

    for _ in range(24):
        system.update()
    assert len(system) == 50

    for _ in range(26):
        system.update()
    assert len(system) == 0


def test_expired_particles_removed_in_order():
    system = ParticleSystem()
    fast = Particle(Vector2(0, 0), Vector2(0, 0), decay=0.6, color="a")
    slow_a = Particle(Vector2(1, 0), Vector2(0, 0), decay=0.1, color="b")
    slow_b = Particle(Vector2(2, 0), Vector2(0, 0), decay=0.1, color="c")
    system.particles = [slow_a, fast, slow_b]

    system.update()
    assert [p.color for p in system] == ["b", "a", "c"]
    system.update()
    assert [p.color for p in system] == ["b", "c"]


def test_update_moves_particles():
    p = Particle(Vector2(0, 0), Vector2(1, 2), decay=0.1, color="x")
    p.update()

    assert p.position.to_tuple() == (1, 2)
    assert p.life == 0.9
