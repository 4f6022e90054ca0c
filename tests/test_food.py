import random

import pytest

from config import FOOD_PHASE_STEP, FOOD_SIZE, FOOD_SPAWN_MARGIN, SNAKE_WIDTH
from snike.food import Food
from snike.vector import Vector2


def test_spawn_stays_inside_padded_arena():
    food = Food(800, 600, rng=random.Random(1))
    for _ in range(500):
        pos = food.spawn()
        assert FOOD_SPAWN_MARGIN <= pos.x <= 800 - FOOD_SPAWN_MARGIN
        assert FOOD_SPAWN_MARGIN <= pos.y <= 600 - FOOD_SPAWN_MARGIN


def test_resize_respawns_only_when_out_of_bounds():
    food = Food(800, 600, rng=random.Random(2))
    food.position = Vector2(100, 100)
    food.resize(400, 300)
    assert food.position.to_tuple() == (100, 100)

    food.position = Vector2(700, 500)
    food.resize(400, 300)
    assert food.in_bounds()
    assert food.position.x <= 400 - FOOD_SPAWN_MARGIN


def test_update_only_advances_phase():
    food = Food(800, 600, rng=random.Random(3))
    before = food.position.copy()
    food.update()
    food.update()

    assert food.phase == pytest.approx(2 * FOOD_PHASE_STEP)
    assert food.position == before


def test_check_collision_threshold():
    food = Food(800, 600, rng=random.Random(4))
    food.position = Vector2(200, 200)
    reach = FOOD_SIZE + SNAKE_WIDTH

    assert food.check_collision(Vector2(200 + reach - 0.01, 200))
    assert not food.check_collision(Vector2(200 + reach, 200))


def test_tiny_arena_spawns_on_centre_line():
    food = Food(800, 600, rng=random.Random(5))
    food.position = Vector2(700, 500)
    food.resize(40, 40)

    assert food.position.to_tuple() == (20, 20)
    assert food.in_bounds()

    food.resize(40, 600)
    for _ in range(100):
        pos = food.spawn()
        assert pos.x == 20
        assert FOOD_SPAWN_MARGIN <= pos.y <= 600 - FOOD_SPAWN_MARGIN
