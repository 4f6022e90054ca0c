import pytest

from snike.vector import Vector2


def test_add_and_scale_mutate_in_place_and_chain():
    v = Vector2(1.0, 2.0)
    result = v.add(Vector2(2.0, 3.0)).scale(2)

    assert result is v
    assert (v.x, v.y) == (6.0, 10.0)


def test_copy_is_independent():
    v = Vector2(1.0, 1.0)
    c = v.copy()
    v.add(Vector2(5.0, 5.0))

    assert (c.x, c.y) == (1.0, 1.0)


def test_distance_to():
    assert Vector2(0, 0).distance_to(Vector2(3, 4)) == pytest.approx(5.0)
