from snike.gravity import GRAVITY_DIRECTIONS, GravityField


def test_starts_down():
    assert GravityField().current().name == "DOWN"


def test_advance_cycles_through_all_four_before_repeating():
    field = GravityField()
    seen = [field.advance().name for _ in range(8)]

    assert seen == ["UP", "LEFT", "RIGHT", "DOWN", "UP", "LEFT", "RIGHT", "DOWN"]


def test_directions_are_unit_vectors():
    for d in GRAVITY_DIRECTIONS:
        assert abs(d.x) + abs(d.y) == 1


def test_reset_goes_back_to_down():
    field = GravityField()
    field.advance()
    field.advance()
    field.reset()

    assert field.current() is GRAVITY_DIRECTIONS[0]
