from snike.input import InputSnapshot


def test_merge_ors_every_source():
    merged = InputSnapshot.merge([
        InputSnapshot(left=True),
        InputSnapshot(up=True, toggle_gravity=True),
        InputSnapshot(),
    ])

    assert merged == InputSnapshot(left=True, up=True, toggle_gravity=True)


def test_later_sources_do_not_clear_earlier_ones():
    merged = InputSnapshot.merge([InputSnapshot(right=True), InputSnapshot(right=False)])

    assert merged.right


def test_merge_of_nothing_is_idle():
    assert InputSnapshot.merge([]) == InputSnapshot()


def test_towards_respects_dead_zone():
    assert InputSnapshot.towards((100, 100), (110, 90), dead_zone=30) == InputSnapshot()
    assert InputSnapshot.towards((100, 100), (200, 40), dead_zone=30) == InputSnapshot(right=True, up=True)
    assert InputSnapshot.towards((100, 100), (20, 180), dead_zone=30) == InputSnapshot(left=True, down=True)


def test_towards_without_target():
    assert InputSnapshot.towards((100, 100), None) == InputSnapshot()
