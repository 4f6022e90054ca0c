import json

from config import DEFAULT_COLOR, DEFAULT_THEME, KEY_COLOR, KEY_HIGHSCORE, KEY_THEME, KEY_USER
from snike.profile import JsonProfileStore, MemoryProfileStore, Profile, load_profile


def test_defaults_for_empty_store():
    assert load_profile(MemoryProfileStore()) == Profile("", 0, DEFAULT_COLOR, DEFAULT_THEME)


def test_reads_all_fields():
    store = MemoryProfileStore({
        KEY_USER: " ada ",
        KEY_HIGHSCORE: "120",
        KEY_COLOR: "#7000ff",
        KEY_THEME: "void",
    })

    assert load_profile(store) == Profile("ada", 120, "#7000ff", "void")


def test_malformed_high_score_falls_back_to_zero():
    store = MemoryProfileStore({KEY_HIGHSCORE: "lots"})

    assert load_profile(store).high_score == 0


def test_memory_store_keeps_strings():
    store = MemoryProfileStore()
    store.set(KEY_HIGHSCORE, 40)

    assert store.get(KEY_HIGHSCORE) == "40"


def test_json_store_survives_reopen(tmp_path):
    path = tmp_path / "profile.json"
    store = JsonProfileStore(str(path))
    store.set(KEY_USER, "grace")
    store.set(KEY_HIGHSCORE, 90)

    reopened = JsonProfileStore(str(path))
    assert reopened.get(KEY_USER) == "grace"
    assert load_profile(reopened).high_score == 90


def test_json_store_ignores_garbage(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text("{not json")
    assert JsonProfileStore(str(path)).get(KEY_USER) is None

    path.write_text(json.dumps([1, 2, 3]))
    assert JsonProfileStore(str(path)).get(KEY_USER) is None


def test_json_store_write_failure_is_not_raised(tmp_path):
    store = JsonProfileStore(str(tmp_path))
    store.set(KEY_USER, "linus")

    assert store.get(KEY_USER) == "linus"
