import logging
import sys

from snike.app import SnikeGame


def test_camera_without_tracking_extra_is_skipped(monkeypatch, caplog):
    # a None entry makes the import raise ImportError
    monkeypatch.setitem(sys.modules, "snike.tracker", None)
    game = object.__new__(SnikeGame)

    with caplog.at_level(logging.WARNING, logger="snike.app"):
        assert game._start_camera(800, 600) is None
    assert "Finger steering unavailable" in caplog.text
