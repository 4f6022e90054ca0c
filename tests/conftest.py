import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from snike.profile import MemoryProfileStore
from snike.session import GameStateMachine


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now=10_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryProfileStore({"snike_user": "ada"})


@pytest.fixture
def machine(store, clock):
    return GameStateMachine(store, width=800, height=600, clock=clock, rng=random.Random(7))
