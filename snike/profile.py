"""Persisted player profile: name, high score, snake color and theme.

Everything goes through a ``ProfileStore`` with a plain ``get``/``set`` string
interface so the state machine can run against an in-memory store in tests
and a JSON file in the real game.
"""

import json
import logging
import os
from dataclasses import dataclass
from config import *

logger = logging.getLogger(__name__)


class MemoryProfileStore:
    """Keeps profile values in a dict. Nothing survives the process."""

    def __init__(self, values=None):
        self.values = dict(values or {})

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = str(value)


class JsonProfileStore:
    """Profile values stored as a flat JSON object on disk (best-effort)."""

    def __init__(self, path=PROFILE_FILE):
        self.path = os.path.abspath(path)
        self.values = self._load()

    def _load(self):
        """Load the file, returning an empty profile if missing or unreadable."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning("Could not read profile %s, starting fresh", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Profile %s is not a JSON object, ignoring it", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        """Update one key and rewrite the file. Write failures are only logged."""
        self.values[key] = str(value)
        try:
            with open(self.path, 'w') as f:
                json.dump(self.values, f, indent=2)
        except OSError:
            logger.warning("Could not save profile to %s", self.path)


@dataclass
class Profile:
    name: str = ''
    high_score: int = 0
    color: str = DEFAULT_COLOR
    theme: str = DEFAULT_THEME


def load_profile(store):
    """Read the profile, falling back to defaults for absent or bad values."""
    profile = Profile()
    profile.name = (store.get(KEY_USER) or '').strip()

    raw_score = store.get(KEY_HIGHSCORE)
    if raw_score:
        try:
            profile.high_score = max(0, int(raw_score))
        except ValueError:
            logger.warning("Ignoring malformed high score %r", raw_score)

    profile.color = store.get(KEY_COLOR) or DEFAULT_COLOR
    profile.theme = store.get(KEY_THEME) or DEFAULT_THEME
    return profile
