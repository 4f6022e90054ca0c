"""Game state machine and the per-session simulation.

``GameStateMachine`` is the only thing the host loop talks to. It owns the
current ``Session`` (snake, food, particles, gravity, score and timers),
applies one update per frame and hands the renderer an immutable
``FrameSnapshot``. No pygame import happens here, so the whole core can be
driven headless from tests.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from config import *
from snike.food import Food
from snike.gravity import GravityField
from snike.input import InputSnapshot
from snike.particles import ParticleSystem
from snike.profile import load_profile
from snike.snake import Snake

logger = logging.getLogger(__name__)

FRAME_MS = 1000.0 / FPS


def monotonic_ms():
    return time.monotonic() * 1000.0


class GameState(Enum):
    AUTH = 'AUTH'
    START = 'START'
    CUSTOMIZE = 'CUSTOMIZE'
    PLAYING = 'PLAYING'
    PAUSED = 'PAUSED'
    OVER = 'OVER'


@dataclass
class Session:
    """One play-through, replaced wholesale on every start."""

    snake: Snake
    food: Food
    particles: ParticleSystem
    gravity: GravityField
    started_at: float
    last_gravity_change: float
    score: int = 0


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer needs for one frame."""

    state: GameState
    width: float
    height: float
    score: int
    high_score: int
    name: str
    color: str
    theme: str
    gravity: object
    trail: tuple
    head: tuple
    food: tuple
    food_phase: float
    particles: tuple
    since_gravity_flip: object = None


class GameStateMachine:
    """AUTH / START / CUSTOMIZE / PLAYING / PAUSED / OVER.

    Commands that are not legal in the current state are ignored and return
    ``False``; the UI is expected not to offer them in the first place.
    """

    def __init__(self, store, width=GAME_WIDTH, height=GAME_HEIGHT, clock=monotonic_ms,
                 audio=None, rng=None, frame_rate_independent=False):
        self.store = store
        self.width = width
        self.height = height
        self.clock = clock
        self.audio = audio
        self.rng = rng
        self.frame_rate_independent = frame_rate_independent

        self.profile = load_profile(store)
        self.state = GameState.START if self.profile.name else GameState.AUTH
        self.previous_state = None
        self.last_flip_at = None
        self.session = self._new_session()
        logger.info("Initial state %s (player %r)", self.state.value, self.profile.name)

    def _new_session(self):
        now = self.clock()
        return Session(
            snake=Snake(self.width / 2, self.height / 2),
            food=Food(self.width, self.height, rng=self.rng),
            particles=ParticleSystem(rng=self.rng),
            gravity=GravityField(),
            started_at=now,
            last_gravity_change=now,
        )

    def _set_state(self, state):
        logger.info("State %s -> %s", self.state.value, state.value)
        self.state = state

    def _ignored(self, command):
        logger.debug("Ignoring %s in state %s", command, self.state.value)
        return False

    # --- commands ---

    def submit_name(self, name):
        """Set the player name and leave the AUTH screen."""
        name = (name or '').strip()
        if self.state is not GameState.AUTH or not name:
            return self._ignored('submit_name')
        self.profile.name = name
        self.store.set(KEY_USER, name)
        self._set_state(GameState.START)
        return True

    def start(self):
        """Begin a fresh session from the menu or the game-over screen."""
        if self.state not in (GameState.START, GameState.OVER):
            return self._ignored('start')
        self.session = self._new_session()
        self.last_flip_at = None
        self._set_state(GameState.PLAYING)
        if self.audio is not None:
            self.audio.play_start()
        return True

    def pause(self):
        if self.state is not GameState.PLAYING:
            return self._ignored('pause')
        self._set_state(GameState.PAUSED)
        return True

    def resume(self):
        if self.state is not GameState.PAUSED:
            return self._ignored('resume')
        self._set_state(GameState.PLAYING)
        return True

    def toggle_pause(self):
        if self.state is GameState.PLAYING:
            return self.pause()
        return self.resume()

    def customize(self):
        """Open the customization screen, remembering where to go back to."""
        if self.state not in (GameState.START, GameState.PAUSED, GameState.OVER):
            return self._ignored('customize')
        self.previous_state = self.state
        self._set_state(GameState.CUSTOMIZE)
        return True

    def back(self):
        if self.state is not GameState.CUSTOMIZE:
            return self._ignored('back')
        self._set_state(self.previous_state or GameState.START)
        self.previous_state = None
        return True

    def set_color(self, color):
        if self.state is not GameState.CUSTOMIZE or not color:
            return self._ignored('set_color')
        self.profile.color = color
        self.store.set(KEY_COLOR, color)
        return True

    def set_theme(self, theme):
        if self.state is not GameState.CUSTOMIZE or not theme:
            return self._ignored('set_theme')
        self.profile.theme = theme
        self.store.set(KEY_THEME, theme)
        return True

    def flip_gravity(self):
        """Rotate gravity. Both the player command and the timer end up here."""
        if self.state is not GameState.PLAYING:
            return self._ignored('flip_gravity')
        direction = self.session.gravity.advance()
        self.last_flip_at = self.clock()
        logger.info("Gravity now %s", direction.name)
        if self.audio is not None:
            self.audio.play_gravity()
        return True

    def resize(self, width, height):
        """Follow a viewport change. On the menu the session is rebuilt to fit."""
        self.width = width
        self.height = height
        self.session.food.resize(width, height)
        if self.state is GameState.START:
            self.session = self._new_session()

    # --- simulation ---

    def update(self, dt, inputs=()):
        """Run one frame. ``dt`` is the elapsed time in milliseconds.

        ``inputs`` holds one InputSnapshot per input source; they are merged
        before use.
        """
        merged = InputSnapshot.merge(inputs)
        if merged.pause:
            self.toggle_pause()
        if merged.toggle_gravity and self.state is GameState.PLAYING:
            self.flip_gravity()

        step = dt / FRAME_MS if self.frame_rate_independent else 1.0

        if self.state is GameState.PLAYING:
            self._tick(merged, step)
        else:
            self.session.food.update(step)
            self.session.particles.update(step)

    def _tick(self, movement, step):
        session = self.session
        snake = session.snake
        now = self.clock()

        if now - session.last_gravity_change > GRAVITY_CHANGE_INTERVAL:
            self.flip_gravity()
            session.last_gravity_change = now

        snake.update(movement, session.gravity.current(), step)

        if session.food.check_collision(snake.head):
            session.score += FOOD_POINTS
            snake.grow()
            session.particles.spawn(session.food.position, ACCENT_NEON, PARTICLE_COUNT)
            if self.audio is not None:
                self.audio.play_eat()
            session.food.spawn()

        if now - session.started_at > GRACE_PERIOD:
            if snake.check_collision(self.width, self.height):
                self._game_over()

        session.food.update(step)
        session.particles.update(step)

    def _game_over(self):
        session = self.session
        self._set_state(GameState.OVER)
        if self.audio is not None:
            self.audio.play_crash()
        if session.score > self.profile.high_score:
            self.profile.high_score = session.score
            self.store.set(KEY_HIGHSCORE, session.score)
            logger.info("New high score %d", session.score)
        session.particles.spawn(session.snake.head, PRIMARY_NEON, DEATH_PARTICLE_COUNT)

    def snapshot(self):
        session = self.session
        since_flip = None
        if self.last_flip_at is not None:
            since_flip = self.clock() - self.last_flip_at
        return FrameSnapshot(
            state=self.state,
            width=self.width,
            height=self.height,
            score=session.score,
            high_score=self.profile.high_score,
            name=self.profile.name,
            color=self.profile.color,
            theme=self.profile.theme,
            gravity=session.gravity.current(),
            trail=tuple(p.to_tuple() for p in session.snake.trail),
            head=session.snake.head.to_tuple(),
            food=session.food.position.to_tuple(),
            food_phase=session.food.phase,
            particles=tuple(
                (p.position.x, p.position.y, p.life, p.color) for p in session.particles
            ),
            since_gravity_flip=since_flip,
        )
