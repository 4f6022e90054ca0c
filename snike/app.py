import logging
import pygame
from config import *
from snike.audio import AudioController
from snike.controls import KeyboardInput, PointerPad
from snike.profile import JsonProfileStore
from snike.render import Renderer
from snike.session import GameState, GameStateMachine

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 16


class SnikeGame:
    """Window, event pump and frame loop around the GameStateMachine."""

    def __init__(self, width=GAME_WIDTH, height=GAME_HEIGHT, profile_path=PROFILE_FILE,
                 camera=False, muted=False, frame_rate_independent=False):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Anti-Gravity Snake")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)

        self.audio = AudioController(muted=muted)
        self.audio.init()

        self.machine = GameStateMachine(
            JsonProfileStore(profile_path),
            width=width,
            height=height,
            audio=self.audio,
            frame_rate_independent=frame_rate_independent,
        )
        self.keyboard = KeyboardInput()
        self.pad = PointerPad(width, height)
        self.camera = self._start_camera(width, height) if camera else None
        self.name_buffer = ''
        self.running = True

    def _start_camera(self, width, height):
        # opencv and mediapipe come from the optional tracking extra
        try:
            from snike.tracker import CameraPointer
        except ImportError as exc:
            logger.warning("Finger steering unavailable (%s); install snike[tracking]", exc)
            return None

        pointer = CameraPointer(width, height)
        if not pointer.available:
            return None
        pointer.start()
        return pointer

    def resize(self, width, height):
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.renderer.screen = self.screen
        self.machine.resize(width, height)
        self.pad.layout(width, height)
        if self.camera is not None:
            self.camera.resize(width, height)

    def _handle_auth_key(self, event):
        if event.key == pygame.K_RETURN:
            if self.machine.submit_name(self.name_buffer):
                self.name_buffer = ''
        elif event.key == pygame.K_BACKSPACE:
            self.name_buffer = self.name_buffer[:-1]
        elif event.unicode and event.unicode.isprintable() and len(self.name_buffer) < MAX_NAME_LENGTH:
            self.name_buffer += event.unicode
        return True

    def _cycle(self, options, current, offset):
        index = options.index(current) if current in options else 0
        return options[(index + offset) % len(options)]

    def _handle_customize_key(self, event):
        profile = self.machine.profile
        if event.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE, pygame.K_b):
            self.machine.back()
        elif event.key in (pygame.K_LEFT, pygame.K_a):
            self.machine.set_color(self._cycle(COLOR_OPTIONS, profile.color, -1))
        elif event.key in (pygame.K_RIGHT, pygame.K_d):
            self.machine.set_color(self._cycle(COLOR_OPTIONS, profile.color, 1))
        elif event.key in (pygame.K_UP, pygame.K_w):
            self.machine.set_theme(self._cycle(THEMES, profile.theme, -1))
        elif event.key in (pygame.K_DOWN, pygame.K_s):
            self.machine.set_theme(self._cycle(THEMES, profile.theme, 1))
        return True

    def handle_menu_key(self, event):
        """Menu commands. Returns True if the key was consumed here."""
        state = self.machine.state
        if state is GameState.AUTH:
            return self._handle_auth_key(event)
        if state is GameState.CUSTOMIZE:
            return self._handle_customize_key(event)

        if event.key == pygame.K_m:
            muted = self.audio.toggle_mute()
            logger.info("Audio %s", "muted" if muted else "unmuted")
            return True
        if state in (GameState.START, GameState.OVER):
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.machine.start()
                return True
            if event.key == pygame.K_q:
                self.running = False
                return True
        if state in (GameState.START, GameState.PAUSED, GameState.OVER) and event.key == pygame.K_c:
            self.machine.customize()
            return True
        return False

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN and self.handle_menu_key(event):
                continue
            else:
                self.keyboard.handle_event(event)
                self.pad.handle_event(event)

    def gather_inputs(self):
        inputs = [self.keyboard.snapshot(), self.pad.snapshot()]
        if self.camera is not None:
            inputs.append(self.camera.snapshot(self.machine.session.snake.head.to_tuple()))
        return inputs

    def run(self):
        """Main game loop."""
        try:
            while self.running:
                dt = self.clock.tick(FPS)
                self.handle_events()
                self.machine.update(dt, self.gather_inputs())
                self.renderer.draw(self.machine.snapshot(), pad=self.pad, name_buffer=self.name_buffer)
                pygame.display.flip()
        finally:
            self.cleanup()

    def cleanup(self):
        """Clean up resources."""
        self.running = False
        if self.camera is not None:
            self.camera.stop()
        pygame.quit()
