"""Turn pygame events into InputSnapshots.

Each source keeps its own state and produces one snapshot per frame; the
state machine ORs them together. Edge commands (gravity flip, pause) are
latched on the event and cleared when the snapshot is taken.
"""

import pygame
from config import *
from snike.input import InputSnapshot

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)


class KeyboardInput:
    """Arrow keys / WASD steer, Space flips gravity, Escape or P pauses."""

    def __init__(self):
        self.held = set()
        self._flip = False
        self._pause = False

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            self.held.add(event.key)
            if event.key == pygame.K_SPACE:
                self._flip = True
            elif event.key in (pygame.K_ESCAPE, pygame.K_p):
                self._pause = True
        elif event.type == pygame.KEYUP:
            self.held.discard(event.key)
        elif event.type == pygame.WINDOWFOCUSLOST:
            # no KEYUP arrives for keys released while unfocused
            self.clear()

    def _any(self, keys):
        return any(k in self.held for k in keys)

    def snapshot(self):
        snap = InputSnapshot(
            left=self._any(LEFT_KEYS),
            right=self._any(RIGHT_KEYS),
            up=self._any(UP_KEYS),
            down=self._any(DOWN_KEYS),
            toggle_gravity=self._flip,
            pause=self._pause,
        )
        self._flip = False
        self._pause = False
        return snap

    def clear(self):
        self.held.clear()
        self._flip = False
        self._pause = False


class PointerPad:
    """On-screen d-pad plus a gravity flip button for mouse and touch.

    A direction is held while the pointer button is down on it, like a
    touchscreen arrow; the flip button fires once per click.
    """

    DIRECTIONS = ('up', 'down', 'left', 'right')

    def __init__(self, width, height):
        self.pressed = None
        self._flip = False
        self.layout(width, height)

    def layout(self, width, height):
        """Place the buttons in the bottom-right corner of the arena."""
        s = PAD_BUTTON_SIZE
        cx = width - PAD_MARGIN - s * 1.5
        cy = height - PAD_MARGIN - s * 1.5
        self.buttons = {
            'up': pygame.Rect(int(cx - s / 2), int(cy - s * 1.5), s, s),
            'down': pygame.Rect(int(cx - s / 2), int(cy + s / 2), s, s),
            'left': pygame.Rect(int(cx - s * 1.5), int(cy - s / 2), s, s),
            'right': pygame.Rect(int(cx + s / 2), int(cy - s / 2), s, s),
        }
        self.flip_button = pygame.Rect(PAD_MARGIN, int(height - PAD_MARGIN - s), s * 2, s)

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.flip_button.collidepoint(event.pos):
                self._flip = True
                return
            for name, rect in self.buttons.items():
                if rect.collidepoint(event.pos):
                    self.pressed = name
                    return
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.pressed = None
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.pressed = None

    def snapshot(self):
        snap = InputSnapshot(
            left=self.pressed == 'left',
            right=self.pressed == 'right',
            up=self.pressed == 'up',
            down=self.pressed == 'down',
            toggle_gravity=self._flip,
        )
        self._flip = False
        return snap
