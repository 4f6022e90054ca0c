import pygame
import pytest

from config import KEY_USER
from snike.controls import PointerPad
from snike.profile import MemoryProfileStore
from snike.render import Renderer, pad_score, to_rgb
from snike.session import FRAME_MS, GameStateMachine
from snike.vector import Vector2


@pytest.fixture
def renderer():
    pygame.font.init()
    yield Renderer(pygame.Surface((800, 600)))
    pygame.font.quit()


def test_to_rgb_falls_back_on_bad_tokens():
    assert to_rgb("#00f2ff") == (0, 242, 255)
    assert to_rgb("not-a-color") == (0, 242, 255)


def test_pad_score():
    assert pad_score(7) == "007"
    assert pad_score(1234) == "1234"


@pytest.mark.parametrize("theme", ["space", "neon", "void", "unknown"])
def test_draws_every_state(renderer, clock, theme):
    machine = GameStateMachine(MemoryProfileStore(), width=800, height=600, clock=clock)
    pad = PointerPad(800, 600)
    renderer.draw(machine.snapshot(), pad=pad, name_buffer="ad")

    machine.submit_name("ada")
    renderer.draw(machine.snapshot(), pad=pad)

    machine.customize()
    machine.set_theme(theme)
    machine.set_color("garbage")
    renderer.draw(machine.snapshot(), pad=pad)
    machine.back()

    machine.start()
    machine.flip_gravity()
    machine.update(FRAME_MS, ())
    renderer.draw(machine.snapshot(), pad=pad)

    machine.pause()
    renderer.draw(machine.snapshot(), pad=pad)
    machine.resume()

    machine.session.snake.position = Vector2(-1, 300)
    clock.advance(1500)
    machine.update(FRAME_MS, ())
    renderer.draw(machine.snapshot(), pad=pad)
    assert machine.snapshot().particles
