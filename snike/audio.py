import logging
import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def synth_wave(freq=440, duration=0.12, volume=0.1, waveform='sine', sample_rate=SAMPLE_RATE):
    """Return a mono int16 tone with an exponential fade to 1% volume."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    phase = 2 * np.pi * freq * t
    if waveform == 'square':
        wave = np.sign(np.sin(phase))
    elif waveform == 'sawtooth':
        wave = 2.0 * (t * freq - np.floor(0.5 + t * freq))
    else:
        wave = np.sin(phase)
    # Exponential gain ramp from volume down to 0.01
    env = volume * np.power(0.01 / volume, t / duration) if volume > 0.01 else np.full_like(t, volume)
    wave = wave * env
    return (wave * (2**15 - 1)).astype(np.int16)


def mix(*waves):
    """Sum tones of different lengths, clipping to the int16 range."""
    length = max(len(w) for w in waves)
    out = np.zeros(length, dtype=np.int32)
    for w in waves:
        out[:len(w)] += w
    return np.clip(out, -2**15, 2**15 - 1).astype(np.int16)


def make_sound(wave):
    """Wrap a mono wave in a pygame Sound matching the mixer channel count."""
    _, _, channels = pygame.mixer.get_init()
    if channels > 1:
        wave = np.column_stack([wave] * channels)
    return pygame.sndarray.make_sound(np.ascontiguousarray(wave))


class AudioController:
    """Generated sound cues for start, eating, crashing and gravity flips."""

    def __init__(self, muted=False):
        self.muted = muted
        self.sounds = {}

    def init(self):
        """Create the mixer and sounds. Leaves audio silent if the mixer fails."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE)
            self.sounds['start'] = make_sound(synth_wave(880, 0.12, 0.08, 'sine'))
            self.sounds['eat'] = make_sound(mix(
                synth_wave(440, 0.10, 0.05, 'square'),
                synth_wave(880, 0.15, 0.03, 'square'),
            ))
            self.sounds['crash'] = make_sound(synth_wave(100, 0.5, 0.1, 'sawtooth'))
            self.sounds['gravity'] = make_sound(synth_wave(220, 0.3, 0.08, 'sine'))
        except pygame.error as e:
            logger.warning("Audio unavailable, running silent: %s", e)
            self.sounds = {}

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def play(self, name):
        if self.muted or name not in self.sounds:
            return
        self.sounds[name].play()

    def play_start(self):
        self.play('start')

    def play_eat(self):
        self.play('eat')

    def play_crash(self):
        self.play('crash')

    def play_gravity(self):
        self.play('gravity')
