import numpy as np
import pytest

from snike.audio import AudioController, mix, synth_wave


@pytest.mark.parametrize("waveform", ["sine", "square", "sawtooth"])
def test_synth_wave_shape_and_fade(waveform):
    wave = synth_wave(440, 0.1, 0.1, waveform, sample_rate=8000)

    assert wave.dtype == np.int16
    assert len(wave) == 800
    head = np.abs(wave[:100].astype(np.int32)).max()
    tail = np.abs(wave[-100:].astype(np.int32)).max()
    assert tail < head
    assert head <= int(0.1 * (2**15 - 1)) + 1


def test_mix_pads_to_longest_and_clips():
    loud = np.full(10, 30000, dtype=np.int16)
    short = np.full(4, 30000, dtype=np.int16)
    out = mix(loud, short)

    assert len(out) == 10
    assert out[0] == 2**15 - 1
    assert out[-1] == 30000


def test_muted_or_missing_sounds_do_nothing():
    audio = AudioController(muted=True)
    audio.sounds = {"eat": None}
    audio.play_eat()

    audio.toggle_mute()
    audio.sounds = {}
    audio.play_crash()
    assert audio.muted is False
