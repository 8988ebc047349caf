import numpy as np

from neonpong import audio
from neonpong.audio import SAMPLE_RATE, ToneSink, synth_tone
from neonpong.game import Tone


def test_synth_tone_shape():
    buf = synth_tone(440, 100)
    assert buf.dtype == np.int16
    assert buf.shape == (SAMPLE_RATE // 10, 2)
    assert np.array_equal(buf[:, 0], buf[:, 1])


def test_synth_tone_mono():
    buf = synth_tone(440, 50, channels=1)
    assert buf.ndim == 1


def test_synth_tone_fades_and_respects_volume():
    buf = synth_tone(300, 200, volume=0.5)
    assert buf[0, 0] == 0
    assert abs(int(buf[-1, 0])) < 200
    assert np.abs(buf).max() <= int(0.5 * (2 ** 15 - 1))
    assert np.abs(buf).max() > 10000


def test_very_short_tone():
    buf = synth_tone(1000, 0)
    assert buf.shape[0] == 1


def test_sink_without_mixer_is_silent():
    sink = ToneSink({"sound": True})
    # never initialised: play must not touch the mixer
    sink.play_all([Tone(440.0, 60), Tone(220.0, 300)])
    assert sink.sounds == {}


def test_sink_respects_sound_setting():
    sink = ToneSink({"sound": False})
    sink.available = True
    sink.play(Tone(440.0, 60))
    assert sink.sounds == {}


def test_sink_follows_mixer_rate(monkeypatch):
    monkeypatch.setattr(audio.mix, "init", lambda **kwargs: None)
    monkeypatch.setattr(audio.mix, "get_init", lambda: (44100, -16, 2))
    made = []
    monkeypatch.setattr(audio.pg.sndarray, "make_sound", lambda buf: made.append(buf) or object())

    sink = ToneSink({"sound": True})
    assert sink.init()
    assert sink.sample_rate == 44100
    sink.sound(Tone(440.0, 100))
    assert made[0].shape == (4410, 2)
