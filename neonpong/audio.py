import numpy as np
import pygame as pg
from pygame import mixer as mix

SAMPLE_RATE = 22050
FADE_MS = 8


def synth_tone(frequency, duration_ms, volume=0.4, sample_rate=SAMPLE_RATE, channels=2):
    """int16 sine wave with a short linear fade in and out, one column per channel."""
    n_samples = max(1, int(round(sample_rate * duration_ms / 1000.0)))
    t = np.arange(n_samples) / sample_rate
    wave = np.sin(2 * np.pi * frequency * t)

    # avoid clicks at both ends
    fade = min(n_samples // 2, int(sample_rate * FADE_MS / 1000.0))
    if fade > 0:
        ramp = np.linspace(0.0, 1.0, fade)
        wave[:fade] *= ramp
        wave[-fade:] *= ramp[::-1]

    max_sample = 2 ** 15 - 1
    mono = (wave * volume * max_sample).astype(np.int16)
    if channels == 1:
        return mono
    return np.column_stack([mono] * channels)


class ToneSink:
    def __init__(self, settings):
        self.settings = settings
        self.sounds = {}
        self.available = False
        self.channels = 2
        self.sample_rate = SAMPLE_RATE

    def init(self):
        # Initialize mixer safely (may raise if no audio device)
        try:
            mix.init(frequency=SAMPLE_RATE, size=-16, channels=2)
            params = mix.get_init()
        except pg.error as e:
            print(f"audio unavailable: {e}")
            self.available = False
            return False
        self.available = params is not None
        if params:
            # the device may open at a different rate than requested
            self.sample_rate, _, self.channels = params
        return self.available

    def sound(self, tone):
        key = (tone.frequency, tone.duration_ms)
        snd = self.sounds.get(key)
        if snd is None:
            buf = synth_tone(
                tone.frequency,
                tone.duration_ms,
                sample_rate=self.sample_rate,
                channels=self.channels,
            )
            snd = pg.sndarray.make_sound(buf)
            self.sounds[key] = snd
        return snd

    def play(self, tone):
        if not self.available or not self.settings.get("sound", True):
            return
        try:
            self.sound(tone).play()
        except pg.error as e:
            print(f"tone playback failed: {e}")
            self.available = False

    def play_all(self, tones):
        for tone in tones:
            self.play(tone)

    def quit(self):
        self.sounds.clear()
        if self.available:
            mix.quit()
            self.available = False
