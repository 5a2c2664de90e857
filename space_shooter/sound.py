import logging
import math
import struct

import pygame

from .config import SAMPLE_RATE, clamp

logger = logging.getLogger(__name__)

# waveform, start Hz, end Hz, seconds, relative level
SOUND_SPECS = {
    "shoot": ("square", 800, 400, 0.1, 0.4),
    "explosion": ("sawtooth", 500, 100, 0.3, 0.8),
    "collect": ("sine", 600, 800, 0.2, 0.4),
    "game_over": ("sine", 300, 150, 1.0, 0.4),
}


def _wave(shape: str, phase: float) -> float:
    if shape == "square":
        return 1.0 if (phase % 1.0) < 0.5 else -1.0
    if shape == "sawtooth":
        return 2.0 * (phase % 1.0) - 1.0
    return math.sin(2 * math.pi * phase)


def sweep_samples(shape, f0, f1, duration, amp=0.45, rate=SAMPLE_RATE, channels=1):
    """16-bit PCM of an exponential frequency sweep with a decaying gain.

    Each sample is written once per mixer channel so the sweep keeps its
    pitch and length on a stereo device.
    """
    n = int(rate * duration)
    buf = bytearray()
    phase = 0.0
    for i in range(n):
        frac = i / n
        freq = f0 * (f1 / f0) ** frac
        gain = 0.01 ** frac
        val = int(_wave(shape, phase) * gain * amp * 32767)
        buf += struct.pack("<h", val) * channels
        phase += freq / rate
    return bytes(buf)


class SoundManager:
    """Plays the synthesized effects; silently does nothing without a mixer."""

    def __init__(self, enabled: bool = True, volume: float = 0.5):
        self.enabled = enabled
        self.muted = False
        self.volume = clamp(volume, 0.0, 1.0)
        self.ok = False
        self.sounds = {}
        if not enabled:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.pre_init(SAMPLE_RATE, size=-16, channels=1, buffer=512)
                pygame.mixer.init()
            rate, _, channels = pygame.mixer.get_init()
            pygame.mixer.set_num_channels(10)
            for name, (shape, f0, f1, duration, _) in SOUND_SPECS.items():
                pcm = sweep_samples(shape, f0, f1, duration, rate=rate, channels=channels)
                self.sounds[name] = pygame.mixer.Sound(buffer=pcm)
            self.ok = True
        except pygame.error as e:
            logger.warning("Audio unavailable, continuing silently: %s", e)
            self.enabled = False
            self.sounds = {}
            return
        self._apply_volume()

    def _apply_volume(self):
        for name, s in self.sounds.items():
            s.set_volume(SOUND_SPECS[name][4] * self.volume)

    def set_volume(self, volume: float):
        self.volume = clamp(volume, 0.0, 1.0)
        self._apply_volume()

    def set_muted(self, muted: bool):
        self.muted = bool(muted)

    def play(self, name: str):
        if not (self.enabled and self.ok) or self.muted or name not in self.sounds:
            return
        try:
            self.sounds[name].play()
        except pygame.error as e:
            logger.warning("Sound %r failed, disabling audio: %s", name, e)
            self.enabled = False
