import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from space_shooter.config import Settings
from space_shooter.controls import InputState
from space_shooter.session import GameSession


class FakeSound:
    def __init__(self):
        self.played = []
        self.volume = 0.5
        self.muted = False

    def play(self, name):
        self.played.append(name)

    def set_volume(self, volume):
        self.volume = volume

    def set_muted(self, muted):
        self.muted = muted


class MemoryScores:
    def __init__(self, value=0):
        self.value = value
        self.saves = []

    def load(self):
        return self.value

    def save(self, v):
        self.saves.append(v)
        self.value = v


class SeqRandom:
    """Returns queued values from random(); everything else delegates."""

    def __init__(self, values, seed=0):
        self.values = list(values)
        self._rng = random.Random(seed)

    def random(self):
        return self.values.pop(0)

    def __getattr__(self, name):
        return getattr(self._rng, name)


@pytest.fixture
def sound():
    return FakeSound()


@pytest.fixture
def scores():
    return MemoryScores(50)


@pytest.fixture
def inputs():
    return InputState()


@pytest.fixture
def session(sound, scores):
    s = GameSession(Settings(sensitivity=5), sound, scores, rng=random.Random(1234))
    s.start_game()
    return s


@pytest.fixture
def quiet_session(session):
    """Playing session whose enemy spawner never fires."""
    session.enemy_spawner.last_spawn = 10 ** 9
    return session
