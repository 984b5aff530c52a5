import os

# headless SDL for anything that touches pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from keys import KeyKind, PianoKey
from rectangle import Rectangle


class RecordingSink:
    def __init__(self):
        self.played = []

    def play(self, sound):
        self.played.append(sound)


class RecordingPainter:
    def __init__(self):
        self.calls = []

    def draw_filled_rect(self, rect, fill):
        self.calls.append(("fill", rect, fill))

    def draw_stroked_rect(self, rect, stroke, line_width):
        self.calls.append(("stroke", rect, stroke, line_width))


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def painter():
    return RecordingPainter()


@pytest.fixture
def natural_key():
    return PianoKey(KeyKind.NATURAL, "snd-c", Rectangle(0, 0, 10, 100), index=0)


@pytest.fixture
def overlapping_keys():
    # B is added after A, so it is painted on top and tested first
    a = PianoKey(KeyKind.NATURAL, "snd-a", Rectangle(0, 0, 20, 100), index=0)
    b = PianoKey(KeyKind.ACCENT, "snd-b", Rectangle(10, 0, 10, 60), index=1)
    return [a, b]
