import logging
from dataclasses import dataclass
from enum import Enum

from config import (NATURAL_COLOR, ACCENT_COLOR, HIGHLIGHT_COLOR,
                    NATURAL_STROKE, ACCENT_STROKE, FADE_MS)
from color import Color

logger = logging.getLogger(__name__)

HIGHLIGHT = Color.from_tuple(HIGHLIGHT_COLOR)


class KeyKind(Enum):
    NATURAL = "natural"
    ACCENT = "accent"


RESTING_COLORS = {
    KeyKind.NATURAL: Color.from_tuple(NATURAL_COLOR),
    KeyKind.ACCENT: Color.from_tuple(ACCENT_COLOR),
}
STROKES = {
    KeyKind.NATURAL: NATURAL_STROKE,
    KeyKind.ACCENT: ACCENT_STROKE,
}


@dataclass
class FadeState:
    """Linear transition from start to end over total milliseconds."""
    start: Color
    end: Color
    total: float
    elapsed: float = 0.0

    @property
    def done(self):
        return self.elapsed >= self.total

    def advance(self, dt):
        # elapsed only moves forward and never passes total
        self.elapsed = min(self.total, self.elapsed + max(0.0, dt))

    @property
    def color(self):
        if self.done:
            return self.end
        return Color.at(self.start, self.end, self.elapsed / self.total)


class PianoKey:
    """A clickable key: bounds on the canvas, a sound and an animated fill."""
    def __init__(self, kind, sound, bounds, index=None):
        self.kind = kind
        self.sound = sound
        self.bounds = bounds
        self.index = index
        self.resting_color = RESTING_COLORS[kind]
        self.current_color = self.resting_color
        self.fade = None

    @property
    def is_fading(self):
        return self.fade is not None

    @property
    def stroke(self):
        return STROKES[self.kind]

    def strike(self, sink, duration=FADE_MS):
        if self.sound is not None:
            sink.play(self.sound)
        # replaces any fade in flight; the old color is dropped, not blended
        self.fade = FadeState(HIGHLIGHT, self.resting_color, duration)
        self.current_color = HIGHLIGHT
        logger.debug("Struck key %s (%s)", self.index, self.kind.value)

    def advance(self, dt):
        if self.fade is None:
            return
        self.fade.advance(dt)
        if self.fade.done:
            self.fade = None
            self.current_color = self.resting_color
        else:
            self.current_color = self.fade.color

    def __repr__(self):
        return (f"PianoKey(index={self.index}, kind={self.kind.value}, "
                f"bounds={self.bounds}, color={self.current_color})")
