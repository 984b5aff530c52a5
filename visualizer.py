# visualizer.py
import re

import pygame

from config import BG
from events import TickEvent

_CSS_RGB = re.compile(r"^\s*rgba?\(([^)]*)\)\s*$", re.IGNORECASE)


def _channel(v):
    return max(0, min(255, int(round(v))))


def parse_css_color(text):
    """'rgb(255, 160, 122)', 'rgba(0, 0, 0, 0.5)' or a named color -> pygame.Color.

    Fades hand over fractional, possibly out-of-range channels; they are
    rounded and clamped here, at the display boundary, and nowhere else.
    """
    m = _CSS_RGB.match(text)
    if not m:
        return pygame.Color(text)  # named colors; ValueError if unknown
    parts = [p.strip() for p in m.group(1).split(",")]
    if len(parts) not in (3, 4):
        raise ValueError(f"invalid color string: {text!r}")
    r, g, b = (_channel(float(p)) for p in parts[:3])
    a = _channel(float(parts[3]) * 255) if len(parts) == 4 else 255
    return pygame.Color(r, g, b, a)


def _to_rect(rect):
    # round edges, not sizes, so neighbours share a pixel boundary
    left, top = round(rect.x), round(rect.y)
    return pygame.Rect(left, top, round(rect.right) - left, round(rect.bottom) - top)


class Visualizer:
    """Paints key rectangles onto a pygame surface."""
    def __init__(self, surface, background=BG):
        self.surf = surface
        self.background = background

    # ---------- Painter ----------
    def draw_filled_rect(self, rect, fill):
        pygame.draw.rect(self.surf, parse_css_color(fill), _to_rect(rect))

    def draw_stroked_rect(self, rect, stroke, line_width):
        pygame.draw.rect(self.surf, parse_css_color(stroke), _to_rect(rect), width=line_width)

    # ---------- Frame ----------
    def clear(self):
        self.surf.fill(self.background)

    def present(self):
        pygame.display.flip()

    def frames(self, events):
        """Pass events through, clearing before and flipping after each tick."""
        for event in events:
            is_tick = isinstance(event, TickEvent)
            if is_tick:
                self.clear()
            yield event
            if is_tick:
                self.present()
