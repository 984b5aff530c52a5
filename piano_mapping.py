# ---------------------- Sound index -> Key layout ----------------------
from config import (NATURAL_KEY_SPAN, ACCENT_WIDTH_RATIO, ACCENT_HEIGHT_RATIO,
                    ACCENT_POSITIONS)
from rectangle import Rectangle
from keys import KeyKind, PianoKey


def key_kind(index):
    return KeyKind.ACCENT if index % 12 in ACCENT_POSITIONS else KeyKind.NATURAL


def layout_keys(sound_count, canvas_width, canvas_height):
    """Lay out sound_count keys on the canvas.

    Returns (index, kind, Rectangle) tuples in key-buffer order: every
    natural left to right, then every accent left to right. That is the
    paint order, and reversed it is the hit-test order, so accents win
    over the naturals they overlap.

    The natural width is canvas_width / NATURAL_KEY_SPAN whatever the
    sound count, so fewer sounds leave the right side of the canvas empty.
    """
    w1 = canvas_width / NATURAL_KEY_SPAN
    w2 = w1 * ACCENT_WIDTH_RATIO

    naturals, accents = [], []
    for i in range(sound_count):
        x_offset = w1 * len(naturals)
        kind = key_kind(i)
        if kind is KeyKind.ACCENT:
            # centered on the edge between the last natural and the next one
            rect = Rectangle(x_offset - w2 / 2, 0, w2, canvas_height * ACCENT_HEIGHT_RATIO)
            accents.append((i, kind, rect))
        else:
            rect = Rectangle(x_offset, 0, w1, canvas_height)
            naturals.append((i, kind, rect))
    return naturals + accents


def build_key_buffer(sounds, canvas_width, canvas_height):
    return [PianoKey(kind, sounds[i], rect, index=i)
            for i, kind, rect in layout_keys(len(sounds), canvas_width, canvas_height)]
