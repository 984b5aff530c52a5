import pytest

from keys import KeyKind
from piano_mapping import build_key_buffer, key_kind, layout_keys


def test_key_kind_pattern():
    kinds = [key_kind(i) for i in range(24)]
    accents = [i for i, k in enumerate(kinds) if k is KeyKind.ACCENT]
    assert accents == [1, 3, 6, 8, 10, 13, 15, 18, 20, 22]


def test_one_octave_widths():
    keys = layout_keys(12, 210, 200)
    naturals = [rect for _, kind, rect in keys if kind is KeyKind.NATURAL]
    accents = [rect for _, kind, rect in keys if kind is KeyKind.ACCENT]
    assert len(naturals) == 7
    assert len(accents) == 5
    assert all(r.width == 10 for r in naturals)
    assert all(r.width == 5 for r in accents)


def test_naturals_tile_left_to_right_full_height():
    keys = layout_keys(12, 210, 200)
    naturals = [rect for _, kind, rect in keys if kind is KeyKind.NATURAL]
    assert [r.x for r in naturals] == [0, 10, 20, 30, 40, 50, 60]
    assert all(r.y == 0 and r.height == 200 for r in naturals)


def test_accents_centered_on_natural_boundaries():
    keys = layout_keys(12, 210, 200)
    accents = [rect for _, kind, rect in keys if kind is KeyKind.ACCENT]
    # C# sits on the C/D edge at x=10, D# on D/E at 20, and so on
    assert [r.x + r.width / 2 for r in accents] == [10, 20, 40, 50, 60]
    assert all(r.y == 0 for r in accents)
    assert all(r.height == pytest.approx(125) for r in accents)


def test_buffer_order_is_naturals_then_accents():
    keys = layout_keys(12, 210, 200)
    kinds = [kind for _, kind, _ in keys]
    assert kinds == [KeyKind.NATURAL] * 7 + [KeyKind.ACCENT] * 5
    assert [i for i, _, _ in keys] == [0, 2, 4, 5, 7, 9, 11, 1, 3, 6, 8, 10]


def test_natural_width_does_not_depend_on_sound_count():
    for count in (5, 12, 36):
        rects = [r for _, k, r in layout_keys(count, 840, 100) if k is KeyKind.NATURAL]
        assert all(r.width == 40 for r in rects)


def test_empty_layout():
    assert layout_keys(0, 800, 200) == []
    assert build_key_buffer([], 800, 200) == []


def test_build_key_buffer_attaches_sounds_by_index():
    sounds = [f"s{i}" for i in range(12)]
    keys = build_key_buffer(sounds, 210, 200)
    assert len(keys) == 12
    for key in keys:
        assert key.sound == f"s{key.index}"
        assert key.kind is key_kind(key.index)
        assert key.current_color == key.resting_color
