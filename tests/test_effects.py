"""Tests for the effects module."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from golor.effects import (  # noqa: E402
    BOLD,
    BOLD32,
    BOLD64,
    CROSSED_OUT,
    UNDERLINE,
    UNDERLINE32,
    UNDERLINE64,
    RGB,
    BgEffect,
    Effect,
    FgEffect,
    Packed32,
    Packed64,
    Property,
    Resolved,
    resolve,
)
from golor.errors import UnsupportedEncodingError  # noqa: E402


def test_properties_occupy_one_bit_each():
    values = [int(prop) for prop in Property]
    assert values == [1, 2, 4, 8, 16, 32, 64]


def test_rgb_rejects_out_of_range_channels():
    with pytest.raises(ValueError):
        RGB(256, 0, 0)
    with pytest.raises(ValueError):
        RGB(0, -1, 0)


def test_rgb_from_hex_accepts_strings_and_ints():
    assert RGB.from_hex("#ff8000") == RGB(0xFF, 0x80, 0x00)
    assert RGB.from_hex("00ff00") == RGB(0, 0xFF, 0)
    assert RGB.from_hex(0x123456).to_int() == 0x123456
    with pytest.raises(ValueError):
        RGB.from_hex("fff")


def test_resolve_effect_copies_both_channels():
    effect = Effect(RGB(1, 2, 3), RGB(4, 5, 6), BOLD | UNDERLINE)

    resolved = resolve(effect)

    assert resolved == Resolved(RGB(1, 2, 3), RGB(4, 5, 6), BOLD | UNDERLINE)


def test_resolve_fg_effect_leaves_background_absent():
    resolved = resolve(FgEffect(255, 0, 0, BOLD))

    assert resolved.foreground == RGB(255, 0, 0)
    assert resolved.background is None
    assert resolved.properties == BOLD


def test_resolve_bg_effect_leaves_foreground_absent():
    resolved = resolve(BgEffect(0x20, 0x00, 0x80))

    assert resolved.foreground is None
    assert resolved.background == RGB(0x20, 0x00, 0x80)
    assert resolved.properties == Property(0)


def test_resolve_packed32_layout():
    resolved = resolve(Packed32(0x12345678 & 0x00FFFFFF | UNDERLINE32))

    assert resolved.foreground == RGB(0x34, 0x56, 0x78)
    assert resolved.background is None
    assert resolved.properties == UNDERLINE


def test_packed32_matches_fg_effect():
    for rgb, props in [(0xFF0000, BOLD), (0x00AA55, UNDERLINE | CROSSED_OUT), (0x000000, Property(0))]:
        packed = Packed32(rgb | (int(props) << 24))
        color = RGB.from_hex(rgb)
        fg = FgEffect(color.red, color.green, color.blue, props)

        assert resolve(packed) == resolve(fg)
        assert resolve(packed).background is None


@pytest.mark.parametrize(
    "word, background, foreground, properties",
    [
        (0x0000000000FF0000, RGB(0, 0, 0), RGB(0xFF, 0, 0), Property(0)),
        (0x0000FF0000000000, RGB(0xFF, 0, 0), RGB(0, 0, 0), Property(0)),
        (0x000000FF00000000, RGB(0, 0xFF, 0), RGB(0, 0, 0), Property(0)),
        (0x00000000FF000000, RGB(0, 0, 0xFF), RGB(0, 0, 0), Property(0)),
        (0x0000000000000001, RGB(0, 0, 0), RGB(0, 0, 1), Property(0)),
        (0x0001000000000000, RGB(0, 0, 0), RGB(0, 0, 0), BOLD),
        (0x0040000000000000, RGB(0, 0, 0), RGB(0, 0, 0), CROSSED_OUT),
        (0x0000AADD44FF0000 | BOLD64, RGB(0xAA, 0xDD, 0x44), RGB(0xFF, 0, 0), BOLD),
        (0x0000432072_00FF00, RGB(0x43, 0x20, 0x72), RGB(0, 0xFF, 0), Property(0)),
    ],
)
def test_resolve_packed64_layout(word, background, foreground, properties):
    resolved = resolve(Packed64(word))

    assert resolved.background == background
    assert resolved.foreground == foreground
    assert resolved.properties == properties


def test_packed64_ignores_bits_above_properties():
    resolved = resolve(Packed64(0xFF00000000000000))

    assert resolved == Resolved(RGB(0, 0, 0), RGB(0, 0, 0), Property(0))


def test_packed_from_parts_round_trip():
    packed = Packed64.from_parts(RGB(1, 2, 3), RGB(4, 5, 6), UNDERLINE)

    assert int(packed) == 0x0008010203040506
    assert resolve(Packed32.from_parts(RGB(9, 8, 7), BOLD)) == Resolved(RGB(9, 8, 7), None, BOLD)


def test_packed_words_are_range_checked():
    with pytest.raises(ValueError):
        Packed32(1 << 32)
    with pytest.raises(ValueError):
        Packed64(-1)


def test_preshifted_constants():
    assert BOLD32 == 1 << 24
    assert BOLD64 == 1 << 48


@pytest.mark.parametrize("value", [0xFF0000, "red", None, (255, 0, 0), RGB(1, 2, 3)])
def test_resolve_rejects_unknown_shapes(value):
    with pytest.raises(UnsupportedEncodingError):
        resolve(value)


def test_or_with_preshifted_constants_keeps_packed_type():
    word32 = Packed32(0xFF0000) | BOLD32
    word64 = UNDERLINE64 | Packed64(0xAADD44FF0000)

    assert type(word32) is Packed32
    assert type(word64) is Packed64
    assert resolve(word32) == Resolved(RGB(0xFF, 0, 0), None, BOLD)
    assert resolve(word64).properties == UNDERLINE


def test_or_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        Packed32(0) | (1 << 32)
