"""
HSL helpers to compute smooth color sequences, and text fades built on them.
"""

from __future__ import annotations

import colorsys
from typing import Iterator, Tuple

from .effects import Packed32, Packed64
from .printer import sprintf

RGB_MASK = 0xFFFFFF


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Hue, saturation and lightness (all in 0..1) of an RGB color."""
    h, l, s = colorsys.rgb_to_hls(r / 0xFF, g / 0xFF, b / 0xFF)
    return h, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """RGB bytes of an HSL color. Channels are truncated, not rounded."""
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return int(r * 0xFF), int(g * 0xFF), int(b * 0xFF)


def _split(rgb: int) -> Tuple[int, int, int]:
    return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF


def hsl_gradient(start_rgb: int, end_rgb: int, steps: int) -> Iterator[Tuple[int, int]]:
    """
    Interpolate linearly in HSL space from ``start_rgb`` to ``end_rgb``.

    Args:
        start_rgb: First color as ``0xRRGGBB``.
        end_rgb: Last color as ``0xRRGGBB``.
        steps: Number of colors to produce.

    Yields:
        ``(index, 0xRRGGBB)`` pairs. Nothing for ``steps <= 0``; only the start
        color for ``steps == 1``.
    """
    h1, s1, l1 = rgb_to_hsl(*_split(start_rgb))
    h2, s2, l2 = rgb_to_hsl(*_split(end_rgb))

    for index in range(steps):
        t = index / (steps - 1) if steps > 1 else 0.0
        r, g, b = hsl_to_rgb(h1 + (h2 - h1) * t, s1 + (s2 - s1) * t, l1 + (l2 - l1) * t)
        yield index, (r << 16) | (g << 8) | b


def _fade(text: str, start: int, end: int, request) -> str:
    colors = [request(color) for _, color in hsl_gradient(start, end, len(text))]
    args = [value for pair in zip(colors, text) for value in pair]
    return sprintf("%C{%c}" * len(text), *args)


def fade_foreground(text: str, start: int, end: int) -> str:
    """Render ``text`` with a foreground gradient, one color verb per character."""
    return _fade(text, start, end, Packed32)


def fade_background(text: str, start: int, end: int) -> str:
    """Render ``text`` with a background gradient."""
    return _fade(text, start, end, lambda color: Packed64(color << 24))


def fade_both(text: str, start: int, end: int) -> str:
    """Foreground gradient over a background of the complementary colors."""
    return _fade(text, start, end, lambda color: Packed64(((color ^ RGB_MASK) << 24) | color))
