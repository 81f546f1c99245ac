"""Color requests accepted by the %C{...} verb and their normalisation.

Five shapes are recognised:

* ``Effect``: foreground RGB, background RGB and properties.
* ``FgEffect``: foreground RGB and properties, no background.
* ``BgEffect``: background RGB and properties, no foreground.
* ``Packed32``: a 32-bit word laid out as ``PPPPPPPP RRRRRRRR GGGGGGGG BBBBBBBB``
  (bits 24-31 properties, 16-23 red, 8-15 green, 0-7 blue). No background.
* ``Packed64``: a 64-bit word where bits 48-55 hold the properties, bits 24-47
  the background RGB and bits 0-23 the foreground RGB. Bits 56-63 are unused.

``resolve`` reduces all of them to a ``Resolved`` record. A channel the shape
does not provide is ``None``, never black.
"""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from typing import Union

from .constants import (
    PACKED32_PROPERTIES_SHIFT,
    PACKED64_BACKGROUND_SHIFT,
    PACKED64_FOREGROUND_SHIFT,
    PACKED64_PROPERTIES_SHIFT,
)
from .errors import UnsupportedEncodingError


class Property(enum.IntFlag):
    """Text attributes, one bit each."""

    BOLD = 1 << 0
    DIM = 1 << 1
    ITALIC = 1 << 2
    UNDERLINE = 1 << 3
    SLOW_BLINK = 1 << 4
    RAPID_BLINK = 1 << 5
    CROSSED_OUT = 1 << 6


NO_PROPERTIES = Property(0)

BOLD = Property.BOLD
DIM = Property.DIM
ITALIC = Property.ITALIC
UNDERLINE = Property.UNDERLINE
SLOW_BLINK = Property.SLOW_BLINK
RAPID_BLINK = Property.RAPID_BLINK
CROSSED_OUT = Property.CROSSED_OUT

# Pre-shifted properties to be OR-ed into packed words
BOLD32 = int(BOLD) << PACKED32_PROPERTIES_SHIFT
DIM32 = int(DIM) << PACKED32_PROPERTIES_SHIFT
ITALIC32 = int(ITALIC) << PACKED32_PROPERTIES_SHIFT
UNDERLINE32 = int(UNDERLINE) << PACKED32_PROPERTIES_SHIFT
SLOW_BLINK32 = int(SLOW_BLINK) << PACKED32_PROPERTIES_SHIFT
RAPID_BLINK32 = int(RAPID_BLINK) << PACKED32_PROPERTIES_SHIFT
CROSSED_OUT32 = int(CROSSED_OUT) << PACKED32_PROPERTIES_SHIFT

BOLD64 = int(BOLD) << PACKED64_PROPERTIES_SHIFT
DIM64 = int(DIM) << PACKED64_PROPERTIES_SHIFT
ITALIC64 = int(ITALIC) << PACKED64_PROPERTIES_SHIFT
UNDERLINE64 = int(UNDERLINE) << PACKED64_PROPERTIES_SHIFT
SLOW_BLINK64 = int(SLOW_BLINK) << PACKED64_PROPERTIES_SHIFT
RAPID_BLINK64 = int(RAPID_BLINK) << PACKED64_PROPERTIES_SHIFT
CROSSED_OUT64 = int(CROSSED_OUT) << PACKED64_PROPERTIES_SHIFT


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


def _check_properties(value: int) -> None:
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"properties must be a non-negative integer, got {value!r}")


@dataclass(frozen=True)
class RGB:
    """A 24-bit color."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)

    @classmethod
    def from_hex(cls, value: int | str) -> "RGB":
        """
        Build a color from ``0xRRGGBB`` or a ``"#rrggbb"``/``"rrggbb"`` string.

        Raises:
            ValueError: If the value does not describe a 24-bit color.
        """
        if isinstance(value, str):
            text = value.strip().lstrip("#")
            if len(text) != 6:
                raise ValueError(f"Expected six hex digits, got {value!r}")
            value = int(text, 16)
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"Color out of range: {value!r}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_int(self) -> int:
        return (self.red << 16) | (self.green << 8) | self.blue


@dataclass(frozen=True)
class Effect:
    """Foreground and background colors plus properties."""

    foreground: RGB
    background: RGB
    properties: int = NO_PROPERTIES

    def __post_init__(self) -> None:
        _check_properties(self.properties)


@dataclass(frozen=True)
class FgEffect:
    """Foreground color plus properties."""

    red: int
    green: int
    blue: int
    properties: int = NO_PROPERTIES

    def __post_init__(self) -> None:
        RGB(self.red, self.green, self.blue)
        _check_properties(self.properties)


@dataclass(frozen=True)
class BgEffect:
    """Background color plus properties."""

    red: int
    green: int
    blue: int
    properties: int = NO_PROPERTIES

    def __post_init__(self) -> None:
        RGB(self.red, self.green, self.blue)
        _check_properties(self.properties)


class _PackedWord(int):
    """An unsigned integer of a fixed width.

    OR-ing an integer keeps the packed type, so ``Packed32(0xFF0000) | BOLD32``
    is still a ``Packed32``.
    """

    BITS = 0

    def __or__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return type(self)(int(self) | int(other))

    __ror__ = __or__

    def __new__(cls, value: int = 0):
        value = operator.index(value)
        if not 0 <= value < (1 << cls.BITS):
            raise ValueError(f"{cls.__name__} must fit in {cls.BITS} unsigned bits, got {value!r}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{int(self):0{self.BITS // 4}x})"


class Packed32(_PackedWord):
    """Properties in bits 24-31, foreground RGB in bits 0-23."""

    BITS = 32

    @classmethod
    def from_parts(cls, foreground: RGB, properties: int = NO_PROPERTIES) -> "Packed32":
        return cls(foreground.to_int() | (int(properties) << PACKED32_PROPERTIES_SHIFT))


class Packed64(_PackedWord):
    """Properties in bits 48-55, background RGB in bits 24-47, foreground RGB in bits 0-23."""

    BITS = 64

    @classmethod
    def from_parts(cls, background: RGB, foreground: RGB, properties: int = NO_PROPERTIES) -> "Packed64":
        return cls(
            (int(properties) << PACKED64_PROPERTIES_SHIFT)
            | (background.to_int() << PACKED64_BACKGROUND_SHIFT)
            | (foreground.to_int() << PACKED64_FOREGROUND_SHIFT)
        )


ColorRequest = Union[Effect, FgEffect, BgEffect, Packed32, Packed64]


@dataclass(frozen=True)
class Resolved:
    """Canonical form every color request reduces to."""

    foreground: RGB | None
    background: RGB | None
    properties: Property = NO_PROPERTIES


def _unpack_rgb(word: int, shift: int) -> RGB:
    return RGB.from_hex((word >> shift) & 0xFFFFFF)


def resolve(request: object) -> Resolved:
    """
    Normalise a color request.

    Args:
        request: One of ``Effect``, ``FgEffect``, ``BgEffect``, ``Packed32`` or ``Packed64``.

    Returns:
        The foreground, background and properties described by the request.

    Raises:
        UnsupportedEncodingError: If the request has any other type, plain ``int`` included.
    """
    if isinstance(request, Effect):
        return Resolved(request.foreground, request.background, Property(request.properties))
    if isinstance(request, FgEffect):
        return Resolved(RGB(request.red, request.green, request.blue), None, Property(request.properties))
    if isinstance(request, BgEffect):
        return Resolved(None, RGB(request.red, request.green, request.blue), Property(request.properties))
    if isinstance(request, Packed32):
        word = int(request)
        return Resolved(
            foreground=_unpack_rgb(word, 0),
            background=None,
            properties=Property((word >> PACKED32_PROPERTIES_SHIFT) & 0xFF),
        )
    if isinstance(request, Packed64):
        word = int(request)
        return Resolved(
            foreground=_unpack_rgb(word, PACKED64_FOREGROUND_SHIFT),
            background=_unpack_rgb(word, PACKED64_BACKGROUND_SHIFT),
            properties=Property((word >> PACKED64_PROPERTIES_SHIFT) & 0xFF),
        )
    raise UnsupportedEncodingError(request)
