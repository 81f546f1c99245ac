"""golor package."""

from .colors import colorize, escape_sequence, render
from .effects import (
    BOLD, BOLD32, BOLD64, CROSSED_OUT, CROSSED_OUT32, CROSSED_OUT64, DIM, DIM32, DIM64,
    ITALIC, ITALIC32, ITALIC64, RAPID_BLINK, RAPID_BLINK32, RAPID_BLINK64,
    SLOW_BLINK, SLOW_BLINK32, SLOW_BLINK64, UNDERLINE, UNDERLINE32, UNDERLINE64,
    RGB, BgEffect, Effect, FgEffect, Packed32, Packed64, Property, Resolved, resolve,
)
from .errors import ArgumentUnderflowError, GolorError, MalformedColorVerbError, UnsupportedEncodingError
from .printer import formatted_write, fprintf, printf, sprintf
from .substitution import process_color_verbs

__all__ = [
    "ArgumentUnderflowError",
    "BOLD", "BOLD32", "BOLD64",
    "BgEffect",
    "CROSSED_OUT", "CROSSED_OUT32", "CROSSED_OUT64",
    "DIM", "DIM32", "DIM64",
    "Effect",
    "FgEffect",
    "GolorError",
    "ITALIC", "ITALIC32", "ITALIC64",
    "MalformedColorVerbError",
    "Packed32",
    "Packed64",
    "Property",
    "RAPID_BLINK", "RAPID_BLINK32", "RAPID_BLINK64",
    "RGB",
    "Resolved",
    "SLOW_BLINK", "SLOW_BLINK32", "SLOW_BLINK64",
    "UNDERLINE", "UNDERLINE32", "UNDERLINE64",
    "UnsupportedEncodingError",
    "colorize",
    "escape_sequence",
    "formatted_write",
    "fprintf",
    "printf",
    "process_color_verbs",
    "render",
    "resolve",
    "sprintf",
]
