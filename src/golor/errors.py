"""Exceptions raised while expanding color verbs."""

from __future__ import annotations


class GolorError(Exception):
    """Base class for every error raised by the color verb engine."""


class UnsupportedEncodingError(GolorError):
    """Raised when a color argument is not one of the recognised shapes."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unsupported color encoding: {value!r} ({type(value).__name__})")
        self.value = value


class ArgumentUnderflowError(GolorError):
    """Raised when a verb needs an argument beyond the end of the list."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"Missing argument: verb needs argument #{needed} but only {available} given")
        self.needed = needed
        self.available = available


class MalformedColorVerbError(GolorError):
    """Raised when a %C{ verb is never closed."""

    def __init__(self, template: str, offset: int) -> None:
        super().__init__(f"Unterminated color verb at offset {offset}: {template[offset:]!r}")
        self.template = template
        self.offset = offset
