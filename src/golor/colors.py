"""
24-bit ANSI escape sequences for resolved color requests.
"""

from __future__ import annotations

from .constants import (
    BACKGROUND_PREFIX,
    FOREGROUND_PREFIX,
    PREFIX,
    PROPERTY_CODES,
    SEPARATOR,
    SUFFIX,
    TERMINATOR,
)
from .effects import RGB, Resolved, resolve


def _rgb_segment(lead: str, color: RGB) -> str:
    return SEPARATOR.join((lead, str(color.red), str(color.green), str(color.blue)))


def property_codes(properties: int) -> list[str]:
    """Return the SGR codes of the set properties in ascending bit order."""
    return [code for bit, code in PROPERTY_CODES if properties & bit]


def escape_sequence(resolved: Resolved) -> str:
    """
    Build the opening escape sequence of a resolved request.

    Args:
        resolved: Colors and properties to activate.

    Returns:
        ``ESC[`` followed by the foreground, background and property codes
        separated by ``;`` and terminated by ``m``. Absent channels are omitted;
        with nothing to activate the result is ``ESC[m``.
    """
    segments = []
    if resolved.foreground is not None:
        segments.append(_rgb_segment(FOREGROUND_PREFIX, resolved.foreground))
    if resolved.background is not None:
        segments.append(_rgb_segment(BACKGROUND_PREFIX, resolved.background))
    segments.extend(property_codes(resolved.properties))
    return f"{PREFIX}{SEPARATOR.join(segments)}{TERMINATOR}"


def render(resolved: Resolved, chunk: str) -> str:
    """Wrap ``chunk`` between the escape sequence of ``resolved`` and the reset code."""
    return f"{escape_sequence(resolved)}{chunk}{SUFFIX}"


def colorize(text: str, request: object) -> str:
    """Resolve ``request`` and wrap ``text`` with it. No verb processing takes place."""
    return render(resolve(request), text)
