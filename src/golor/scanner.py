"""Locate the verbs of a format template.

A single regular expression recognises both the color verb ``%C{...}`` and the
printf-style verbs understood by the ``%`` operator. Only the opening ``%C{``
is matched by the expression; the body extends to the brace closing depth zero.
Nested color verbs are not scanned here, the substitution pass re-scans the
body of every color verb on its own.

Inside a color verb body a backslash escapes ``{``, ``}`` and itself.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .errors import MalformedColorVerbError
from .logger import logger

STANDARD_SPECIFIERS = "diuoxXfFeEgGaAcspnr"

VERB_PATTERN = re.compile(
    r"%(?:"
    r"(?P<percent>%)"
    r"|(?P<color>C\{)"
    r"|(?P<flags>[-+#0 ]*)"
    r"(?P<width>\d+|\*)?"
    r"(?:\.(?P<precision>\d+|\*))?"
    r"(?P<length>hh|ll|[hljztL])?"
    rf"(?P<specifier>[{STANDARD_SPECIFIERS}])"
    r")"
)

# Characters a backslash escapes inside a color verb body
ESCAPABLE = "\\{}"
ESCAPE_PATTERN = re.compile(r"\\([\\{}])")


class VerbKind(enum.Enum):
    COLOR = "color"
    STANDARD = "standard"


@dataclass(frozen=True)
class VerbOccurrence:
    """A verb found in a template, spanning ``template[start:end]``."""

    kind: VerbKind
    start: int
    end: int
    inner: str | None = None
    arity: int = 1


def find_closing_brace(template: str, start: int) -> int:
    """
    Return the index of the brace closing depth zero, searching from ``start``.

    Braces preceded by a backslash are skipped. Returns -1 when there is none.
    """
    depth = 0
    index = start
    length = len(template)
    while index < length:
        char = template[index]
        if char == "\\" and index + 1 < length and template[index + 1] in ESCAPABLE:
            index += 2
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                return index
            depth -= 1
        index += 1
    return -1


def scan(template: str) -> list[VerbOccurrence]:
    """
    Split a template into its verb occurrences.

    Args:
        template: Format string possibly containing ``%C{...}`` verbs.

    Returns:
        Occurrences in template order, never overlapping. Text between them is
        literal, including any ``%`` not followed by a valid verb. ``%%`` is a
        standard occurrence of arity zero.

    Raises:
        MalformedColorVerbError: If a ``%C{`` has no closing brace.
    """
    occurrences: list[VerbOccurrence] = []
    position = 0
    while True:
        match = VERB_PATTERN.search(template, position)
        if match is None:
            break
        if match.group("percent"):
            occurrences.append(VerbOccurrence(VerbKind.STANDARD, match.start(), match.end(), arity=0))
            position = match.end()
        elif match.group("color"):
            close = find_closing_brace(template, match.end())
            if close < 0:
                raise MalformedColorVerbError(template, match.start())
            occurrences.append(
                VerbOccurrence(VerbKind.COLOR, match.start(), close + 1, inner=template[match.end():close])
            )
            position = close + 1
        else:
            # '*' width and precision are read from the argument list too
            stars = (match.group("width") == "*") + (match.group("precision") == "*")
            occurrences.append(VerbOccurrence(VerbKind.STANDARD, match.start(), match.end(), arity=1 + stars))
            position = match.end()

    logger.debug("scanned %d verb(s) in %r", len(occurrences), template)
    return occurrences
