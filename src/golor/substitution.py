"""Replace color verbs by escape sequences and allocate the arguments.

Every verb consumes arguments from a single ``ArgumentCursor`` shared by the
whole recursion:

* a standard verb consumes ``arity`` arguments and keeps them, along with the
  verb itself, for the formatter;
* a color verb consumes its color request, which is absorbed, then the body of
  the verb is substituted on its own with the same cursor. The arguments kept
  by the body are kept by the enclosing pass in the same order.

Each argument is therefore consumed by exactly one verb. Arguments left after
the last verb of the top level template are forwarded untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from .colors import render
from .effects import resolve
from .errors import ArgumentUnderflowError
from .logger import logger
from .scanner import ESCAPE_PATTERN, VerbKind, scan


class ArgumentCursor:
    """Position in the caller's argument list."""

    def __init__(self, arguments: Sequence[Any]) -> None:
        self.arguments = tuple(arguments)
        self.position = 0

    @property
    def consumed(self) -> int:
        return self.position

    def take(self, count: int = 1) -> List[Any]:
        """
        Consume the next ``count`` arguments.

        Raises:
            ArgumentUnderflowError: If fewer than ``count`` arguments remain.
        """
        end = self.position + count
        if end > len(self.arguments):
            raise ArgumentUnderflowError(end, len(self.arguments))
        taken = list(self.arguments[self.position:end])
        self.position = end
        return taken

    def remaining(self) -> List[Any]:
        return list(self.arguments[self.position:])


@dataclass
class Substitution:
    """Template and arguments left for the formatter after one pass."""

    template: str
    arguments: List[Any]


def _literal(text: str) -> str:
    # the formatter reads every remaining % as the start of a verb
    return text.replace("%", "%%")


def _nested_literal(text: str) -> str:
    return _literal(ESCAPE_PATTERN.sub(r"\1", text))


def substitute(template: str, cursor: ArgumentCursor, *, nested: bool = False) -> Substitution:
    """
    Run one substitution pass over ``template``.

    Args:
        template: Template or body of a color verb.
        cursor: Arguments, positioned at the first one this pass may use.
        nested: True for the body of a color verb, where a backslash escapes
            braces and backslashes.

    Returns:
        The template with its color verbs rendered and the arguments consumed by
        the standard verbs it keeps.

    Raises:
        ArgumentUnderflowError: If a verb needs an argument past the end.
        UnsupportedEncodingError: If a color request cannot be resolved.
        MalformedColorVerbError: If a color verb is not terminated.
    """
    literal = _nested_literal if nested else _literal
    pieces: List[str] = []
    arguments: List[Any] = []
    offset = 0
    start_position = cursor.position

    for occurrence in scan(template):
        pieces.append(literal(template[offset:occurrence.start]))

        if occurrence.kind is VerbKind.COLOR:
            (request,) = cursor.take()
            resolved = resolve(request)
            inner = substitute(occurrence.inner or "", cursor, nested=True)
            pieces.append(render(resolved, inner.template))
            arguments.extend(inner.arguments)
        else:
            pieces.append(template[occurrence.start:occurrence.end])
            arguments.extend(cursor.take(occurrence.arity))

        offset = occurrence.end

    pieces.append(literal(template[offset:]))
    logger.debug(
        "pass over %r consumed %d argument(s), kept %d",
        template, cursor.position - start_position, len(arguments),
    )
    return Substitution("".join(pieces), arguments)


def process_color_verbs(template: str, *args: Any) -> Tuple[str, List[Any]]:
    """
    Substitute every color verb of ``template``.

    Args:
        template: Format string with ``%C{...}`` and printf-style verbs.
        *args: Positional arguments, color requests included.

    Returns:
        The residual template, which only holds printf-style verbs, and the
        arguments matching them followed by any unconsumed trailing ones.
    """
    cursor = ArgumentCursor(args)
    result = substitute(template, cursor)
    return result.template, result.arguments + cursor.remaining()
