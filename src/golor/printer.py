"""printf-like entry points understanding the %C{...} verb."""

from __future__ import annotations

import sys
from typing import Any, Sequence, TextIO

from .substitution import process_color_verbs


def formatted_write(stream: TextIO, template: str, args: Sequence[Any]) -> int:
    """
    Format ``template`` with the ``%`` operator and write the result once.

    Args:
        stream: Text stream to write to.
        template: printf-style template without color verbs.
        args: Values for the verbs of ``template``.

    Returns:
        Number of bytes written, counted in UTF-8.

    Raises:
        TypeError, ValueError: Raised by the ``%`` operator, unchanged.
    """
    text = template % tuple(args)
    stream.write(text)
    return len(text.encode("utf-8"))


def sprintf(template: str, *args: Any) -> str:
    """Return ``template`` formatted with ``args``, color verbs rendered."""
    residual, arguments = process_color_verbs(template, *args)
    return residual % tuple(arguments)


def fprintf(stream: TextIO, template: str, *args: Any) -> int:
    """
    Write ``template`` formatted with ``args`` to ``stream``.

    Color verbs are substituted first; nothing is written if that fails.

    Returns:
        Number of bytes written.
    """
    residual, arguments = process_color_verbs(template, *args)
    return formatted_write(stream, residual, arguments)


def printf(template: str, *args: Any) -> int:
    """Counterpart of ``fprintf`` writing to standard output."""
    return fprintf(sys.stdout, template, *args)
