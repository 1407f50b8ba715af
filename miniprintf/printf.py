"""A small printf supporting %c %s %d %i %u %p %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Sequence, TextIO

from .conversions import (
    format_char,
    format_hex,
    format_pointer,
    format_signed,
    format_str,
    format_unsigned,
)


class FormatError(ValueError):
    """Raised when a template cannot be rendered."""


_CONVERTERS = {
    "c": format_char,
    "s": format_str,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "p": format_pointer,
    "x": lambda value: format_hex(value, "x"),
    "X": lambda value: format_hex(value, "X"),
}


def _pieces(template: str | None, args: Sequence[Any]) -> Iterator[str]:
    if template is None:
        raise FormatError("template is missing")
    remaining = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("template ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            # Unknown specifiers produce nothing and consume no argument.
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(f"no argument left for '%{spec}'") from None
        yield converter(value)


def render(template: str | None, *args: Any) -> str:
    """Return ``template`` with its specifiers replaced by ``args``."""
    return "".join(_pieces(template, args))


def printf(template: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered template to ``stream`` and return the characters written.

    Output is written as it is produced, so text before a formatting error
    has already reached the stream when :class:`FormatError` is raised.
    """
    out = sys.stdout if stream is None else stream
    written = 0
    for piece in _pieces(template, args):
        out.write(piece)
        written += len(piece)
    return written