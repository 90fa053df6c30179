"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Iterator
from typing import Any, TextIO

__all__ = ["PrintfFormatError", "render", "printf"]

_SPECIFIERS = "cspdiuxX%"
_WHITESPACE = " \t\n\v\f\r"
_PIECE_PATTERN = re.compile(r"%(?P<spec>.)?|[^%]+", re.DOTALL)
_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


class PrintfFormatError(ValueError):
    """Raised for a format string that cannot be rendered."""


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise PrintfFormatError(f"missing argument for %{spec}") from None


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{spec} expects an integer, got {type(value).__name__}"
        ) from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    value = _next_arg(args, spec)
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c expects a single character")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        if value is None or (isinstance(value, int) and value == 0):
            return "(nil)"
        address = value if isinstance(value, int) else id(value)
        return "0x" + format(address & _POINTER_MASK, "x")
    number = _as_int(value, spec)
    if spec in "di":
        return str(_signed32(number))
    if spec == "u":
        return str(number & _UINT_MASK)
    return format(number & _UINT_MASK, spec)


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A ``%`` followed only by whitespace, or by nothing, raises
    PrintfFormatError. A ``%`` before an unknown character yields that
    character. Surplus arguments are ignored.
    """
    remaining = iter(args)
    pieces = []
    for match in _PIECE_PATTERN.finditer(fmt):
        piece = match.group(0)
        if not piece.startswith("%"):
            pieces.append(piece)
            continue
        if not fmt[match.start() + 1:].strip(_WHITESPACE):
            raise PrintfFormatError(
                f"incomplete conversion at position {match.start()}"
            )
        spec = match.group("spec")
        pieces.append(_convert(spec, remaining) if spec in _SPECIFIERS else spec)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered format to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)