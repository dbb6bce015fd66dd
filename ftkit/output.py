"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO


def _as_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def put_char(c: int | str) -> int:
    """Write one character to standard output; returns the count written."""
    return sys.stdout.write(_as_char(c))


def put_char_fd(c: int | str, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_as_char(c))


def put_str_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``."""
    stream.write(s)


def put_endl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    stream.write(s + "\n")


def put_nbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of the integer ``n`` to ``stream``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    stream.write(str(n))


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return str(value)


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``%c``, ``%s``, ``%d`` and ``%i`` in ``fmt``.

    ``%s`` with ``None`` gives ``(null)``. Any other character after ``%``
    is dropped together with the ``%`` and takes no argument; a lone
    ``%`` at the end is dropped. Extra arguments are ignored.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in "cdis":
            pieces.append(_convert(spec, _next_arg(remaining)))
    return "".join(pieces)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to ``stream``; returns the characters written."""
    text = format_string(fmt, *args)
    stream.write(text)
    return len(text)