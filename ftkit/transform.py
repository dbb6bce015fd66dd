"""String splitting, joining, trimming, slicing, mapping and tokenizing."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, MutableSequence
from typing import Any, Optional


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"{what} must be a string, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def _require_str(s: Any, what: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"{what} must be a string, got {type(s).__name__}")
    return s


def count_words(s: str, sep: str) -> int:
    """Count the non-empty runs of characters in ``s`` separated by ``sep``."""
    _require_str(s, "s")
    _single_char(sep, "separator")
    return sum(1 for word in s.split(sep) if word)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between repeated separators."""
    _require_str(s, "s")
    _single_char(sep, "separator")
    return [word for word in s.split(sep) if word]


def join(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return _require_str(a, "first string") + _require_str(b, "second string")


def trim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(chars, "chars")
    return s.strip(chars) if chars else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError(f"start and length must not be negative, got {start} and {length}")
    if start >= len(s):
        return ""
    return s[start:start + length]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    _require_str(s, "s")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def iter_indexed(s: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on each item of ``s`` in place.

    A result other than ``None`` replaces the item; ``None`` leaves it as it was.
    """
    for index, item in enumerate(list(s)):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def is_delim(c: str, delimiters: str) -> bool:
    """True when the character ``c`` is one of ``delimiters``."""
    return _single_char(c, "character") in delimiters


class Tokenizer:
    """Pull tokens out of a text one at a time.

    The delimiter set may differ from one call to the next. Once the text
    is used up every further call returns ``None``.
    """

    def __init__(self, text: str) -> None:
        self._text = _require_str(text, "text")
        self._pos: Optional[int] = 0

    def next_token(self, delimiters: str) -> Optional[str]:
        """Return the next token, or ``None`` when no token is left."""
        if self._pos is None:
            return None
        text = self._text
        if not delimiters:
            token = text[self._pos:]
            self._pos = None
            return token or None
        pattern = re.compile(f"[^{re.escape(delimiters)}]+")
        match = pattern.search(text, self._pos)
        if match is None:
            self._pos = None
            return None
        end = match.end()
        # The delimiter that ends the token is consumed with it.
        self._pos = end + 1 if end < len(text) else None
        return match.group()


def tokenize(text: str, delimiters: str) -> Iterator[str]:
    """Yield the tokens of ``text`` separated by any of ``delimiters``."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delimiters)) is not None:
        yield token