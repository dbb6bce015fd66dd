"""Conversions between integers and their textual forms."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGIT_VALUES = {
    **{ch: ord(ch) - ord("0") for ch in "0123456789"},
    **{ch: ord(ch) - ord("A") + 10 for ch in "ABCDEF"},
    **{ch: ord(ch) - ord("a") + 10 for ch in "abcdef"},
}


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is accepted,
    and parsing stops at the first character that is not a digit. Text
    with no digits gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result * sign


def atoi_base(text: str, base: int) -> int:
    """Parse a leading integer written in ``base`` (2 to 16).

    In base 16 an optional ``0x`` or ``0X`` prefix is skipped; a leading
    ``-`` is recognised only in base 10. Parsing stops at the first
    character that is not a valid digit for the base.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    rest = text
    if base == 16 and rest[:2] in ("0x", "0X"):
        rest = rest[2:]
    sign = 1
    if base == 10 and rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        value = _DIGIT_VALUES.get(ch)
        if value is None or value >= base:
            break
        result = result * base + value
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)