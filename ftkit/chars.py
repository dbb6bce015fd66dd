"""Character classification and case conversion for ASCII codes.

Every function accepts either a one-character string or an integer code.
The classifiers return booleans; the case converters return a value of
the same kind they were given.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _as_signed_byte(code: int) -> int:
    """Reduce ``code`` to the value a signed 8-bit char would hold."""
    byte = code & 0xFF
    return byte - 0x100 if byte >= 0x80 else byte


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits, judged on the low byte of the code."""
    byte = _as_signed_byte(_code(c))
    return (
        ord("0") <= byte <= ord("9")
        or ord("A") <= byte <= ord("Z")
        or ord("a") <= byte <= ord("z")
    )


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits.

    The lower bound is checked on the low byte of the code and the upper
    bound on the full code.
    """
    code = _code(c)
    return _as_signed_byte(code) >= ord("0") and code <= ord("9")


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c