"""String searching, comparison and bounded copying.

Search functions return indices, or ``None`` when nothing is found.
Comparisons return the difference of the first pair of characters that
differ, treating the end of a string as a character with code 0.
The bounded copy functions write NUL-terminated byte strings into a
fixed-size ``bytearray``.
"""

from __future__ import annotations

from typing import Union

ByteText = Union[str, bytes, bytearray]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def _c_bytes(src: ByteText) -> bytes:
    data = src.encode("utf-8") if isinstance(src, str) else bytes(src)
    end = data.find(0)
    return data if end < 0 else data[:end]


def strlen(s: str | None) -> int:
    """Return the length of ``s``; ``None`` counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Compare two strings; 0 when equal, otherwise the code difference."""
    return strncmp(a, b, max(len(a), len(b)) + 1)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    for i in range(min(n, max(len(a), len(b)))):
        diff = _code_at(a, i) - _code_at(b, i)
        if diff:
            return diff
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0.
    """
    if not little:
        return 0
    index = big[: max(length, 0)].find(little)
    return None if index < 0 else index


def strlcpy(dest: bytearray, src: ByteText, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes including a NUL.

    Returns the length of ``src``, so a result of ``size`` or more means
    the copy was truncated.
    """
    if size < 0 or size > len(dest):
        raise ValueError(f"size {size} does not fit a buffer of {len(dest)} bytes")
    data = _c_bytes(src)
    if size:
        copied = data[: size - 1]
        dest[: len(copied)] = copied
        dest[len(copied)] = 0
    return len(data)


def strlcat(dest: bytearray, src: ByteText, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest``.

    At most ``size`` bytes of ``dest`` are used, including the NUL.
    Returns the length the full result would have had, so a result of
    ``size`` or more means the string was truncated.
    """
    if size < 0 or size > len(dest):
        raise ValueError(f"size {size} does not fit a buffer of {len(dest)} bytes")
    data = _c_bytes(src)
    end = bytes(dest[:size]).find(0)
    start = size if end < 0 else end
    room = max(size - start - 1, 0)
    appended = data[:room]
    dest[start:start + len(appended)] = appended
    if start != size:
        dest[start + len(appended)] = 0
    return start + len(data)