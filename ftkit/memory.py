"""Byte-buffer operations on mutable byte sequences.

Buffers are ``bytearray`` objects, or any object that supports slice
assignment of bytes. Counts that fall outside a buffer raise
``ValueError`` instead of reading or writing past its end.
"""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ByteSource = Union[bytes, bytearray, memoryview]


def _check_span(n: int, available: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > available:
        raise ValueError(f"{n} bytes exceed the {available} bytes of {what}")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_span(n, len(buffer), "the buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count} and {size}")
    return bytearray(count * size)


def memchr(data: ByteSource, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to the low byte of ``value``.

    Only the first ``n`` bytes are searched; ``None`` means no match.
    """
    _check_span(n, len(data), "the data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ByteSource, b: ByteSource, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0
    when the spans are equal.
    """
    _check_span(n, len(a), "the first operand")
    _check_span(n, len(b), "the second operand")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Buffer, src: ByteSource, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_span(n, len(src), "the source")
    _check_span(n, len(dest), "the destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest_offset: int, src_offset: int, n: int) -> Buffer:
    """Move ``n`` bytes within ``buffer``; the two regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span(n, len(buffer) - src_offset, "the buffer after the source offset")
    _check_span(n, len(buffer) - dest_offset, "the buffer after the destination offset")
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def realloc(buffer: ByteSource, new_size: int) -> bytearray:
    """Return a new buffer of ``new_size`` bytes seeded from ``buffer``.

    Only the first ``new_size // 2`` bytes (or fewer, if ``buffer`` is
    shorter) are carried over; the rest of the new buffer is zero.
    """
    if new_size < 0:
        raise ValueError(f"size must not be negative, got {new_size}")
    resized = bytearray(new_size)
    keep = min(new_size // 2, len(buffer))
    resized[:keep] = bytes(buffer[:keep])
    return resized