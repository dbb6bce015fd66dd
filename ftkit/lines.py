"""Reading a byte source one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Optional, Union

BUFFER_SIZE = 10

Source = Union[int, Any]


class LineReader:
    """Read lines from a file descriptor or a binary file object.

    Data is read ``buffer_size`` bytes at a time. Each line is returned as
    ``bytes`` with its trailing newline; the final line may lack one.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(fd, int):
            if fd < 0:
                raise ValueError(f"invalid file descriptor {fd}")
        elif not callable(getattr(fd, "read", None)):
            raise TypeError(
                f"expected a file descriptor or a readable object, got {type(fd).__name__}"
            )
        self._source = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return bytes(self._source.read(self._buffer_size) or b"")

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` once the source is exhausted."""
        newline = self._pending.find(b"\n")
        while newline < 0:
            searched = len(self._pending)
            chunk = self._read_chunk()
            if not chunk:
                break
            self._pending += chunk
            newline = self._pending.find(b"\n", searched)
        if not self._pending:
            return None
        end = len(self._pending) if newline < 0 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(fd: Source, buffer_size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every line of ``fd``."""
    yield from LineReader(fd, buffer_size)