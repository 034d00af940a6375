"""Read a file descriptor one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 10


def _fill(fd: int, pending: bytearray, buffer_size: int) -> None:
    """Append reads from ``fd`` to ``pending`` until it holds a newline or EOF is hit."""
    if b"\n" in pending:
        return
    while True:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            return
        pending += chunk
        if b"\n" in chunk:
            return


def _split_line(pending: bytearray) -> bytes | None:
    """Remove and return the first line of ``pending``, newline included."""
    if not pending:
        return None
    newline = pending.find(b"\n")
    end = newline + 1 if newline >= 0 else len(pending)
    line = bytes(pending[:end])
    del pending[:end]
    return line


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")


class LineReader:
    """Hands out lines from a descriptor, keeping unread bytes between calls.

    A single buffer is shared by every descriptor passed in, so the reader is
    meant to be used on one descriptor at a time.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line, ending in ``b"\\n"`` unless it is the last, or None at EOF.

        A negative descriptor discards buffered data and raises ValueError.
        A failed read discards buffered data and re-raises the OSError.
        """
        if fd < 0:
            self.clear()
            raise ValueError(f"invalid file descriptor {fd}")
        try:
            _fill(fd, self._pending, self.buffer_size)
        except OSError:
            self.clear()
            raise
        return _split_line(self._pending)

    def clear(self) -> None:
        """Drop any buffered bytes."""
        self._pending.clear()

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield lines from ``fd`` until end of file."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line of ``fd`` using a shared reader with the default buffer size."""
    return _default_reader.next_line(fd)