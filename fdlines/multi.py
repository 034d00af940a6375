"""Line reading with an independent buffer for each file descriptor."""

from __future__ import annotations

from fdlines.reader import DEFAULT_BUFFER_SIZE, _check_buffer_size, _fill, _split_line

DEFAULT_MAX_FDS = 1024


class MultiLineReader:
    """Hands out lines from many descriptors, each with its own unread bytes."""

    def __init__(
        self, buffer_size: int = DEFAULT_BUFFER_SIZE, max_fds: int = DEFAULT_MAX_FDS
    ) -> None:
        _check_buffer_size(buffer_size)
        if max_fds <= 0:
            raise ValueError(f"max_fds must be positive, got {max_fds}")
        self.buffer_size = buffer_size
        self.max_fds = max_fds
        self._buffers: dict[int, bytearray] = {}

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd``, or None at EOF.

        A descriptor outside ``0 <= fd < max_fds`` discards every buffer and
        raises ValueError. A failed read discards that descriptor's buffer and
        re-raises the OSError.
        """
        if not 0 <= fd < self.max_fds:
            self.clear()
            raise ValueError(f"file descriptor {fd} outside 0..{self.max_fds - 1}")
        pending = self._buffers.setdefault(fd, bytearray())
        try:
            _fill(fd, pending, self.buffer_size)
        except OSError:
            del self._buffers[fd]
            raise
        line = _split_line(pending)
        if not pending:
            del self._buffers[fd]
        return line

    def clear(self) -> None:
        """Drop the buffered bytes of every descriptor."""
        self._buffers.clear()

    def pending(self, fd: int) -> bytes:
        """Return the bytes read from ``fd`` but not yet handed out."""
        return bytes(self._buffers.get(fd, b""))


_default_reader = MultiLineReader()


def get_next_line_multi(fd: int) -> bytes | None:
    """Return the next line of ``fd`` using a shared per-descriptor reader."""
    return _default_reader.next_line(fd)