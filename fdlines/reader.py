"""Reading a file descriptor one line at a time, with state kept per descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFF_SIZE = 1
MAX_FD = 1024

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineReader:
    """Returns successive lines from file descriptors.

    Data read past the end of a line is kept for the next call on the same
    descriptor, so several descriptors may be read in turn.
    """

    def __init__(self, buffer_size: int = BUFF_SIZE, max_fd: int = MAX_FD) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if max_fd < 0:
            raise ValueError(f"max_fd must not be negative, got {max_fd}")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._pending: dict[int, bytearray] = {}

    def _check_fd(self, fd: int) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"fd must be an int, got {type(fd).__name__}")
        if fd < 0 or fd > self.max_fd:
            raise ValueError(f"file descriptor {fd} is out of range 0..{self.max_fd}")

    def next_line(self, fd: int) -> str | None:
        """Return the next line without its newline, or None at end of input.

        Raises OSError when reading fails.
        """
        self._check_fd(fd)
        pending = self._pending.get(fd)
        while pending is None or b"\n" not in pending:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            if pending is None:
                pending = self._pending[fd] = bytearray()
            pending += chunk

        if not pending:
            self._pending.pop(fd, None)
            return None

        end = pending.find(b"\n")
        if end < 0:
            line = bytes(pending)
            del self._pending[fd]
        else:
            line = bytes(pending[:end])
            del pending[:end + 1]
            if not pending:
                del self._pending[fd]
        return line.decode(_ENCODING, _ERRORS)

    def lines(self, fd: int) -> Iterator[str]:
        """Yield the remaining lines of ``fd``."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = LineReader(BUFF_SIZE, MAX_FD)


def get_next_line(fd: int) -> str | None:
    """Return the next line of ``fd`` using a shared reader, or None at end of input."""
    return _default_reader.next_line(fd)