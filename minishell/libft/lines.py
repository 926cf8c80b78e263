"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024
MAX_FD = 1024


class LineReader:
    """Buffered line reader over a raw file descriptor.

    Lines come back with their trailing newline, the last one without if the
    input does not end in one, and ``None`` once the input is exhausted.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""
        self._eof = False

    def _fill(self) -> None:
        while b"\n" not in self._pending and not self._eof:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if chunk:
                self._pending += chunk
            else:
                self._eof = True

    def read_line(self) -> str | None:
        """Return the next line, or None at end of input."""
        self._fill()
        if not self._pending:
            # Allow a later call to read again, e.g. from a terminal.
            self._eof = False
            return None
        newline = self._pending.find(b"\n")
        end = len(self._pending) if newline < 0 else newline + 1
        line, self._pending = self._pending[:end], self._pending[end:]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line from fd, keeping what was read ahead per descriptor."""
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"invalid file descriptor {fd}")
    reader = _readers.setdefault(fd, LineReader(fd))
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line