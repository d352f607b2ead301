"""Line-by-line reading from raw file descriptors."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 10
MAX_FD = 1024


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is pulled from the descriptor ``buffer_size`` bytes at a time and
    kept until a full line is available. Each line keeps its trailing
    newline; the last line of the input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = bytearray()

    def _fill(self) -> None:
        while b"\n" not in self._stash:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._stash.clear()
                raise
            if not chunk:
                return
            self._stash += chunk

    def readline(self) -> bytes | None:
        """Return the next line, or None when no data is left."""
        self._fill()
        if not self._stash:
            return None
        newline = self._stash.find(b"\n")
        end = len(self._stash) if newline < 0 else newline + 1
        line = bytes(self._stash[:end])
        del self._stash[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.readline()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line from ``fd``, keeping separate state per descriptor.

    Returns None at the end of the input or for a descriptor outside
    ``0 <= fd < MAX_FD``.
    """
    if not 0 <= fd < MAX_FD:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.readline()
    except OSError:
        del _readers[fd]
        raise
    if line is None:
        del _readers[fd]
    return line