"""Reading a file descriptor one line at a time.

Each descriptor keeps its own read-ahead buffer, so several descriptors
can be read in turn without losing their places. A line comes back as
``bytes`` with its trailing newline, if it had one. ``None`` means there
was nothing left to read.
"""

from __future__ import annotations

import os
from typing import Optional

__all__ = ["DEFAULT_BUFFER_SIZE", "LineReader", "get_next_line"]

DEFAULT_BUFFER_SIZE = 1024


class LineReader:
    """Reads lines from file descriptors, one buffer per descriptor."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            buffer_size = DEFAULT_BUFFER_SIZE
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, or None at end of input.

        A negative descriptor gives None. A failed read raises OSError;
        the part of the line read so far is dropped.
        """
        if fd < 0:
            return None
        pending = self._pending.pop(fd, b"")
        parts: list[bytes] = []
        while True:
            if not pending:
                pending = os.read(fd, self.buffer_size)
                if not pending:
                    break
            newline = pending.find(b"\n")
            if newline >= 0:
                parts.append(pending[: newline + 1])
                pending = pending[newline + 1 :]
                break
            parts.append(pending)
            pending = b""
        if pending:
            self._pending[fd] = pending
        line = b"".join(parts)
        return line or None

    def reset(self) -> None:
        """Forget everything buffered for every descriptor."""
        self._pending.clear()


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)