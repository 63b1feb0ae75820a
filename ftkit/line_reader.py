"""Reading text one line at a time from file descriptors.

Data left over after a line is kept per descriptor, so several descriptors
can be read in turn without their lines getting mixed up.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024
_ENCODING = "utf-8"


class LineReader:
    """Reads lines from file descriptors in chunks of ``buffer_size`` bytes."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytearray] = {}

    def read_line(self, fd: int) -> str | None:
        """The next line from ``fd`` without its newline.

        Text after the last newline is returned as a final line. Returns
        None once nothing is left. A read error discards what was buffered
        for ``fd`` and propagates as OSError.
        """
        pending = self._pending.setdefault(fd, bytearray())
        while True:
            index = pending.find(b"\n")
            if index >= 0:
                line = bytes(pending[:index])
                del pending[: index + 1]
                return line.decode(_ENCODING, errors="replace")
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self.forget(fd)
                raise
            if not chunk:
                rest = bytes(self._pending.pop(fd))
                return rest.decode(_ENCODING, errors="replace") if rest else None
            pending += chunk

    def iter_lines(self, fd: int) -> Iterator[str]:
        """Yield the remaining lines of ``fd``."""
        while (line := self.read_line(fd)) is not None:
            yield line

    def forget(self, fd: int) -> None:
        """Discard any data buffered for ``fd``."""
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> str | None:
    """The next line from ``fd`` using a shared reader; None at the end."""
    return _default_reader.read_line(fd)