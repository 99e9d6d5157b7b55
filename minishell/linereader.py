"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 100


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line keeps its trailing newline; the last line of the input may
    have none. Bytes read past the end of a line are kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                return
            self._pending += chunk

    def next_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end == -1 else end + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line