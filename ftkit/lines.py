"""Reading a file descriptor one line at a time, with per-descriptor state."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Optional

BUFFER_SIZE = 42


class LineReader:
    """Reads newline-terminated lines from file descriptors.

    Data read past the end of a line is kept for the next call on the same
    descriptor, so several descriptors can be read in turn without mixing
    their contents.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer size must be an int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, newline included, or None at end of input.

        The last line is returned without a newline if the input does not end
        with one. If reading fails, the data kept for ``fd`` is dropped and
        the OSError propagates.
        """
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        pending = bytearray(self._pending.pop(fd, b""))
        newline = pending.find(b"\n")
        while newline < 0:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            start = len(pending)
            pending += chunk
            newline = pending.find(b"\n", start)
        if not pending:
            return None
        if newline < 0:
            return bytes(pending)
        rest = bytes(pending[newline + 1:])
        if rest:
            self._pending[fd] = rest
        return bytes(pending[: newline + 1])

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield the remaining lines of ``fd`` until the end of input."""
        while (line := self.read_line(fd)) is not None:
            yield line


_default_reader = LineReader(BUFFER_SIZE)


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd`` using a shared reader, or None at end of input."""
    return _default_reader.read_line(fd)


def main(argv: Optional[list[str]] = None) -> int:
    """Print the first line of a file (``test1.txt`` unless a path is given)."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else "test1.txt"
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        sys.stderr.write(f"{path}: {exc.strerror}\n")
        return 1
    try:
        line = LineReader(BUFFER_SIZE).read_line(fd)
    finally:
        os.close(fd)
    if line is not None:
        sys.stdout.write(line.decode("utf-8", errors="replace"))
        sys.stdout.flush()
    return 0