"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Union

CharLike = Union[int, str]
TextLike = Union[str, bytes, bytearray]


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of ``data`` to ``fd`` and return how many were written."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def _encode(s: TextLike) -> bytes:
    if isinstance(s, str):
        return s.encode("utf-8")
    if isinstance(s, (bytes, bytearray)):
        return bytes(s)
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def put_char(c: CharLike, fd: int) -> int:
    """Write one character to ``fd``.

    An int is written as a single byte (taken modulo 256); a one-character
    string is written in UTF-8.
    """
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        return _write_all(fd, bytes([c & 0xFF]))
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _write_all(fd, c.encode("utf-8"))
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def put_str(s: TextLike, fd: int) -> int:
    """Write ``s`` to ``fd``."""
    return _write_all(fd, _encode(s))


def put_endl(s: TextLike, fd: int) -> int:
    """Write ``s`` followed by a newline to ``fd``."""
    return _write_all(fd, _encode(s) + b"\n")


def put_nbr(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return _write_all(fd, str(n).encode("ascii"))