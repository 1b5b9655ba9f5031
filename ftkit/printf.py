"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, Union

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def format_char(c: Union[int, str]) -> str:
    """Render one character; an int is taken as a byte value modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c, "%c") & 0xFF)


def format_str(s: Optional[str]) -> str:
    """Render a string; None is shown as ``(null)``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"%s expects a str, got {type(s).__name__}")
    return s


def format_pointer(ptr: Optional[int]) -> str:
    """Render an address as ``0x`` and lower-case hex; null is ``(nil)``."""
    if ptr is None:
        return "(nil)"
    value = _require_int(ptr, "%p") & _POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def format_signed(n: int) -> str:
    """Render ``n`` as a signed 32-bit decimal."""
    value = _require_int(n, "%d") & _UINT_MASK
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return str(value)


def format_unsigned(n: int) -> str:
    """Render ``n`` as an unsigned 32-bit decimal."""
    return str(_require_int(n, "%u") & _UINT_MASK)


def format_hex(n: int, conversion: str) -> str:
    """Render ``n`` as unsigned 32-bit hex; ``conversion`` is ``'x'`` or ``'X'``."""
    if conversion not in ("x", "X"):
        raise ValueError(f"hex conversion must be 'x' or 'X', got {conversion!r}")
    return format(_require_int(n, "%" + conversion) & _UINT_MASK, conversion)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, "x"),
    "X": lambda n: format_hex(n, "X"),
}


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``.

    Unknown conversions produce nothing, a lone trailing ``%`` is dropped
    and surplus arguments are ignored. Too few arguments raise ValueError.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        render = _CONVERSIONS.get(spec)
        if render is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise ValueError(f"not enough arguments for conversion %{spec}") from None
        pieces.append(render(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)