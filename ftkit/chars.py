"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(range(9, 14)) | {32}


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C ``atoi`` does.

    Leading whitespace (tab, newline, vertical tab, form feed, carriage
    return, space) is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - 48)
        pos += 1
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits