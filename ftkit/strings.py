"""String helpers modelled on the classic C string routines.

Positions are returned as indices (or None where nothing is found) and new
strings are returned instead of being written into caller buffers.
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Callable, Iterator, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        if c < 0:
            raise ValueError(f"character code must not be negative, got {c}")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _codes(s: str, n: int) -> Iterator[int]:
    """Character codes of ``s`` followed by terminating zeros, ``n`` in all."""
    return islice(chain(map(ord, s), repeat(0)), n)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of differing character codes,
    or 0 if the compared parts are equal. The end of a string compares as
    code 0.
    """
    _non_negative("n", n)
    for a, b in zip(_codes(s1, n), _codes(s2, n)):
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` in the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. The match must lie wholly within
    the first ``length`` characters; None is returned otherwise.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters including the terminator.

    Returns the copied text (at most ``dstsize - 1`` characters) and the
    full length of ``src``, which tells whether truncation happened.
    """
    _non_negative("dstsize", dstsize)
    if dstsize == 0:
        return "", len(src)
    return src[: dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dstsize`` does not exceed ``len(dst)``, ``dst`` is left unchanged and
    the length reported is ``dstsize + len(src)``.
    """
    _non_negative("dstsize", dstsize)
    if dstsize <= len(dst):
        return dst, dstsize + len(src)
    room = dstsize - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return f"{s1}{s2}"


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(_char(sep)) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``f(index, char)`` for each character of the mutable sequence ``s``.

    When ``f`` returns a value other than None, that value replaces the
    character in place. The sequence is returned.
    """
    for index, ch in enumerate(list(s)):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement
    return s