"""String searching, comparison, bounded copying, slicing, trimming, splitting and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ``c`` may be a code or a character."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")


def _check_size(value: int, what: str) -> None:
    """Reject sizes, counts and offsets that are not non-negative ints."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string, ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string, ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    The end of a string compares as a NUL character. Returns the difference of
    the codes at the first mismatch, or 0 if the strings agree up to the
    first ``n`` characters or to a common end.
    """
    _check_size(n, "count")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of the first ``needle`` lying wholly within the first
    ``length`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the terminator.

    Returns the copied (possibly truncated) string and the length of ``src``,
    the length that was attempted. With ``size`` 0 nothing is copied.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the resulting string and the length that was attempted. When
    ``size`` is 0, or does not exceed the length of ``dst``, ``dst`` is left
    unchanged and the returned length is ``size + len(src)`` (or ``len(src)``
    for size 0).
    """
    _check_size(size, "size")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end yields the empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    delimiter = _char(sep)
    return [piece for piece in s.split(delimiter) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call ``func(index, item)`` on each element of ``s`` in place.

    ``s`` is a mutable sequence of characters, such as a list of one-character
    strings. A value returned by ``func`` replaces the element; None leaves it
    as it is.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement