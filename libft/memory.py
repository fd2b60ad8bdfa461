"""Byte-buffer helpers: filling, zeroing, allocation, searching, comparing, copying."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *lengths: int) -> None:
    """Reject a byte count that is negative or runs past any of the buffers."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte count must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256).

    Returns ``buf``.
    """
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb`` elements of ``size`` bytes each.

    Raises OverflowError when the total size cannot be represented.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > sys.maxsize // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes is too large")
    return bytearray(nmemb * size)


def memchr(data: BytesLike, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` (modulo 256) among the
    first ``n`` bytes of ``data``, or None if there is none."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_count(n, len(a), len(b))
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: MutableSequence[int], src: BytesLike, n: int) -> MutableSequence[int]:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``.

    Returns ``dest``.
    """
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were copied
    to a temporary buffer first. Returns ``buf``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    if n == 0 or dest == src:
        return buf
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf