"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from libft.chars import itoa


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``, retrying on short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character string, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    _write_all(fd, c.encode("utf-8"))


def put_str_fd(s: str, fd: int) -> None:
    """Write ``s`` to ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, (s + "\n").encode("utf-8"))


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    _write_all(fd, itoa(n).encode("ascii"))