"""Reading a stream one line at a time, in chunks of a fixed size."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any, AnyStr, Generic, Optional, Union

BUFFER_SIZE = 1
"""Chunk size used by :func:`get_next_line` and the default for :class:`LineReader`."""

Chunk = Union[bytes, str]
Reader = Callable[[int], Any]


def _newline_for(chunk: Chunk) -> Chunk:
    """Return the newline of the same kind as ``chunk``, bytes or str."""
    if isinstance(chunk, (bytes, bytearray)):
        return b"\n"
    if isinstance(chunk, str):
        return "\n"
    raise TypeError(f"read() must return bytes or str, got {type(chunk).__name__}")


def _next_line(
    pending: Optional[Chunk], read: Reader, buffer_size: int
) -> tuple[Optional[Chunk], Optional[Chunk]]:
    """Take the next line from ``pending`` plus whatever ``read`` supplies.

    Chunks of ``buffer_size`` are read until a newline has been seen or the
    source reports its end. Returns the line (newline included, or the final
    unterminated piece) and the text left over for the next call; the line
    is None once nothing is left.
    """
    newline = None if pending is None else _newline_for(pending)
    while newline is None or newline not in pending:
        chunk = read(buffer_size)
        if not chunk:
            break
        if pending is None:
            newline = _newline_for(chunk)
            pending = chunk
        else:
            pending = pending + chunk
    if not pending:
        return None, None
    index = pending.find(newline)
    if index < 0:
        return pending, None
    return pending[: index + 1], pending[index + 1:]


def _check_buffer_size(buffer_size: int) -> None:
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise TypeError(f"buffer size must be an int, got {type(buffer_size).__name__}")
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")


def _check_fd(fd: int) -> None:
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"file descriptor must be an int, got {type(fd).__name__}")
    if fd < 0:
        raise ValueError(f"file descriptor must not be negative, got {fd}")


class LineReader(Generic[AnyStr]):
    """Read lines from a file descriptor or a file-like object.

    ``source`` is either an int file descriptor, read with ``os.read`` and
    giving bytes, or an object with a ``read(size)`` method, giving whatever
    that method returns (bytes or str). Lines keep their trailing newline;
    the last line of a source that does not end with one is returned as is.
    """

    def __init__(self, source: Union[int, Any], buffer_size: int = BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        if isinstance(source, int) and not isinstance(source, bool):
            _check_fd(source)
            fd = source
            self._read: Reader = lambda size: os.read(fd, size)
        elif callable(getattr(source, "read", None)):
            self._read = source.read
        else:
            raise TypeError(
                f"source must be a file descriptor or have a read() method, "
                f"got {type(source).__name__}"
            )
        self.source = source
        self.buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the source has nothing more."""
        try:
            line, self._pending = _next_line(self._pending, self._read, self.buffer_size)
        except BaseException:
            self._pending = None
            raise
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


class _Carry:
    """Text left over between calls of :func:`get_next_line`, shared by all descriptors."""

    pending: Optional[bytes] = None


_carry = _Carry()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line read from file descriptor ``fd``, or None at the end.

    Reads ``BUFFER_SIZE`` bytes at a time. The text read past the returned
    line is kept for the next call; one such store serves every descriptor.
    """
    _check_fd(fd)
    try:
        line, _carry.pending = _next_line(
            _carry.pending, lambda size: os.read(fd, size), BUFFER_SIZE
        )
    except BaseException:
        _carry.pending = None
        raise
    return line