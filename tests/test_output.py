import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.output import put_char_fd, put_endl_fd, put_nbr_fd, put_str_fd


class _Pipe:
    """A pipe whose write end is handed to the code under test."""

    def __enter__(self):
        self._read_end, self.fd = os.pipe()
        self._write_open = True
        return self

    def output(self):
        self._close_write()
        chunks = []
        while True:
            chunk = os.read(self._read_end, 4096)
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def _close_write(self):
        if self._write_open:
            os.close(self.fd)
            self._write_open = False

    def __exit__(self, *exc_info):
        self._close_write()
        os.close(self._read_end)
        return False


def test_put_char():
    with _Pipe() as pipe:
        put_char_fd("a", pipe.fd)
        assert pipe.output() == b"a"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char_fd("ab", 1)


def test_put_char_rejects_int():
    with pytest.raises(TypeError):
        put_char_fd(97, 1)


def test_put_str():
    with _Pipe() as pipe:
        put_str_fd("Hello", pipe.fd)
        assert pipe.output() == b"Hello"


def test_put_str_empty():
    with _Pipe() as pipe:
        put_str_fd("", pipe.fd)
        assert pipe.output() == b""


def test_put_endl():
    with _Pipe() as pipe:
        put_endl_fd("Hello", pipe.fd)
        assert pipe.output() == b"Hello\n"


@given(st.text(max_size=50))
def test_put_endl_round_trip(text):
    with _Pipe() as pipe:
        put_endl_fd(text, pipe.fd)
        assert pipe.output().decode("utf-8") == text + "\n"


def test_put_nbr_negative():
    with _Pipe() as pipe:
        put_nbr_fd(-15386, pipe.fd)
        assert pipe.output() == b"-15386"


def test_put_nbr_int_min():
    with _Pipe() as pipe:
        put_nbr_fd(-2147483648, pipe.fd)
        assert pipe.output() == b"-2147483648"


def test_put_nbr_zero():
    with _Pipe() as pipe:
        put_nbr_fd(0, pipe.fd)
        assert pipe.output() == b"0"


@given(st.integers(-(2**31), 2**31 - 1))
def test_put_nbr_round_trip(n):
    with _Pipe() as pipe:
        put_nbr_fd(n, pipe.fd)
        assert int(pipe.output()) == n


def test_write_to_closed_fd_raises():
    read_end, write_end = os.pipe()
    os.close(read_end)
    os.close(write_end)
    with pytest.raises(OSError):
        put_str_fd("x", write_end)