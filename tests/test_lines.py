import io
import os

import pytest
from hypothesis import given, strategies as st

from libft.lines import BUFFER_SIZE, LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


class _Scripted:
    """A source whose reads follow a script of chunks and exceptions."""

    def __init__(self, script):
        self.script = list(script)

    def read(self, size):
        if not self.script:
            return b""
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


def test_lines_keep_newlines_and_last_piece():
    reader = LineReader(io.BytesIO(b"one\ntwo\nthree"), 4)
    assert list(reader) == [b"one\n", b"two\n", b"three"]


def test_read_line_returns_none_at_end():
    reader = LineReader(io.BytesIO(b"a\n"), 10)
    assert reader.read_line() == b"a\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_source_gives_nothing():
    assert list(LineReader(io.BytesIO(b""), 3)) == []


def test_empty_lines_are_kept():
    assert list(LineReader(io.BytesIO(b"\n\nx\n"), 2)) == [b"\n", b"\n", b"x\n"]


def test_text_source_gives_str_lines():
    reader = LineReader(io.StringIO("Hello World\nbye\n"), 5)
    assert list(reader) == ["Hello World\n", "bye\n"]


@pytest.mark.parametrize("size", [1, 2, 7, 100])
def test_file_descriptor_source(size):
    fd = _pipe_with(b"line one\nline two\n")
    try:
        assert list(LineReader(fd, size)) == [b"line one\n", b"line two\n"]
    finally:
        os.close(fd)


def test_default_buffer_size():
    reader = LineReader(io.BytesIO(b"x"))
    assert reader.buffer_size == BUFFER_SIZE == 1


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b""), size)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1, 4)


def test_source_without_read_rejected():
    with pytest.raises(TypeError):
        LineReader(object(), 4)


def test_read_error_discards_pending_text():
    reader = LineReader(_Scripted([b"ab", OSError("boom"), b"cd\n"]), 2)
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.read_line() == b"cd\n"
    assert reader.read_line() is None


def test_closed_descriptor_raises():
    read_end, write_end = os.pipe()
    os.close(read_end)
    os.close(write_end)
    with pytest.raises(OSError):
        LineReader(read_end, 4).read_line()


@given(st.binary(max_size=200), st.integers(min_value=1, max_value=16))
def test_lines_rebuild_the_input(data, size):
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    for line in lines[:-1]:
        assert line.endswith(b"\n")
        assert line.count(b"\n") == 1
    if lines:
        assert lines[-1].count(b"\n") <= 1
        assert b"\n" not in lines[-1][:-1]


@given(st.text(max_size=100), st.integers(min_value=1, max_value=8))
def test_text_lines_rebuild_the_input(data, size):
    lines = list(LineReader(io.StringIO(data), size))
    assert "".join(lines) == data
    assert all(line.endswith("\n") for line in lines[:-1])


def test_get_next_line_reads_a_pipe():
    fd = _pipe_with(b"first\nsecond")
    try:
        assert get_next_line(fd) == b"first\n"
        assert get_next_line(fd) == b"second"
        assert get_next_line(fd) is None
    finally:
        os.close(fd)


def test_get_next_line_negative_fd():
    with pytest.raises(ValueError):
        get_next_line(-1)


def test_get_next_line_empty_pipe():
    fd = _pipe_with(b"")
    try:
        assert get_next_line(fd) is None
    finally:
        os.close(fd)