# libft

A small library of character, string, memory, linked-list, formatted-output
and line-reading routines with Python-friendly interfaces. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`: ASCII
  classification. Each takes an int code or a one-character string.
- `to_lower`, `to_upper`: change the case of ASCII letters only. The result
  has the same type as the argument (int in, int out; str in, str out).
- `atoi(text)`: skips leading whitespace, takes one optional sign, then reads
  digits up to the first non-digit. Text without digits gives 0. The result
  wraps to a signed 32-bit integer.
- `itoa(n)`: decimal representation of an int.

### `libft.memory`

Routines working on `bytes`, `bytearray` and `memoryview` objects. A byte
count that is negative or runs past a buffer raises `ValueError`.

- `memset(buf, value, n)`: fill the first `n` bytes with `value & 0xFF`;
  returns `buf`.
- `bzero(buf, n)`: zero the first `n` bytes.
- `calloc(nmemb, size)`: a zero-filled `bytearray`; `OverflowError` when the
  total size is too large.
- `memchr(data, c, n)`: index of the first byte equal to `c` within the first
  `n` bytes, or `None`.
- `memcmp(a, b, n)`: difference of the first unequal pair of bytes, or 0.
- `memcpy(dest, src, n)`: copy `n` bytes to the start of `dest`; returns
  `dest`.
- `memmove(buf, dest, src, n)`: move `n` bytes inside `buf` from offset `src`
  to offset `dest`; overlapping regions are handled.

### `libft.output`

`put_char_fd(c, fd)`, `put_str_fd(s, fd)`, `put_endl_fd(s, fd)` and
`put_nbr_fd(n, fd)` write a character, a string, a string plus newline, or a
decimal number to an open file descriptor. Text is encoded as UTF-8.

### `libft.strings`

- `strchr(s, c)`, `strrchr(s, c)`: index of the first or last occurrence, or
  `None`. Searching for `"\0"` gives `len(s)`.
- `strncmp(s1, s2, n)`: compares at most `n` characters; the end of a string
  counts as NUL. Returns the difference of the codes at the first mismatch.
- `strnstr(haystack, needle, length)`: index of `needle` lying wholly within
  the first `length` characters, or `None`; an empty needle gives 0.
- `strlcpy(src, size)` and `strlcat(dst, src, size)`: bounded copy and append
  into a destination of `size` slots (one kept for the terminator). Both
  return a tuple of the resulting string and the length that was attempted.
- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`.
- `split(s, sep)`: split on one character, dropping empty pieces.
- `strmapi(s, func)`: new string of `func(index, char)` for each character.
- `striteri(s, func)`: calls `func(index, item)` on a mutable sequence such as
  a list of characters; a non-`None` return replaces the item.

### `libft.lists`

`Node` (with `content` and `next`) and `LinkedList`, a singly linked list
built from any iterable. It supports `len()`, iteration, `push_front`,
`push_back`, `last` (content of the last node), `pop_front(delete)`,
`clear(delete)`, `for_each(func)` and `map(func, delete)`. `last` and
`pop_front` raise `IndexError` on an empty list. `delete` is an optional
callable given each removed content; if `func` raises during `map`, the
contents built so far are passed to `delete` and the error propagates.

### `libft.printf`

- `format_string(fmt, *args)`: supports `%c %s %d %i %u %x %X %p %%`.
  Integers are treated as 32-bit values and pointers as 64-bit addresses. A
  `None` string prints `(null)`; a `None` or zero pointer prints `(nil)`; any
  other non-int object passed to `%p` prints its `id()`. An unknown conversion
  produces nothing and takes no argument. A missing or wrongly typed argument
  raises `TypeError`.
- `printf(fmt, *args, file=None)`: writes the result to `file` (standard
  output by default) and returns the number of characters written.

### `libft.lines`

- `LineReader(source, buffer_size=1)`: reads lines from an int file
  descriptor (giving bytes) or from any object with a `read(size)` method
  (giving what it returns, bytes or str), `buffer_size` at a time. Use
  `read_line()`, which returns `None` at the end, or iterate over it. Lines
  keep their newline; a final unterminated line is returned as it is.
- `get_next_line(fd)`: returns the next line from a file descriptor as
  bytes, or `None` at the end, reading `BUFFER_SIZE` (1) bytes at a time.
  Leftover text is kept between calls in a single store shared by all
  descriptors, so use it on one descriptor at a time; use `LineReader` to
  read several sources side by side.

## Examples

```python
from libft.chars import atoi, itoa
from libft.strings import split, strtrim, strlcpy
from libft.printf import format_string
from libft.lists import LinkedList

atoi("   -42abc")                           # -42
itoa(-2147483648)                           # "-2147483648"
split("a,,b,c,", ",")                       # ["a", "b", "c"]
strtrim("xxhelloxx", "x")                   # "hello"
strlcpy("hello", 3)                         # ("he", 5)
format_string("%d in hex is %x", 255, 255)  # "255 in hex is ff"

items = LinkedList(["a", "b", "c"])
items.push_back("d")
list(items.map(str.upper))                  # ["A", "B", "C", "D"]
```

Reading a file line by line:

```python
from libft.lines import LineReader

with open("notes.txt") as handle:
    for line in LineReader(handle, 100):
        print(line, end="")
```

## What it does not do

This is a library only: it installs no command-line program.