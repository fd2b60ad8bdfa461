"""A small printf: %c %s %d %i %u %x %X %p and %%, with a count of what was written."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from libft.chars import itoa

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_INT_BITS = 32
_POINTER_BITS = 64
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _to_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` bits, two's-complement style."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _to_unsigned(value: int, bits: int) -> int:
    """Reduce ``value`` to an unsigned integer of ``bits`` bits."""
    return value % (1 << bits)


def _hex(value: int, digits: str) -> str:
    """Return ``value`` (non-negative) in base 16 using the given digit set."""
    out = []
    while True:
        value, digit = divmod(value, 16)
        out.append(digits[digit])
        if not value:
            break
    return "".join(reversed(out))


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    if isinstance(value, bool) or not isinstance(value, int):
        address = id(value)
    else:
        address = _to_unsigned(value, _POINTER_BITS)
    if address == 0:
        return _NULL_POINTER
    return "0x" + _hex(address, _HEX_LOWER)


def _format_signed(value: Any, spec: str) -> str:
    return itoa(_to_signed(_require_int(value, spec), _INT_BITS))


def _format_unsigned(value: Any, spec: str) -> str:
    return itoa(_to_unsigned(_require_int(value, spec), _INT_BITS))


def _format_hex(value: Any, spec: str, digits: str) -> str:
    return _hex(_to_unsigned(_require_int(value, spec), _INT_BITS), digits)


def _convert(spec: str, args: Iterator[Any]) -> str:
    """Render one conversion, taking its argument from ``args`` when it needs one."""
    if spec == "%":
        return "%"
    if spec not in "cdsipuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec in "di":
        return _format_signed(value, spec)
    if spec == "s":
        return _format_string(value)
    if spec == "p":
        return _format_pointer(value)
    if spec == "u":
        return _format_unsigned(value, spec)
    if spec == "x":
        return _format_hex(value, spec, _HEX_LOWER)
    return _format_hex(value, spec, _HEX_UPPER)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Supported: %c, %s, %d, %i, %u, %x, %X, %p and %%. An unknown conversion
    produces nothing and consumes no argument; a lone '%' at the end is kept.
    Integers are taken as 32-bit values; pointers as 64-bit addresses. A None
    string prints "(null)" and a None or zero pointer prints "(nil)".
    Raises TypeError when an argument is missing or of the wrong kind.
    """
    remaining = iter(args)
    pieces = []
    pos = 0
    length = len(fmt)
    while pos < length:
        ch = fmt[pos]
        if ch == "%" and pos + 1 < length:
            pieces.append(_convert(fmt[pos + 1], remaining))
            pos += 2
        else:
            pieces.append(ch)
            pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)