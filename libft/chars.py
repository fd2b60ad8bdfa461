"""Character classification, case conversion and integer/string conversion."""

from __future__ import annotations

from typing import overload

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or one-character str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character string, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 0x61 <= code <= 0x7A or 0x41 <= code <= 0x5A


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 0x30 <= _code(c) <= 0x39


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


@overload
def to_lower(c: int) -> int: ...
@overload
def to_lower(c: str) -> str: ...


def to_lower(c):
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 0x41 <= code <= 0x5A:
        code += 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_upper(c: int) -> int: ...
@overload
def to_upper(c: str) -> str: ...


def to_upper(c):
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 0x61 <= code <= 0x7A:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, two's-complement style."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text without digits yields 0. The result is
    a 32-bit signed integer; values beyond that range wrap around.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - 0x30)
        pos += 1
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    magnitude = abs(n)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(0x30 + digit))
        if not magnitude:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))