import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.printf import format_string, printf


def test_literal_text_passes_through():
    assert format_string("Hello World") == "Hello World"


def test_percent_percent():
    assert format_string("100%%") == "100%"


def test_trailing_lone_percent_is_kept():
    assert format_string("50%") == "50%"


def test_unknown_conversion_prints_nothing_and_keeps_arguments():
    assert format_string("a%qb%d", 7) == "ab7"


def test_char_and_string_and_int_mix():
    result = format_string("Test: %c and %c with some %d\n%s %%", "A", "b", -1, "Hello World")
    assert result == "Test: A and b with some -1\nHello World %"


def test_char_from_int_code():
    assert format_string("%c", ord("Z")) == "Z"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_has_hex_prefix():
    result = format_string("%p", 4096)
    assert result.startswith("0x")
    assert int(result, 16) == 4096


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"
    assert format_string("%i", -2147483648) == "-2147483648"


def test_unsigned_of_minus_one_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1


def test_signed_wraps_to_32_bits():
    assert int(format_string("%d", 2**31)) == -(2**31)


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_unsigned_round_trip(n):
    assert int(format_string("%u", n)) == n


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "12")
    with pytest.raises(TypeError):
        format_string("%s", 12)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("x=%d s=%s%%", 42, "hi", file=out)
    assert out.getvalue() == "x=42 s=hi%"
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", None)
    assert capsys.readouterr().out == "(null)"
    assert count == len("(null)")


@given(st.text(alphabet=st.characters(blacklist_characters="%")))
def test_text_without_percent_is_unchanged(text):
    out = io.StringIO()
    assert printf(text, file=out) == len(text)
    assert out.getvalue() == text