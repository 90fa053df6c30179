import io

import pytest

from pipex.printf import PrintfFormatError, printf, render


def test_plain_text_passes_through():
    assert render("hello world") == "hello world"


def test_percent_literal():
    assert render("100%%") == "100%"


def test_null_string():
    assert render("%s", None) == "(null)"


def test_nil_pointer():
    assert render("%p", None) == "(nil)"
    assert render("%p", 0) == "(nil)"


def test_pointer_has_hex_prefix_and_round_trips():
    out = render("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096


def test_int_min():
    assert render("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("number", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_decimal_round_trip(number):
    assert int(render("%d", number)) == number
    assert render("%i", number) == render("%d", number)


def test_decimal_wraps_like_int():
    assert int(render("%d", 2147483648)) == -2147483648


@pytest.mark.parametrize("number", [0, 9, 10, 255, 48879, 4294967295])
def test_hex_round_trip(number):
    lower = render("%x", number)
    assert int(lower, 16) == number
    assert lower == lower.lower()
    assert render("%X", number) == lower.upper()


def test_unsigned_of_negative_wraps():
    assert int(render("%u", -1)) == 4294967295
    assert render("%x", -1) == "ffffffff"


def test_char_from_str_and_int():
    assert render("%c", "A") == "A"
    assert render("%c", ord("z")) == "z"


def test_mixed_conversions():
    assert render("%s=%d", "answer", 42) == "answer=42"


def test_unknown_specifier_prints_character():
    assert render("%q") == "q"


def test_space_after_percent_is_printed():
    assert render("% d") == " d"


@pytest.mark.parametrize("fmt", ["abc %", "abc %   ", "% \t\n", "%"])
def test_trailing_percent_raises(fmt):
    with pytest.raises(PrintfFormatError):
        render(fmt)


def test_missing_argument_raises():
    with pytest.raises(PrintfFormatError):
        render("%d")


def test_non_integer_for_d_raises():
    with pytest.raises(TypeError):
        render("%d", "seven")


def test_printf_writes_and_counts():
    buffer = io.StringIO()
    count = printf("%s-%d%%", "x", 5, file=buffer)
    assert buffer.getvalue() == render("%s-%d%%", "x", 5)
    assert count == len(buffer.getvalue())


def test_printf_error_writes_nothing():
    buffer = io.StringIO()
    with pytest.raises(PrintfFormatError):
        printf("oops %", file=buffer)
    assert buffer.getvalue() == ""