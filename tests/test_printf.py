import io

import pytest

from miniprintf.conversions import (
    format_hex,
    format_pointer,
    format_signed,
    format_unsigned,
)
from miniprintf.printf import FormatError, printf, render


def test_render_plain_text():
    assert render("plain text") == "plain text"


def test_render_percent_escape():
    assert render("%%") == "%"


def test_render_char_and_string():
    assert render("%c%s", "a", "bc") == "a" + "bc"


def test_render_null_string():
    assert render("%s", None) == "(null)"


@pytest.mark.parametrize("spec", ["d", "i"])
def test_render_signed(spec):
    assert render("n=%" + spec, -7) == "n=" + format_signed(-7)


def test_render_unsigned_and_hex():
    result = render("%u %x %X", -1, 3054, 3054)
    assert result == " ".join(
        [format_unsigned(-1), format_hex(3054, "x"), format_hex(3054, "X")]
    )


def test_render_pointer():
    assert render("%p|%p", 0, 0x1F) == "(nil)|" + format_pointer(0x1F)


def test_unknown_specifier_consumes_nothing():
    assert render("%q%d", 3) == format_signed(3)


def test_extra_arguments_ignored():
    assert render("%s", "x", "y") == "x"


def test_render_none_template():
    with pytest.raises(FormatError):
        render(None)


def test_render_lone_percent():
    with pytest.raises(FormatError):
        render("abc%")


def test_render_missing_argument():
    with pytest.raises(FormatError):
        render("%d %d", 1)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        render("%s")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%%", "key", 12, stream=stream)
    assert stream.getvalue() == render("%s=%d%%", "key", 12)
    assert count == len(stream.getvalue())


def test_printf_counts_nul_char():
    stream = io.StringIO()
    count = printf("%c", 0, stream=stream)
    assert count == 1
    assert stream.getvalue() == "\0"


def test_printf_keeps_prefix_on_error():
    stream = io.StringIO()
    with pytest.raises(FormatError):
        printf("ab%", stream=stream)
    assert stream.getvalue() == "ab"


def test_printf_default_stream(capsys):
    count = printf("%s!", "hi")
    captured = capsys.readouterr()
    assert captured.out == "hi!"
    assert count == len(captured.out)