import io

import pytest

from ftkit.output import (
    format_string,
    fprintf,
    put_char,
    put_char_fd,
    put_endl_fd,
    put_nbr_fd,
    put_str_fd,
)


def test_put_char_to_stdout(capsys):
    assert put_char("z") == 1
    assert capsys.readouterr().out == "z"


def test_put_char_fd_with_code():
    stream = io.StringIO()
    put_char_fd(ord("q"), stream)
    put_char_fd("r", stream)
    assert stream.getvalue() == "qr"


def test_put_char_fd_rejects_long_string():
    with pytest.raises(ValueError):
        put_char_fd("ab", io.StringIO())


def test_put_str_and_endl():
    stream = io.StringIO()
    put_str_fd("hello", stream)
    put_endl_fd("world", stream)
    assert stream.getvalue() == "hello" + "world\n"


@pytest.mark.parametrize("n, text", [(-2147483648, "-2147483648"), (2147483647, "2147483647"), (0, "0")])
def test_put_nbr_fd(n, text):
    stream = io.StringIO()
    put_nbr_fd(n, stream)
    assert stream.getvalue() == text


def test_put_nbr_fd_round_trip():
    stream = io.StringIO()
    put_nbr_fd(-98765, stream)
    assert int(stream.getvalue()) == -98765


def test_put_nbr_fd_rejects_float():
    with pytest.raises(TypeError):
        put_nbr_fd(1.5, io.StringIO())


def test_format_null_string():
    assert format_string("%s", None) == "(null)"


def test_format_mixed():
    assert format_string("name=%s id=%d", "x", -2147483648) == "name=x id=-2147483648"


def test_format_char_and_int_spec():
    assert format_string("%c%i", "k", 7) == "k" + str(7)


def test_format_unknown_spec_dropped():
    assert format_string("a%xb%", 5) == "ab"


def test_format_percent_percent_dropped():
    assert format_string("50%%") == "50"


def test_format_missing_argument():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_format_wrong_type():
    with pytest.raises(TypeError):
        format_string("%d", "nope")


def test_fprintf_writes_and_counts():
    stream = io.StringIO()
    count = fprintf(stream, "Error: %s at %d\n", "map", 3)
    assert stream.getvalue() == format_string("Error: %s at %d\n", "map", 3)
    assert count == len(stream.getvalue())


def test_fprintf_plain_text():
    stream = io.StringIO()
    assert fprintf(stream, "plain") == len("plain")
    assert stream.getvalue() == "plain"