import io

import pytest

from wireframe.intconv import parse_int
from wireframe.output import put_char, put_line, put_number, put_str


def test_put_char():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str():
    buf = io.StringIO()
    put_str("Map dosen't exist.", buf)
    assert buf.getvalue() == "Map dosen't exist."


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    put_line(None, buf)
    assert buf.getvalue() == ""


def test_put_line_appends_newline():
    buf = io.StringIO()
    put_line("Parameter error", buf)
    assert buf.getvalue() == "Parameter error\n"


def test_put_line_empty():
    buf = io.StringIO()
    put_line("", buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, -7, 10, 16777215, 2147483647, -2147483648])
def test_put_number_round_trip(n):
    buf = io.StringIO()
    put_number(n, buf)
    assert parse_int(buf.getvalue()) == n


def test_default_stream_is_stdout(capsys):
    put_str("ESC : Exit.")
    put_char("!")
    put_number(-12)
    assert capsys.readouterr().out == "ESC : Exit.!-12"