import io

import pytest

from fillit.output import put_char, put_line, put_lines, put_number, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("#", buf)
    assert buf.getvalue() == "#"


def test_put_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_rejects_empty_string():
    with pytest.raises(ValueError):
        put_char("", io.StringIO())


def test_put_str_writes_text_unchanged():
    buf = io.StringIO()
    put_str("AAB.", buf)
    put_str("CC..", buf)
    assert buf.getvalue() == "AAB." + "CC.."


def test_put_line_appends_newline():
    buf = io.StringIO()
    put_line("ABCD", buf)
    value = buf.getvalue()
    assert value.endswith("\n")
    assert value.splitlines() == ["ABCD"]


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_number_round_trips(n):
    buf = io.StringIO()
    put_number(n, buf)
    assert int(buf.getvalue()) == n


def test_put_number_negative_has_leading_minus():
    buf = io.StringIO()
    put_number(-5, buf)
    assert buf.getvalue().startswith("-")


def test_put_lines_writes_each_line():
    lines = ["AA..", "AA..", "BBBB"]
    buf = io.StringIO()
    put_lines(lines, buf)
    value = buf.getvalue()
    assert value.splitlines() == lines
    assert value.count("\n") == len(lines)


def test_put_lines_empty_writes_nothing():
    buf = io.StringIO()
    put_lines([], buf)
    assert buf.getvalue() == ""


def test_default_stream_is_stdout(capsys):
    put_str("xy")
    put_char("z")
    assert capsys.readouterr().out == "xy" + "z"