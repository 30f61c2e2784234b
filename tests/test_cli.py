import io
import sys

import pytest

from bistromath.cli import main, parse_size, read_expression
from bistromath.validate import CalcError, ExprSyntaxError

DEC = "0123456789"
OPS = "()+-*/%"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+42", 42),
        ("--42", 42),
        ("-42", -42),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("2147483647", 2147483647),
        ("2147483648", 0),
        ("-2147483648", -2147483648),
        ("99999999999", 0),
        ("2147483647x", 0),
    ],
)
def test_parse_size(text, expected):
    assert parse_size(text) == expected


def test_read_expression_bytes_stops_at_size():
    assert read_expression(io.BytesIO(b"1+2\n"), 3) == "1+2"


def test_read_expression_text_stream():
    assert read_expression(io.StringIO("1+2"), 3) == "1+2"


def test_read_expression_short_input():
    with pytest.raises(CalcError):
        read_expression(io.BytesIO(b"1+2"), 5)


def test_read_expression_zero_size():
    with pytest.raises(ExprSyntaxError):
        read_expression(io.BytesIO(b"1+2"), 0)


def test_read_expression_negative_size():
    with pytest.raises(CalcError):
        read_expression(io.BytesIO(b"1+2"), -3)


def run(monkeypatch, capsys, argv, data):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    code = main(argv)
    return code, capsys.readouterr().out


def test_main_prints_result(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, [DEC, OPS, "5"], b"3+4*2")
    assert code == 0
    assert out == str(3 + 4 * 2)


def test_main_negative_result(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, [DEC, OPS, "3"], b"2-9")
    assert (code, out) == (0, str(2 - 9))


def test_main_usage(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, [DEC, OPS], b"")
    assert code == 1
    assert out.startswith("Usage : ")
    assert out.endswith(' base ops"()+-*/%" exp_len\n')


@pytest.mark.parametrize(
    "argv, data",
    [
        ([DEC, OPS, "0"], b"1+2"),
        ([DEC, "()+-*/", "3"], b"1+2"),
        (["00123", OPS, "3"], b"1+2"),
        ([DEC, OPS, "5a"], b"1+2*3"),
        ([DEC, OPS, "4"], b"1+2\n"),
        ([DEC, OPS, "3"], b"1+x"),
    ],
)
def test_main_syntax_errors(monkeypatch, capsys, argv, data):
    code, out = run(monkeypatch, capsys, argv, data)
    assert (code, out) == (0, "syntax error")


@pytest.mark.parametrize(
    "argv, data",
    [
        ([DEC, OPS, "9"], b"1+2"),
        ([DEC, OPS, "4"], b"10/0"),
    ],
)
def test_main_errors(monkeypatch, capsys, argv, data):
    code, out = run(monkeypatch, capsys, argv, data)
    assert (code, out) == (0, "Error")