"""Command line: ``calc base ops size`` reads the expression from stdin."""

from __future__ import annotations

import os
import re
import sys
from typing import IO, AnyStr

from .evaluate import calculate
from .validate import CalcError, ExprSyntaxError, check_args

_LEADING = re.compile(r"([+-]*)([0-9]*)")
_INT_MAX = "2147483647"
_INT_MIN_MAGNITUDE = "2147483648"


def parse_size(text: str) -> int:
    """Read a leading signed integer; out of the 32-bit range gives 0."""
    match = _LEADING.match(text)
    signs, digits = match.group(1), match.group(2)
    negative = signs.count("-") % 2 == 1
    rest = text[len(signs):]
    limit = _INT_MIN_MAGNITUDE if negative else _INT_MAX
    if len(digits) > len(limit):
        return 0
    if len(digits) == len(limit) and rest > limit:
        return 0
    value = int(digits or "0")
    return -value if negative else value


def read_expression(stream: IO[AnyStr], size: int) -> str:
    """Read exactly ``size`` characters of expression from ``stream``."""
    if size == 0:
        raise ExprSyntaxError()
    if size < 0:
        raise CalcError()
    data = stream.read(size)
    if len(data) != size:
        raise CalcError()
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="surrogateescape")
    return data


def _usage() -> str:
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "calc"
    return f'Usage : {prog} base ops"()+-*/%" exp_len\n'


def main(argv: list[str] | None = None) -> int:
    """Run the calculator and print the result or an error message."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        sys.stdout.write(_usage())
        return 1
    base, ops, size_text = args
    try:
        size = parse_size(size_text)
        expr = read_expression(getattr(sys.stdin, "buffer", sys.stdin), size)
        check_args(base, ops, size_text)
        result = calculate(expr, base, ops)
    except CalcError as exc:
        sys.stdout.write(str(exc))
        return 0
    sys.stdout.write(result)
    return 0