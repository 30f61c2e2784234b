"""Arbitrary-precision arithmetic on unsigned decimal digit strings."""

from __future__ import annotations

from itertools import zip_longest

from .validate import CalcError

_DIGITS = "0123456789"


def _check(text: str) -> None:
    if not text or any(char not in _DIGITS for char in text):
        raise ValueError(f"not a decimal digit string: {text!r}")


def _normalize(text: str) -> str:
    return text.lstrip("0") or "0"


def _from_low_digits(digits: list[int]) -> str:
    return _normalize("".join(str(digit) for digit in reversed(digits)))


def compare_digits(a: str, b: str) -> int:
    """Compare two digit strings: the longer is larger, then digit by digit.

    Returns -1, 0 or 1.
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    if a == b:
        return 0
    return 1 if a > b else -1


def compare_in_base(a: str, b: str, base: str) -> int:
    """Compare two numbers written in ``base``; returns -1, 0 or 1.

    Raises ValueError if a character is not a digit of the base.
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for char_a, char_b in zip(a, b):
        index_a, index_b = base.index(char_a), base.index(char_b)
        if index_a != index_b:
            return 1 if index_a > index_b else -1
    return 0


def add(a: str, b: str) -> str:
    """Return the sum of two digit strings."""
    _check(a)
    _check(b)
    result: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        result.append(digit)
    result.append(carry)
    return _from_low_digits(result)


def subtract(a: str, b: str) -> str:
    """Return the absolute difference of two digit strings."""
    _check(a)
    _check(b)
    a, b = _normalize(a), _normalize(b)
    if compare_digits(a, b) < 0:
        a, b = b, a
    result: list[int] = []
    borrow = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        value = int(x) - int(y) - borrow
        borrow = 1 if value < 0 else 0
        result.append(value + 10 * borrow)
    return _from_low_digits(result)


def multiply(a: str, b: str) -> str:
    """Return the product of two digit strings."""
    _check(a)
    _check(b)
    xs = [int(char) for char in reversed(a)]
    ys = [int(char) for char in reversed(b)]
    acc = [0] * (len(xs) + len(ys))
    for i, x in enumerate(xs):
        carry = 0
        for j, y in enumerate(ys):
            carry, acc[i + j] = divmod(acc[i + j] + x * y + carry, 10)
        acc[i + len(ys)] += carry
    return _from_low_digits(acc)


def _divmod(a: str, b: str) -> tuple[str, str]:
    a, b = _normalize(a), _normalize(b)
    quotient: list[str] = []
    remainder = "0"
    for char in a:
        remainder = _normalize(remainder + char)
        digit = 0
        while compare_digits(remainder, b) >= 0:
            remainder = subtract(remainder, b)
            digit += 1
        quotient.append(str(digit))
    return _normalize("".join(quotient)), remainder


def divide(a: str, b: str) -> str:
    """Return the integer quotient of two digit strings.

    Raises CalcError when dividing by zero.
    """
    _check(a)
    _check(b)
    if _normalize(b) == "0":
        raise CalcError()
    if b == "1":
        return a
    if compare_digits(a, b) < 0:
        return "0"
    if a == b:
        return "1"
    return _divmod(a, b)[0]


def modulo(a: str, b: str) -> str:
    """Return the remainder of the division of two digit strings.

    A zero dividend gives "0" even when the divisor is zero; otherwise a
    zero divisor raises CalcError.
    """
    _check(a)
    _check(b)
    if _normalize(a) == "0":
        return "0"
    if compare_digits(a, b) < 0:
        return a
    if _normalize(b) == "0":
        raise CalcError()
    return _divmod(a, b)[1]