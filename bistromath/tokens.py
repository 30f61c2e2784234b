"""Splitting an expression into numbers, operators and parentheses."""

from __future__ import annotations

from dataclasses import dataclass

from .validate import OPS_LENGTH, ExprSyntaxError

UNARY_ONE = "1"


@dataclass
class Token:
    """A signed number, or an operator or parenthesis symbol."""

    text: str
    is_number: bool
    sign: int = 1
    priority: int = 0


def strip_leading_zeros(text: str, base: str) -> str:
    """Remove leading zero digits of ``base`` from ``text``, keeping one."""
    zero = base[:1]
    if not zero or not text:
        return text
    return text.lstrip(zero) or zero


def priority(symbol: str, ops: str) -> int:
    """Return the binding priority of an operator symbol."""
    if symbol == ops[0]:
        return 4
    if symbol in (ops[4], ops[5], ops[6]):
        return 3
    if symbol in (ops[2], ops[3]):
        return 2
    return 0


class _Scanner:
    """Walks the expression text and collects tokens."""

    def __init__(self, expr: str, ops: str) -> None:
        self.expr = expr
        self.pos = 0
        self.tokens: list[Token] = []
        self.op_chars = set(ops)
        (
            self.opening,
            self.closing,
            self.plus,
            self.minus,
            self.times,
            self.divide,
            self.modulo,
        ) = ops

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        if 0 <= index < len(self.expr):
            return self.expr[index]
        return ""

    def scan(self) -> list[Token]:
        while self.pos < len(self.expr):
            char = self.peek()
            prev = self.peek(-1)
            if char in (self.opening, self.closing):
                self.tokens.append(Token(char, False))
                self.pos += 1
            elif char not in self.op_chars:
                self.tokens.append(Token(self._read_number(), True))
            elif char in (self.plus, self.minus) and (
                self.pos == 0
                or prev in (self.opening, self.times, self.divide, self.modulo)
            ):
                self._read_unary()
            elif self.pos > 0 and prev != self.opening and self.peek(1):
                self._read_operator()
            else:
                raise ExprSyntaxError()
        return self.tokens

    def _read_number(self) -> str:
        start = self.pos
        while self.peek() and self.peek() not in self.op_chars:
            self.pos += 1
        if start == self.pos:
            raise ExprSyntaxError()
        return self.expr[start:self.pos]

    def _plus_minus_run(self) -> int:
        """Consume a run of + and - signs and return how many were minus."""
        minuses = 0
        while (char := self.peek()) in self.op_chars and char != self.opening:
            if char not in (self.plus, self.minus):
                raise ExprSyntaxError()
            minuses += char == self.minus
            self.pos += 1
        return minuses

    def _read_unary(self) -> None:
        sign = -1 if self._plus_minus_run() % 2 else 1
        one = Token(UNARY_ONE, True, sign)
        times = Token(self.times, False)
        if self.peek() == self.opening:
            self.tokens += [one, times, Token(self.opening, False)]
            self.pos += 1
        else:
            number = Token(self._read_number(), True)
            self.tokens += [number, times, one]

    def _read_operator(self) -> None:
        char = self.peek()
        if char in (self.plus, self.minus):
            symbol = self.minus if self._plus_minus_run() % 2 else self.plus
        else:
            following = self.peek(1)
            if following in self.op_chars and following not in (
                self.opening,
                self.plus,
                self.minus,
            ):
                raise ExprSyntaxError()
            symbol = char
            self.pos += 1
        self.tokens.append(Token(symbol, False))


def tokenize(expr: str, ops: str, base: str) -> list[Token]:
    """Split ``expr`` into tokens in reading order.

    A unary sign becomes a multiplication by a signed one. Leading zeros of
    numbers are removed and operators receive their priority.
    Raises ExprSyntaxError on malformed input.
    """
    if len(ops) != OPS_LENGTH:
        raise ExprSyntaxError()
    tokens = _Scanner(expr, ops).scan()
    for token in tokens:
        if token.is_number:
            token.text = strip_leading_zeros(token.text, base)
        else:
            token.priority = priority(token.text, ops)
    return tokens