"""Evaluation of token lists with operator priority and signed results."""

from __future__ import annotations

from .bigint import add, compare_in_base, divide, modulo, multiply, subtract
from .tokens import Token, tokenize
from .validate import OPS_LENGTH, CalcError, ExprSyntaxError, check_expression

DECIMAL = "0123456789"


def _signed_add(left: Token, right: Token, base: str) -> tuple[str, int]:
    if left.sign == right.sign:
        return add(left.text, right.text), (-1 if left.sign == -1 else 1)
    order = compare_in_base(left.text, right.text, base)
    positive = (order == 1 and right.sign == -1) or (order == -1 and left.sign == -1)
    return subtract(left.text, right.text), (1 if positive else -1)


def _signed_subtract(left: Token, right: Token, base: str) -> tuple[str, int]:
    if left.sign == right.sign:
        order = compare_in_base(left.text, right.text, base)
        negative = (order == 1 and left.sign == -1) or (order == -1 and left.sign == 1)
        return subtract(left.text, right.text), (-1 if negative else 1)
    return add(left.text, right.text), (-1 if left.sign == -1 else 1)


def apply_operator(
    operator: str, left: Token, right: Token, ops: str, base: str
) -> Token:
    """Apply ``operator`` to two signed number tokens and return the result.

    Division and modulo work on magnitudes; their sign is the product of
    the operands' signs. Raises CalcError on division by zero.
    """
    plus, minus, times, divide_op, modulo_op = ops[2:7]
    sign = left.sign * right.sign
    try:
        if operator == plus:
            text, sign = _signed_add(left, right, base)
        elif operator == minus:
            text, sign = _signed_subtract(left, right, base)
        elif operator == times:
            text = multiply(left.text, right.text)
        elif operator == divide_op:
            text = divide(left.text, right.text)
        elif operator == modulo_op:
            text = modulo(left.text, right.text)
        else:
            raise ExprSyntaxError()
    except ValueError as exc:
        raise CalcError() from exc
    return Token(text, True, sign)


def _reduce(output: list[Token], ops: str, base: str) -> None:
    operator = output.pop()
    if len(output) < 2:
        raise ExprSyntaxError()
    right = output.pop()
    left = output.pop()
    output.append(apply_operator(operator.text, left, right, ops, base))


def evaluate(tokens: list[Token], ops: str, base: str) -> list[Token]:
    """Evaluate tokens and return what is left on the output stack, top first.

    A well-formed expression leaves exactly one number token.
    """
    opening, closing = ops[0], ops[1]
    output: list[Token] = []
    stack: list[Token] = []

    def unwind(top: Token, compare_base: str) -> None:
        if top.text != opening:
            output.append(top)
        if output and not output[-1].is_number:
            _reduce(output, ops, compare_base)

    for token in tokens:
        if token.is_number:
            output.append(token)
        elif token.text == closing:
            while stack and stack[-1].text != opening:
                unwind(stack.pop(), DECIMAL)
            if not stack:
                raise ExprSyntaxError()
            stack.pop()
        else:
            while (
                stack
                and stack[-1].priority >= token.priority
                and stack[-1].text != opening
            ):
                unwind(stack.pop(), DECIMAL)
            stack.append(token)
    while stack:
        unwind(stack.pop(), base)
    return output[::-1]


def format_result(token: Token) -> str:
    """Render a token; negative non-zero numbers get a leading minus."""
    if token.is_number and token.sign == -1 and not token.text.startswith("0"):
        return "-" + token.text
    return token.text


def calculate(expr: str, base: str, ops: str) -> str:
    """Check, tokenize and evaluate ``expr`` and return the printed result."""
    if not expr or len(ops) != OPS_LENGTH:
        raise ExprSyntaxError()
    check_expression(expr, base, ops)
    tokens = tokenize(expr, ops, base)
    return "".join(format_result(token) for token in evaluate(tokens, ops, base))