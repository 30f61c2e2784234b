"""Checks on the base, the operator set and the expression text."""

from __future__ import annotations

ERROR_MSG = "Error"
SYNTAX_ERROR_MSG = "syntax error"

OPS_LENGTH = 7


class CalcError(Exception):
    """A failure while computing the result, such as a division by zero."""

    default_message = ERROR_MSG

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ExprSyntaxError(CalcError):
    """The arguments or the expression are malformed."""

    default_message = SYNTAX_ERROR_MSG


def has_unique_chars(text: str) -> bool:
    """Return True when no character appears twice in ``text``."""
    return len(set(text)) == len(text)


def check_base_ops(base: str, ops: str) -> bool:
    """Return True when base and ops have no repeats and share no character."""
    return (
        has_unique_chars(base)
        and has_unique_chars(ops)
        and not set(base) & set(ops)
    )


def check_args(base: str, ops: str, size_text: str) -> None:
    """Validate the command-line arguments, raising ExprSyntaxError if bad."""
    if any(char not in "0123456789" for char in size_text):
        raise ExprSyntaxError()
    if len(ops) != OPS_LENGTH:
        raise ExprSyntaxError()
    if not check_base_ops(base, ops):
        raise ExprSyntaxError()


def check_expression(expr: str, base: str, ops: str) -> str:
    """Check the characters and the parentheses of ``expr`` and return it."""
    allowed = set(ops) | set(base)
    opening, closing = ops[0], ops[1]
    depth = 0
    for char in expr:
        if char not in allowed:
            raise ExprSyntaxError()
        if char == opening:
            depth += 1
        if char == closing:
            depth -= 1
        if depth < 0:
            raise ExprSyntaxError()
    if depth != 0:
        raise ExprSyntaxError()
    return expr