# bistromath

An integer calculator with no precision limit. It reads an arithmetic
expression from standard input and prints the result. You choose which
characters are accepted as digits and which are used as operators.

## Usage

```
bistromath BASE OPS SIZE
```

- `BASE` is the set of digit characters, such as `0123456789`. No
  character may appear twice.
- `OPS` must be exactly seven characters. In order they are: open
  parenthesis, close parenthesis, plus, minus, times, divide and modulo.
  The usual set is `()+-*/%`. No character may appear twice, and none may
  also appear in `BASE`.
- `SIZE` is the number of bytes of expression to read from standard input.
  It must be made of decimal digits only.

Example:

```
$ printf '3+6*(2-4)' | bistromath 0123456789 "()+-*/%" 9
-9
```

The result is printed with no trailing newline.

Expressions may use parentheses, unary `+` and `-` (a run of signs is
folded into one), and the usual precedence: times, divide and modulo bind
tighter than plus and minus. Leading zeros of numbers are dropped, and a
negative zero is printed as `0`.

Divide and modulo work on the magnitudes of their operands; the sign of
the result is the product of the operands' signs. A zero dividend gives
`0` for modulo even when the divisor is zero.

## Errors

Nothing is raised to the shell; a message is printed and the exit status
is 0:

- `syntax error` for bad arguments (a non-numeric `SIZE`, an `OPS` that is
  not seven characters, repeated or shared characters), a `SIZE` of 0, a
  character outside `BASE` and `OPS`, unbalanced parentheses, or a
  misplaced operator.
- `Error` for a calculation failure such as division by zero, a negative
  `SIZE`, or fewer than `SIZE` bytes available on standard input.

With the wrong number of arguments a usage line is printed and the exit
status is 1.

## Limitations

`BASE` decides which characters are accepted, what counts as the zero
digit for stripping leading zeros, and how numbers are compared for
signs. The arithmetic itself is always decimal: digits are read as the
decimal digits `0`–`9`. A number containing any other character ends in
`Error`. Bases other than a set of decimal digit characters are therefore
not calculated in.

## Library use

```python
from bistromath.evaluate import calculate

print(calculate("12*(3+4)", "0123456789", "()+-*/%"))  # 84
```

- `bistromath.evaluate`: `calculate(expr, base, ops)`,
  `evaluate(tokens, ops, base)`, `apply_operator(...)` and
  `format_result(token)`.
- `bistromath.tokens`: `tokenize(expr, ops, base)` returns a list of
  `Token` objects (`text`, `is_number`, `sign`, `priority`); also
  `strip_leading_zeros` and `priority`.
- `bistromath.bigint`: `add`, `subtract` (absolute difference),
  `multiply`, `divide`, `modulo`, `compare_digits` and `compare_in_base`,
  working on strings of decimal digits.
- `bistromath.validate`: `check_args`, `check_base_ops`,
  `check_expression` and `has_unique_chars`, and the exceptions
  `CalcError` and its subclass `ExprSyntaxError`.
- `bistromath.cli`: `main(argv=None)`, `parse_size` and
  `read_expression`.