# bigcalc

A command-line calculator for signed integers of any length. It does the
arithmetic one decimal digit at a time, so operands may have as many
digits as you like.

## Installation

```
pip install .
```

## Usage

```
bigcalc <operand1> <operator> <operand2>
```

The same command can also be run as `python -m bigcalc.cli`.

An operand is a string of decimal digits. It may start with a single
`+` or `-` sign. Leading zeros are ignored.

The operators are:

| Operator    | Operation                                   |
|-------------|---------------------------------------------|
| `+`         | addition                                    |
| `-`         | subtraction                                 |
| `x` or `X`  | multiplication                              |
| `/`         | integer division, quotient truncated to zero |

Only the first character of the operator argument is used.

Examples:

```
bigcalc 123456789012345678901234567890 + 987654321098765432109876543210
bigcalc -500 - 250
bigcalc 99999999999999999999 x 99999999999999999999
bigcalc 1000000000000000000000 / 7
```

Multiplication uses `x` because shells expand `*`.

The program prints the operands and the operator, then the operation it
chose, then a banner with the result. The output is coloured with ANSI
escape codes. The exit status is 0 on success and 1 on error.

It reports these errors: a wrong number of arguments, an operand that
is not a decimal integer, an unknown operator, and division by zero.
An argument error is followed by a usage line.

## Library use

The digit arithmetic lives in `bigcalc.digits`. Numbers are sequences
of decimal digits, most significant digit first, with no sign:

```python
from bigcalc.digits import parse_operand, add, multiply, divide, format_digits

a = parse_operand("12345678901234567890")
b = parse_operand("987")
print(format_digits(add(a, b)))
print(format_digits(multiply(a, b)))
print(format_digits(divide(a, b)))
```

The module provides:

- `parse_operand(text)`: digits of an optionally signed decimal string.
  The sign is dropped, leading zeros are kept. Raises `ValueError` for
  anything else.
- `strip_leading_zeros(digits)`: drops leading zeros, keeping one digit
  for zero.
- `format_digits(digits)`: the digits as a string.
- `compare(a, b)`: a `Comparison` (`SAME`, `OPERAND1` or `OPERAND2`)
  saying which number is larger. It compares digit count first, so strip
  leading zeros before comparing.
- `add(a, b)`, `multiply(a, b)`.
- `subtract(a, b)`: raises `ValueError` if `b` is larger than `a`.
- `divide(a, b)`: the integer quotient. Raises `ZeroDivisionError` when
  `b` is zero.

`bigcalc.cli` holds the signed layer:

- `Operand.parse(text)` turns a string into an `Operand` with its text,
  digits and sign.
- `calculate(left, operator, right)` takes two operands (strings or
  `Operand` objects) and an operator and returns a `Result`, whose
  `str()` is the signed number, for example `"-750"`.
- `validate_args(args)` checks a list of three command arguments.
- `main(argv=None)` runs the command.

Errors from this layer are raised as `CalculatorError`.

```python
from bigcalc.cli import calculate

print(calculate("-500", "-", "250"))   # -750
print(calculate("17", "/", "-5"))      # -3
```

## Limits

Division gives only the quotient; there is no remainder or modulo
operator. Only the four operators above are supported, and each run
works on exactly two operands.

## Running the tests

```
pip install ".[test]"
pytest
```