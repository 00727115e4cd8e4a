"""Command-line calculator for signed integers of any length."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from bigcalc.digits import (
    Comparison,
    add,
    compare,
    divide,
    format_digits,
    multiply,
    parse_operand,
    strip_leading_zeros,
    subtract,
)

RESET = "\033[0m"
RED = "\033[1;31m"
YELLOW = "\033[1;33m"
BLUE = "\033[1;34m"
CYAN = "\033[1;36m"
WHITE = "\033[1;37m"
PURPLE = "\033[1;35m"
PINK = "\033[38;5;213m"

_LABELS = {
    "+": "ADDITION (+)",
    "-": "SUBTRACTION (-)",
    "x": "MULTIPLICATION (x)",
    "X": "MULTIPLICATION (x)",
    "/": "DIVISION (/)",
}


class CalculatorError(Exception):
    """Raised for bad arguments, unknown operators and division by zero."""


@dataclass
class Operand:
    """A signed operand: its original text, magnitude digits and sign."""

    text: str
    digits: list[int]
    negative: bool = False

    @classmethod
    def parse(cls, text: str) -> Operand:
        """Parse an optionally signed decimal string."""
        try:
            digits = parse_operand(text)
        except ValueError as exc:
            raise CalculatorError(f"Invalid operand {text!r}") from exc
        return cls(text, strip_leading_zeros(digits), text.startswith("-"))


@dataclass
class Result:
    """Outcome of a calculation: magnitude digits and sign."""

    digits: list[int]
    negative: bool = False

    def __str__(self) -> str:
        return ("-" if self.negative else "") + format_digits(self.digits)


def validate_args(args: Sequence[str]) -> tuple[Operand, str, Operand]:
    """Check the three command arguments and parse both operands."""
    args = list(args)
    if len(args) != 3:
        raise CalculatorError("Invalid number of CLAs")
    left_text, operator, right_text = args
    try:
        left = Operand.parse(left_text)
    except CalculatorError as exc:
        raise CalculatorError("Invalid Operand 1") from exc
    try:
        right = Operand.parse(right_text)
    except CalculatorError as exc:
        raise CalculatorError("Invalid Operand 3") from exc
    return left, operator, right


def _as_operand(value: Operand | str) -> Operand:
    return value if isinstance(value, Operand) else Operand.parse(value)


def _difference(
    a: list[int], b: list[int], order: Comparison, negative_if_first_larger: bool
) -> Result:
    if order is Comparison.OPERAND1:
        return Result(subtract(a, b), negative_if_first_larger)
    if order is Comparison.OPERAND2:
        return Result(subtract(b, a), not negative_if_first_larger)
    return Result([0])


def calculate(left: Operand | str, operator: str, right: Operand | str) -> Result:
    """Apply ``+``, ``-``, ``x``/``X`` or ``/`` to two signed operands."""
    left, right = _as_operand(left), _as_operand(right)
    a, b = left.digits, right.digits
    neg1, neg2 = left.negative, right.negative
    order = compare(a, b)
    op = operator[:1]

    if op == "+":
        if neg1 and neg2:
            return Result(add(a, b), True)
        if neg1:
            return _difference(a, b, order, True)
        if neg2:
            return _difference(a, b, order, False)
        return Result(add(a, b))

    if op == "-":
        if neg1 and neg2:
            return _difference(a, b, order, True)
        if neg1:
            return Result(add(a, b), True)
        if neg2:
            return Result(add(a, b))
        return _difference(a, b, order, False)

    if op in ("x", "X"):
        return Result(multiply(a, b), neg1 != neg2)

    if op == "/":
        if b == [0]:
            raise CalculatorError("Runtime error : Divide by zero")
        negative = (not (neg1 and neg2)) and order is not Comparison.OPERAND2 and (neg1 or neg2)
        return Result(divide(a, b), negative)

    raise CalculatorError("Invalid Operator")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on ``<op1> <op> <op2>`` and print the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        left, operator, right = validate_args(args)
    except CalculatorError as exc:
        print(f"{RED}{exc}{RESET}")
        print(f"{RED}ERROR: Invalid argument count!{RESET}")
        print(f"{YELLOW}Usage: bigcalc <op1> <op> <op2>{RESET}")
        return 1

    print(f"{BLUE}\nOperand 1 : {RESET}{left.text}")
    print(f"{BLUE}Operand 2 : {RESET}{right.text}")
    print(f"{BLUE}Operator  : {RESET}{operator[:1]}")
    print(f"{CYAN}----------------------------------------{RESET}")

    label = _LABELS.get(operator[:1])
    if label:
        print(f"{YELLOW}Operation chosen : {label}{RESET}")

    try:
        result = calculate(left, operator, right)
    except CalculatorError as exc:
        print(f"{RED}{exc}{RESET}")
        return 1

    print(f"========================================{RESET}")
    print(f"{WHITE}         :::    APC CALCULATOR  :::           ")
    print(f"========================================{RESET}")
    sign = f"{PINK}-{RESET}" if result.negative else ""
    print(f"{PURPLE}RESULT : {RESET}{sign}{WHITE}{format_digits(result.digits)}{RESET}")
    return 0


if __name__ == "__main__":
    sys.exit(main())