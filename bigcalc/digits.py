"""Arithmetic on non-negative integers held as lists of decimal digits.

Digits are stored most significant first, so ``[1, 2, 3]`` is the number 123.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from itertools import zip_longest

_DECIMAL = frozenset("0123456789")


class Comparison(enum.IntEnum):
    """Outcome of comparing two digit sequences."""

    SAME = 0
    OPERAND1 = 1
    OPERAND2 = 2


def compare(a: Sequence[int], b: Sequence[int]) -> Comparison:
    """Tell which of two numbers is larger, judging first by digit count."""
    if len(a) != len(b):
        return Comparison.OPERAND1 if len(a) > len(b) else Comparison.OPERAND2
    for x, y in zip(a, b):
        if x > y:
            return Comparison.OPERAND1
        if x < y:
            return Comparison.OPERAND2
    return Comparison.SAME


def strip_leading_zeros(digits: Sequence[int]) -> list[int]:
    """Drop leading zeros, keeping a single digit when the number is zero."""
    digits = list(digits)
    for index, digit in enumerate(digits[:-1]):
        if digit:
            return digits[index:]
    return digits[-1:]


def parse_operand(text: str) -> list[int]:
    """Turn an optionally signed decimal string into its digits.

    The sign is skipped; leading zeros are kept.
    """
    body = text[1:] if text.startswith(("+", "-")) else text
    if not body or not set(body) <= _DECIMAL:
        raise ValueError(f"not a decimal integer: {text!r}")
    return [int(char) for char in body]


def format_digits(digits: Sequence[int]) -> str:
    """Render digits as a decimal string."""
    return "".join(str(digit) for digit in digits)


def add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the sum of two numbers."""
    result: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        carry, digit = divmod(x + y + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result


def subtract(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``a - b``; ``a`` must not be smaller than ``b``."""
    if compare(strip_leading_zeros(a), strip_leading_zeros(b)) is Comparison.OPERAND2:
        raise ValueError("subtrahend is larger than minuend")
    result: list[int] = []
    borrow = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        x -= borrow
        if x >= y:
            result.append(x - y)
            borrow = 0
        else:
            result.append(x + 10 - y)
            borrow = 1
    result.reverse()
    return strip_leading_zeros(result)


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the product of two numbers by long multiplication."""
    result = [0]
    for shift, y in enumerate(reversed(b)):
        partial: list[int] = []
        carry = 0
        for x in reversed(a):
            carry, digit = divmod(x * y + carry, 10)
            partial.append(digit)
        if carry:
            partial.append(carry)
        partial.reverse()
        partial.extend([0] * shift)
        result = add(result, partial)
    return strip_leading_zeros(result)


def _divide_step(remainder: Sequence[int], divisor: list[int]) -> tuple[int, list[int]]:
    """Subtract the divisor as often as it fits; return the count and what is left."""
    remainder = strip_leading_zeros(remainder)
    count = 0
    while compare(remainder, divisor) is not Comparison.OPERAND2:
        remainder = subtract(remainder, divisor)
        count += 1
    return count, remainder


def divide(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the integer quotient ``a // b`` by long division."""
    if not a or not b:
        raise ValueError("operands must have at least one digit")
    divisor = strip_leading_zeros(b)
    if divisor == [0]:
        raise ZeroDivisionError("division by zero")

    rest = iter(a)
    remainder = [next(rest)]
    while compare(remainder, divisor) is Comparison.OPERAND2:
        digit = next(rest, None)
        if digit is None:
            return [0]
        remainder.append(digit)

    count, remainder = _divide_step(remainder, divisor)
    quotient = [count]
    for digit in rest:
        count, remainder = _divide_step([*remainder, digit], divisor)
        quotient.append(count)
    return quotient