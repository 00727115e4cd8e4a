import pytest

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

PAIRS = [
    ("0", "0"),
    ("1", "9"),
    ("999", "1"),
    ("123456789012345678901234567890", "987654321"),
    ("1000", "1"),
    ("5", "5"),
    ("42", "7"),
    ("100", "10"),
    ("7", "250"),
    ("99999999999999999999", "99999999999999999999"),
]


def digits_of(text):
    return parse_operand(text)


def value_of(digits):
    return int(format_digits(digits))


def test_parse_operand_skips_sign():
    assert parse_operand("+123") == [1, 2, 3]
    assert parse_operand("-45") == [4, 5]


def test_parse_operand_keeps_leading_zeros():
    assert parse_operand("007") == [0, 0, 7]


@pytest.mark.parametrize("text", ["", "+", "-", "12a", "1.5", "--3", "٣"])
def test_parse_operand_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_operand(text)


def test_format_round_trip():
    assert format_digits(parse_operand("9081726354")) == "9081726354"


def test_strip_leading_zeros():
    assert strip_leading_zeros([0, 0, 7]) == [7]
    assert strip_leading_zeros([0, 0, 0]) == [0]
    assert strip_leading_zeros([0, 5, 0]) == [5, 0]
    assert strip_leading_zeros([]) == []


def test_compare_by_length_then_digits():
    assert compare(digits_of("123"), digits_of("45")) is Comparison.OPERAND1
    assert compare(digits_of("45"), digits_of("123")) is Comparison.OPERAND2
    assert compare(digits_of("456"), digits_of("465")) is Comparison.OPERAND2
    assert compare(digits_of("777"), digits_of("777")) is Comparison.SAME


@pytest.mark.parametrize("x, y", PAIRS)
def test_add_matches_integers(x, y):
    result = add(digits_of(x), digits_of(y))
    assert value_of(result) == int(x) + int(y)
    assert format_digits(result) == str(int(x) + int(y))


@pytest.mark.parametrize("x, y", PAIRS)
def test_add_is_commutative(x, y):
    assert add(digits_of(x), digits_of(y)) == add(digits_of(y), digits_of(x))


@pytest.mark.parametrize("x, y", PAIRS)
def test_subtract_matches_integers(x, y):
    big, small = sorted((x, y), key=int, reverse=True)
    result = subtract(digits_of(big), digits_of(small))
    assert format_digits(result) == str(int(big) - int(small))


@pytest.mark.parametrize("x, y", PAIRS)
def test_subtract_undoes_add(x, y):
    total = add(digits_of(x), digits_of(y))
    assert subtract(total, digits_of(y)) == strip_leading_zeros(digits_of(x))


def test_subtract_does_not_modify_inputs():
    a = digits_of("1000")
    b = digits_of("1")
    subtract(a, b)
    assert a == [1, 0, 0, 0]
    assert b == [1]


def test_subtract_rejects_larger_subtrahend():
    with pytest.raises(ValueError):
        subtract(digits_of("12"), digits_of("13"))


@pytest.mark.parametrize("x, y", PAIRS)
def test_multiply_matches_integers(x, y):
    result = multiply(digits_of(x), digits_of(y))
    assert format_digits(result) == str(int(x) * int(y))


@pytest.mark.parametrize("x, y", PAIRS)
def test_divide_matches_integers(x, y):
    if int(y) == 0:
        with pytest.raises(ZeroDivisionError):
            divide(digits_of(x), digits_of(y))
    else:
        result = divide(digits_of(x), digits_of(y))
        assert format_digits(result) == str(int(x) // int(y))


@pytest.mark.parametrize(
    "x, y",
    [("1000000", "7"), ("100100", "100"), ("999", "3"), ("123456789", "1234"), ("10", "10")],
)
def test_divide_with_zero_digits_inside(x, y):
    assert format_digits(divide(digits_of(x), digits_of(y))) == str(int(x) // int(y))


def test_divide_smaller_dividend_is_zero():
    assert divide(digits_of("3"), digits_of("5")) == [0]


def test_divide_by_zero_with_leading_zeros():
    with pytest.raises(ZeroDivisionError):
        divide(digits_of("12"), digits_of("000"))


def test_divide_times_divisor_plus_remainder():
    a, b = digits_of("98765432109876543210"), digits_of("12345")
    quotient = divide(a, b)
    back = multiply(quotient, b)
    assert compare(back, a) is not Comparison.OPERAND1
    assert compare(add(back, b), a) is Comparison.OPERAND1