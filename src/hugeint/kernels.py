"""
Unsigned digit kernels operating on little-endian magnitudes.

A magnitude is a tuple of decimal digits stored least-significant digit
first, with no trailing (most-significant) zeros. Zero is the empty tuple.

Properties:
    - Every kernel returns a canonical magnitude
    - No kernel checks capacity; callers decide what overflows
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from hugeint.exceptions import DivisionByZeroError

Magnitude = tuple[int, ...]

EMPTY: Magnitude = ()


class Ordering(IntEnum):
    """Result of comparing two magnitudes."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def strip_trailing_zeros(digits: Sequence[int]) -> Magnitude:
    """Drop most-significant zero positions from a little-endian sequence."""
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])


def compare_magnitudes(first: Magnitude, second: Magnitude) -> Ordering:
    """
    Compare two canonical magnitudes.

    The shorter magnitude is the smaller one. Equal lengths are compared
    from the most significant digit down, and the first differing digit
    decides.

    Args:
        first: Left magnitude
        second: Right magnitude

    Returns:
        Ordering of first relative to second
    """
    if len(first) != len(second):
        return Ordering.LESS if len(first) < len(second) else Ordering.GREATER

    for position in range(len(first) - 1, -1, -1):
        if first[position] != second[position]:
            return Ordering.LESS if first[position] < second[position] else Ordering.GREATER

    return Ordering.EQUAL


def add_magnitudes(first: Magnitude, second: Magnitude) -> Magnitude:
    """
    Add two magnitudes digit by digit with carry.

    Properties:
        - Commutative: add_magnitudes(a, b) == add_magnitudes(b, a)
        - Identity: add_magnitudes(a, ()) == a
        - Length is at most max(len(a), len(b)) + 1
    """
    length = max(len(first), len(second))
    result = [0] * (length + 1)
    carry = 0

    for position in range(length):
        first_digit = first[position] if position < len(first) else 0
        second_digit = second[position] if position < len(second) else 0
        total = first_digit + second_digit + carry
        carry = 1 if total > 9 else 0
        result[position] = total % 10

    if carry:
        result[length] = 1
        return tuple(result)

    return strip_trailing_zeros(result)


def subtract_magnitudes(minuend: Magnitude, subtrahend: Magnitude, order: Ordering) -> Magnitude:
    """
    Subtract the smaller magnitude from the larger one with borrow.

    Args:
        minuend: First magnitude
        subtrahend: Second magnitude
        order: compare_magnitudes(minuend, subtrahend), which tells the
            kernel which operand is the larger

    Returns:
        The absolute difference of the two magnitudes
    """
    if order == Ordering.EQUAL:
        return EMPTY

    if order == Ordering.LESS:
        minuend, subtrahend = subtrahend, minuend

    result = [0] * len(minuend)
    borrow = 0

    for position in range(len(minuend)):
        subtrahend_digit = subtrahend[position] if position < len(subtrahend) else 0
        difference = minuend[position] - subtrahend_digit - borrow
        borrow = 1 if difference < 0 else 0
        result[position] = (difference + 10) % 10

    return strip_trailing_zeros(result)


def multiply_magnitudes(multiplier: Magnitude, multiplicand: Magnitude) -> Magnitude:
    """
    Multiply two magnitudes with the schoolbook cross product.

    Every pairwise digit product lands in the column given by the sum of
    the digit positions; carries are resolved once all columns are summed.

    Properties:
        - Commutative: multiply_magnitudes(a, b) == multiply_magnitudes(b, a)
        - Zero: multiply_magnitudes(a, ()) == ()
        - Length is at most len(a) + len(b)
    """
    columns = [0] * (len(multiplier) + len(multiplicand))

    for i, multiplicand_digit in enumerate(multiplicand):
        for j, multiplier_digit in enumerate(multiplier):
            columns[i + j] += multiplier_digit * multiplicand_digit

    carry = 0
    for position, column in enumerate(columns):
        total = column + carry
        columns[position] = total % 10
        carry = total // 10

    return strip_trailing_zeros(columns)


def _trial_quotient_digit(parcel: Magnitude, divisor: Magnitude) -> int:
    """Count how many times divisor fits in parcel, by repeated addition."""
    accumulator = divisor
    count = 0
    while compare_magnitudes(accumulator, parcel) != Ordering.GREATER:
        accumulator = add_magnitudes(accumulator, divisor)
        count += 1
    return count


def divide_magnitudes(dividend: Magnitude, divisor: Magnitude) -> tuple[Magnitude, Magnitude]:
    """
    Long division of two magnitudes.

    The working remainder (the parcel) starts as the shortest most
    significant prefix of the dividend that is not smaller than the
    divisor. Each step finds one quotient digit by trial addition, removes
    digit * divisor from the parcel and brings down the next dividend digit.

    Properties:
        - Reconstruction: quotient * divisor + remainder == dividend
        - Range: remainder < divisor

    Args:
        dividend: Magnitude to divide
        divisor: Non-empty magnitude to divide by

    Returns:
        Tuple of (quotient, remainder)

    Raises:
        DivisionByZeroError: If divisor is empty
    """
    if not divisor:
        raise DivisionByZeroError(dividend)

    if compare_magnitudes(dividend, divisor) == Ordering.LESS:
        return EMPTY, dividend

    index = len(dividend) - len(divisor)
    parcel = dividend[index:]
    if compare_magnitudes(parcel, divisor) == Ordering.LESS:
        index -= 1
        parcel = dividend[index:]

    quotient_digits = []
    while True:
        digit = _trial_quotient_digit(parcel, divisor)
        quotient_digits.append(digit)
        product = multiply_magnitudes((digit,), divisor)
        remainder = subtract_magnitudes(
            parcel, product, compare_magnitudes(parcel, product)
        )

        index -= 1
        if index < 0:
            break
        parcel = strip_trailing_zeros((dividend[index],) + remainder)

    # Quotient digits were collected most-significant first
    quotient = strip_trailing_zeros(quotient_digits[::-1])
    return quotient, remainder
