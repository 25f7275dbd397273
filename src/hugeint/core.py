"""HugeInteger value type providing exact 40-digit signed arithmetic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import IntEnum
from typing import TypeAlias

from hugeint.exceptions import (
    CapacityExceededError,
    DivisionByZeroError,
    MalformedInputError,
    SignMismatchError,
)
from hugeint.kernels import (
    EMPTY,
    Magnitude,
    Ordering,
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)
from hugeint.validators import (
    MAX_DIGITS,
    strip_leading_zeros,
    validate_digits,
    validate_int,
    validate_signum,
    validate_text,
)

logger = logging.getLogger(__name__)

Operand: TypeAlias = "HugeInteger | str | int | Sequence[int]"


class Sign(IntEnum):
    """Sign of a HugeInteger, ordered NEGATIVE < ZERO < POSITIVE."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


def _parse_text(text: str) -> tuple[Sign, Magnitude]:
    validate_text(text)
    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text

    digits = strip_leading_zeros([int(char) for char in body])
    if not digits:
        return Sign.ZERO, EMPTY

    return (Sign.NEGATIVE if negative else Sign.POSITIVE), digits[::-1]


def _parse_digits(digits: Sequence[int], signum: int | None) -> tuple[Sign, Magnitude]:
    if signum is not None:
        validate_signum(signum)

    digits = strip_leading_zeros(validate_digits(digits))
    if not digits:
        return Sign.ZERO, EMPTY

    # A negative leading digit carries the sign of the whole sequence
    negative_encoded = digits[0] < 0
    digits = (abs(digits[0]),) + digits[1:]

    if signum is None:
        sign = Sign.NEGATIVE if negative_encoded else Sign.POSITIVE
    elif signum == 0:
        raise SignMismatchError(signum, "Zero signum with non-zero digits")
    elif negative_encoded and signum != -1:
        raise SignMismatchError(signum, "Negative leading digit requires signum -1")
    else:
        sign = Sign(signum)

    return sign, digits[::-1]


class HugeInteger:
    """
    An immutable signed decimal integer of at most 40 digits.

    Values are stored as a sign plus a little-endian tuple of digits with
    no redundant zeros, so every value has exactly one representation.
    Arithmetic never wraps around: results that do not fit raise
    CapacityExceededError.

    Example:
        >>> HugeInteger("1240").multiply("1239")
        HugeInteger('1536360')
        >>> HugeInteger([-1, 2, 4, 0]).divide(1239)
        HugeInteger('-1')
    """

    __slots__ = ("_sign", "_magnitude")

    def __init__(self, value: Operand | None = None, signum: int | None = None) -> None:
        """
        Build a HugeInteger from text, an int or a digit sequence.

        Args:
            value: Decimal text such as ``"-1240"``, an int, another
                HugeInteger, or a most-significant-first digit sequence
                whose leading digit may be negative. None gives zero.
            signum: Explicit sign (-1, 0 or 1), only with a digit sequence

        Raises:
            MalformedInputError: If value is not a valid HugeInteger
            SignMismatchError: If signum disagrees with the digits
        """
        if isinstance(value, (HugeInteger, str, int)) and signum is not None:
            raise MalformedInputError(signum, "signum is only accepted with a digit sequence")

        if value is None:
            sign, magnitude = _parse_digits((), signum)
        elif isinstance(value, HugeInteger):
            sign, magnitude = value._sign, value._magnitude
        elif isinstance(value, str):
            sign, magnitude = _parse_text(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            sign, magnitude = _parse_text(str(validate_int(value)))
        else:
            sign, magnitude = _parse_digits(value, signum)

        object.__setattr__(self, "_sign", sign)
        object.__setattr__(self, "_magnitude", magnitude)

    @classmethod
    def _from_parts(cls, sign: Sign, magnitude: Magnitude) -> HugeInteger:
        """Wrap kernel output that is already canonical, skipping validation."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "_sign", sign)
        object.__setattr__(instance, "_magnitude", magnitude)
        return instance

    @classmethod
    def parse(cls, text: str) -> HugeInteger:
        """Parse the decimal text form, e.g. ``"+0042"`` or ``"-7"``."""
        return cls._from_parts(*_parse_text(text))

    @classmethod
    def from_digits(cls, digits: Sequence[int], signum: int | None = None) -> HugeInteger:
        """Build from most-significant-first digits and an optional signum."""
        return cls._from_parts(*_parse_digits(digits, signum))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def sign(self) -> Sign:
        """Sign as a Sign member."""
        return self._sign

    @property
    def signum(self) -> int:
        """-1, 0 or 1."""
        return int(self._sign)

    @property
    def magnitude(self) -> Magnitude:
        """Digits of the absolute value, least significant first."""
        return self._magnitude

    @property
    def digits(self) -> tuple[int, ...]:
        """Digits of the absolute value, most significant first."""
        return self._magnitude[::-1]

    # Sign queries

    def is_zero(self) -> bool:
        """True for the value 0."""
        return self._sign == Sign.ZERO

    def is_positive(self) -> bool:
        """True for values greater than 0."""
        return self._sign == Sign.POSITIVE

    def is_negative(self) -> bool:
        """True for values less than 0."""
        return self._sign == Sign.NEGATIVE

    def is_one(self) -> bool:
        """True for the value 1."""
        return self._sign == Sign.POSITIVE and self._magnitude == (1,)

    def is_minus_one(self) -> bool:
        """True for the value -1."""
        return self._sign == Sign.NEGATIVE and self._magnitude == (1,)

    # Unary operations

    def copy(self) -> HugeInteger:
        """Return an equal, independent instance."""
        return self._from_parts(self._sign, self._magnitude)

    def negate(self) -> HugeInteger:
        """Return the opposite value; zero stays zero."""
        return self._from_parts(Sign(-self._sign), self._magnitude)

    def abs(self) -> HugeInteger:
        """Return the absolute value."""
        if self.is_zero():
            return ZERO
        return self._from_parts(Sign.POSITIVE, self._magnitude)

    # Comparisons

    def compare(self, other: Operand) -> int:
        """
        Three-way comparison with another value.

        Signs are compared first; magnitudes only break ties between
        two non-zero values of the same sign.

        Returns:
            -1, 0 or 1 as self is less than, equal to or greater than other
        """
        other = _as_huge(other)
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        if self.is_zero():
            return 0
        # A larger negative magnitude is a smaller value
        return int(compare_magnitudes(self._magnitude, other._magnitude)) * int(self._sign)

    def is_equal_to(self, other: Operand) -> bool:
        """self == other."""
        return self.compare(other) == 0

    def is_not_equal_to(self, other: Operand) -> bool:
        """self != other."""
        return self.compare(other) != 0

    def is_less_than(self, other: Operand) -> bool:
        """self < other."""
        return self.compare(other) < 0

    def is_less_than_or_equal_to(self, other: Operand) -> bool:
        """self <= other."""
        return self.compare(other) <= 0

    def is_greater_than(self, other: Operand) -> bool:
        """self > other."""
        return self.compare(other) > 0

    def is_greater_than_or_equal_to(self, other: Operand) -> bool:
        """self >= other."""
        return self.compare(other) >= 0

    # Arithmetic

    def _sum(self, other: HugeInteger, operation: str) -> HugeInteger:
        """Add magnitudes, keeping self's sign."""
        magnitude = add_magnitudes(self._magnitude, other._magnitude)
        if len(magnitude) > MAX_DIGITS:
            logger.debug(f"{operation} of {self} and {other} needs {len(magnitude)} digits")
            raise CapacityExceededError(operation, self, other)
        return self._from_parts(self._sign, magnitude)

    def _difference(self, other: HugeInteger) -> HugeInteger:
        """Subtract magnitudes; the larger one decides the sign relative to self."""
        order = compare_magnitudes(self._magnitude, other._magnitude)
        if order == Ordering.EQUAL:
            return ZERO
        magnitude = subtract_magnitudes(self._magnitude, other._magnitude, order)
        return self._from_parts(Sign(order * self._sign), magnitude)

    def add(self, other: Operand) -> HugeInteger:
        """
        Add another value.

        Raises:
            CapacityExceededError: If the sum needs more than 40 digits
        """
        other = _as_huge(other)
        if self.is_zero():
            return other.copy()
        if other.is_zero():
            return self.copy()
        if self._sign == other._sign:
            return self._sum(other, "addition")
        return self._difference(other)

    def subtract(self, other: Operand) -> HugeInteger:
        """
        Subtract another value.

        Raises:
            CapacityExceededError: If the difference needs more than 40 digits
        """
        other = _as_huge(other)
        if other.is_zero():
            return self.copy()
        if self.is_zero():
            return other.negate()
        if self._sign != other._sign:
            return self._sum(other, "subtraction")
        return self._difference(other)

    def multiply(self, other: Operand) -> HugeInteger:
        """
        Multiply by another value.

        Raises:
            CapacityExceededError: If the product needs more than 40 digits
        """
        other = _as_huge(other)
        if self.is_zero() or other.is_zero():
            return ZERO
        if self.is_one():
            return other.copy()
        if self.is_minus_one():
            return other.negate()
        if other.is_one():
            return self.copy()
        if other.is_minus_one():
            return self.negate()

        magnitude = multiply_magnitudes(self._magnitude, other._magnitude)
        if len(magnitude) > MAX_DIGITS:
            logger.debug(f"multiplication of {self} and {other} needs {len(magnitude)} digits")
            raise CapacityExceededError("multiplication", self, other)
        return self._from_parts(Sign(self._sign * other._sign), magnitude)

    def _check_divisor(self, divisor: HugeInteger) -> None:
        if divisor.is_zero():
            logger.debug(f"division of {self} by zero")
            raise DivisionByZeroError(self)

    def divide(self, other: Operand) -> HugeInteger:
        """
        Divide by another value, truncating toward zero.

        Raises:
            DivisionByZeroError: If other is zero
        """
        other = _as_huge(other)
        self._check_divisor(other)
        if self.is_zero():
            return ZERO

        order = compare_magnitudes(self._magnitude, other._magnitude)
        if order == Ordering.LESS:
            return ZERO
        if order == Ordering.EQUAL:
            return ONE if self._sign == other._sign else MINUS_ONE
        if other.is_one():
            return self.copy()
        if other.is_minus_one():
            return self.negate()

        quotient, _ = divide_magnitudes(self._magnitude, other._magnitude)
        return self._from_parts(Sign(self._sign * other._sign), quotient)

    def remainder(self, other: Operand) -> HugeInteger:
        """
        Remainder of truncating division; a non-zero result has self's sign.

        Raises:
            DivisionByZeroError: If other is zero
        """
        other = _as_huge(other)
        self._check_divisor(other)
        if self.is_zero():
            return ZERO

        order = compare_magnitudes(self._magnitude, other._magnitude)
        if order == Ordering.EQUAL:
            return ZERO
        if order == Ordering.LESS:
            return self.copy()
        if other.is_one() or other.is_minus_one():
            return ZERO

        _, remainder = divide_magnitudes(self._magnitude, other._magnitude)
        if not remainder:
            return ZERO
        return self._from_parts(self._sign, remainder)

    # Formatting

    def to_string(self) -> str:
        """Canonical decimal text: '-' for negatives, no leading zeros, '0' for zero."""
        if self.is_zero():
            return "0"
        text = "".join(str(digit) for digit in reversed(self._magnitude))
        return "-" + text if self.is_negative() else text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"HugeInteger('{self}')"

    def __int__(self) -> int:
        return int(self.to_string())

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        return hash(int(self))

    # Operators

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HugeInteger):
            return self.is_equal_to(other)
        if _is_plain_int(other):
            return int(self) == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other: object) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: object) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)

    def __neg__(self) -> HugeInteger:
        return self.negate()

    def __pos__(self) -> HugeInteger:
        return self.copy()

    def __abs__(self) -> HugeInteger:
        return self.abs()

    def __add__(self, other: object) -> HugeInteger:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> HugeInteger:
        if not _is_operator_operand(other):
            return NotImplemented
        return HugeInteger(other).add(self)

    def __sub__(self, other: object) -> HugeInteger:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> HugeInteger:
        if not _is_operator_operand(other):
            return NotImplemented
        return HugeInteger(other).subtract(self)

    def __mul__(self, other: object) -> HugeInteger:
        if not _is_operator_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> HugeInteger:
        if not _is_operator_operand(other):
            return NotImplemented
        return HugeInteger(other).multiply(self)

    def __reduce__(self) -> tuple:
        return (HugeInteger, (self.to_string(),))


def _is_plain_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_operator_operand(value: object) -> bool:
    return isinstance(value, HugeInteger) or _is_plain_int(value)


def _as_huge(value: Operand) -> HugeInteger:
    """Coerce an operand, validating anything that is not already a HugeInteger."""
    if isinstance(value, HugeInteger):
        return value
    return HugeInteger(value)


ZERO = HugeInteger()
ONE = HugeInteger("1")
MINUS_ONE = HugeInteger("-1")
