"""Input validation and normalization for HugeInteger construction."""

import re
from collections.abc import Sequence

from hugeint.exceptions import MalformedInputError, SignMismatchError

# Capacity of a HugeInteger, in decimal digits
MAX_DIGITS = 40

# Largest magnitude a HugeInteger can hold
MAX_VALUE = 10**MAX_DIGITS - 1

# One optional sign character plus the digits
MAX_TEXT_LENGTH = MAX_DIGITS + 1

VALID_SIGNUMS = (-1, 0, 1)

_TEXT_PATTERN = re.compile(r"[+-]?[0-9]{1,%d}" % MAX_DIGITS)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_digits(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Validate a most-significant-first digit sequence.

    The leading digit may be negative, which marks the whole sequence
    as encoding a negative value.

    Args:
        digits: Digits in big-endian order

    Returns:
        The digits as a tuple

    Raises:
        MalformedInputError: If the sequence is too long or holds a bad digit
    """
    if isinstance(digits, (str, bytes)) or not isinstance(digits, Sequence):
        raise MalformedInputError(
            digits, f"Expected a sequence of digits, got {type(digits).__name__}"
        )

    if len(digits) > MAX_DIGITS:
        raise MalformedInputError(
            len(digits), f"Number too large. Must have at most {MAX_DIGITS} digits"
        )

    for position, digit in enumerate(digits):
        if not _is_int(digit):
            raise MalformedInputError(digit, f"Digit at position {position} is not an integer")
        low = -9 if position == 0 else 0
        if not low <= digit <= 9:
            raise MalformedInputError(digit, f"Invalid digit at position {position}")

    return tuple(digits)


def validate_signum(signum: int) -> int:
    """
    Validate an explicit signum value.

    Raises:
        SignMismatchError: If signum is not one of -1, 0 or 1
    """
    if not _is_int(signum) or signum not in VALID_SIGNUMS:
        raise SignMismatchError(signum, "Invalid signum value")
    return signum


def validate_int(value: int) -> int:
    """
    Validate that an int fits in a HugeInteger.

    The range is checked numerically so oversized ints are never
    converted to text.

    Raises:
        MalformedInputError: If value is not an int or has more than 40 digits
    """
    if not _is_int(value):
        raise MalformedInputError(value, f"Expected int, got {type(value).__name__}")

    if abs(value) > MAX_VALUE:
        raise MalformedInputError(
            f"int of {value.bit_length()} bits",
            f"Number too large. Must have at most {MAX_DIGITS} digits",
        )

    return value


def validate_text(text: str) -> str:
    """
    Validate the decimal text form of a HugeInteger.

    Accepts an optional single leading ``+`` or ``-`` followed by
    1 to 40 ASCII digits and nothing else.

    Args:
        text: The text to validate

    Returns:
        The validated text

    Raises:
        MalformedInputError: If text is not a valid decimal integer
    """
    if not isinstance(text, str):
        raise MalformedInputError(text, f"Expected str, got {type(text).__name__}")

    if not text:
        raise MalformedInputError(text, "Empty string")

    if len(text) > MAX_TEXT_LENGTH or (len(text) > MAX_DIGITS and text[0] not in "+-"):
        raise MalformedInputError(
            text, f"Number too large. Must have at most {MAX_DIGITS} digits"
        )

    if _TEXT_PATTERN.fullmatch(text) is None:
        raise MalformedInputError(text, "Invalid number")

    return text


def strip_leading_zeros(digits: Sequence[int]) -> tuple[int, ...]:
    """Drop leading zeros from a big-endian digit sequence."""
    first_non_zero = 0
    while first_non_zero < len(digits) and digits[first_non_zero] == 0:
        first_non_zero += 1
    return tuple(digits[first_non_zero:])
