"""
Fixed-capacity signed decimal integers with exact arithmetic.

This package provides:
- HugeInteger, an immutable value of up to 40 decimal digits
- Schoolbook digit kernels with explicit overflow detection
- Strict validation of every construction path
"""

from hugeint.core import MINUS_ONE, ONE, ZERO, HugeInteger, Sign
from hugeint.exceptions import (
    CapacityExceededError,
    DivisionByZeroError,
    HugeIntegerError,
    MalformedInputError,
    SignMismatchError,
)
from hugeint.kernels import (
    Ordering,
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)
from hugeint.validators import (
    MAX_DIGITS,
    validate_digits,
    validate_int,
    validate_signum,
    validate_text,
)

__all__ = [
    "MAX_DIGITS",
    "MINUS_ONE",
    "ONE",
    "ZERO",
    "CapacityExceededError",
    "DivisionByZeroError",
    "HugeInteger",
    "HugeIntegerError",
    "MalformedInputError",
    "Ordering",
    "Sign",
    "SignMismatchError",
    "add_magnitudes",
    "compare_magnitudes",
    "divide_magnitudes",
    "multiply_magnitudes",
    "subtract_magnitudes",
    "validate_digits",
    "validate_int",
    "validate_signum",
    "validate_text",
]

__version__ = "0.1.0"
