"""Custom exceptions for the hugeint package."""

from typing import Any


class HugeIntegerError(Exception):
    """Base exception for all HugeInteger errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class MalformedInputError(HugeIntegerError):
    """Raised when a text or digit sequence is not a valid HugeInteger."""

    def __init__(self, value: Any, reason: str = "invalid number") -> None:
        super().__init__(reason, value)
        self.reason = reason


class SignMismatchError(HugeIntegerError):
    """Raised when an explicit signum disagrees with the digit sequence."""

    def __init__(self, signum: Any, reason: str = "signum mismatch") -> None:
        super().__init__(reason, signum)
        self.signum = signum
        self.reason = reason


class CapacityExceededError(HugeIntegerError):
    """Raised when a result would need more digits than a HugeInteger holds."""

    def __init__(self, operation: str, *operands: Any) -> None:
        super().__init__(f"Capacity exceeded in {operation}", tuple(str(o) for o in operands))
        self.operation = operation
        self.operands = operands


class DivisionByZeroError(HugeIntegerError):
    """Raised when dividing or taking a remainder by zero."""

    def __init__(self, dividend: Any) -> None:
        super().__init__("Division by zero", str(dividend))
        self.dividend = dividend
