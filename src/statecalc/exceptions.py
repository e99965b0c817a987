"""Custom exceptions for the statecalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class OverflowError(CalculatorError):
    """Raised when a calculation results in overflow."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when input is invalid (NaN, Inf, wrong type)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class UnknownOperationError(InvalidInputError):
    """Raised when an operation code is outside the supported set."""

    def __init__(self, code: Any) -> None:
        super().__init__(code, "Unknown operation")
        self.code = code


class UnknownKeyError(InvalidInputError):
    """Raised when a keypad label has no binding."""

    def __init__(self, label: Any) -> None:
        super().__init__(label, "Unknown key")
        self.label = label


class ConfigurationError(CalculatorError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, raw: str, reason: str) -> None:
        super().__init__(f"Invalid {name} ({reason})", raw)
        self.name = name
        self.raw = raw
