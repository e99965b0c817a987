"""Input validation functions with strict type checking."""

import math
from typing import Any, TypeVar

from statecalc.exceptions import InvalidInputError

T = TypeVar("T", int, float)


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Booleans are rejected even though ``bool`` subclasses ``int``, and so are
    integers too large to be represented as a float.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")
    else:
        try:
            float(value)
        except OverflowError as e:
            raise InvalidInputError(value, "Integer too large") from e

    return value


def validate_operands(a: Any, b: Any) -> tuple[float, float]:
    """Validate both operands of a binary operation, left first, as floats."""
    return float(validate_number(a)), float(validate_number(b))
