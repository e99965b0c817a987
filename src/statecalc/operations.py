"""Four-function arithmetic and the closed set of calculator operations."""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from statecalc.exceptions import DivisionByZeroError, OverflowError, UnknownOperationError
from statecalc.validators import validate_number

if TYPE_CHECKING:
    from collections.abc import Callable


def add(a: float, b: float) -> float:
    """
    Add two numbers with overflow protection.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    validate_number(a)
    validate_number(b)

    result = a + b

    if math.isinf(result):
        raise OverflowError("addition", a, b)

    return result


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a with overflow protection.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    validate_number(a)
    validate_number(b)

    result = a - b

    if math.isinf(result):
        raise OverflowError("subtraction", a, b)

    return result


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers with overflow protection.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    validate_number(a)
    validate_number(b)

    result = a * b

    if math.isinf(result):
        raise OverflowError("multiplication", a, b)

    return result


def divide(a: float, b: float) -> float:
    """
    Divide a by b with zero and overflow protection.

    Properties:
        - Identity: divide(a, 1) == a
        - Self-division: divide(a, a) == 1 (for a != 0)

    Raises:
        InvalidInputError: If inputs are invalid
        DivisionByZeroError: If b is zero
        OverflowError: If result would overflow
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        raise DivisionByZeroError(a)

    result = a / b

    if math.isinf(result):
        raise OverflowError("division", a, b)

    return result


class Operation(str, Enum):
    """The operations a calculator button can select.

    Values are the op codes carried by the operator buttons.
    """

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def execute(self, a: float, b: float) -> float:
        """Apply this operation to ``a`` and ``b``."""
        return _IMPLEMENTATIONS[self](a, b)

    @classmethod
    def from_code(cls, code: str) -> Operation:
        """
        Resolve an op code or button symbol to an Operation.

        Raises:
            UnknownOperationError: If ``code`` names no operation
        """
        operation = get_strategy(code)
        if operation is None:
            raise UnknownOperationError(code)
        return operation


_IMPLEMENTATIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
}

_SYMBOLS: dict[Operation, str] = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "×",
    Operation.DIVIDE: "÷",
}

# Button labels accepted in addition to the op codes themselves.
_ALIASES: dict[str, Operation] = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "−": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "×": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
    "÷": Operation.DIVIDE,
}


def get_strategy(name: object) -> Operation | None:
    """Map an op code or symbol to its Operation, or None if unrecognised."""
    if isinstance(name, Operation):
        return name
    if not isinstance(name, str):
        return None
    try:
        return Operation(name)
    except ValueError:
        return _ALIASES.get(name)
