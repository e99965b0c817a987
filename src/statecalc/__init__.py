"""
Four-function calculator built around an explicit input-mode machine.

The package is layered leaf-first:
- operations: the closed Operation enum and the arithmetic behind it
- pipeline: operand validation followed by operation dispatch
- core: the CalculatorContext and its Start/Input/Operation modes
- keypad: button labels mapped onto context events
"""

from statecalc.config import Settings, load_settings
from statecalc.core import Calculation, CalculatorContext, ContextSnapshot, InputMode
from statecalc.exceptions import (
    CalculatorError,
    ConfigurationError,
    DivisionByZeroError,
    InvalidInputError,
    OverflowError,
    UnknownKeyError,
    UnknownOperationError,
)
from statecalc.formatting import format_number, parse_operand
from statecalc.keypad import Keypad
from statecalc.operations import (
    Operation,
    add,
    divide,
    get_strategy,
    multiply,
    subtract,
)
from statecalc.pipeline import INVALID_INPUT, CalculationPipeline
from statecalc.validators import validate_number, validate_operands

__all__ = [
    "INVALID_INPUT",
    "Calculation",
    "CalculationPipeline",
    "CalculatorContext",
    "CalculatorError",
    "ConfigurationError",
    "ContextSnapshot",
    "DivisionByZeroError",
    "InputMode",
    "InvalidInputError",
    "Keypad",
    "Operation",
    "OverflowError",
    "Settings",
    "UnknownKeyError",
    "UnknownOperationError",
    "add",
    "divide",
    "format_number",
    "get_strategy",
    "load_settings",
    "multiply",
    "parse_operand",
    "subtract",
    "validate_number",
    "validate_operands",
]

__version__ = "0.1.0"
