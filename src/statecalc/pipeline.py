"""Two-step calculation pipeline: validate the operands, then dispatch."""

from __future__ import annotations

import logging
from typing import Any

from statecalc.exceptions import CalculatorError, InvalidInputError
from statecalc.operations import Operation
from statecalc.validators import validate_operands

logger = logging.getLogger(__name__)

# Shown in place of a number when a calculation cannot produce one.
INVALID_INPUT = "Invalid input"


class CalculationPipeline:
    """
    Template for running one binary calculation.

    ``calculate`` fixes the order of the steps; ``validate`` and
    ``execute_operation`` are the hooks a subclass may replace. Failures never
    escape ``calculate``: they come back as the ``INVALID_INPUT`` sentinel so
    the caller can show them and keep accepting input.

    Example:
        >>> pipeline = CalculationPipeline()
        >>> pipeline.calculate(5, 3, Operation.ADD)
        8.0
        >>> pipeline.calculate(5, 0, Operation.DIVIDE)
        'Invalid input'
    """

    def calculate(self, a: Any, b: Any, operation: Any) -> float | str:
        """Validate ``a`` and ``b`` and apply ``operation`` to them."""
        try:
            a, b = self.validate(a, b)
            if not isinstance(operation, Operation):
                raise InvalidInputError(operation, "Expected an Operation")
            return self.execute_operation(a, b, operation)
        except CalculatorError as exc:
            logger.info("Calculation %r(%r, %r) failed: %s", operation, a, b, exc)
            return INVALID_INPUT

    def validate(self, a: Any, b: Any) -> tuple[float, float]:
        """Reject operands that are not finite numbers."""
        return validate_operands(a, b)

    def execute_operation(self, a: float, b: float, operation: Operation) -> float:
        return operation.execute(a, b)
