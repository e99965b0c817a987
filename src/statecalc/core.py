"""Calculator context driving the Start/Input/Operation input modes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from statecalc.config import Settings
from statecalc.exceptions import InvalidInputError
from statecalc.formatting import format_number, parse_operand
from statecalc.operations import Operation, get_strategy
from statecalc.pipeline import CalculationPipeline

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Display text while nothing has been typed.
EMPTY_DISPLAY = "0"


class InputMode(str, Enum):
    """What the next key press means to the calculator."""

    START = "start"
    INPUT = "input"
    OPERATION = "operation"


@dataclass(frozen=True)
class Calculation:
    """Immutable record of one completed calculation."""

    first_operand: float
    operation: Operation
    second_operand: float
    result: str

    def __str__(self) -> str:
        return (
            f"{format_number(self.first_operand)} {self.operation.symbol} "
            f"{format_number(self.second_operand)} = {self.result}"
        )


@dataclass(frozen=True)
class ContextSnapshot:
    """Point-in-time view of a CalculatorContext."""

    state: InputMode
    first_operand: float
    current_input: str
    operation: Operation | None
    display_text: str


class CalculatorContext:
    """
    Owns the calculator's input mode, operands and display.

    Every public method looks at the current mode and either performs the
    transition for that mode or does nothing. Nothing here raises for an
    arithmetic failure: the pipeline's sentinel text becomes the new input.

    Example:
        >>> calc = CalculatorContext()
        >>> calc.input("5")
        >>> calc.set_operation("add")
        >>> calc.input("3")
        >>> calc.calculate_result()
        >>> calc.display_text
        '8'
    """

    get_strategy = staticmethod(get_strategy)

    def __init__(
        self,
        pipeline: CalculationPipeline | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._pipeline = pipeline if pipeline is not None else CalculationPipeline()
        self._history_limit = (settings or Settings()).history_limit
        self._listeners: list[Callable[[str], None]] = []
        self._history: list[Calculation] = []
        self._state = InputMode.START
        self._first_operand = 0.0
        self._current_input = ""
        self._operation: Operation | None = None
        self._display_text = EMPTY_DISPLAY

    @property
    def state(self) -> InputMode:
        return self._state

    @property
    def first_operand(self) -> float:
        return self._first_operand

    @property
    def current_input(self) -> str:
        """Buffered text of the operand being typed, or the last result."""
        return self._current_input

    @property
    def operation(self) -> Operation | None:
        """The pending operation; only set in OPERATION mode."""
        return self._operation

    @property
    def display_text(self) -> str:
        return self._display_text

    @property
    def history(self) -> list[Calculation]:
        """Completed calculations, oldest first."""
        return self._history.copy()

    def subscribe(self, listener: Callable[[str], None]) -> None:
        """Call ``listener`` with the display text on every refresh."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[str], None]) -> None:
        self._listeners.remove(listener)

    def input(self, char: str) -> None:
        """Append a typed character to the operand being entered."""
        if not isinstance(char, str) or not char:
            raise InvalidInputError(char, "Expected a non-empty key label")

        if self._state is InputMode.START:
            self._current_input = char
            self._set_state(InputMode.INPUT)
        else:
            self._current_input += char
        self._refresh()

    def set_operation(self, operation: Operation | str) -> None:
        """
        Store the typed operand and wait for the second one.

        Only acts in INPUT mode. The operation is resolved first, so an
        unknown code is rejected whatever the mode.

        Raises:
            UnknownOperationError: If ``operation`` names no operation
        """
        selected = Operation.from_code(operation)

        if self._state is not InputMode.INPUT:
            logger.debug("Ignoring operation %s in %s mode", selected.value, self._state.value)
            return

        self._first_operand = parse_operand(self._current_input)
        self._current_input = ""
        self._operation = selected
        self._set_state(InputMode.OPERATION)
        self._refresh()

    def calculate_result(self) -> None:
        """Apply the pending operation; only acts in OPERATION mode."""
        if self._state is not InputMode.OPERATION or self._operation is None:
            logger.debug("Nothing to calculate in %s mode", self._state.value)
            return

        second_operand = parse_operand(self._current_input)
        result = self._pipeline.calculate(self._first_operand, second_operand, self._operation)
        text = result if isinstance(result, str) else format_number(result)

        self._record(Calculation(self._first_operand, self._operation, second_operand, text))
        self._current_input = text
        self._operation = None
        self._set_state(InputMode.INPUT)
        self._refresh()

    def reset(self) -> None:
        """Return to the initial state and clear history."""
        self._first_operand = 0.0
        self._current_input = ""
        self._operation = None
        self._history.clear()
        self._set_state(InputMode.START)
        self._refresh()

    clear = reset

    def snapshot(self) -> ContextSnapshot:
        return ContextSnapshot(
            state=self._state,
            first_operand=self._first_operand,
            current_input=self._current_input,
            operation=self._operation,
            display_text=self._display_text,
        )

    def _set_state(self, state: InputMode) -> None:
        if state is not self._state:
            logger.debug("Mode %s -> %s", self._state.value, state.value)
        self._state = state

    def _record(self, calculation: Calculation) -> None:
        if self._history_limit == 0:
            return
        self._history.append(calculation)
        del self._history[: -self._history_limit]

    def _refresh(self) -> None:
        self._display_text = self._current_input or EMPTY_DISPLAY
        for listener in self._listeners:
            listener(self._display_text)

    def __repr__(self) -> str:
        return (
            f"CalculatorContext(state={self._state.value}, "
            f"input={self._current_input!r}, display={self._display_text!r})"
        )
