"""
Property-based tests for CalculatorContext.

Random key sequences are pushed through the context and its invariants are
checked after every step with a Hypothesis state machine.
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from statecalc import (
    INVALID_INPUT,
    CalculationPipeline,
    CalculatorContext,
    InputMode,
    Keypad,
    Operation,
    format_number,
)

digits = st.sampled_from("0123456789.")
digit_runs = st.lists(digits, min_size=1, max_size=12)
operations = st.sampled_from(list(Operation))
small_ints = st.integers(min_value=0, max_value=10**6)
events = st.lists(
    st.one_of(digits, st.sampled_from(["+", "-", "*", "/", "=", "C"])),
    max_size=30,
)


@pytest.mark.property
class TestContextProperties:
    """Property-based tests for CalculatorContext."""

    @given(keys=digit_runs)
    def test_buffer_is_concatenation_of_digits(self, keys: list[str]):
        """Typing digits only ever appends."""
        context = CalculatorContext()
        for key in keys:
            context.input(key)
        assert context.current_input == "".join(keys)
        assert context.display_text == "".join(keys)

    @given(keys=events)
    def test_reset_from_any_state(self, keys: list[str]):
        """reset() always lands on the initial state."""
        context = CalculatorContext()
        Keypad(context).press_many(keys)
        context.reset()
        assert context.state is InputMode.START
        assert context.first_operand == 0
        assert context.current_input == ""
        assert context.display_text == "0"

    @given(keys=events)
    def test_reset_is_idempotent(self, keys: list[str]):
        context = CalculatorContext()
        Keypad(context).press_many(keys)
        context.reset()
        once = context.snapshot()
        context.reset()
        assert context.snapshot() == once

    @given(a=small_ints, b=small_ints, operation=operations)
    def test_keypad_matches_pipeline(self, a: int, b: int, operation: Operation):
        """Typing a calculation gives the same text as running it directly."""
        context = CalculatorContext()
        keypad = Keypad(context)
        keypad.press_many([*str(a), operation.value, *str(b), "="])

        expected = CalculationPipeline().calculate(float(a), float(b), operation)
        expected_text = expected if isinstance(expected, str) else format_number(expected)
        assert context.current_input == expected_text
        assert context.state is InputMode.INPUT

    @given(a=small_ints)
    def test_divide_by_zero_always_invalid(self, a: int):
        context = CalculatorContext()
        Keypad(context).press_many([*str(a), "/", "0", "="])
        assert context.display_text == INVALID_INPUT


@pytest.mark.property
@pytest.mark.slow
class ContextStateMachine(RuleBasedStateMachine):
    """
    Stateful testing for CalculatorContext.

    A simple model of the mode and buffer is kept alongside the real context
    and compared after every rule.
    """

    def __init__(self) -> None:
        super().__init__()
        self.context = CalculatorContext()
        self.mode = InputMode.START
        self.buffer = ""

    @invariant()
    def display_mirrors_buffer(self) -> None:
        assert self.context.display_text == (self.context.current_input or "0")

    @invariant()
    def operation_only_in_operation_mode(self) -> None:
        assert (self.context.operation is not None) == (
            self.context.state is InputMode.OPERATION
        )

    @invariant()
    def model_matches(self) -> None:
        assert self.context.state is self.mode
        assert self.context.current_input == self.buffer

    @rule(key=digits)
    def type_key(self, key: str) -> None:
        self.context.input(key)
        self.buffer = key if self.mode is InputMode.START else self.buffer + key
        if self.mode is InputMode.START:
            self.mode = InputMode.INPUT

    @rule(operation=operations)
    def choose_operation(self, operation: Operation) -> None:
        self.context.set_operation(operation)
        if self.mode is InputMode.INPUT:
            self.mode = InputMode.OPERATION
            self.buffer = ""

    @rule()
    def equals(self) -> None:
        self.context.calculate_result()
        if self.mode is InputMode.OPERATION:
            self.mode = InputMode.INPUT
            self.buffer = self.context.current_input
            value = self.buffer
            assert value == INVALID_INPUT or not math.isnan(float(value))

    @rule()
    def clear(self) -> None:
        self.context.reset()
        self.mode = InputMode.START
        self.buffer = ""


# Run the state machine as a pytest test
TestContextStateMachine = ContextStateMachine.TestCase
