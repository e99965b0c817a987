"""Binding from calculator button labels to context events."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from statecalc.exceptions import UnknownKeyError
from statecalc.operations import get_strategy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from statecalc.core import CalculatorContext

logger = logging.getLogger(__name__)

DIGIT_KEYS = frozenset("0123456789.")
CLEAR_KEY = "C"
EQUALS_KEY = "="


class Keypad:
    """
    Routes button presses to a CalculatorContext.

    The context is passed in rather than created here, so the same keypad
    shape works for any front end that owns one.
    """

    def __init__(self, context: CalculatorContext) -> None:
        self.context = context

    def press(self, label: str) -> str:
        """
        Press one button and return the display text afterwards.

        Raises:
            UnknownKeyError: If no button carries ``label``
        """
        if label in DIGIT_KEYS:
            self.context.input(label)
        elif label == CLEAR_KEY:
            self.context.reset()
        elif label == EQUALS_KEY:
            self.context.calculate_result()
        else:
            operation = get_strategy(label)
            if operation is None:
                raise UnknownKeyError(label)
            self.context.set_operation(operation)
        logger.debug("Pressed %r, display %r", label, self.context.display_text)
        return self.context.display_text

    def press_many(self, labels: Iterable[str]) -> str:
        """Press each label in order; stops at the first unknown key."""
        for label in labels:
            self.press(label)
        return self.context.display_text
