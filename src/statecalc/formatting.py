"""Conversion between keypad text and numbers.

Operands are typed one character at a time, so the buffer can hold text that
is only partly numeric (``"5.5.5"``, ``"Invalid input3"``). Parsing takes the
longest numeric prefix and yields NaN when there is none; the pipeline is the
place that rejects NaN, not the parser.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

_NUMERIC_PREFIX = re.compile(
    r"""
    \s*
    (?P<number>
        [+-]?
        (?:
            Infinity
            | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
        )
    )
    """,
    re.VERBOSE,
)

# Point positions printed in fixed notation, i.e. 1e-6 <= |x| < 1e21.
_MIN_PLAIN_EXPONENT = -6
_MAX_PLAIN_EXPONENT = 21


def parse_operand(text: str) -> float:
    """
    Parse the numeric prefix of ``text`` the way a browser's parseFloat does.

    Examples:
        >>> parse_operand("42")
        42.0
        >>> parse_operand("5.5.5")
        5.5
        >>> math.isnan(parse_operand(""))
        True
    """
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return math.nan
    number = match.group("number")
    if number.lstrip("+-") == "Infinity":
        return -math.inf if number.startswith("-") else math.inf
    return float(number)


def format_number(value: float) -> str:
    """
    Render a result for the display the way a browser prints a number.

    The shortest round-trip digits are kept. Magnitudes from 1e-6 up to (but
    not including) 1e21 print in fixed notation; others use an unpadded
    exponent (``1e-7``, ``1.5e+300``). Negative zero prints as ``0``.

    Examples:
        >>> format_number(8.0)
        '8'
        >>> format_number(1e-5)
        '0.00001'
        >>> format_number(1e-7)
        '1e-7'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # point_position: the value is 0.<digits> * 10 ** point_position
    point_position = len(digits) + exponent

    if len(digits) <= point_position <= _MAX_PLAIN_EXPONENT:
        return sign + digits + "0" * (point_position - len(digits))
    if 0 < point_position <= _MAX_PLAIN_EXPONENT:
        return sign + digits[:point_position] + "." + digits[point_position:]
    if _MIN_PLAIN_EXPONENT < point_position <= 0:
        return sign + "0." + "0" * -point_position + digits

    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    shown_exponent = point_position - 1
    return f"{sign}{mantissa}e{'+' if shown_exponent > 0 else '-'}{abs(shown_exponent)}"
