"""Unit tests for validator functions."""

import pytest

from statecalc import InvalidInputError, validate_number, validate_operands


class TestValidateNumber:
    """Tests for validate_number function."""

    def test_accepts_int(self):
        assert validate_number(42) == 42

    def test_accepts_float(self):
        assert validate_number(3.14) == 3.14

    def test_accepts_negative(self):
        assert validate_number(-100) == -100

    def test_accepts_zero(self):
        assert validate_number(0) == 0

    def test_accepts_sample_numbers(self, sample_numbers):
        for number in sample_numbers:
            assert validate_number(number) == number

    def test_rejects_nan(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_number(float("nan"))
        assert "NaN" in str(exc_info.value)

    def test_rejects_positive_inf(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_number(float("inf"))
        assert "Infinity" in str(exc_info.value)

    def test_rejects_negative_inf(self):
        with pytest.raises(InvalidInputError):
            validate_number(float("-inf"))

    def test_rejects_string(self):
        with pytest.raises(InvalidInputError):
            validate_number("42")  # type: ignore

    def test_rejects_none(self):
        with pytest.raises(InvalidInputError):
            validate_number(None)  # type: ignore

    def test_rejects_bool(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_number(True)  # type: ignore
        assert exc_info.value.reason == "Expected number, got bool"


class TestValidateOperands:
    """Tests for validate_operands function."""

    def test_returns_both(self):
        assert validate_operands(1, 2.5) == (1.0, 2.5)

    def test_rejects_bad_left(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_operands("x", 2)
        assert exc_info.value.value == "x"

    def test_rejects_bad_right(self):
        with pytest.raises(InvalidInputError):
            validate_operands(1, float("nan"))

    def test_returns_floats(self):
        a, b = validate_operands(3, 4)
        assert isinstance(a, float) and isinstance(b, float)

    def test_rejects_huge_int(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_operands(10**400, 1)
        assert exc_info.value.reason == "Integer too large"
