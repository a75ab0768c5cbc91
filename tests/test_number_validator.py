"""Tests for number validation."""

import pytest

from fieldknobs import ConfigurationError, NumberOptions, NumberValidator, validate_number


class TestBasicScenarios:
    """Test the common success and failure paths."""

    def test_valid_integer_in_range(self):
        """Test a bounded integer that passes."""
        result = validate_number(42, {"min_value": 0, "max_value": 100, "is_integer": True})

        assert result.is_valid
        assert result.returned_number == 42

    def test_negative_disallowed(self):
        """Test the negative policy message."""
        result = validate_number(-5, {"allow_negative": False})

        assert not result.is_valid
        assert result.error_message == "Negative numbers are not allowed"
        assert result.returned_number is None

    def test_defaults_accept_any_number(self):
        """Test that default options accept any real number."""
        for value in (-3, 0, 2.5, 10**20):
            assert validate_number(value).returned_number == value


class TestTypeCheck:
    """Test the number type check."""

    @pytest.mark.parametrize("value", ["42", None, [1], True, False])
    def test_non_numbers(self, value):
        """Test that strings, None, containers and booleans fail."""
        assert validate_number(value).error_message == "Value must be a number."

    def test_custom_type_message(self):
        """Test overriding the type message."""
        result = validate_number("x", is_number_error="Enter digits only")
        assert result.error_message == "Enter digits only"


class TestRules:
    """Test the individual rules through the validator."""

    def test_bounds(self):
        """Test min and max messages."""
        assert validate_number(-1, min_value=0).error_message == (
            "Number should not be less than the minimum value"
        )
        assert validate_number(101, max_value=100).error_message == (
            "Number should not exceed the maximum value"
        )
        assert validate_number(0, min_value=0, max_value=0).is_valid

    def test_integer_required(self):
        """Test requiring an integer."""
        assert validate_number(3.5, is_integer=True).error_message == "Number should be an integer"
        assert validate_number(3.0, is_integer=True).is_valid

    def test_integer_false_applies_no_check(self):
        """Test that is_integer=False leaves integrality unchecked."""
        assert validate_number(5, is_integer=False).is_valid
        assert validate_number(3.5, is_integer=False).is_valid
        assert validate_number(5, {"is_integer": False}).returned_number == 5

    def test_integer_unconstrained_by_default(self):
        """Test that integrality is unchecked unless configured."""
        assert validate_number(3).is_valid
        assert validate_number(3.5).is_valid

    def test_zero_and_positive(self):
        """Test the zero and positive policies."""
        assert validate_number(0, allow_zero=False).error_message == "Zero is not allowed"
        assert validate_number(1, allow_positive=False).error_message == (
            "Positive numbers are not allowed"
        )
        assert validate_number(-1, allow_positive=False, allow_zero=False).is_valid

    def test_only_decimal(self):
        """Test requiring a fractional part."""
        assert validate_number(2, only_decimal=True).error_message == (
            "Number must have a decimal component"
        )
        assert validate_number(2.5, only_decimal=True).is_valid

    def test_decimal_places(self):
        """Test decimal-place bounds."""
        assert validate_number(1.234, max_decimal_places=2).error_message == (
            "Number must have at most 2 decimal places"
        )
        assert validate_number(1.2, min_decimal_places=2).error_message == (
            "Number must have at least 2 decimal places"
        )
        assert validate_number(19.99, min_decimal_places=2, max_decimal_places=2).is_valid

    def test_only_binary(self):
        """Test the binary rule."""
        assert validate_number(1011, only_binary=True).is_valid
        assert validate_number(1021, only_binary=True).error_message == (
            "Number must be a binary number"
        )

    def test_message_overrides(self):
        """Test that supplied messages replace the defaults."""
        result = validate_number(-1, allow_negative=False, negative_error="Must be >= 0")
        assert result.error_message == "Must be >= 0"


class TestRuleOrder:
    """Test that the first violated rule wins."""

    def test_min_before_negative(self):
        """Test that bounds are reported before sign policy."""
        result = validate_number(-5, min_value=0, allow_negative=False)
        assert result.error_message == "Number should not be less than the minimum value"

    def test_integer_before_sign(self):
        """Test that integrality is reported before sign policy."""
        result = validate_number(-1.5, is_integer=True, allow_negative=False)
        assert result.error_message == "Number should be an integer"

    def test_sign_before_decimal(self):
        """Test that sign policy is reported before decimal rules."""
        result = validate_number(-2, allow_negative=False, only_decimal=True)
        assert result.error_message == "Negative numbers are not allowed"


class TestOptions:
    """Test option handling at the validator level."""

    def test_unknown_option_raises(self):
        """Test that unknown keys raise instead of failing the result."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_number(5, {"minimum": 1})

        assert "minimum" in str(exc_info.value)

    def test_unknown_option_raises_for_non_number(self):
        """Test that unknown keys raise even when the value is not a number."""
        with pytest.raises(ConfigurationError):
            validate_number("five", {"minimum": 1})

    def test_options_record(self):
        """Test passing a NumberOptions record."""
        options = NumberOptions(max_value=10)
        assert not validate_number(11, options).is_valid

    def test_reusable_validator(self):
        """Test one validator applied to several values."""
        percentage = NumberValidator(min_value=0, max_value=100)

        assert percentage(50).is_valid
        assert not percentage(150).is_valid
        assert not percentage("50").is_valid
