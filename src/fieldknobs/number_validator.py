"""Number validation.

``validate_number`` mirrors ``validate_string`` for real numbers. Rules run
in this order and the first failure is reported:

    type check -> required -> min_value -> max_value -> is_integer ->
    allow_negative -> allow_zero -> allow_positive -> only_decimal ->
    max_decimal_places -> min_decimal_places -> only_binary

The type check and the three sign/zero rules always run; every other rule
runs only when its option is set.

Example:
    ```python
    from fieldknobs import validate_number

    validate_number(42, min_value=0, max_value=100, is_integer=True).returned_number
    # 42

    validate_number(-5, {"allow_negative": False}).error_message
    # 'Negative numbers are not allowed'
    ```
"""

from __future__ import annotations

from typing import Any, List, Mapping

from fieldknobs.checks import numeric
from fieldknobs.options import NumberOptions, normalize_options
from fieldknobs.result import NumberValidationResult
from fieldknobs.rules import Rule, evaluate_rules


class NumberValidator:
    """Reusable number validator.

    Args:
        options: Option mapping or ``NumberOptions`` record
        **kwargs: Individual options; these override entries in ``options``

    Raises:
        ConfigurationError: On unrecognized option keys
    """

    def __init__(self, options: Mapping[str, Any] | NumberOptions | None = None, **kwargs: Any):
        self.options = normalize_options(options, NumberOptions, **kwargs)

    def validate(self, value: Any) -> NumberValidationResult:
        """Validate a value.

        Args:
            value: Value to validate; ``bool`` and non-real values fail

        Returns:
            NumberValidationResult with the first failing rule's message, or
            the unchanged number on success
        """
        failed = evaluate_rules(self._build_rules(value))
        if failed is not None:
            return NumberValidationResult.failure(failed.message)
        return NumberValidationResult.success(value)

    __call__ = validate

    def _build_rules(self, value: Any) -> List[Rule]:
        opts = self.options
        rules = [
            Rule(
                "is_number",
                lambda: not numeric.is_number(value),
                opts.is_number_error or "Value must be a number.",
            ),
            Rule(
                "is_required",
                lambda: opts.is_required and not numeric.is_number_required(value, opts.is_required),
                opts.required_error or "Number is required",
            ),
        ]

        if opts.min_value is not None:
            min_value = opts.min_value
            rules.append(Rule(
                "min_value",
                lambda: not numeric.is_min_value(value, min_value),
                opts.min_value_error or "Number should not be less than the minimum value",
            ))

        if opts.max_value is not None:
            max_value = opts.max_value
            rules.append(Rule(
                "max_value",
                lambda: not numeric.is_max_value(value, max_value),
                opts.max_value_error or "Number should not exceed the maximum value",
            ))

        if opts.is_integer:
            rules.append(Rule(
                "is_integer",
                lambda: not numeric.is_integer(value),
                opts.integer_error or "Number should be an integer",
            ))

        rules.extend([
            Rule(
                "allow_negative",
                lambda: not numeric.allow_negative(value, opts.allow_negative),
                opts.negative_error or "Negative numbers are not allowed",
            ),
            Rule(
                "allow_zero",
                lambda: not numeric.allow_zero(value, opts.allow_zero),
                opts.zero_error or "Zero is not allowed",
            ),
            Rule(
                "allow_positive",
                lambda: not numeric.allow_positive(value, opts.allow_positive),
                opts.positive_error or "Positive numbers are not allowed",
            ),
        ])

        if opts.only_decimal:
            rules.append(Rule(
                "only_decimal",
                lambda: not numeric.must_have_decimal(value),
                opts.decimal_error or "Number must have a decimal component",
            ))

        if opts.max_decimal_places is not None:
            max_places = opts.max_decimal_places
            rules.append(Rule(
                "max_decimal_places",
                lambda: not numeric.is_valid_max_decimal_places(value, max_places),
                opts.max_decimal_error or f"Number must have at most {max_places} decimal places",
            ))

        if opts.min_decimal_places is not None:
            min_places = opts.min_decimal_places
            rules.append(Rule(
                "min_decimal_places",
                lambda: not numeric.is_valid_min_decimal_places(value, min_places),
                opts.min_decimal_error or f"Number must have at least {min_places} decimal places",
            ))

        if opts.only_binary:
            rules.append(Rule(
                "only_binary",
                lambda: not numeric.is_binary(value),
                opts.binary_error or "Number must be a binary number",
            ))

        return rules


def validate_number(
    value: Any,
    options: Mapping[str, Any] | NumberOptions | None = None,
    **kwargs: Any,
) -> NumberValidationResult:
    """Validate a single value as a number.

    Args:
        value: Value to validate
        options: Option mapping or ``NumberOptions`` record
        **kwargs: Individual options; these override entries in ``options``

    Returns:
        NumberValidationResult

    Raises:
        ConfigurationError: On unrecognized option keys, before any rule runs
    """
    return NumberValidator(options, **kwargs).validate(value)
