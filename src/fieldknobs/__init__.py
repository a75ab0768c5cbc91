"""Configurable field validation for strings and numbers.

This package provides:

- **Validators**: ``validate_string`` / ``validate_number`` and their reusable
  ``StringValidator`` / ``NumberValidator`` forms
- **Predicates**: the individual checks, in ``fieldknobs.checks``
- **Patterns**: named regular-expression presets and ``resolve_pattern``
- **Factory**: validators built from YAML/JSON configuration

Example:
    ```python
    from fieldknobs import validate_number, validate_string

    result = validate_string("  John   Doe  ", {"min_words_count": 2})
    if result:
        save(result.validated_input)   # 'John Doe'
    else:
        show(result.error_message)

    validate_number(3.5, is_integer=True).error_message
    # 'Number should be an integer'
    ```

Unrecognized options raise ``ConfigurationError`` instead of producing a
failed result.
"""

from fieldknobs.exceptions import (
    ConfigurationError,
    FieldknobsError,
    UnknownPatternError,
)
from fieldknobs.factory import ValidatorFactory, load_validators
from fieldknobs.number_validator import NumberValidator, validate_number
from fieldknobs.options import (
    NumberOptions,
    StringOptions,
    normalize_options,
    option_names,
)
from fieldknobs.patterns import PREDEFINED_PATTERNS, PatternRegistry, resolve_pattern
from fieldknobs.result import (
    NumberValidationResult,
    StringValidationResult,
    ValidationResult,
)
from fieldknobs.rules import Rule, evaluate_rules
from fieldknobs.string_validator import StringValidator, validate_string

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Validators
    "validate_string",
    "validate_number",
    "StringValidator",
    "NumberValidator",
    # Options
    "StringOptions",
    "NumberOptions",
    "normalize_options",
    "option_names",
    # Results
    "ValidationResult",
    "StringValidationResult",
    "NumberValidationResult",
    # Rules
    "Rule",
    "evaluate_rules",
    # Patterns
    "PREDEFINED_PATTERNS",
    "PatternRegistry",
    "resolve_pattern",
    # Factory
    "ValidatorFactory",
    "load_validators",
    # Exceptions
    "FieldknobsError",
    "ConfigurationError",
    "UnknownPatternError",
]
