"""Validation result types.

Every validator returns one of these, pass or fail. Exactly one of
``error_message`` (failure) or the validated value (success) is set.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from numbers import Real
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """Outcome shared by string and number validation.

    Attributes:
        is_valid: Whether every rule passed
        error_message: Message of the first failing rule, if any
    """

    is_valid: bool
    error_message: str | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary, leaving out unset fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def failure(cls, error_message: str) -> ValidationResult:
        """Create a failed result carrying the first failing rule's message."""
        return cls(is_valid=False, error_message=error_message)


@dataclass(frozen=True)
class StringValidationResult(ValidationResult):
    """Result of ``validate_string``.

    Attributes:
        validated_input: Trimmed input with whitespace runs replaced by the
            configured word separator; only set on success
    """

    validated_input: str | None = None

    @classmethod
    def success(cls, validated_input: str) -> StringValidationResult:
        """Create a successful result.

        Args:
            validated_input: The normalized string

        Returns:
            Successful StringValidationResult
        """
        return cls(is_valid=True, validated_input=validated_input)


@dataclass(frozen=True)
class NumberValidationResult(ValidationResult):
    """Result of ``validate_number``.

    Attributes:
        returned_number: The input number, unchanged; only set on success
    """

    returned_number: Real | None = None

    @classmethod
    def success(cls, returned_number: Real) -> NumberValidationResult:
        """Create a successful result.

        Args:
            returned_number: The validated number

        Returns:
            Successful NumberValidationResult
        """
        return cls(is_valid=True, returned_number=returned_number)
