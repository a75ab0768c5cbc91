"""Exception hierarchy for fieldknobs.

Only misconfiguration is raised. A value that fails a rule is never an
exception: it comes back as a failed result from ``validate_string`` or
``validate_number``.

Example:
    ```python
    from fieldknobs import ConfigurationError, validate_string

    try:
        validate_string("abc", {"min_lenght": 2})
    except ConfigurationError as e:
        logger.error(f"Bad validator options: {e}")
        logger.error(f"Unknown keys: {e.context['invalid_options']}")
    ```
"""

from typing import Any, Dict


class FieldknobsError(Exception):
    """Base exception for all fieldknobs errors.

    Supports optional context data so callers can inspect what went wrong
    without parsing the message.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Example:
        ```python
        error = FieldknobsError(
            "Validator could not be built",
            context={"validator": "username"}
        )
        str(error)
        # 'Validator could not be built'
        error.context
        # {'validator': 'username'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(FieldknobsError):
    """Raised when validator configuration is invalid.

    This signals a programming mistake, not bad input data. Common causes:
    - Unrecognized option keys
    - A regex pattern that is neither compiled nor a predefined name
    - A factory entry with an unknown validator type

    Example:
        ```python
        raise ConfigurationError(
            "Invalid option(s)",
            context={"invalid_options": ["min_lenght"], "available_options": [...]}
        )
        ```
    """

    pass


class UnknownPatternError(ConfigurationError):
    """Raised when a symbolic pattern name is not in the predefined registry."""

    def __init__(self, pattern: str, available: list[str] | None = None):
        super().__init__(
            f"The regex pattern '{pattern}' is not available in the predefined patterns.",
            context={"pattern": pattern, "available_patterns": available or []},
        )
        self.pattern = pattern
