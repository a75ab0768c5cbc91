"""String validation.

``validate_string`` checks a value against a ``StringOptions`` record in a
fixed order and reports the first rule that fails:

    1. value is a string                   (is_string_error)
    2. value is non-blank when required    (is_required_error)
    3. contains one of allowed_chars       (allowed_chars_error)
    4. min_string_length                   (length_error)
    5. max_string_length                   (length_error)
    6. matches regex_pattern               (regex_pattern_error)
    7. none of disallowed_chars            (disallowed_chars_error)
    8. custom_validation_fn passes         (custom_error)
    9. none of blacklist_words             (blacklist_words_error)
   10. starts_with_pattern                 (starts_with_error)
   11. ends_with_pattern                   (ends_with_error)
   12. no spaces unless allow_spaces       (allowed_spaces_error)
   13. min_words_count                     (min_words_error)
   14. max_words_count                     (max_words_error)
   15. max_repetitive_chars_limit          (max_repetitive_chars_error)

Rules 2-15 test the trimmed input. On success the result carries the
trimmed input with each internal whitespace run replaced by
``word_separator``.

Example:
    ```python
    from fieldknobs import validate_string

    validate_string("  John   Doe  ").validated_input
    # 'John Doe'

    validate_string("ab", {"min_string_length": 3}).error_message
    # 'Name must be at least 3 characters long'
    ```
"""

from __future__ import annotations

from typing import Any, List, Mapping

from fieldknobs.checks import text
from fieldknobs.options import StringOptions, normalize_options
from fieldknobs.patterns import resolve_pattern
from fieldknobs.result import StringValidationResult
from fieldknobs.rules import Rule, evaluate_rules


class StringValidator:
    """Reusable string validator.

    Options are normalized and ``regex_pattern`` is resolved once, when the
    validator is built, so configuration mistakes surface immediately and
    repeated validation does no lookup work. Instances are immutable and
    safe to share between threads.

    Args:
        options: Option mapping or ``StringOptions`` record
        **kwargs: Individual options; these override entries in ``options``

    Raises:
        ConfigurationError: On unrecognized option keys
        UnknownPatternError: If ``regex_pattern`` names no predefined pattern

    Example:
        ```python
        username = StringValidator(regex_pattern="USERNAME", max_string_length=20)
        username("jane_doe").is_valid
        # True
        ```
    """

    def __init__(self, options: Mapping[str, Any] | StringOptions | None = None, **kwargs: Any):
        self.options = normalize_options(options, StringOptions, **kwargs)
        self.pattern = (
            resolve_pattern(self.options.regex_pattern)
            if self.options.regex_pattern is not None
            else None
        )

    def validate(self, value: Any) -> StringValidationResult:
        """Validate a value.

        Args:
            value: Value to validate; anything that is not a ``str`` fails

        Returns:
            StringValidationResult with the first failing rule's message, or
            the normalized string on success
        """
        opts = self.options

        if not text.is_string(value):
            return StringValidationResult.failure(opts.is_string_error or "Name must be a string")

        trimmed = text.trim_string(value)
        candidate = text.normalize_whitespace(trimmed, opts.word_separator)

        failed = evaluate_rules(self._build_rules(trimmed))
        if failed is not None:
            return StringValidationResult.failure(failed.message)
        return StringValidationResult.success(candidate)

    __call__ = validate

    def _build_rules(self, value: str) -> List[Rule]:
        """Build the ordered rules for one trimmed input."""
        opts = self.options
        rules = [
            Rule(
                "is_required",
                lambda: opts.is_required and not text.is_string_required(value, opts.is_required),
                opts.is_required_error or "Name is required",
            ),
        ]

        if opts.allowed_chars is not None:
            allowed = opts.allowed_chars
            rules.append(Rule(
                "allowed_chars",
                lambda: text.contains_allowed_char(value, allowed) is None,
                opts.allowed_chars_error or "Name contains disallowed characters",
            ))

        if opts.min_string_length is not None:
            min_length = opts.min_string_length
            rules.append(Rule(
                "min_string_length",
                lambda: not text.is_string_length_at_least(value, min_length),
                opts.length_error or f"Name must be at least {min_length} characters long",
            ))

        if opts.max_string_length is not None:
            max_length = opts.max_string_length
            rules.append(Rule(
                "max_string_length",
                lambda: not text.is_string_length_at_most(value, max_length),
                opts.length_error or f"Name must be at most {max_length} characters long",
            ))

        if self.pattern is not None:
            pattern = self.pattern
            rules.append(Rule(
                "regex_pattern",
                lambda: not text.matches_pattern(value, pattern),
                opts.regex_pattern_error or "Invalid input pattern",
            ))

        if opts.disallowed_chars is not None:
            disallowed = opts.disallowed_chars
            rules.append(Rule(
                "disallowed_chars",
                lambda: text.contains_disallowed_char(value, disallowed) is not None,
                opts.disallowed_chars_error or "Name contains disallowed characters",
            ))

        if opts.custom_validation_fn is not None:
            custom_fn = opts.custom_validation_fn
            rules.append(Rule(
                "custom_validation_fn",
                lambda: not custom_fn(value),
                opts.custom_error or "Custom validation failed",
            ))

        if opts.blacklist_words is not None:
            blacklist = opts.blacklist_words
            rules.append(Rule(
                "blacklist_words",
                lambda: text.contains_blacklisted_word(value, blacklist) is not None,
                opts.blacklist_words_error or "Name contains blacklisted words",
            ))

        if opts.starts_with_pattern is not None:
            prefix = opts.starts_with_pattern
            rules.append(Rule(
                "starts_with_pattern",
                lambda: not text.does_string_start_with(value, prefix),
                opts.starts_with_error or f"Name must start with {prefix}",
            ))

        if opts.ends_with_pattern is not None:
            suffix = opts.ends_with_pattern
            rules.append(Rule(
                "ends_with_pattern",
                lambda: not text.does_string_end_with(value, suffix),
                opts.ends_with_error or f"Name must end with '{suffix}'",
            ))

        rules.append(Rule(
            "allow_spaces",
            lambda: not text.is_spaces_allowed(value, opts.allow_spaces),
            opts.allowed_spaces_error or "Spaces are not allowed in the name",
        ))

        if opts.min_words_count is not None:
            min_words = opts.min_words_count
            rules.append(Rule(
                "min_words_count",
                lambda: not text.is_word_count_above_threshold(value, min_words),
                opts.min_words_error or f"Name must contain at least {min_words} words",
            ))

        if opts.max_words_count is not None:
            max_words = opts.max_words_count
            rules.append(Rule(
                "max_words_count",
                lambda: not text.is_word_count_below_threshold(value, max_words),
                opts.max_words_error or f"Name must contain at most {max_words} words",
            ))

        limit = opts.max_repetitive_chars_limit
        rules.append(Rule(
            "max_repetitive_chars_limit",
            lambda: text.has_excessive_repetitive_chars(value, limit),
            opts.max_repetitive_chars_error
            or f"Name contains consecutive repetitive characters exceeding the limit of {limit}",
        ))

        return rules


def validate_string(
    value: Any,
    options: Mapping[str, Any] | StringOptions | None = None,
    **kwargs: Any,
) -> StringValidationResult:
    """Validate a single value as a string.

    Args:
        value: Value to validate
        options: Option mapping or ``StringOptions`` record
        **kwargs: Individual options; these override entries in ``options``

    Returns:
        StringValidationResult

    Raises:
        ConfigurationError: On unrecognized option keys, before any rule runs
        UnknownPatternError: If ``regex_pattern`` names no predefined pattern
    """
    return StringValidator(options, **kwargs).validate(value)
