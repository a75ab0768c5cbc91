"""Validator option records and the option normalizer.

Each validator type has a frozen dataclass listing every option it
understands, with its default. The dataclass fields are the one and only
list of valid option names: a caller key that is not a field is a
``ConfigurationError``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Real
from typing import Any, Callable, Mapping, Sequence, Type, TypeVar

from fieldknobs.exceptions import ConfigurationError
from fieldknobs.patterns import PatternLike

OptionsT = TypeVar("OptionsT", "StringOptions", "NumberOptions")


@dataclass(frozen=True)
class StringOptions:
    """Options understood by ``validate_string``.

    Constraint options default to ``None`` (not configured) except
    ``is_required``, ``allow_spaces``, ``word_separator`` and
    ``max_repetitive_chars_limit``, which always apply. The ``*_error``
    fields override the default message of the matching rule.
    """

    is_required: bool = True
    min_string_length: int | None = None
    max_string_length: int | None = None
    allowed_chars: Sequence[str] | None = None
    disallowed_chars: Sequence[str] | None = None
    blacklist_words: Sequence[str] | None = None
    word_separator: str = " "
    starts_with_pattern: str | None = None
    ends_with_pattern: str | None = None
    allow_spaces: bool = True
    min_words_count: int | None = None
    max_words_count: int | None = None
    max_repetitive_chars_limit: float = math.inf
    regex_pattern: PatternLike | None = None
    custom_validation_fn: Callable[[str], bool] | None = None

    is_string_error: str | None = None
    length_error: str | None = None
    custom_error: str | None = None
    allowed_chars_error: str | None = None
    disallowed_chars_error: str | None = None
    blacklist_words_error: str | None = None
    is_required_error: str | None = None
    starts_with_error: str | None = None
    ends_with_error: str | None = None
    allowed_spaces_error: str | None = None
    min_words_error: str | None = None
    max_words_error: str | None = None
    max_repetitive_chars_error: str | None = None
    regex_pattern_error: str | None = None


@dataclass(frozen=True)
class NumberOptions:
    """Options understood by ``validate_number``.

    ``is_integer``, ``only_decimal`` and ``only_binary`` add a rule only when
    True. The sign and zero flags are permissive by default and always
    evaluated.
    """

    is_required: bool = True
    min_value: Real | None = None
    max_value: Real | None = None
    is_integer: bool = False
    allow_negative: bool = True
    allow_positive: bool = True
    allow_zero: bool = True
    only_decimal: bool = False
    max_decimal_places: int | None = None
    min_decimal_places: int | None = None
    only_binary: bool = False

    is_number_error: str | None = None
    required_error: str | None = None
    min_value_error: str | None = None
    max_value_error: str | None = None
    integer_error: str | None = None
    negative_error: str | None = None
    positive_error: str | None = None
    zero_error: str | None = None
    decimal_error: str | None = None
    max_decimal_error: str | None = None
    min_decimal_error: str | None = None
    binary_error: str | None = None


# explicit None means "use the default" for options that always apply
_NULLABLE = {
    cls: frozenset(f.name for f in fields(cls) if f.default is None)
    for cls in (StringOptions, NumberOptions)
}
_SEQUENCE_OPTIONS = frozenset({"allowed_chars", "disallowed_chars", "blacklist_words"})


def option_names(options_cls: Type[OptionsT]) -> list[str]:
    """List the recognized option names of an options class, in declaration order."""
    return [f.name for f in fields(options_cls)]


def normalize_options(
    raw: Mapping[str, Any] | OptionsT | None,
    options_cls: Type[OptionsT],
    **overrides: Any,
) -> OptionsT:
    """Merge caller options with defaults, rejecting unknown keys.

    Args:
        raw: Caller options as a mapping, an already-built options record,
            or None for all defaults
        options_cls: ``StringOptions`` or ``NumberOptions``
        **overrides: Extra options; these win over entries in ``raw``

    Returns:
        The effective options record

    Raises:
        ConfigurationError: If any key is not a recognized option name, or a
            character or word list option is given a single string
    """
    if isinstance(raw, options_cls):
        if not overrides:
            return raw
        supplied: dict[str, Any] = {
            f.name: getattr(raw, f.name) for f in fields(options_cls)
        }
    elif raw is None:
        supplied = {}
    elif isinstance(raw, Mapping):
        supplied = dict(raw)
    else:
        raise ConfigurationError(
            f"Options must be a mapping or {options_cls.__name__}, "
            f"got {type(raw).__name__}",
            context={"options_type": type(raw).__name__},
        )
    supplied.update(overrides)

    available = option_names(options_cls)
    known = set(available)
    invalid = [key for key in supplied if key not in known]
    if invalid:
        raise ConfigurationError(
            "Invalid option(s):\n- "
            + "\n- ".join(str(key) for key in invalid)
            + "\n\nAvailable options:\n- "
            + "\n- ".join(available),
            context={"invalid_options": invalid, "available_options": available},
        )

    supplied = {
        key: value
        for key, value in supplied.items()
        if not (value is None and key not in _NULLABLE[options_cls])
    }
    for key in _SEQUENCE_OPTIONS.intersection(supplied):
        if isinstance(supplied[key], str):
            raise ConfigurationError(
                f"Option '{key}' must be a list of strings, not a single string",
                context={"option": key, "value": supplied[key]},
            )

    return options_cls(**supplied)
