"""Predefined regular expressions and symbolic pattern resolution.

A string validator's ``regex_pattern`` option accepts either a compiled
``re.Pattern`` or the name of one of the presets below, e.g.:

    ```python
    validate_string("2024-01-31", {"regex_pattern": "DATE_YYYY_MM_DD"})
    ```

Names are resolved through ``PREDEFINED_PATTERNS``, a registry built once at
import time and never modified afterwards.
"""

import re
from typing import Dict, Iterator, List, Mapping, Pattern, Union

from fieldknobs.exceptions import ConfigurationError, UnknownPatternError

PatternLike = Union[Pattern[str], str]


_PRESETS: Dict[str, Pattern[str]] = {
    # letters and digits
    "LETTERS_ONLY": re.compile(r"^[A-Za-z]+$"),
    "LETTERS_WITH_SPACES": re.compile(r"^[A-Za-z\s]+$"),
    "LETTERS_NUMBERS_WITH_SPACES": re.compile(r"^[A-Za-z0-9\s]+$"),
    "NUMBERS_ONLY": re.compile(r"^[0-9]+$"),
    "ALPHANUMERIC": re.compile(r"^[A-Za-z0-9]+$"),
    "ALPHABET_UPPERCASE_ONLY": re.compile(r"^[A-Z]+$"),
    "ALPHABET_LOWERCASE_ONLY": re.compile(r"^[a-z]+$"),
    "ALPHABET_MIXED_CASE": re.compile(r"^[A-Za-z]+$"),
    "NUMBERS_WITH_DECIMALS": re.compile(r"^-?\d+(\.\d+)?$"),
    "ALPHA_NUMERIC_WITH_SPECIAL_CHARACTERS": re.compile(
        r"^[a-zA-Z0-9!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~]+$"
    ),
    "USERNAME": re.compile(r"^[a-zA-Z0-9_]+$"),
    # contact details
    "EMAIL_ADDRESS": re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$"),
    "PHONE_NUMBER": re.compile(r"^\+?[0-9]{1,3}[-. (]?\d{3}[-. )]?\d{3}[-. ]?\d{4}$"),
    "US_PHONE_NUMBER": re.compile(
        r"^(1\s?)?(\([0-9]{3}\)|[0-9]{3})[\s.-]?[0-9]{3}[\s.-]?[0-9]{4}$"
    ),
    "INTERNATIONAL_PHONE_NUMBER": re.compile(r"^\+(?:[0-9] ?){6,14}[0-9]$"),
    "POSTAL_CODE_US": re.compile(r"(^\d{5}$)|(^\d{5}-\d{4}$)"),
    "UK_POSTAL_CODE": re.compile(r"^[A-Za-z]{1,2}\d{1,2}[A-Za-z]?\s*\d[A-Za-z]{2}$"),
    "URL": re.compile(r"^(https?|ftp)://[^\s/$.?#]+\.[^\s]*$"),
    # colors
    "HEX_COLOR_CODE": re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"),
    "HTML_COLOR_CODE": re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"),
    "HTML_HEXADECIMAL_COLOR": re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}\b"),
    # dates and times
    "TIME_24_HOURS_FORMAT": re.compile(r"^(0[0-9]|1[0-9]|2[0-3]):[0-5][0-9]$"),
    "TIME_12_HOURS_FORMAT": re.compile(r"^(0?[1-9]|1[0-2]):[0-5][0-9]\s?(AM|PM)$"),
    "DATE_MM_DD_YYYY": re.compile(r"^(0[1-9]|1[0-2])/(0[1-9]|[12]\d|3[01])/\d{4}$"),
    "DATE_YYYY_MM_DD": re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$"),
    "DATE_DD_MM_YYYY": re.compile(r"^(0[1-9]|[12]\d|3[01])-(0[1-9]|1[0-2])-\d{4}$"),
    # network and identifiers
    "IP_ADDRESS": re.compile(r"^\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b$"),
    "MAC_ADDRESS": re.compile(r"^([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})$"),
    "CREDIT_CARD": re.compile(r"^\d{4} \d{4} \d{4} \d{4}$"),
    "US_SSN": re.compile(r"^(?!000|666|9\d{2})\d{3}-(?!00)\d{2}-(?!0000)\d{4}$"),
    # html fragments
    "HTML_TAG": re.compile(r"^<([a-z]+)([^<]+)*(?:>(.*)</\1>|\s+/>)$"),
    "HTML_COMMENT": re.compile(r"<!--[\s\S]*?-->"),
    "HTML_IMAGE_TAG": re.compile(r"<img\s+(?:[^>]*?\s+)?src=([\"'])(.*?)\1"),
    "HTML_LINK_TAG": re.compile(r"<a\s+(?:[^>]*?\s+)?href=([\"'])(.*?)\1"),
    "HTML_SCRIPT_TAG": re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE),
    "HTML_STYLE_TAG": re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE),
}


class PatternRegistry:
    """Read-only registry of named, precompiled regular expressions.

    Lookups never mutate the registry, so a single instance can be shared
    freely between threads.

    Args:
        name: Registry name, used in error context
        patterns: Mapping of symbolic name to compiled pattern

    Example:
        ```python
        registry = PatternRegistry("presets", {"DIGITS": re.compile(r"^\\d+$")})
        registry.get("DIGITS").search("123")
        registry.has("LETTERS")
        # False
        ```
    """

    def __init__(self, name: str, patterns: Mapping[str, Pattern[str]]):
        self._name = name
        self._items: Dict[str, Pattern[str]] = dict(patterns)

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def get(self, key: str) -> Pattern[str]:
        """Get a pattern by its symbolic name.

        Args:
            key: Symbolic pattern name, e.g. ``"EMAIL_ADDRESS"``

        Returns:
            The compiled pattern

        Raises:
            UnknownPatternError: If no pattern is registered under ``key``
        """
        try:
            return self._items[key]
        except KeyError:
            raise UnknownPatternError(key, available=self.list_keys()) from None

    def has(self, key: str) -> bool:
        """Check whether a symbolic name is registered."""
        return key in self._items

    def list_keys(self) -> List[str]:
        """List all registered names in registration order."""
        return list(self._items.keys())

    def count(self) -> int:
        """Number of registered patterns."""
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"PatternRegistry(name={self._name!r}, count={len(self._items)})"


PREDEFINED_PATTERNS = PatternRegistry("predefined_patterns", _PRESETS)


def resolve_pattern(
    pattern: PatternLike, registry: PatternRegistry = PREDEFINED_PATTERNS
) -> Pattern[str]:
    """Turn a ``regex_pattern`` option into a compiled pattern.

    Args:
        pattern: A compiled pattern (returned unchanged) or a symbolic name
        registry: Registry to look names up in

    Returns:
        The compiled pattern

    Raises:
        UnknownPatternError: If ``pattern`` is a name the registry does not know
        ConfigurationError: If ``pattern`` is neither a string nor a compiled pattern
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return registry.get(pattern)
    raise ConfigurationError(
        f"regex_pattern must be a compiled pattern or a predefined pattern name, "
        f"got {type(pattern).__name__}",
        context={"pattern": pattern},
    )
