"""String predicates used by the string validator.

Each function is pure and tests a single concern. Functions that look for a
member of a set return the member found (or None) rather than a bool, so the
caller can report which character or word matched.
"""

import re
from typing import Any, Optional, Pattern, Sequence

# whitespace runs: to collapse or split on runs of whitespace by
#    x.sub(sep, text) or x.split(text)
WHITESPACE_RE = re.compile(r"\s+")


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_string_required(value: Optional[str], is_required: bool) -> bool:
    """True if the value is non-empty after trimming, or not required at all."""
    if not is_required:
        return True
    return value is not None and value.strip() != ""


def trim_string(value: Any) -> str:
    """Strip leading and trailing whitespace; non-strings become ""."""
    if is_string(value):
        return value.strip()
    return ""


def normalize_whitespace(value: str, separator: str = " ") -> str:
    """Trim, then replace each internal whitespace run with ``separator``."""
    return WHITESPACE_RE.sub(lambda _: separator, trim_string(value))


def is_string_length_at_least(value: str, min_length: int) -> bool:
    return len(value) >= min_length


def is_string_length_at_most(value: str, max_length: int) -> bool:
    return len(value) <= max_length


def _first_contained(value: str, candidates: Sequence[str]) -> Optional[str]:
    # Scan order follows the candidates, not the value. An empty candidate
    # never counts as found.
    for candidate in candidates:
        if candidate and candidate in value:
            return candidate
    return None


def contains_allowed_char(value: str, chars: Sequence[str]) -> Optional[str]:
    """Return the first of ``chars`` present in ``value``, or None."""
    return _first_contained(value, chars)


def contains_disallowed_char(value: str, chars: Sequence[str]) -> Optional[str]:
    """Return the first of ``chars`` present in ``value``, or None."""
    return _first_contained(value, chars)


def contains_blacklisted_word(value: str, blacklist: Sequence[str]) -> Optional[str]:
    """Return the first blacklist entry found in ``value``, ignoring case.

    The entry is returned exactly as the caller supplied it.
    """
    lowered = value.lower()
    for word in blacklist:
        if word and word.lower() in lowered:
            return word
    return None


def does_string_start_with(value: str, prefix: Optional[str]) -> bool:
    """True if ``value`` starts with ``prefix``; an absent prefix always passes."""
    return value.startswith(prefix) if prefix else True


def does_string_end_with(value: str, suffix: Optional[str]) -> bool:
    """True if ``value`` ends with ``suffix``; an absent suffix always passes."""
    return value.endswith(suffix) if suffix else True


def is_spaces_allowed(value: str, allow_spaces: bool) -> bool:
    return allow_spaces or " " not in value


def count_words(value: str) -> int:
    """Number of whitespace-separated words; blank input has zero words."""
    trimmed = value.strip()
    if not trimmed:
        return 0
    return len(WHITESPACE_RE.split(trimmed))


def is_word_count_above_threshold(value: str, min_words: int) -> bool:
    """True if ``value`` has at least ``min_words`` words."""
    return count_words(value) >= min_words


def is_word_count_below_threshold(value: str, max_words: int) -> bool:
    """True if ``value`` has at most ``max_words`` words."""
    return count_words(value) <= max_words


def has_excessive_repetitive_chars(value: str, max_repetitive_chars: float) -> bool:
    """True if some run of one repeated character is longer than the limit.

    Runs are maximal: "aaab" has a run of 3 "a"s. With a limit of 0 any
    non-empty string fails; a run of exactly ``limit + 1`` is the shortest
    failing run.
    """
    run_char = None
    run_length = 0
    for char in value:
        if char == run_char:
            run_length += 1
        else:
            run_char = char
            run_length = 1
        if run_length > max_repetitive_chars:
            return True
    return False


def matches_pattern(value: str, pattern: Pattern[str]) -> bool:
    """True if ``pattern`` matches anywhere in ``value``."""
    return pattern.search(value) is not None
