"""Predicate library: pure, single-concern checks used by the validators.

These are public so callers can compose their own checks, e.g.:

    ```python
    from fieldknobs.checks import text

    text.has_excessive_repetitive_chars("aaab", 2)
    # True
    ```
"""

from fieldknobs.checks import numeric, text

__all__ = ["numeric", "text"]
