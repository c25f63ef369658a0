"""Text helpers for callers post-processing scanned items.

The scanner never trims; these helpers let callers opt in.

Example:
    >>> from iniscan.utils.text import trim
    >>> trim("  KEY ")
    'KEY'
"""

from __future__ import annotations

# ASCII whitespace: space, tab, line feed, form feed, carriage return.
ASCII_WHITESPACE = " \t\n\x0c\r"


def trim(text: str) -> str:
    """Strip ASCII whitespace from both ends of ``text``.

    Non-ASCII whitespace (e.g. NO-BREAK SPACE) is kept, unlike ``str.strip()``.

    Examples:
        >>> trim(" SECTION ")
        'SECTION'
        >>> trim("\\u00a0value\\u00a0")
        '\\xa0value\\xa0'
    """
    return text.strip(ASCII_WHITESPACE)


def trim_value(value: str | None) -> str | None:
    """Trim a property value, keeping an absent value absent."""
    if value is None:
        return None
    return trim(value)
