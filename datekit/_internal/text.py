"""String helpers used by the formatter.

This module is not part of the public API.
"""

from __future__ import annotations


def pad_left(value: object, width: int, fill: str = "0") -> str:
    """Pad the string form of value on the left up to width.

    Values already at least width characters long are returned unchanged.

    Examples:
        >>> pad_left(7, 2)
        '07'
        >>> pad_left(2013, 2)
        '2013'
    """
    return str(value).rjust(width, fill)


def replace_all(text: str, old: str, new: object) -> str:
    """Replace every literal occurrence of old in text with str(new)."""
    if not old:
        return text
    return text.replace(old, str(new))


__all__ = ["pad_left", "replace_all"]
