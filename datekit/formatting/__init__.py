"""Token-based formatting of Instants.

Functions:
    format: Format a date/time value with a token string.
    format_now: Format the current local time with a token string.

Examples:
    >>> from datekit.formatting import format
    >>> format("2013-04-29 09:31:20", "yyyy/MM/dd HH:mm")
    '2013/04/29 09:31'
"""

from __future__ import annotations

from datekit.formatting.tokens import FormatOptions, format, format_now

__all__: list[str] = [
    "FormatOptions",
    "format",
    "format_now",
]
