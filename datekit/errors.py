"""Datekit exception hierarchy.

All Datekit-specific exceptions inherit from DatekitError.
"""

from __future__ import annotations


class DatekitError(Exception):
    """Base exception for all Datekit errors."""

    pass


class ParseError(DatekitError):
    """Failed to turn a value into an Instant.

    Raised by operations that need a valid Instant and were given
    something ``parse`` rejects. ``parse`` itself returns None instead.

    Examples:
        - "not a date"
        - "2013-xx-01"
        - an object that is neither a string, number nor datetime
    """

    pass


class ValidationError(DatekitError):
    """Invalid field values.

    Raised when an Instant is constructed directly from out-of-range
    fields, or when arithmetic is given an amount that is not a finite
    number. Parsing and arithmetic normalize overflowing fields instead.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Millisecond value outside 0-999
        - NaN or infinite amount passed to add()
    """

    pass


class ReferenceTimeError(ParseError):
    """Invalid reference time passed to a ReferenceClock.

    Kept distinct from a silent None so that a bad reference time can
    never overwrite the stored offset.
    """

    pass


class OverflowError(DatekitError):
    """Arithmetic result outside the representable range.

    Examples:
        - Adding 10000 years to 2024-01-01
        - Subtracting a day from 0001-01-01
    """

    pass


class LocaleError(DatekitError):
    """Unknown locale name."""

    pass


__all__ = [
    "DatekitError",
    "ValidationError",
    "ParseError",
    "ReferenceTimeError",
    "OverflowError",
    "LocaleError",
]
