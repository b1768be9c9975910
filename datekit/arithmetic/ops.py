"""Date arithmetic on local wall-clock fields.

Every function parses its input, leaves it untouched and returns a new
Instant, or a formatted string when a formatter is given.

Fixed-length units delegate down one unit at a time:
    add_weeks -> add_days -> add_hours -> add_minutes -> add_seconds -> add

Calendar units:
    add_years -> add_months

Overflow is carried through the fields rather than clamped: adding one
month to January 31st gives March 3rd (March 2nd in a leap year).
"""

from __future__ import annotations

import math

from datekit._internal.calendar import compose
from datekit.core.instant import Instant
from datekit.errors import ValidationError
from datekit.formatting import format
from datekit.infer import coerce


def _whole(amount: int | float) -> int:
    if isinstance(amount, float) and not math.isfinite(amount):
        raise ValidationError(f"amount must be a finite number, got {amount!r}")
    return math.trunc(amount)


def _finish(result: Instant, formatter: str | None) -> Instant | str:
    if formatter:
        return format(result, formatter)
    return result


def add(
    value: object,
    milliseconds: int | float,
    formatter: str | None = None,
) -> Instant | str:
    """Add milliseconds to a date/time value.

    The delta is added to the millisecond field and carried or borrowed
    through seconds, minutes, hours, days, months and years.

    Args:
        value: Anything parse() accepts.
        milliseconds: Milliseconds to add; may be negative.
        formatter: Optional format string for the result.

    Returns:
        A new Instant, or a string when formatter is given.

    Raises:
        ParseError: If value cannot be parsed.
        ValidationError: If the amount is NaN or infinite.
        OverflowError: If the result falls outside years 1-9999.

    Examples:
        >>> add("2013-04-29 09:31:20", 2000, "HH:mm:ss")
        '09:31:22'

        >>> add("2013-01-01 00:00:00", -1)
        Instant(2012, 12, 31, 23, 59, 59, millisecond=999)
    """
    instant = coerce(value)
    result = compose(
        instant.year,
        instant.month_index,
        instant.day,
        instant.hour,
        instant.minute,
        instant.second,
        instant.millisecond + _whole(milliseconds),
    )
    return _finish(Instant._from_datetime(result), formatter)


def add_seconds(value: object, seconds: int | float, formatter: str | None = None) -> Instant | str:
    """Add seconds to a date/time value.

    Examples:
        >>> add_seconds("2013-04-29 09:31:20", 90, "HH:mm:ss")
        '09:32:50'
    """
    return add(value, seconds * 1000, formatter)


def add_minutes(value: object, minutes: int | float, formatter: str | None = None) -> Instant | str:
    """Add minutes to a date/time value."""
    return add_seconds(value, minutes * 60, formatter)


def add_hours(value: object, hours: int | float, formatter: str | None = None) -> Instant | str:
    """Add hours to a date/time value.

    Examples:
        >>> add_hours("2013-04-29 09:31:20", 35, "yyyy-MM-dd HH:mm")
        '2013-04-30 20:31'
    """
    return add_minutes(value, hours * 60, formatter)


def add_days(value: object, days: int | float, formatter: str | None = None) -> Instant | str:
    """Add days to a date/time value."""
    return add_hours(value, days * 24, formatter)


def add_weeks(value: object, weeks: int | float, formatter: str | None = None) -> Instant | str:
    """Add weeks to a date/time value."""
    return add_days(value, weeks * 7, formatter)


def add_months(value: object, months: int | float, formatter: str | None = None) -> Instant | str:
    """Add months to a date/time value.

    The month index moves by months and rolls the year; the day of month
    is kept and overflows into the following month when it does not
    exist in the target month.

    Args:
        value: Anything parse() accepts.
        months: Months to add; may be negative. Fractions are truncated.
        formatter: Optional format string for the result.

    Raises:
        ParseError: If value cannot be parsed.
        ValidationError: If the amount is NaN or infinite.
        OverflowError: If the result falls outside years 1-9999.

    Examples:
        >>> add_months("2013-01-31", 1, "yyyy-MM-dd")
        '2013-03-03'

        >>> add_months("2013-11-15", 3, "yyyy-MM-dd")
        '2014-02-15'
    """
    instant = coerce(value)
    result = compose(
        instant.year,
        instant.month_index + _whole(months),
        instant.day,
        instant.hour,
        instant.minute,
        instant.second,
        instant.millisecond,
    )
    return _finish(Instant._from_datetime(result), formatter)


def add_years(value: object, years: int | float, formatter: str | None = None) -> Instant | str:
    """Add years to a date/time value.

    Examples:
        >>> add_years("2012-02-29", 1, "yyyy-MM-dd")
        '2013-03-01'
    """
    return add_months(value, years * 12, formatter)


__all__ = [
    "add",
    "add_seconds",
    "add_minutes",
    "add_hours",
    "add_days",
    "add_weeks",
    "add_months",
    "add_years",
]
