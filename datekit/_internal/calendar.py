"""Calendar utilities for Datekit.

This module provides the low-level conversions behind Instant:
    - Composing local wall-clock fields with overflow into larger fields
    - Converting between local wall-clock time and Unix epoch milliseconds
    - Truncating remainder for duration decomposition

Field overflow follows the rules of the classic host date primitive:
month 12 is January of the next year, day 0 is the last day of the
previous month, second -1 is the last second of the previous minute, and
so on. Nothing is clamped.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil import tz

from datekit import errors
from datekit._internal.constants import MAX_YEAR, MIN_YEAR

LOCAL = tz.tzlocal()

_EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def trunc_rem(value: int, divisor: int) -> int:
    """Return the remainder of value / divisor truncated toward zero.

    The sign of the result follows the dividend, unlike Python's ``%``.

    Examples:
        >>> trunc_rem(7, 3)
        1
        >>> trunc_rem(-7, 3)
        -1
    """
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


def compose(
    year: int,
    month_index: int,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Build a naive local datetime from possibly out-of-range fields.

    Args:
        year: The year.
        month_index: Zero-based month; values outside 0-11 roll the year.
        day: Day of month; values outside the month roll into neighbours.
        hour: Hour; overflows into days.
        minute: Minute; overflows into hours.
        second: Second; overflows into minutes.
        millisecond: Millisecond; overflows into seconds.

    Returns:
        The normalized naive datetime.

    Raises:
        OverflowError: If the normalized year falls outside 1-9999.

    Examples:
        >>> compose(2013, 12, 1)
        datetime.datetime(2014, 1, 1, 0, 0)

        >>> compose(2013, 1, 31)  # February 31st
        datetime.datetime(2013, 3, 3, 0, 0)
    """
    # Python's divmod floors, so negative month indexes borrow from the year
    normalized_year, normalized_month = divmod(year * 12 + month_index, 12)
    if normalized_year < MIN_YEAR or normalized_year > MAX_YEAR:
        raise errors.OverflowError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {normalized_year}"
        )

    first_of_month = datetime(normalized_year, normalized_month + 1, 1)
    try:
        return first_of_month + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            milliseconds=millisecond,
        )
    except OverflowError as exc:
        raise errors.OverflowError(
            f"date out of range: {normalized_year}-{normalized_month + 1:02d} "
            f"day {day} {hour}:{minute}:{second}.{millisecond}"
        ) from exc


def to_epoch_millis(local: datetime) -> int:
    """Convert a naive local datetime to Unix epoch milliseconds."""
    aware = local.replace(tzinfo=LOCAL)
    return (aware - _EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(millis: int) -> datetime:
    """Convert Unix epoch milliseconds to a naive local datetime.

    Raises:
        OverflowError: If the result cannot be represented.
    """
    try:
        utc = _EPOCH + timedelta(milliseconds=millis)
        return utc.astimezone(LOCAL).replace(tzinfo=None)
    except (OverflowError, OSError, ValueError) as exc:
        raise errors.OverflowError(f"epoch milliseconds out of range: {millis}") from exc


def to_local(value: datetime) -> datetime:
    """Return value as naive local wall-clock time.

    Aware datetimes are converted to the local zone; naive ones are
    assumed to be local already.
    """
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=None)
    try:
        return value.astimezone(LOCAL).replace(tzinfo=None)
    except (OverflowError, OSError, ValueError) as exc:
        raise errors.OverflowError(f"datetime out of range: {value!r}") from exc


__all__ = [
    "LOCAL",
    "trunc_rem",
    "compose",
    "to_epoch_millis",
    "from_epoch_millis",
    "to_local",
]
