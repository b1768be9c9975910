"""TimeUnit enumeration for fixed-length time units.

This module provides the TimeUnit enum representing the time
measurement units Datekit works with, from milliseconds to weeks.
"""

from __future__ import annotations

from enum import Enum

from datekit._internal.constants import DAY, HOUR, MINUTE, MS, SECOND, WEEK


class TimeUnit(Enum):
    """Fixed-length time units.

    Each member knows its size in milliseconds and the short key used
    for it in duration descriptors.

    Note:
        Months and years have no fixed length and are not members;
        use add_months and add_years for calendar arithmetic.

    Examples:
        >>> TimeUnit.HOUR.milliseconds
        3600000

        >>> TimeUnit.WEEK.key
        'ww'
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"

    @property
    def milliseconds(self) -> int:
        """Return the number of milliseconds in one unit."""
        return _SIZES[self]

    @property
    def key(self) -> str:
        """Return the two-letter descriptor key (ww, dd, hh, mm, ss, ms)."""
        return _KEYS[self]


_SIZES: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: MS,
    TimeUnit.SECOND: SECOND,
    TimeUnit.MINUTE: MINUTE,
    TimeUnit.HOUR: HOUR,
    TimeUnit.DAY: DAY,
    TimeUnit.WEEK: WEEK,
}

_KEYS: dict[TimeUnit, str] = {
    TimeUnit.MILLISECOND: "ms",
    TimeUnit.SECOND: "ss",
    TimeUnit.MINUTE: "mm",
    TimeUnit.HOUR: "hh",
    TimeUnit.DAY: "dd",
    TimeUnit.WEEK: "ww",
}


__all__ = ["TimeUnit"]
