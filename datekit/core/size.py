"""Decomposition of a millisecond count into calendar-free units.

This module provides size(), which splits a duration into weeks, days,
hours, minutes, seconds and milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass

from datekit._internal.calendar import trunc_rem
from datekit._internal.constants import DAY, HOUR, MINUTE, MS, SECOND, WEEK
from datekit.units.locale import Locale, get_locale
from datekit.units.timeunit import TimeUnit


@dataclass(frozen=True)
class SizeDesc:
    """Text per unit, e.g. ``"1小时"``; empty when the count is not positive."""

    ww: str = ""
    dd: str = ""
    hh: str = ""
    mm: str = ""
    ss: str = ""
    ms: str = ""


@dataclass(frozen=True)
class Size:
    """A duration split into units.

    Attributes:
        weeks: Whole weeks.
        days: Days left after removing whole weeks.
        hours: Hours left after removing whole days.
        minutes: Minutes left after removing whole hours.
        seconds: Seconds left after removing whole minutes.
        milliseconds: Milliseconds left after removing whole seconds.
        value: The original millisecond count.
        desc: Text descriptors per unit.
    """

    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    value: int
    desc: SizeDesc


def _floor(value: int, unit: int) -> int:
    return int(value // unit)


def size(value: int, locale: str | Locale = "zh") -> Size:
    """Split a duration in milliseconds into weeks down to milliseconds.

    Each unit is taken from what remains after removing all larger units,
    so for non-negative input the parts add back up to value exactly.

    Remainders are truncated toward zero and quotients floored, which
    makes negative input yield mixed-sign parts: -1 gives weeks == -1 and
    milliseconds == -1.

    Args:
        value: Duration in milliseconds.
        locale: Locale for the descriptors ("zh" or "en").

    Returns:
        A Size record.

    Raises:
        LocaleError: If locale is unknown.

    Examples:
        >>> s = size(3750 * 1000)
        >>> s.hours, s.minutes, s.seconds
        (1, 2, 30)
        >>> s.desc.hh, s.desc.dd
        ('1小时', '')

        >>> size(90 * 60 * 1000, locale="en").desc.mm
        '30 minutes'
    """
    names = get_locale(locale)

    ww = _floor(value, WEEK)
    dd = _floor(trunc_rem(value, WEEK), DAY)
    hh = _floor(trunc_rem(value, DAY), HOUR)
    mm = _floor(trunc_rem(trunc_rem(value, DAY), HOUR), MINUTE)
    ss = _floor(trunc_rem(trunc_rem(trunc_rem(value, DAY), HOUR), MINUTE), SECOND)
    ms = _floor(
        trunc_rem(trunc_rem(trunc_rem(trunc_rem(value, DAY), HOUR), MINUTE), SECOND),
        MS,
    )

    counts = {
        TimeUnit.WEEK: ww,
        TimeUnit.DAY: dd,
        TimeUnit.HOUR: hh,
        TimeUnit.MINUTE: mm,
        TimeUnit.SECOND: ss,
        TimeUnit.MILLISECOND: ms,
    }
    desc = SizeDesc(**{unit.key: names.describe(count, unit) for unit, count in counts.items()})

    return Size(
        weeks=ww,
        days=dd,
        hours=hh,
        minutes=mm,
        seconds=ss,
        milliseconds=ms,
        value=value,
        desc=desc,
    )


__all__ = ["Size", "SizeDesc", "size"]
