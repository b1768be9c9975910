"""Separator-based splitting of date-only and time-only strings.

A date token looks like ``2013-04-29`` (or with ``.``, ``/``, ``_``) and
a time token like ``09:31:20``. Trailing parts may be missing. Nothing
here validates ranges or converts to numbers.

Internal module - use parse() from datekit.infer instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from datekit._internal.constants import DATE_SEPARATORS, TIME_SEPARATOR

Part = str | int


@dataclass(frozen=True)
class DateParts:
    """Raw date segments; month 0 means no month was given."""

    year: Part
    month: Part = 0
    day: Part = 1


@dataclass(frozen=True)
class TimeParts:
    """Raw time segments."""

    hour: Part = 0
    minute: Part = 0
    second: Part = 0


def _find_separator(s: str, candidates: tuple[str, ...]) -> str | None:
    # A separator at index 0 does not count
    for separator in candidates:
        if s.find(separator) > 0:
            return separator
    return None


def _segment(segments: list[str], index: int, default: int) -> Part:
    if index < len(segments) and segments[index]:
        return segments[index]
    return default


def parse_date_token(s: str) -> DateParts | None:
    """Split a date string on its first recognized separator.

    Separators are tried in the order ``.``, ``-``, ``/``, ``_``; the first
    one present splits the whole string.

    Returns:
        DateParts, or None if no separator is present.

    Examples:
        >>> parse_date_token("2013-04-29")
        DateParts(year='2013', month='04', day='29')

        >>> parse_date_token("2013/4")
        DateParts(year='2013', month='4', day=1)

        >>> parse_date_token("20130429") is None
        True
    """
    separator = _find_separator(s, DATE_SEPARATORS)
    if separator is None:
        return None

    segments = s.split(separator)
    return DateParts(
        year=segments[0],
        month=_segment(segments, 1, 0),
        day=_segment(segments, 2, 1),
    )


def parse_time_token(s: str) -> TimeParts | None:
    """Split a time string on ``:``.

    Returns:
        TimeParts, or None if there is no colon after the first character.

    Examples:
        >>> parse_time_token("09:31:20")
        TimeParts(hour='09', minute='31', second='20')

        >>> parse_time_token("9:05")
        TimeParts(hour='9', minute='05', second=0)
    """
    if _find_separator(s, (TIME_SEPARATOR,)) is None:
        return None

    segments = s.split(TIME_SEPARATOR)
    return TimeParts(
        hour=_segment(segments, 0, 0),
        minute=_segment(segments, 1, 0),
        second=_segment(segments, 2, 0),
    )


__all__ = ["DateParts", "TimeParts", "parse_date_token", "parse_time_token"]
