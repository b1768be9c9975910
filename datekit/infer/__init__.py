"""Flexible date/time parsing.

This module turns loosely formatted values into Instants.

Public API:
    parse: Parse a value, returning None when it is not recognized.
    coerce: Parse a value, raising ParseError when it is not recognized.

Strings are tried in three passes:
    1. ISO 8601 via dateutil's isoparser ("2013-04-29T09:31:20Z",
       "2013-04-29 09:31:20", "2013-04-29", ...)
    2. dateutil's general parser for text with month, weekday or zone
       names ("Mon, 29 Apr 2013 09:31:20 +0800", "April 29, 2013",
       "Mon Apr 29 2013 09:31:20 GMT+0800 (China Standard Time)").
       Results whose year or month would come from a default are
       rejected.
    3. Separator-based recognition of a date part, a time part, or both:
       yyyy-MM-dd, yyyy.MM.dd, yyyy/MM/dd, yyyy_MM_dd, HH:mm:ss and any
       date followed by a space and a time. Missing trailing parts are
       allowed ("2013-4", "9:30").

Examples:
    >>> from datekit.infer import parse
    >>> parse("2013/4/29 9:31:20")
    Instant(2013, 4, 29, 9, 31, 20, millisecond=0)

    >>> parse("not a date") is None
    True
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime

import dateutil.parser
from dateutil.parser import isoparser

from datekit import errors
from datekit._internal.calendar import compose
from datekit.core.instant import Instant
from datekit.infer._tokens import (
    DateParts,
    Part,
    TimeParts,
    parse_date_token,
    parse_time_token,
)

logger = logging.getLogger(__name__)

# ISO 8601 text is ASCII digits plus a few designators
_ISO_TEXT = re.compile(r"[0-9T:.,+\-Z ]+")
_ISO_PARSERS = (isoparser(sep="T"), isoparser(sep=" "))

# Trailing "(China Standard Time)" as written by Date.prototype.toString()
_ZONE_COMMENT = re.compile(r"\s*\([^()]*\)\s*$")
# dateutil reads "GMT+0800" POSIX-style as eight hours west of GMT
_GMT_OFFSET = re.compile(r"\b(?:GMT|UTC)(?=[+-]\d)")
# Year and month differ between the two, so a defaulted field shows up
_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 2, 1))

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse(value: object) -> Instant | None:
    """Parse value into an Instant.

    Years in strings are taken literally: "13-4-29" is the year 13, not
    1913.

    Args:
        value: An Instant, a datetime or date, epoch milliseconds as an
            int or float, or a string.

    Returns:
        The parsed Instant, or None if value is not recognized. This
        function never raises for bad input.

    Examples:
        >>> parse("2013-04-29 09:31:20").hour
        9

        >>> parse("April 29, 2013")
        Instant(2013, 4, 29, 0, 0, 0, millisecond=0)

        >>> parse(0) == Instant.from_epoch_millis(0)
        True

        >>> parse(True) is None
        True
    """
    if isinstance(value, Instant):
        return value

    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        return None

    try:
        if isinstance(value, date):
            return Instant.from_datetime(value)
        if isinstance(value, (int, float)):
            return _parse_epoch(value)
    except errors.OverflowError:
        logger.debug("value out of range: %r", value)
        return None

    if isinstance(value, str):
        return _parse_string(value)

    return None


def coerce(value: object) -> Instant:
    """Parse value into an Instant or fail.

    Every operation that needs a valid Instant goes through here.

    Raises:
        ParseError: If parse() does not recognize value.
    """
    instant = parse(value)
    if instant is None:
        raise errors.ParseError(f"unrecognized date/time value: {value!r}")
    return instant


def _parse_epoch(value: int | float) -> Instant | None:
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        value = math.trunc(value)
    return Instant.from_epoch_millis(value)


def _parse_string(text: str) -> Instant | None:
    for step in (_parse_iso, _parse_general):
        parsed = step(text)
        if parsed is not None:
            try:
                return Instant.from_datetime(parsed)
            except errors.OverflowError:
                logger.debug("date/time out of range: %r", text)
                return None
    return _parse_custom(text)


def _parse_iso(text: str) -> datetime | None:
    if not _ISO_TEXT.fullmatch(text):
        return None
    for parser in _ISO_PARSERS:
        try:
            return parser.isoparse(text)
        except (ValueError, OverflowError):
            continue
    logger.debug("not ISO 8601: %r", text)
    return None


def _parse_general(text: str) -> datetime | None:
    # Purely numeric text is left to the separator rules
    if not any(ch.isalpha() for ch in text):
        return None

    cleaned = _GMT_OFFSET.sub("", _ZONE_COMMENT.sub("", text))
    try:
        first, second = (
            dateutil.parser.parse(cleaned, default=default) for default in _DEFAULTS
        )
    except (ValueError, OverflowError):
        logger.debug("not a recognized date string: %r", text)
        return None

    if first != second:
        logger.debug("no year or month in %r", text)
        return None
    return first


def _parse_custom(text: str) -> Instant | None:
    segments = text.split(" ")
    head = segments[0]
    if not head:
        return None

    # A colon only ever belongs to the time part
    if head.find(":") > 0:
        date_text, time_text = None, head
    else:
        date_text = head
        time_text = segments[1] if len(segments) > 1 and segments[1] else None

    date_parts = parse_date_token(date_text) if date_text else None
    time_parts = parse_time_token(time_text) if time_text else None

    if (date_text and date_parts is None) or (time_text and time_parts is None):
        logger.debug("unrecognized date/time parts: %r", text)
        return None

    try:
        return _build(date_parts, time_parts)
    except ValueError:
        logger.debug("non-numeric date/time parts: %r", text)
        return None
    except errors.OverflowError:
        logger.debug("date/time out of range: %r", text)
        return None


def _number(part: Part) -> int:
    if isinstance(part, int):
        return part
    if not _INTEGER.fullmatch(part):
        raise ValueError(f"not an integer: {part!r}")
    return int(part)


def _build(date_parts: DateParts | None, time_parts: TimeParts | None) -> Instant:
    if date_parts is None:
        today = datetime.now()
        year, month_index, day = today.year, today.month - 1, today.day
    else:
        year = _number(date_parts.year)
        # An absent month means January; an explicit one is 1-based
        month_index = _number(date_parts.month) - 1 if date_parts.month else 0
        day = _number(date_parts.day)

    if time_parts is None:
        time_parts = TimeParts()

    return Instant._from_datetime(
        compose(
            year,
            month_index,
            day,
            _number(time_parts.hour),
            _number(time_parts.minute),
            _number(time_parts.second),
        )
    )


__all__ = [
    "parse",
    "coerce",
]
