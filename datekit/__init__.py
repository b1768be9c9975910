"""Datekit: parse, format and shift local dates and times.

Datekit works on local wall-clock time with millisecond precision. It
accepts loosely formatted input, formats with simple letter tokens and
keeps a reference clock for following a remote time source.

Core Types:
    Instant: Local point in time (year down to millisecond)
    Size: A millisecond duration split into weeks down to milliseconds

Units:
    TimeUnit: MILLISECOND, SECOND, MINUTE, HOUR, DAY, WEEK
    Locale: Weekday and unit names ("zh" and "en")

Functions:
    size: Split a millisecond duration into units
    parse: Parse a value, returning None on failure
    coerce: Parse a value, raising ParseError on failure
    format, format_now: Token-based formatting
    add, add_seconds, ..., add_years: Date arithmetic
    set_reference, get_reference: Default reference clock

Constants:
    MS, SECOND, MINUTE, HOUR, DAY, WEEK: Unit sizes in milliseconds

Exceptions:
    DatekitError: Base exception
    ValidationError: Invalid Instant fields
    ParseError: Unrecognized date/time value
    ReferenceTimeError: Unrecognized reference time
    OverflowError: Result outside years 1-9999
    LocaleError: Unknown locale

Example:
    >>> import datekit
    >>> datekit.format("2013-04-29 09:31:20", "yyyy年M月d日 dddd")
    '2013年4月29日 星期一'
    >>> datekit.add_days("2013-04-29", 3, "yyyy-MM-dd")
    '2013-05-02'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Constants
from datekit._internal.constants import DAY, HOUR, MINUTE, MS, SECOND, WEEK

# Core types
from datekit.core.instant import Instant
from datekit.core.size import Size, SizeDesc, size

# Units
from datekit.units.locale import Locale
from datekit.units.timeunit import TimeUnit

# Exceptions
from datekit.errors import (
    DatekitError,
    LocaleError,
    OverflowError,
    ParseError,
    ReferenceTimeError,
    ValidationError,
)

# Parsing and formatting
from datekit.infer import coerce, parse
from datekit.formatting import FormatOptions, format, format_now

# Arithmetic
from datekit.arithmetic import (
    add,
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_seconds,
    add_weeks,
    add_years,
)

# Reference clock
from datekit.clock import ReferenceClock, get_reference, set_reference

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Constants
    "MS",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    # Core types
    "Instant",
    "Size",
    "SizeDesc",
    "size",
    # Units
    "Locale",
    "TimeUnit",
    # Exceptions
    "DatekitError",
    "ValidationError",
    "ParseError",
    "ReferenceTimeError",
    "OverflowError",
    "LocaleError",
    # Parsing and formatting
    "parse",
    "coerce",
    "format",
    "format_now",
    "FormatOptions",
    # Arithmetic
    "add",
    "add_seconds",
    "add_minutes",
    "add_hours",
    "add_days",
    "add_weeks",
    "add_months",
    "add_years",
    # Reference clock
    "ReferenceClock",
    "set_reference",
    "get_reference",
]
