"""Internal constants for Datekit.

These constants define the unit sizes and limits used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Unit sizes in milliseconds
MS: int = 1
SECOND: int = 1000 * MS
MINUTE: int = 60 * SECOND
HOUR: int = 60 * MINUTE
DAY: int = 24 * HOUR  # 86_400_000
WEEK: int = 7 * DAY  # 604_800_000

MICROS_PER_MILLISECOND: int = 1_000

# Year limits of the underlying datetime primitive
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Date separators in priority order; the first one found wins
DATE_SEPARATORS: tuple[str, ...] = (".", "-", "/", "_")
TIME_SEPARATOR: str = ":"

# Format tokens in replacement order. A token that contains another
# token must come before it.
FORMAT_TOKENS: tuple[str, ...] = (
    "yyyy",
    "yy",
    "MM",
    "M",
    "dddd",
    "dd",
    "d",
    "HH",
    "H",
    "hh",
    "h",
    "mm",
    "m",
    "ss",
    "s",
    "tt",
    "t",
    "TT",
    "T",
)


__all__ = [
    "MS",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MICROS_PER_MILLISECOND",
    "MIN_YEAR",
    "MAX_YEAR",
    "DATE_SEPARATORS",
    "TIME_SEPARATOR",
    "FORMAT_TOKENS",
]
