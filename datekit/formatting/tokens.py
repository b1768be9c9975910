"""Token-based formatting.

Format strings are plain text in which the following tokens are
replaced. Replacement is literal and global, one token at a time in the
order listed, so longer tokens are consumed before their prefixes.

Tokens:
    yyyy - 4-digit year (2013)
    yy   - year without its first two digits (13)
    MM   - 2-digit month (01-12)
    M    - month (1-12)
    dddd - weekday name (星期一, or Monday with the "en" locale)
    dd   - 2-digit day (01-31)
    d    - day (1-31)
    HH   - 2-digit hour, 24-hour (00-23)
    H    - hour, 24-hour (0-23)
    hh   - 2-digit hour, 12-hour
    h    - hour, 12-hour
    mm   - 2-digit minute (00-59)
    m    - minute (0-59)
    ss   - 2-digit second (00-59)
    s    - second (0-59)
    tt   - AM / PM
    t    - A / P
    TT   - 上午 / 下午
    T    - 上 / 下

Letters in the surrounding text that spell a token are replaced as well,
so literal words in a format string should avoid token letters.

Examples:
    >>> from datekit import Instant
    >>> from datekit.formatting import format
    >>> format(Instant(2013, 4, 29, 9, 31, 20), "yyyy年M月d日 H:mm:ss dddd")
    '2013年4月29日 9:31:20 星期一'
"""

from __future__ import annotations

from dataclasses import dataclass

from datekit._internal.constants import FORMAT_TOKENS
from datekit._internal.text import pad_left, replace_all
from datekit.core.instant import Instant
from datekit.infer import coerce
from datekit.units.locale import Locale, get_locale


@dataclass(frozen=True)
class FormatOptions:
    """Configuration for format().

    Attributes:
        locale: Locale used for the weekday name ("zh" or "en").
        standard_12h: Use the conventional 12-hour clock (midnight and
            noon shown as 12, noon is PM). The default keeps the legacy
            convention where hours 0-12 are AM and keep their 24-hour
            value, and only hours 13-23 have 12 subtracted.

    Examples:
        >>> opts = FormatOptions(standard_12h=True)
        >>> format(Instant(2013, 4, 29, 0, 5), "h:mm tt", opts)
        '12:05 AM'
    """

    locale: str | Locale = "zh"
    standard_12h: bool = False


_DEFAULT_OPTIONS = FormatOptions()

# Stands in for the weekday name until all tokens are replaced, so letters
# in names such as "Monday" are not treated as tokens.
_WEEKDAY_MARK = "\ue000"


def _twelve_hour(hour: int, standard: bool) -> tuple[int, bool]:
    """Return (12-hour value, is_am) for a 24-hour hour."""
    if standard:
        return (hour % 12 or 12), hour < 12
    is_am = hour <= 12
    return (hour if is_am else hour - 12), is_am


def _replacements(instant: Instant, options: FormatOptions) -> dict[str, str]:
    year = instant.year
    month = instant.month
    day = instant.day
    hour = instant.hour
    minute = instant.minute
    second = instant.second
    hour12, is_am = _twelve_hour(hour, options.standard_12h)

    return {
        "yyyy": pad_left(year, 4),
        "yy": str(year)[2:],
        "MM": pad_left(month, 2),
        "M": str(month),
        "dddd": _WEEKDAY_MARK,
        "dd": pad_left(day, 2),
        "d": str(day),
        "HH": pad_left(hour, 2),
        "H": str(hour),
        "hh": pad_left(hour12, 2),
        "h": str(hour12),
        "mm": pad_left(minute, 2),
        "m": str(minute),
        "ss": pad_left(second, 2),
        "s": str(second),
        "tt": "AM" if is_am else "PM",
        "t": "A" if is_am else "P",
        "TT": "上午" if is_am else "下午",
        "T": "上" if is_am else "下",
    }


def format(  # noqa: A001
    value: object,
    formatter: str,
    options: FormatOptions | None = None,
) -> str:
    """Format a date/time value using token replacement.

    Args:
        value: Anything parse() accepts.
        formatter: Format string containing tokens.
        options: Locale and 12-hour clock settings.

    Returns:
        The formatted string.

    Raises:
        ParseError: If value cannot be parsed.

    Examples:
        >>> format("2013-04-29 09:31:20", "yyyy-MM-dd")
        '2013-04-29'

        >>> format("2013-04-29 15:04:05", "hh:mm:ss TT")
        '03:04:05 下午'
    """
    instant = coerce(value)
    options = options or _DEFAULT_OPTIONS
    weekday = get_locale(options.locale).weekday(instant.day_of_week)
    replacements = _replacements(instant, options)

    result = formatter
    for token in FORMAT_TOKENS:
        result = replace_all(result, token, replacements[token])
    return replace_all(result, _WEEKDAY_MARK, weekday)


def format_now(formatter: str, options: FormatOptions | None = None) -> str:
    """Format the current local time.

    Examples:
        >>> len(format_now("yyyy-MM-dd"))
        10
    """
    return format(Instant.now(), formatter, options)


__all__ = ["FormatOptions", "format", "format_now"]
