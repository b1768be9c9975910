"""Bundled locales for descriptors and weekday names.

Two locales ship with Datekit:
    - zh: Chinese (default), no plural forms
    - en: English, singular/plural unit names

Locales are plain data; nothing here consults the operating system.
"""

from __future__ import annotations

from dataclasses import dataclass

from datekit.errors import LocaleError
from datekit.units.timeunit import TimeUnit


@dataclass(frozen=True)
class Locale:
    """Names used when describing durations and weekdays.

    Attributes:
        name: Locale identifier ("zh", "en").
        weekdays: Weekday names, Sunday first.
        units: (singular, plural) name per TimeUnit, week first.
        joiner: Text placed between a count and its unit name.

    Examples:
        >>> ZH.describe(3, TimeUnit.DAY)
        '3天'
        >>> EN.describe(1, TimeUnit.HOUR)
        '1 hour'
    """

    name: str
    weekdays: tuple[str, ...]
    units: tuple[tuple[str, str], ...]
    joiner: str = ""

    def weekday(self, day_of_week: int) -> str:
        """Return the weekday name for day_of_week (0 = Sunday)."""
        return self.weekdays[day_of_week]

    def describe(self, count: int, unit: TimeUnit) -> str:
        """Return "<count><unit>" or "" when count is not positive."""
        if count <= 0:
            return ""
        singular, plural = self.units[_UNIT_ORDER.index(unit)]
        return f"{count}{self.joiner}{singular if count == 1 else plural}"


_UNIT_ORDER: tuple[TimeUnit, ...] = (
    TimeUnit.WEEK,
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
    TimeUnit.MILLISECOND,
)

ZH = Locale(
    name="zh",
    weekdays=tuple("星期" + c for c in "日一二三四五六"),
    units=(
        ("周", "周"),
        ("天", "天"),
        ("小时", "小时"),
        ("分", "分"),
        ("秒", "秒"),
        ("毫秒", "毫秒"),
    ),
)

EN = Locale(
    name="en",
    weekdays=(
        "Sunday",
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
    ),
    units=(
        ("week", "weeks"),
        ("day", "days"),
        ("hour", "hours"),
        ("minute", "minutes"),
        ("second", "seconds"),
        ("millisecond", "milliseconds"),
    ),
    joiner=" ",
)

_LOCALES: dict[str, Locale] = {ZH.name: ZH, EN.name: EN}


def get_locale(locale: str | Locale) -> Locale:
    """Resolve a locale name (or pass a Locale through).

    Raises:
        LocaleError: If the name is not a bundled locale.
    """
    if isinstance(locale, Locale):
        return locale
    try:
        return _LOCALES[locale]
    except KeyError:
        raise LocaleError(
            f"unknown locale {locale!r}; expected one of {sorted(_LOCALES)}"
        ) from None


__all__ = ["Locale", "ZH", "EN", "get_locale"]
