"""Time units and locales.

This module provides:
    - TimeUnit: Fixed-length units (MILLISECOND through WEEK)
    - Locale: Weekday and unit names for the bundled languages
"""

from __future__ import annotations

from datekit.units.locale import EN, ZH, Locale, get_locale
from datekit.units.timeunit import TimeUnit

__all__: list[str] = [
    "TimeUnit",
    "Locale",
    "ZH",
    "EN",
    "get_locale",
]
