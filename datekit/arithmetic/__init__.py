"""Date arithmetic.

Fixed-length units (from datekit.arithmetic.ops):
    - add: Add milliseconds
    - add_seconds, add_minutes, add_hours, add_days, add_weeks

Calendar units (from datekit.arithmetic.ops):
    - add_months: Move the month, letting the day overflow
    - add_years: Move by twelve months per year

All functions accept anything parse() accepts and an optional format
string for the result.
"""

from __future__ import annotations

from datekit.arithmetic.ops import (
    add,
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_seconds,
    add_weeks,
    add_years,
)

__all__ = [
    "add",
    "add_seconds",
    "add_minutes",
    "add_hours",
    "add_days",
    "add_weeks",
    "add_months",
    "add_years",
]
