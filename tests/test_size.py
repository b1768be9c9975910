"""Tests for duration decomposition."""

import pytest

from datekit import DAY, HOUR, MINUTE, MS, SECOND, WEEK, TimeUnit, size
from datekit.errors import LocaleError


def _total(s):
    return (
        s.weeks * WEEK
        + s.days * DAY
        + s.hours * HOUR
        + s.minutes * MINUTE
        + s.seconds * SECOND
        + s.milliseconds * MS
    )


class TestSizeConstants:
    """Tests for unit size constants."""

    def test_values(self):
        """Unit sizes in milliseconds."""
        assert MS == 1
        assert SECOND == 1000
        assert MINUTE == 60_000
        assert HOUR == 3_600_000
        assert DAY == 86_400_000
        assert WEEK == 604_800_000


class TestSize:
    """Tests for size()."""

    def test_hours_minutes_seconds(self):
        """3750 seconds is 1 hour 2 minutes 30 seconds."""
        s = size(3_750_000)
        assert s.weeks == 0
        assert s.days == 0
        assert s.hours == 1
        assert s.minutes == 2
        assert s.seconds == 30
        assert s.milliseconds == 0
        assert s.value == 3_750_000

    def test_descriptors(self):
        """Descriptors are blank for zero counts."""
        s = size(3_750_000)
        assert s.desc.ww == ""
        assert s.desc.dd == ""
        assert s.desc.hh == "1小时"
        assert s.desc.mm == "2分"
        assert s.desc.ss == "30秒"
        assert s.desc.ms == ""

    def test_all_units(self):
        """Every unit populated."""
        value = 2 * WEEK + 3 * DAY + 4 * HOUR + 5 * MINUTE + 6 * SECOND + 7
        s = size(value)
        assert (s.weeks, s.days, s.hours, s.minutes, s.seconds, s.milliseconds) == (
            2,
            3,
            4,
            5,
            6,
            7,
        )
        assert s.desc.ww == "2周"
        assert s.desc.dd == "3天"
        assert s.desc.ms == "7毫秒"

    def test_zero(self):
        """Zero has no parts and no descriptors."""
        s = size(0)
        assert _total(s) == 0
        assert s.desc.hh == ""

    @pytest.mark.parametrize(
        "value",
        [1, 999, 1000, 59_999, HOUR - 1, DAY, WEEK - 1, WEEK, 3 * WEEK + DAY + 1, 123_456_789_012],
    )
    def test_parts_add_up(self, value):
        """Non-negative durations are reproduced exactly by their parts."""
        assert _total(size(value)) == value

    def test_unit_boundaries(self):
        """Exact unit sizes land in their own unit only."""
        assert size(WEEK).weeks == 1
        assert size(WEEK).days == 0
        assert size(DAY).days == 1
        assert size(DAY).hours == 0
        assert size(HOUR).hours == 1
        assert size(HOUR).minutes == 0

    def test_negative_uses_floor(self):
        """Negative values floor each truncated remainder."""
        s = size(-1)
        assert s.weeks == -1
        assert s.days == -1
        assert s.hours == -1
        assert s.minutes == -1
        assert s.seconds == -1
        assert s.milliseconds == -1
        assert s.desc.ms == ""

    def test_negative_whole_hour(self):
        """-1 hour keeps a zero remainder below hours."""
        s = size(-HOUR)
        assert s.weeks == -1
        assert s.days == -1
        assert s.hours == -1
        assert s.minutes == 0
        assert s.seconds == 0
        assert s.milliseconds == 0


class TestSizeLocale:
    """Tests for size() descriptor locales."""

    def test_english_plural(self):
        """English uses plural names above one."""
        s = size(2 * DAY + HOUR + 30 * SECOND, locale="en")
        assert s.desc.dd == "2 days"
        assert s.desc.hh == "1 hour"
        assert s.desc.ss == "30 seconds"
        assert s.desc.mm == ""

    def test_unknown_locale(self):
        """Unknown locale raises LocaleError."""
        with pytest.raises(LocaleError):
            size(1000, locale="fr")

    def test_descriptor_fields_follow_unit_keys(self):
        """Each descriptor field is named by its unit's key."""
        s = size(WEEK + DAY + HOUR + MINUTE + SECOND + MS, locale="en")
        assert {unit.key: getattr(s.desc, unit.key) for unit in TimeUnit} == {
            "ww": "1 week",
            "dd": "1 day",
            "hh": "1 hour",
            "mm": "1 minute",
            "ss": "1 second",
            "ms": "1 millisecond",
        }
