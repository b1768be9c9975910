"""Tests for the Instant class."""

from datetime import date, datetime, timedelta, timezone

import pytest

from datekit import Instant
from datekit.errors import OverflowError, ValidationError


class TestInstantConstruction:
    """Tests for Instant construction."""

    def test_fields(self):
        """Fields are exposed as given."""
        i = Instant(2013, 4, 29, 9, 31, 20, 123)
        assert i.year == 2013
        assert i.month == 4
        assert i.month_index == 3
        assert i.day == 29
        assert i.hour == 9
        assert i.minute == 31
        assert i.second == 20
        assert i.millisecond == 123

    def test_defaults(self):
        """Time fields default to midnight."""
        i = Instant(2013, 4, 29)
        assert (i.hour, i.minute, i.second, i.millisecond) == (0, 0, 0, 0)

    def test_day_of_week_sunday_first(self):
        """Sunday is 0 and Saturday is 6."""
        assert Instant(2013, 4, 28).day_of_week == 0
        assert Instant(2013, 4, 29).day_of_week == 1
        assert Instant(2013, 5, 4).day_of_week == 6

    def test_invalid_month(self):
        """Month 13 is rejected by the constructor."""
        with pytest.raises(ValidationError):
            Instant(2013, 13, 1)

    def test_invalid_day(self):
        """February 30th is rejected by the constructor."""
        with pytest.raises(ValidationError):
            Instant(2013, 2, 30)

    def test_invalid_millisecond(self):
        """Milliseconds above 999 are rejected."""
        with pytest.raises(ValidationError):
            Instant(2013, 1, 1, millisecond=1000)


class TestInstantConversion:
    """Tests for conversions to and from Instant."""

    def test_from_naive_datetime(self):
        """Naive datetimes are taken as local time."""
        i = Instant.from_datetime(datetime(2013, 4, 29, 9, 31, 20, 123456))
        assert i == Instant(2013, 4, 29, 9, 31, 20, 123)

    def test_from_date(self):
        """Dates become local midnight."""
        assert Instant.from_datetime(date(2013, 4, 29)) == Instant(2013, 4, 29)

    def test_from_aware_datetime(self):
        """Aware datetimes are converted to local time."""
        aware = datetime(2013, 4, 29, 9, 31, 20, tzinfo=timezone.utc)
        expected = aware.astimezone().replace(tzinfo=None)
        assert Instant.from_datetime(aware).to_datetime() == expected

    def test_to_datetime(self):
        """to_datetime returns the naive local datetime."""
        i = Instant(2013, 4, 29, 9, 31, 20, 5)
        assert i.to_datetime() == datetime(2013, 4, 29, 9, 31, 20, 5000)

    def test_epoch_round_trip(self):
        """Epoch milliseconds survive a round trip."""
        millis = 1_367_199_080_123
        assert Instant.from_epoch_millis(millis).epoch_millis == millis

    def test_epoch_zero(self):
        """Epoch zero matches the platform's local rendering."""
        expected = datetime.fromtimestamp(0)
        i = Instant.from_epoch_millis(0)
        assert i.to_datetime() == expected

    def test_epoch_negative(self):
        """Milliseconds before the epoch are supported."""
        i = Instant.from_epoch_millis(-1)
        assert i.epoch_millis == -1
        assert i.millisecond == 999

    def test_epoch_out_of_range(self):
        """Timestamps beyond year 9999 raise OverflowError."""
        with pytest.raises(OverflowError):
            Instant.from_epoch_millis(10**15 * 300)

    def test_now_is_current(self):
        """now() is close to datetime.now()."""
        before = datetime.now() - timedelta(seconds=1)
        now = Instant.now().to_datetime()
        after = datetime.now() + timedelta(seconds=1)
        assert before <= now <= after


class TestInstantComparison:
    """Tests for Instant equality and ordering."""

    def test_equal(self):
        assert Instant(2013, 4, 29) == Instant(2013, 4, 29)

    def test_not_equal_other_type(self):
        assert Instant(2013, 4, 29) != "2013-04-29"

    def test_ordering(self):
        early = Instant(2013, 4, 29)
        late = Instant(2013, 4, 29, millisecond=1)
        assert early < late
        assert late > early
        assert early <= Instant(2013, 4, 29)
        assert sorted([late, early]) == [early, late]

    def test_hashable(self):
        assert len({Instant(2013, 4, 29), Instant(2013, 4, 29)}) == 1

    def test_repr(self):
        assert repr(Instant(2013, 4, 29, 9, 31, 20)) == (
            "Instant(2013, 4, 29, 9, 31, 20, millisecond=0)"
        )

    def test_str(self):
        assert str(Instant(2013, 4, 29, 9, 31, 20, 7)) == "2013-04-29 09:31:20.007"
