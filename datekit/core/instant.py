"""Instant class representing a local point in time.

This module provides the Instant class, a millisecond-resolution
wall-clock value in the local timezone.
"""

from __future__ import annotations

from datetime import date, datetime

from datekit._internal.calendar import (
    from_epoch_millis,
    to_epoch_millis,
    to_local,
)
from datekit._internal.constants import MICROS_PER_MILLISECOND
from datekit.errors import ValidationError


class Instant:
    """A point in time with millisecond precision.

    Instant holds local wall-clock fields. It is immutable; every
    arithmetic operation returns a new Instant.

    Months are 1-based through ``month`` and 0-based through
    ``month_index``. Days of the week count from Sunday (0) to
    Saturday (6).

    Examples:
        >>> i = Instant(2013, 4, 29, 9, 31, 20)
        >>> i.year, i.month, i.day
        (2013, 4, 29)
        >>> i.month_index
        3
        >>> i.day_of_week  # Monday
        1
    """

    __slots__ = ("_dt",)

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        """Create an Instant from in-range local fields.

        Raises:
            ValidationError: If any field is out of range.
        """
        if not 0 <= millisecond <= 999:
            raise ValidationError(f"millisecond must be between 0 and 999, got {millisecond}")
        try:
            self._dt = datetime(
                year,
                month,
                day,
                hour,
                minute,
                second,
                millisecond * MICROS_PER_MILLISECOND,
            )
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

    @classmethod
    def _from_datetime(cls, value: datetime) -> Instant:
        """Wrap a naive local datetime without validation."""
        instance = object.__new__(cls)
        instance._dt = value.replace(
            microsecond=value.microsecond // MICROS_PER_MILLISECOND * MICROS_PER_MILLISECOND
        )
        return instance

    @classmethod
    def now(cls) -> Instant:
        """Return the current local time."""
        return cls._from_datetime(datetime.now())

    @classmethod
    def from_epoch_millis(cls, millis: int) -> Instant:
        """Create an Instant from Unix epoch milliseconds.

        Raises:
            OverflowError: If millis is outside the representable range.
        """
        return cls._from_datetime(from_epoch_millis(millis))

    @classmethod
    def from_datetime(cls, value: date) -> Instant:
        """Create an Instant from a datetime or date.

        Aware datetimes are converted to local time. A plain date gives
        local midnight. Sub-millisecond digits are dropped.
        """
        if isinstance(value, datetime):
            return cls._from_datetime(to_local(value))
        return cls._from_datetime(datetime(value.year, value.month, value.day))

    @property
    def year(self) -> int:
        return self._dt.year

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return self._dt.month

    @property
    def month_index(self) -> int:
        """Return the month (0-11)."""
        return self._dt.month - 1

    @property
    def day(self) -> int:
        return self._dt.day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def millisecond(self) -> int:
        return self._dt.microsecond // MICROS_PER_MILLISECOND

    @property
    def day_of_week(self) -> int:
        """Return the day of the week (0 = Sunday, 6 = Saturday)."""
        return (self._dt.weekday() + 1) % 7

    @property
    def epoch_millis(self) -> int:
        """Return Unix epoch milliseconds for this local time."""
        return to_epoch_millis(self._dt)

    def to_datetime(self) -> datetime:
        """Return the equivalent naive local datetime."""
        return self._dt

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt == other._dt

    def __lt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt < other._dt

    def __le__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt <= other._dt

    def __gt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt > other._dt

    def __ge__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._dt >= other._dt

    def __hash__(self) -> int:
        return hash(self._dt)

    def __repr__(self) -> str:
        return (
            f"Instant({self.year}, {self.month}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}, "
            f"millisecond={self.millisecond})"
        )

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}."
            f"{self.millisecond:03d}"
        )


__all__ = ["Instant"]
