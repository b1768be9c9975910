"""Reference clocks that follow a remote time source.

A ReferenceClock remembers how far a reference time (typically a
server's clock) was from local time when it was set, and applies that
offset to local time on every read. The reference time keeps advancing
with the local clock after it is set.

A process-wide default clock backs the module-level functions
set_reference() and get_reference(). Independent clocks can be created
directly, for example one per remote server or per test.

Examples:
    >>> from datekit.clock import ReferenceClock
    >>> clock = ReferenceClock()
    >>> clock.set("2000-01-01 00:00:00")
    >>> clock.get("yyyy")
    '2000'
"""

from __future__ import annotations

import logging
from typing import Callable

from datekit.arithmetic.ops import add
from datekit.core.instant import Instant
from datekit.errors import ReferenceTimeError
from datekit.formatting import format
from datekit.infer import parse

logger = logging.getLogger(__name__)


class ReferenceClock:
    """Local time shifted by a stored offset.

    Args:
        now: Zero-argument callable returning the current local Instant.
            Defaults to Instant.now; tests can pass a fixed source.

    Attributes:
        offset: Milliseconds between the reference time and local time,
            as measured by the last set() call. Starts at 0.
    """

    __slots__ = ("_now", "_offset")

    def __init__(self, now: Callable[[], Instant] | None = None) -> None:
        self._now = now or Instant.now
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def set(self, value: object) -> None:
        """Record value as the current reference time.

        Replaces any previously stored offset.

        Raises:
            ReferenceTimeError: If value cannot be parsed. The stored
                offset is left unchanged.
        """
        reference = parse(value)
        if reference is None:
            raise ReferenceTimeError(f"unrecognized reference time: {value!r}")

        self._offset = reference.epoch_millis - self._now().epoch_millis
        logger.debug("reference offset set to %d ms", self._offset)

    def get(self, formatter: str | None = None) -> Instant | str:
        """Return the current reference time.

        Args:
            formatter: Optional format string for the result.
        """
        current: Instant | str = self._now()
        if self._offset != 0:
            current = add(current, self._offset)
        if formatter:
            current = format(current, formatter)
        return current

    def reset(self) -> None:
        """Forget the stored offset."""
        self._offset = 0

    def __repr__(self) -> str:
        return f"ReferenceClock(offset={self._offset})"


default_clock = ReferenceClock()


def set_reference(value: object) -> None:
    """Set the reference time on the default clock.

    Raises:
        ReferenceTimeError: If value cannot be parsed.
    """
    default_clock.set(value)


def get_reference(formatter: str | None = None) -> Instant | str:
    """Return the reference time from the default clock."""
    return default_clock.get(formatter)


__all__ = [
    "ReferenceClock",
    "default_clock",
    "set_reference",
    "get_reference",
]
