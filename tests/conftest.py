"""Pytest configuration and fixtures for Datekit tests."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

import pytest

# Pin the local zone before datekit reads it; the zone has had no
# daylight saving time since 1991.
os.environ["TZ"] = "Asia/Shanghai"
if hasattr(time, "tzset"):
    time.tzset()

# Add the parent directory to sys.path so datekit can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datekit import Instant  # noqa: E402
from datekit.clock import default_clock  # noqa: E402


class FixedNow:
    """Deterministic time source for ReferenceClock tests."""

    def __init__(self, instant: Instant) -> None:
        self.instant = instant

    def __call__(self) -> Instant:
        return self.instant

    def advance(self, milliseconds: int) -> None:
        self.instant = Instant.from_epoch_millis(self.instant.epoch_millis + milliseconds)


@pytest.fixture
def fixed_now() -> FixedNow:
    """A time source frozen at 2013-04-29 09:31:20 local time."""
    return FixedNow(Instant(2013, 4, 29, 9, 31, 20))


@pytest.fixture
def clean_default_clock():
    """Reset the process-wide reference clock around a test."""
    default_clock.reset()
    yield default_clock
    default_clock.reset()
