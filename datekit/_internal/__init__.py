"""Internal utilities for Datekit.

This module contains private implementation details:
    - Unit sizes and token tables
    - Field composition with overflow
    - Epoch conversions
    - String helpers for the formatter

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datekit._internal.calendar import compose, from_epoch_millis, to_epoch_millis
from datekit._internal.text import pad_left, replace_all

__all__: list[str] = [
    "compose",
    "from_epoch_millis",
    "to_epoch_millis",
    "pad_left",
    "replace_all",
]
