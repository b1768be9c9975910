"""Core temporal types.

This module provides the fundamental types:
    - Instant: Local point in time with millisecond precision
    - Size: A millisecond duration split into weeks down to milliseconds
"""

from __future__ import annotations

from datekit.core.instant import Instant
from datekit.core.size import Size, SizeDesc, size

__all__: list[str] = [
    "Instant",
    "Size",
    "SizeDesc",
    "size",
]
