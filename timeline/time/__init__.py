"""
Timeline Time - Public API
==========================
Instant parsing and the injectable clock.
"""

from timeline.time.clock import Clock, FixedClock, SystemClock
from timeline.time.instants import ensure_aware, format_instant, parse_instant

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "ensure_aware",
    "format_instant",
    "parse_instant",
]
