"""
Timeline Events - Public API
============================
Event model, immutable snapshots and the copy-on-write store.
"""

from timeline.events.models import Event, render_key
from timeline.events.snapshot import EventSnapshot
from timeline.events.store import EventStore, EventUpdater, StoreResult

__all__ = [
    "Event",
    "EventSnapshot",
    "EventStore",
    "EventUpdater",
    "StoreResult",
    "render_key",
]
