"""
Timeline Events - Snapshot
==========================
An immutable, fully consistent view of the event collection.

Rules:
- Insertion order is preserved (render order)
- Event ids are unique within a snapshot (enforced at construction)
- A snapshot is never mutated; the store installs a new one
- version increases by one for every committed change
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from timeline.events.models import Event


@dataclass(frozen=True)
class EventSnapshot:
    """
    Point-in-time event collection.

    Fields:
        events:   Ordered tuple of events.
        version:  Commit counter of the store that produced it.
    """

    events: tuple[Event, ...] = ()
    version: int = 0
    _index: dict = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.events, tuple):
            raise TypeError("events must be a tuple.")

        if not isinstance(self.version, int) or self.version < 0:
            raise ValueError("version must be int >= 0.")

        index: dict[str, Event] = {}
        for event in self.events:
            if not isinstance(event, Event):
                raise TypeError(
                    f"Expected Event, got {type(event).__name__}."
                )
            if event.id in index:
                raise ValueError(f"Duplicate event id '{event.id}' in snapshot.")
            index[event.id] = event

        object.__setattr__(self, "_index", index)

    # ── reads ─────────────────────────────────────────────────

    def list(self) -> tuple[Event, ...]:
        return self.events

    def get(self, event_id: str) -> Optional[Event]:
        return self._index.get(event_id)

    def __contains__(self, event_id) -> bool:
        return event_id in self._index

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def composite_keys(self) -> frozenset[tuple[str, str]]:
        return frozenset(event.composite_key for event in self.events)

    def has_key(self, event_id: str, resource_id: str) -> bool:
        event = self._index.get(event_id)
        return event is not None and event.resource_id == resource_id

    def for_resource(self, resource_id: str) -> tuple[Event, ...]:
        return tuple(e for e in self.events if e.resource_id == resource_id)

    # ── derivation (copy-on-write) ────────────────────────────

    def with_replaced(self, updated: Event) -> "EventSnapshot":
        """New snapshot with the same-id event swapped; others kept by identity."""
        return EventSnapshot(
            events=tuple(
                updated if event.id == updated.id else event
                for event in self.events
            ),
            version=self.version + 1,
        )

    def with_appended(self, event: Event) -> "EventSnapshot":
        return EventSnapshot(
            events=self.events + (event,),
            version=self.version + 1,
        )

    def to_list(self) -> list[dict]:
        return [event.to_dict() for event in self.events]
