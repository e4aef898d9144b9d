"""
Timeline Events - Event Store
=============================
Owns the current snapshot and the only two ways to change it.

Operations:
- list()                 current events in insertion order
- replace(id, updater)   swap one event for a new version
- insert(event)          append a new event

Rules:
- Copy-on-write: a snapshot handed out is never modified
- Failures are returned as StoreResult, never raised
- A replace that produces an equal event is not a commit
  (same snapshot, same version)
- The store does not validate invariants beyond id identity.
  Validation is the Validator's job; publishing is the Dispatcher's.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Iterable, Optional

from timeline.events.models import Event
from timeline.events.snapshot import EventSnapshot
from timeline.rejection import ReasonCode, RejectionReason

logger = logging.getLogger("timeline.store")

EventUpdater = Callable[[Event], Event]


# ══════════════════════════════════════════════════════════════
# STORE RESULT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class StoreResult:
    """
    Outcome of a store operation.

    Fields:
        snapshot:  Current snapshot after the operation
                   (unchanged on failure).
        event:     The stored event version (None on failure).
        reason:    RejectionReason on failure, None on success.

    Invariants:
        - reason is None  <=> event is not None
    """

    snapshot: EventSnapshot
    event: Optional[Event] = None
    reason: Optional[RejectionReason] = None

    def __post_init__(self):
        if not isinstance(self.snapshot, EventSnapshot):
            raise TypeError("snapshot must be EventSnapshot.")

        if self.reason is None and self.event is None:
            raise ValueError("Successful StoreResult must carry the event.")

        if self.reason is not None and self.event is not None:
            raise ValueError("Failed StoreResult must NOT carry an event.")

    @property
    def ok(self) -> bool:
        return self.reason is None


# ══════════════════════════════════════════════════════════════
# EVENT STORE
# ══════════════════════════════════════════════════════════════

class EventStore:
    """
    In-memory, snapshot-replacing event collection.

    Usage:
        store = EventStore(initial_events)
        result = store.replace("evt-1", lambda e: e.with_changes(title="x"))
        if result.ok:
            render(result.snapshot.list())
    """

    def __init__(self, events: Iterable[Event] = ()):
        self._snapshot = EventSnapshot(events=tuple(events))
        self._lock = Lock()

    # ── reads ─────────────────────────────────────────────────

    @property
    def snapshot(self) -> EventSnapshot:
        return self._snapshot

    def list(self) -> tuple[Event, ...]:
        return self._snapshot.list()

    def get(self, event_id: str) -> Optional[Event]:
        return self._snapshot.get(event_id)

    # ── writes ────────────────────────────────────────────────

    def replace(self, event_id: str, updater: EventUpdater) -> StoreResult:
        """
        Transform the event with `event_id` through `updater`.

        Returns:
            StoreResult with the new snapshot, or NOT_FOUND.

        Raises:
            TypeError:  updater did not return an Event.
            ValueError: updater changed the event id.
        """
        with self._lock:
            current = self._snapshot
            existing = current.get(event_id)

            if existing is None:
                logger.debug(f"replace: event '{event_id}' not found")
                return StoreResult(
                    snapshot=current,
                    reason=_not_found(event_id),
                )

            updated = updater(existing)

            if not isinstance(updated, Event):
                raise TypeError(
                    f"updater must return Event, got {type(updated).__name__}."
                )
            if updated.id != event_id:
                raise ValueError(
                    f"updater changed event id '{event_id}' "
                    f"to '{updated.id}'."
                )

            if updated == existing:
                return StoreResult(snapshot=current, event=existing)

            self._snapshot = current.with_replaced(updated)
            logger.debug(
                f"replace: event '{event_id}' -> "
                f"version {self._snapshot.version}"
            )
            return StoreResult(snapshot=self._snapshot, event=updated)

    def insert(self, event: Event) -> StoreResult:
        """
        Append a new event.

        Returns:
            StoreResult with the new snapshot, or DUPLICATE_ID.
        """
        if not isinstance(event, Event):
            raise TypeError(f"Expected Event, got {type(event).__name__}.")

        with self._lock:
            current = self._snapshot

            if event.id in current:
                logger.debug(f"insert: duplicate event id '{event.id}'")
                return StoreResult(
                    snapshot=current,
                    reason=RejectionReason(
                        code=ReasonCode.DUPLICATE_ID,
                        message=f"Event id '{event.id}' already exists.",
                        rule_name="event_store",
                        details={"event_id": event.id},
                    ),
                )

            self._snapshot = current.with_appended(event)
            logger.debug(
                f"insert: event '{event.id}' -> "
                f"version {self._snapshot.version}"
            )
            return StoreResult(snapshot=self._snapshot, event=event)


def _not_found(event_id: str) -> RejectionReason:
    return RejectionReason(
        code=ReasonCode.NOT_FOUND,
        message=f"Event '{event_id}' not found.",
        rule_name="event_store",
        details={"event_id": event_id},
    )
