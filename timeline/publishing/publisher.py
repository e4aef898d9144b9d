"""
Timeline Publishing - Snapshot Publisher
========================================
Delivers every published snapshot to the rendering subscribers.

Publish behavior:
1. Execute subscribers sequentially, in registration order
2. Catch subscriber exceptions per handler
3. Log failure
4. Continue to next subscriber
5. NEVER roll back the store

A subscriber failure must NOT:
- Break delivery to other subscribers
- Change the published snapshot
- Turn an accepted intent into a rejected one
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Callable

from timeline.events.snapshot import EventSnapshot
from timeline.publishing.errors import DuplicateSubscriberError, PublishingError

logger = logging.getLogger("timeline.publishing")

# (snapshot, outcome) -> None
SnapshotSubscriber = Callable[[EventSnapshot, Any], None]


class SnapshotPublisher:
    """
    In-memory registry of snapshot subscribers.

    Usage:
        publisher = SnapshotPublisher()
        publisher.subscribe(widget.rerender)
        publisher.publish(store.snapshot, outcome)
    """

    def __init__(self):
        self._subscribers: list[SnapshotSubscriber] = []
        self._lock = Lock()

    def subscribe(self, handler: SnapshotSubscriber) -> None:
        if not callable(handler):
            raise PublishingError(
                f"Handler must be callable, got {type(handler)}."
            )

        handler_name = getattr(handler, "__qualname__", str(handler))

        with self._lock:
            for existing in self._subscribers:
                if existing is handler:
                    raise DuplicateSubscriberError(handler_name)
            self._subscribers.append(handler)

        logger.debug(f"Snapshot subscriber registered: {handler_name}")

    def unsubscribe(self, handler: SnapshotSubscriber) -> bool:
        """Remove a handler. Returns False if it was not registered."""
        with self._lock:
            for i, existing in enumerate(self._subscribers):
                if existing is handler:
                    del self._subscribers[i]
                    return True
        return False

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, snapshot: EventSnapshot, outcome: Any = None) -> dict:
        """
        Deliver a snapshot to all subscribers.

        Returns:
            {
                'version': int,
                'subscribers_notified': int,
                'subscribers_failed': int,
                'failures': list[dict]
            }

        This method NEVER raises for subscriber failures.
        """
        with self._lock:
            subscribers = list(self._subscribers)

        result = {
            "version": snapshot.version,
            "subscribers_notified": 0,
            "subscribers_failed": 0,
            "failures": [],
        }

        for handler in subscribers:
            handler_name = getattr(handler, "__qualname__", str(handler))

            try:
                handler(snapshot, outcome)
                result["subscribers_notified"] += 1

            except Exception as exc:
                result["subscribers_failed"] += 1
                result["failures"].append({
                    "handler": handler_name,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                })

                logger.error(
                    f"Snapshot subscriber failed: {handler_name} "
                    f"(version: {snapshot.version}): {exc}",
                    exc_info=True,
                )

        logger.debug(
            f"Published snapshot version {snapshot.version}: "
            f"{result['subscribers_notified']} notified, "
            f"{result['subscribers_failed']} failed"
        )
        return result
