"""
Timeline Django Adapter Wiring
==============================
Constructs HttpApiDependencies for local/staging live runs.

This module is adapter-only glue:
- no core contract changes
- in-memory store (events live for the process lifetime only)
- resources and initial events come from settings.TIMELINE_RESOURCES
  and settings.TIMELINE_INITIAL_EVENTS, falling back to a dev pair
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone

from django.conf import settings

from timeline.config.settings import settings_from_mapping
from timeline.events.models import Event
from timeline.http_api.dependencies import HttpApiDependencies
from timeline.intents.dispatcher import build_dispatcher
from timeline.intents.ids import UuidIdProvider
from timeline.publishing.publisher import SnapshotPublisher
from timeline.resources.registry import Resource, ResourceRegistry

logger = logging.getLogger("timeline.adapters")

DEV_RESOURCE_A_ID = "a59b98d6-3a5d-492f-95eb-d8b9b51d7817"
DEV_RESOURCE_B_ID = "f1a3ed14-93ae-4090-9228-781734f64a5f"
DEV_EVENT_ID = "42ac857c-6836-4419-95d8-f37c364c9f38"

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: HttpApiDependencies | None = None


def _dev_resources() -> list[Resource]:
    return [
        Resource(id=DEV_RESOURCE_A_ID, title="Elliot"),
        Resource(id=DEV_RESOURCE_B_ID, title="Billie"),
    ]


def _dev_events(now: datetime) -> list[Event]:
    base = now.replace(minute=0, second=0, microsecond=0)
    return [
        Event(
            id=DEV_EVENT_ID,
            resource_id=DEV_RESOURCE_A_ID,
            start=base + timedelta(hours=2),
            end=base + timedelta(hours=6),
            title="An event to be drawn in the calendar timeline",
        )
    ]


def _build_registry() -> ResourceRegistry:
    configured = getattr(settings, "TIMELINE_RESOURCES", None)
    if configured is None:
        return ResourceRegistry(_dev_resources())
    return ResourceRegistry(Resource.from_dict(item) for item in configured)


def _build_initial_events() -> list[Event]:
    configured = getattr(settings, "TIMELINE_INITIAL_EVENTS", None)
    if configured is None:
        return _dev_events(datetime.now(timezone.utc))
    return [Event.from_dict(item) for item in configured]


def _log_publication(snapshot, outcome) -> None:
    logger.debug(
        f"Snapshot version {snapshot.version} published "
        f"({len(snapshot)} events, last intent: {outcome.kind})"
    )


def _create_dependencies() -> HttpApiDependencies:
    registry = _build_registry()
    publisher = SnapshotPublisher()
    publisher.subscribe(_log_publication)

    dispatcher = build_dispatcher(
        registry,
        _build_initial_events(),
        settings=settings_from_mapping(getattr(settings, "TIMELINE", None)),
        id_provider=UuidIdProvider(),
        publisher=publisher,
    )

    logger.info(
        f"Timeline wired: {len(registry)} resources, "
        f"{len(dispatcher.store.list())} events"
    )
    return HttpApiDependencies(
        registry=registry,
        dispatcher=dispatcher,
        publisher=publisher,
    )


def build_dependencies() -> HttpApiDependencies:
    """
    Lazy singleton wiring for adapter runtime.
    """
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES = _create_dependencies()
        return _DEPENDENCIES


def reset_dependencies() -> None:
    """Drop the wired singleton (tests and settings reloads)."""
    global _DEPENDENCIES
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None
