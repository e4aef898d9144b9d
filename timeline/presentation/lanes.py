"""
Timeline Presentation - Lane View
=================================
Projects a snapshot onto the registry's lanes for rendering.

Each rendered event carries its render key
(event-{event_id}-resource-{resource_id}), the address automation
uses to check which lane an event sits on.

Read-only. Never touches the store.
"""

from __future__ import annotations

from typing import Any

from timeline.events.snapshot import EventSnapshot
from timeline.resources.registry import ResourceRegistry


def render_event(event) -> dict[str, Any]:
    data = event.to_dict()
    data["render_key"] = event.render_key
    return data


def build_lanes(
    registry: ResourceRegistry,
    snapshot: EventSnapshot,
) -> list[dict[str, Any]]:
    """
    One lane per resource, in registry order; events in snapshot order.

    Events whose resource is not registered are not rendered. The
    validator prevents this for committed events.
    """
    lanes = []
    for resource in registry.list():
        lanes.append({
            "resource": resource.to_dict(),
            "events": [
                render_event(event)
                for event in snapshot.for_resource(resource.id)
            ],
        })
    return lanes


def build_timeline_view(
    registry: ResourceRegistry,
    snapshot: EventSnapshot,
) -> dict[str, Any]:
    return {
        "version": snapshot.version,
        "resources": [resource.to_dict() for resource in registry.list()],
        "lanes": build_lanes(registry, snapshot),
        "events": snapshot.to_list(),
    }


def render_keys(snapshot: EventSnapshot) -> frozenset[str]:
    return frozenset(event.render_key for event in snapshot)
