"""
Timeline Events - Event Model
=============================
A timed block assigned to one resource lane.

Rules:
- Immutable (frozen dataclass); a mutation produces a new version
- start/end are timezone-aware instants (naive input is read as UTC)
- Construction checks field types only. Range and resource
  invariants belong to the Validator, so an invalid candidate can
  still be built, inspected and refused.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime

from timeline.time.instants import ensure_aware, format_instant, parse_instant


@dataclass(frozen=True)
class Event:
    """
    A scheduled event on a resource lane.

    Fields:
        id:                 Opaque identifier, unique within the store.
        resource_id:        Lane the event is assigned to.
        start:              Start instant (inclusive).
        end:                End instant (exclusive).
        title:              Display label.
        editable:           Whether move/resize may change start/end.
        resource_editable:  Whether a move may change resource_id.
    """

    id: str
    resource_id: str
    start: datetime
    end: datetime
    title: str = ""
    editable: bool = True
    resource_editable: bool = True

    def __post_init__(self):
        if not self.id or not isinstance(self.id, str):
            raise ValueError("event id must be a non-empty string.")

        if not self.resource_id or not isinstance(self.resource_id, str):
            raise ValueError("resource_id must be a non-empty string.")

        object.__setattr__(self, "start", ensure_aware(self.start))
        object.__setattr__(self, "end", ensure_aware(self.end))

        if not isinstance(self.title, str):
            raise ValueError("title must be a string.")

        if not isinstance(self.editable, bool):
            raise TypeError("editable must be bool.")

        if not isinstance(self.resource_editable, bool):
            raise TypeError("resource_editable must be bool.")

    # ── identity ──────────────────────────────────────────────

    @property
    def composite_key(self) -> tuple[str, str]:
        """(event id, resource id) - changes when the event changes lane."""
        return (self.id, self.resource_id)

    @property
    def render_key(self) -> str:
        """Stable DOM/test address of the rendered event."""
        return render_key(self.id, self.resource_id)

    # ── versions ──────────────────────────────────────────────

    def with_changes(self, **changes) -> "Event":
        """Return a new version with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def same_range(self, other: "Event") -> bool:
        return self.start == other.start and self.end == other.end

    # ── serialization ─────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "resource_id": self.resource_id,
            "start": format_instant(self.start),
            "end": format_instant(self.end),
            "title": self.title,
            "editable": self.editable,
            "resource_editable": self.resource_editable,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        return cls(
            id=data["id"],
            resource_id=data["resource_id"],
            start=parse_instant(data["start"]),
            end=parse_instant(data["end"]),
            title=data.get("title", ""),
            editable=data.get("editable", True),
            resource_editable=data.get("resource_editable", True),
        )


def render_key(event_id: str, resource_id: str) -> str:
    """
    event-42ac...-resource-a59b...

    Rendering collaborators tag each event with this key so automation
    can verify that an event moved to another lane.
    """
    return f"event-{event_id}-resource-{resource_id}"
