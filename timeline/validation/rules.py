"""
Timeline Validation - Optional Rules
====================================
Extra rules that can be registered on a Validator.
None of them are active unless registered.
"""

from __future__ import annotations

from typing import Optional

from timeline.events.models import Event
from timeline.events.snapshot import EventSnapshot
from timeline.rejection import ReasonCode, RejectionReason
from timeline.time.instants import format_instant


def no_overlap_rule(
    candidate: Event,
    prior: Optional[Event],
    snapshot: EventSnapshot,
) -> Optional[RejectionReason]:
    """
    Refuse double-booking on a lane.

    Ranges are half-open [start, end): an event ending at 10:00 does
    not overlap one starting at 10:00. The candidate's own prior
    version is ignored.
    """
    for other in snapshot.for_resource(candidate.resource_id):
        if other.id == candidate.id:
            continue
        if candidate.start < other.end and other.start < candidate.end:
            return RejectionReason(
                code=ReasonCode.OVERLAPPING_EVENT,
                message=(
                    f"Event '{candidate.id}' overlaps event '{other.id}' "
                    f"on resource '{candidate.resource_id}'."
                ),
                rule_name="no_overlap_rule",
                details={
                    "event_id": candidate.id,
                    "conflicting_event_id": other.id,
                    "resource_id": candidate.resource_id,
                    "conflict_start": format_instant(other.start),
                    "conflict_end": format_instant(other.end),
                },
            )
    return None
