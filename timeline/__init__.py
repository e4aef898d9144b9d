"""
Timeline - Resource Timeline Scheduling Engine
==============================================
Drop, resize and select intents in; consistent event snapshots out.
"""

from timeline.config.settings import TimelineSettings, settings_from_mapping
from timeline.events.models import Event, render_key
from timeline.events.snapshot import EventSnapshot
from timeline.events.store import EventStore, StoreResult
from timeline.intents.base import Drop, Resize, Select
from timeline.intents.dispatcher import MutationDispatcher, build_dispatcher
from timeline.intents.outcomes import IntentOutcome, IntentStatus
from timeline.publishing.publisher import SnapshotPublisher
from timeline.rejection import ReasonCode, RejectionReason
from timeline.resources.registry import Resource, ResourceRegistry
from timeline.validation.validator import ValidationResult, Validator

__all__ = [
    "TimelineSettings",
    "settings_from_mapping",
    "Event",
    "render_key",
    "EventSnapshot",
    "EventStore",
    "StoreResult",
    "Drop",
    "Resize",
    "Select",
    "MutationDispatcher",
    "build_dispatcher",
    "IntentOutcome",
    "IntentStatus",
    "SnapshotPublisher",
    "ReasonCode",
    "RejectionReason",
    "Resource",
    "ResourceRegistry",
    "ValidationResult",
    "Validator",
]
