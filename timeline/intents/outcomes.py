"""
Timeline Intent Layer - Intent Outcome Contract
===============================================
Every Intent produces exactly one Outcome.

ACCEPTED -> change committed; snapshot is the new store state.
REJECTED -> nothing changed; reason is mandatory.

Rules:
- Exactly one outcome per intent
- Outcome is immutable (frozen dataclass)
- REJECTED must contain reason (RejectionReason)
- ACCEPTED must NOT contain reason and must carry the stored event
- snapshot is always the store state after the decision
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from timeline.events.models import Event
from timeline.events.snapshot import EventSnapshot
from timeline.rejection import RejectionReason


class IntentStatus(Enum):
    """Binary decision. No middle ground."""
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class IntentOutcome:
    """
    Result of dispatching an intent.

    Fields:
        intent:       The intent that was judged.
        status:       ACCEPTED or REJECTED.
        snapshot:     Store snapshot after the decision.
        event:        Stored event version (ACCEPTED only).
        reason:       RejectionReason (REJECTED only).
        occurred_at:  When the decision was made.
    """

    intent: Any
    status: IntentStatus
    snapshot: EventSnapshot
    occurred_at: datetime
    event: Optional[Event] = None
    reason: Optional[RejectionReason] = None

    def __post_init__(self):
        if not isinstance(self.status, IntentStatus):
            raise ValueError(
                f"status must be IntentStatus, got {type(self.status).__name__}."
            )

        if not isinstance(self.snapshot, EventSnapshot):
            raise ValueError("snapshot must be EventSnapshot.")

        if self.status == IntentStatus.REJECTED:
            if self.reason is None:
                raise ValueError(
                    "REJECTED outcome must include a RejectionReason. "
                    "No silent rejections allowed."
                )
            if self.event is not None:
                raise ValueError("REJECTED outcome must NOT carry an event.")

        if self.status == IntentStatus.ACCEPTED:
            if self.reason is not None:
                raise ValueError(
                    "ACCEPTED outcome must NOT include a RejectionReason."
                )
            if self.event is None:
                raise ValueError("ACCEPTED outcome must carry the stored event.")

        if not isinstance(self.occurred_at, datetime):
            raise ValueError("occurred_at must be a datetime.")

    @property
    def is_accepted(self) -> bool:
        return self.status == IntentStatus.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status == IntentStatus.REJECTED

    @property
    def kind(self) -> str:
        return getattr(self.intent, "kind", type(self.intent).__name__)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "status": self.status.value,
            "version": self.snapshot.version,
            "event": None if self.event is None else self.event.to_dict(),
            "reason": None if self.reason is None else self.reason.to_dict(),
            "occurred_at": self.occurred_at.isoformat(),
        }
