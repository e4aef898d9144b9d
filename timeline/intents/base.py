"""
Timeline Intent Layer - Intent Contracts
========================================
Every schedule change begins as an Intent.

An Intent is a frozen declaration of what a gesture asked for.
It carries identifiers and instants - nothing else.

Kinds:
- Drop     drag-and-drop completed over a lane
- Resize   resize handle released
- Select   range marked on a lane (creates an event)

Rules:
- Immutable once created (frozen dataclass)
- No business logic inside
- Construction checks shape only; whether the change is allowed
  is decided by the dispatcher and validator

An Intent is NOT a change. It is a request awaiting judgment.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from timeline.time.instants import ensure_aware

INTENT_DROP = "drop"
INTENT_RESIZE = "resize"
INTENT_SELECT = "select"

VALID_INTENT_KINDS = frozenset({INTENT_DROP, INTENT_RESIZE, INTENT_SELECT})


def _require_id(value, field_name: str) -> None:
    if not value or not isinstance(value, str):
        raise ValueError(f"{field_name} must be a non-empty string.")


@dataclass(frozen=True)
class Drop:
    """
    Move an event to a lane and time range.

    target_resource_id=None keeps the event on its current lane
    (a time-only drag).
    """

    event_id: str
    target_resource_id: Optional[str]
    new_start: datetime
    new_end: datetime

    kind = INTENT_DROP

    def __post_init__(self):
        _require_id(self.event_id, "event_id")
        if self.target_resource_id is not None:
            _require_id(self.target_resource_id, "target_resource_id")
        object.__setattr__(self, "new_start", ensure_aware(self.new_start))
        object.__setattr__(self, "new_end", ensure_aware(self.new_end))


@dataclass(frozen=True)
class Resize:
    """Change an event's time range; the lane never changes."""

    event_id: str
    new_start: datetime
    new_end: datetime

    kind = INTENT_RESIZE

    def __post_init__(self):
        _require_id(self.event_id, "event_id")
        object.__setattr__(self, "new_start", ensure_aware(self.new_start))
        object.__setattr__(self, "new_end", ensure_aware(self.new_end))


@dataclass(frozen=True)
class Select:
    """
    Create an event spanning a selected range on a lane.

    start_str/end_str are kept as the widget sent them (ISO-8601);
    they are parsed during dispatch so a malformed value becomes an
    INVALID_INSTANT rejection instead of a crash. Datetimes are also
    accepted for programmatic callers.
    """

    resource_id: str
    start_str: Union[str, datetime]
    end_str: Union[str, datetime]
    title: Optional[str] = None
    editable: bool = True
    resource_editable: bool = True

    kind = INTENT_SELECT

    def __post_init__(self):
        _require_id(self.resource_id, "resource_id")
        for name in ("start_str", "end_str"):
            if not isinstance(getattr(self, name), (str, datetime)):
                raise TypeError(f"{name} must be str or datetime.")
        if self.title is not None and not isinstance(self.title, str):
            raise ValueError("title must be a string or None.")
        if not isinstance(self.editable, bool):
            raise TypeError("editable must be bool.")
        if not isinstance(self.resource_editable, bool):
            raise TypeError("resource_editable must be bool.")


Intent = Union[Drop, Resize, Select]
