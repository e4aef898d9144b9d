"""
Timeline Config - Calendar Settings
===================================
Calendar-wide switches that gate gestures before validation.

These mirror the widget options of a resource timeline:
- editable                 drag/resize allowed at all
- event_resource_editable  drag may change lane
- selectable               selecting a range may create events
- allow_overlap            double-booking permitted on a lane

Settings are data, not code: hosts load them from a mapping
(e.g. the TIMELINE dict in Django settings).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

DEFAULT_EVENT_TITLE = "New event"
DEFAULT_ID_RETRY_LIMIT = 16


@dataclass(frozen=True)
class TimelineSettings:
    """
    Fields:
        editable:                 Calendar-level drag/resize switch.
        event_resource_editable:  Calendar-level lane-change switch.
        selectable:               Calendar-level create switch.
        allow_overlap:            If False, the no-overlap rule is registered.
        default_event_title:      Title for created events without one.
        id_retry_limit:           Max id regenerations on collision.
    """

    editable: bool = True
    event_resource_editable: bool = True
    selectable: bool = True
    allow_overlap: bool = True
    default_event_title: str = DEFAULT_EVENT_TITLE
    id_retry_limit: int = DEFAULT_ID_RETRY_LIMIT

    def __post_init__(self) -> None:
        for name in (
            "editable",
            "event_resource_editable",
            "selectable",
            "allow_overlap",
        ):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be bool.")

        if not isinstance(self.default_event_title, str):
            raise ValueError("default_event_title must be a string.")

        if (
            not isinstance(self.id_retry_limit, int)
            or isinstance(self.id_retry_limit, bool)
            or self.id_retry_limit < 1
        ):
            raise ValueError(
                f"id_retry_limit must be int >= 1, got {self.id_retry_limit!r}."
            )


def settings_from_mapping(
    data: Optional[Mapping[str, Any]],
) -> TimelineSettings:
    """
    Build settings from a plain mapping.

    Keys are matched case-insensitively against TimelineSettings
    field names; unknown keys raise ValueError so typos do not pass
    silently.
    """
    if not data:
        return TimelineSettings()

    known = {f.name for f in fields(TimelineSettings)}
    kwargs: dict[str, Any] = {}

    for key, value in data.items():
        name = str(key).lower()
        if name not in known:
            raise ValueError(
                f"Unknown timeline setting '{key}'. "
                f"Must be one of: {sorted(known)}"
            )
        kwargs[name] = value

    return TimelineSettings(**kwargs)
