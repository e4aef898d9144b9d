"""
Timeline HTTP API - Contracts
=============================
Framework-agnostic request/response DTOs for timeline endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from timeline.intents.base import Drop, Resize, Select


@dataclass(frozen=True)
class DropHttpRequest:
    event_id: str
    start: datetime
    end: datetime
    target_resource_id: Optional[str] = None

    def __post_init__(self):
        if not self.event_id or not isinstance(self.event_id, str):
            raise ValueError("event_id must be a non-empty string.")
        if not isinstance(self.start, datetime):
            raise ValueError("start must be datetime.")
        if not isinstance(self.end, datetime):
            raise ValueError("end must be datetime.")
        if self.target_resource_id is not None and (
            not self.target_resource_id
            or not isinstance(self.target_resource_id, str)
        ):
            raise ValueError("target_resource_id must be a non-empty string or None.")

    def to_intent(self) -> Drop:
        return Drop(
            event_id=self.event_id,
            target_resource_id=self.target_resource_id,
            new_start=self.start,
            new_end=self.end,
        )


@dataclass(frozen=True)
class ResizeHttpRequest:
    event_id: str
    start: datetime
    end: datetime

    def __post_init__(self):
        if not self.event_id or not isinstance(self.event_id, str):
            raise ValueError("event_id must be a non-empty string.")
        if not isinstance(self.start, datetime):
            raise ValueError("start must be datetime.")
        if not isinstance(self.end, datetime):
            raise ValueError("end must be datetime.")

    def to_intent(self) -> Resize:
        return Resize(
            event_id=self.event_id,
            new_start=self.start,
            new_end=self.end,
        )


@dataclass(frozen=True)
class SelectHttpRequest:
    resource_id: str
    start_str: str
    end_str: str
    title: Optional[str] = None

    def __post_init__(self):
        if not self.resource_id or not isinstance(self.resource_id, str):
            raise ValueError("resource_id must be a non-empty string.")
        if not isinstance(self.start_str, str):
            raise ValueError("start must be a string.")
        if not isinstance(self.end_str, str):
            raise ValueError("end must be a string.")
        if self.title is not None and not isinstance(self.title, str):
            raise ValueError("title must be a string or None.")

    def to_intent(self) -> Select:
        return Select(
            resource_id=self.resource_id,
            start_str=self.start_str,
            end_str=self.end_str,
            title=self.title,
        )


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    ok: bool
    data: Any = None
    error: Optional[HttpApiErrorBody] = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "data": self.data}
        if self.error is None:
            raise ValueError("error must be set when ok is False.")
        return {"ok": False, "error": self.error.to_dict()}
