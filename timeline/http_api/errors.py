"""
Timeline HTTP API - Error Mapping
=================================
Stable transport mapping for intent rejections and request failures.
"""

from __future__ import annotations

from typing import Any, Optional

from timeline.http_api.contracts import HttpApiErrorBody, HttpApiResponse
from timeline.rejection import ReasonCode, RejectionReason

INVALID_REQUEST = "INVALID_REQUEST"

_STATUS_BY_CODE = {
    INVALID_REQUEST: 400,
    ReasonCode.INVALID_INSTANT: 400,
    ReasonCode.NOT_FOUND: 404,
}
_REJECTION_STATUS = 409


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        ok=False,
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(data: Any) -> dict[str, Any]:
    return HttpApiResponse(ok=True, data=data).to_dict()


def map_rejection_reason(reason: RejectionReason) -> HttpApiErrorBody:
    details = dict(reason.details)
    details["rule_name"] = reason.rule_name
    return HttpApiErrorBody(
        code=reason.code,
        message=reason.message,
        details=details,
    )


def rejection_response(
    reason: RejectionReason,
    *,
    extra_details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    mapped = map_rejection_reason(reason)
    details = dict(mapped.details)
    if extra_details:
        details.update(extra_details)
    return error_response(
        code=mapped.code,
        message=mapped.message,
        details=details,
    )


def http_status_for(payload: dict[str, Any]) -> int:
    """200 for ok payloads; 400/404/409 by error code otherwise."""
    if payload.get("ok"):
        return 200
    code = payload.get("error", {}).get("code")
    return _STATUS_BY_CODE.get(code, _REJECTION_STATUS)
