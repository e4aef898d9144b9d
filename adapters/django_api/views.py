"""
Timeline Django Adapter Views
=============================
Pass-through HTTP views over timeline/http_api handlers.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from adapters.django_api.wiring import build_dependencies
from timeline.http_api.contracts import (
    DropHttpRequest,
    ResizeHttpRequest,
    SelectHttpRequest,
)
from timeline.http_api.errors import INVALID_REQUEST, error_response, http_status_for
from timeline.http_api.handlers import (
    get_timeline,
    list_resources,
    post_drop,
    post_resize,
    post_select,
)
from timeline.time.instants import parse_instant


def _json(payload: dict[str, Any]) -> JsonResponse:
    return JsonResponse(payload, status=http_status_for(payload))


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_response(code=code, message=message, details={}),
        status=status,
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except Exception as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _required_str(body: dict[str, Any], key: str) -> str:
    value = body[key]
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string.")
    return value


def _optional_str(body: dict[str, Any], key: str) -> Optional[str]:
    value = body.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string.")
    return value


def _dispatch_write(write_handler, request_contract_factory, request: HttpRequest):
    try:
        body = _parse_json_body(request)
        contract = request_contract_factory(body)
    except KeyError as exc:
        return _json_error(INVALID_REQUEST, f"{exc.args[0]} is required.")
    except (ValueError, TypeError) as exc:
        return _json_error(INVALID_REQUEST, str(exc))

    return _json(write_handler(contract, build_dependencies()))


# ══════════════════════════════════════════════════════════════
# READS
# ══════════════════════════════════════════════════════════════

@require_GET
def timeline_view(request: HttpRequest) -> JsonResponse:
    return _json(get_timeline(build_dependencies()))


@require_GET
def resources_list_view(request: HttpRequest) -> JsonResponse:
    return _json(list_resources(build_dependencies()))


# ══════════════════════════════════════════════════════════════
# INTENTS
# ══════════════════════════════════════════════════════════════

@csrf_exempt
@require_POST
def drop_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_write(
        post_drop,
        lambda body: DropHttpRequest(
            event_id=_required_str(body, "event_id"),
            target_resource_id=_optional_str(body, "target_resource_id"),
            start=parse_instant(_required_str(body, "start")),
            end=parse_instant(_required_str(body, "end")),
        ),
        request,
    )


@csrf_exempt
@require_POST
def resize_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_write(
        post_resize,
        lambda body: ResizeHttpRequest(
            event_id=_required_str(body, "event_id"),
            start=parse_instant(_required_str(body, "start")),
            end=parse_instant(_required_str(body, "end")),
        ),
        request,
    )


@csrf_exempt
@require_POST
def select_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_write(
        post_select,
        lambda body: SelectHttpRequest(
            resource_id=_required_str(body, "resource_id"),
            start_str=_required_str(body, "start"),
            end_str=_required_str(body, "end"),
            title=_optional_str(body, "title"),
        ),
        request,
    )
