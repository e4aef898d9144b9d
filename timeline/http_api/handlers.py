"""
Timeline HTTP API - Framework-Agnostic Handlers
===============================================
Pure handler functions over contracts and injected dependencies.
"""

from __future__ import annotations

from typing import Any, Union

from timeline.http_api.contracts import (
    DropHttpRequest,
    ResizeHttpRequest,
    SelectHttpRequest,
)
from timeline.http_api.dependencies import HttpApiDependencies
from timeline.http_api.errors import rejection_response, success_response
from timeline.presentation.lanes import build_timeline_view, render_event

IntentHttpRequest = Union[DropHttpRequest, ResizeHttpRequest, SelectHttpRequest]


def get_timeline(deps: HttpApiDependencies) -> dict[str, Any]:
    view = build_timeline_view(deps.registry, deps.dispatcher.store.snapshot)
    view["subscribers"] = deps.publisher.subscriber_count()
    return success_response(view)


def list_resources(deps: HttpApiDependencies) -> dict[str, Any]:
    return success_response({
        "resources": [resource.to_dict() for resource in deps.registry.list()],
    })


def _post_intent(
    request: IntentHttpRequest,
    deps: HttpApiDependencies,
) -> dict[str, Any]:
    outcome = deps.dispatcher.dispatch(request.to_intent())

    if outcome.is_rejected:
        return rejection_response(
            outcome.reason,
            extra_details={
                "kind": outcome.kind,
                "version": outcome.snapshot.version,
            },
        )

    return success_response({
        "kind": outcome.kind,
        "status": outcome.status.value,
        "version": outcome.snapshot.version,
        "event": render_event(outcome.event),
        "events": outcome.snapshot.to_list(),
    })


def post_drop(
    request: DropHttpRequest, deps: HttpApiDependencies
) -> dict[str, Any]:
    return _post_intent(request, deps)


def post_resize(
    request: ResizeHttpRequest, deps: HttpApiDependencies
) -> dict[str, Any]:
    return _post_intent(request, deps)


def post_select(
    request: SelectHttpRequest, deps: HttpApiDependencies
) -> dict[str, Any]:
    return _post_intent(request, deps)
