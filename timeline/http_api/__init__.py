"""
Timeline HTTP API - Public API
==============================
"""

from timeline.http_api.contracts import (
    DropHttpRequest,
    HttpApiErrorBody,
    HttpApiResponse,
    ResizeHttpRequest,
    SelectHttpRequest,
)
from timeline.http_api.dependencies import HttpApiDependencies
from timeline.http_api.errors import (
    INVALID_REQUEST,
    error_response,
    http_status_for,
    map_rejection_reason,
    rejection_response,
    success_response,
)
from timeline.http_api.handlers import (
    get_timeline,
    list_resources,
    post_drop,
    post_resize,
    post_select,
)

__all__ = [
    "DropHttpRequest",
    "ResizeHttpRequest",
    "SelectHttpRequest",
    "HttpApiErrorBody",
    "HttpApiResponse",
    "HttpApiDependencies",
    "INVALID_REQUEST",
    "error_response",
    "http_status_for",
    "map_rejection_reason",
    "rejection_response",
    "success_response",
    "get_timeline",
    "list_resources",
    "post_drop",
    "post_resize",
    "post_select",
]
