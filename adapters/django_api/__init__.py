"""
Timeline Django HTTP adapter.
Thin framework glue over timeline/http_api handlers.
"""

from adapters.django_api.wiring import (
    DEV_EVENT_ID,
    DEV_RESOURCE_A_ID,
    DEV_RESOURCE_B_ID,
    build_dependencies,
    reset_dependencies,
)

__all__ = [
    "DEV_EVENT_ID",
    "DEV_RESOURCE_A_ID",
    "DEV_RESOURCE_B_ID",
    "build_dependencies",
    "reset_dependencies",
]
