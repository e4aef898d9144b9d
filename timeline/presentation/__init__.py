"""
Timeline Presentation - Public API
==================================
"""

from timeline.presentation.lanes import (
    build_lanes,
    build_timeline_view,
    render_event,
    render_keys,
)

__all__ = [
    "build_lanes",
    "build_timeline_view",
    "render_event",
    "render_keys",
]
