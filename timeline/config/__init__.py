"""
Timeline Config - Public API
============================
"""

from timeline.config.settings import (
    DEFAULT_EVENT_TITLE,
    DEFAULT_ID_RETRY_LIMIT,
    TimelineSettings,
    settings_from_mapping,
)

__all__ = [
    "DEFAULT_EVENT_TITLE",
    "DEFAULT_ID_RETRY_LIMIT",
    "TimelineSettings",
    "settings_from_mapping",
]
