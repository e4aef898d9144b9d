"""
Timeline Resources - Public API
===============================
"""

from timeline.resources.registry import Resource, ResourceRegistry

__all__ = [
    "Resource",
    "ResourceRegistry",
]
