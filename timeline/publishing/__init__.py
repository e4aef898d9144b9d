"""
Timeline Publishing - Public API
================================
The store decides truth. The publisher lets the renderer hear it.
"""

from timeline.publishing.errors import DuplicateSubscriberError, PublishingError
from timeline.publishing.publisher import SnapshotPublisher, SnapshotSubscriber

__all__ = [
    "DuplicateSubscriberError",
    "PublishingError",
    "SnapshotPublisher",
    "SnapshotSubscriber",
]
