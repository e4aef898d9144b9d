"""
Timeline HTTP API - Dependencies
================================
Injected collaborators for handler wiring.
"""

from __future__ import annotations

from dataclasses import dataclass

from timeline.intents.dispatcher import MutationDispatcher
from timeline.publishing.publisher import SnapshotPublisher
from timeline.resources.registry import ResourceRegistry


@dataclass(frozen=True)
class HttpApiDependencies:
    registry: ResourceRegistry
    dispatcher: MutationDispatcher
    publisher: SnapshotPublisher
