"""
Timeline Intent Layer - Public API
==================================
Gesture intents in, consistent snapshots out.
"""

from timeline.intents.base import (
    INTENT_DROP,
    INTENT_RESIZE,
    INTENT_SELECT,
    VALID_INTENT_KINDS,
    Drop,
    Intent,
    Resize,
    Select,
)
from timeline.intents.dispatcher import MutationDispatcher, build_dispatcher
from timeline.intents.ids import (
    IdProvider,
    ScriptedIdProvider,
    SequenceIdProvider,
    UuidIdProvider,
)
from timeline.intents.outcomes import IntentOutcome, IntentStatus

__all__ = [
    "INTENT_DROP",
    "INTENT_RESIZE",
    "INTENT_SELECT",
    "VALID_INTENT_KINDS",
    "Drop",
    "Intent",
    "Resize",
    "Select",
    "MutationDispatcher",
    "build_dispatcher",
    "IdProvider",
    "ScriptedIdProvider",
    "SequenceIdProvider",
    "UuidIdProvider",
    "IntentOutcome",
    "IntentStatus",
]
