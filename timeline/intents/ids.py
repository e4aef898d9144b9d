"""
Timeline Intent Layer - Event Id Providers
==========================================
Id generation is a capability injected into the dispatcher.
"""

from __future__ import annotations

import uuid
from typing import Iterable, Iterator, Protocol


class IdProvider(Protocol):
    def new_event_id(self) -> str:
        ...


class UuidIdProvider:
    """Production provider - random UUID4 strings."""

    def new_event_id(self) -> str:
        return str(uuid.uuid4())


class SequenceIdProvider:
    """
    Deterministic provider: evt-1, evt-2, ...

    Usage:
        ids = SequenceIdProvider(prefix="evt")
        ids.new_event_id()  # 'evt-1'
    """

    def __init__(self, prefix: str = "evt", start: int = 1):
        self._prefix = prefix
        self._next = start

    def new_event_id(self) -> str:
        value = f"{self._prefix}-{self._next}"
        self._next += 1
        return value


class ScriptedIdProvider:
    """
    Test provider that replays a fixed list of ids.

    Useful for forcing collisions. Raises RuntimeError once exhausted.
    """

    def __init__(self, ids: Iterable[str]):
        self._ids: Iterator[str] = iter(ids)
        self.issued: list[str] = []

    def new_event_id(self) -> str:
        try:
            value = next(self._ids)
        except StopIteration:
            raise RuntimeError("ScriptedIdProvider exhausted.") from None
        self.issued.append(value)
        return value
