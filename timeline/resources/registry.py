"""
Timeline Resources - Resource Registry
======================================
The fixed set of lanes an event may be assigned to.

Rules:
- Configured once at start-up, read-only afterwards
- Resource ids are unique within the registry
- Registration order is lane order
- Events hold a weak reference (resource_id) only
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Resource:
    """
    A lane on the timeline.

    Fields:
        id:     Opaque stable identifier.
        title:  Display label (not unique).
    """

    id: str
    title: str

    def __post_init__(self):
        if not self.id or not isinstance(self.id, str):
            raise ValueError("resource id must be a non-empty string.")
        if not isinstance(self.title, str):
            raise ValueError("resource title must be a string.")

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title}

    @classmethod
    def from_dict(cls, data: dict) -> "Resource":
        return cls(id=data["id"], title=data.get("title", ""))


class ResourceRegistry:
    """
    Immutable lookup over configured resources.

    Usage:
        registry = ResourceRegistry([
            Resource(id="res-a", title="Elliot"),
            Resource(id="res-b", title="Billie"),
        ])
        registry.lookup("res-a")   # Resource
        registry.lookup("nope")    # None
    """

    def __init__(self, resources: Iterable[Resource] = ()):
        ordered = tuple(resources)
        by_id: dict[str, Resource] = {}

        for resource in ordered:
            if not isinstance(resource, Resource):
                raise TypeError(
                    f"Expected Resource, got {type(resource).__name__}."
                )
            if resource.id in by_id:
                raise ValueError(
                    f"Duplicate resource id '{resource.id}' in registry."
                )
            by_id[resource.id] = resource

        self._ordered = ordered
        self._by_id = by_id

    def lookup(self, resource_id: str) -> Optional[Resource]:
        """Return the resource, or None if not registered."""
        return self._by_id.get(resource_id)

    def list(self) -> tuple[Resource, ...]:
        """All resources in lane order."""
        return self._ordered

    def __contains__(self, resource_id) -> bool:
        return resource_id in self._by_id

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self):
        return iter(self._ordered)
