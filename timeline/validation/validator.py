"""
Timeline Validation - Candidate Validator
=========================================
Pure invariant checks for a fully formed candidate event.

Checks (in order, first failure wins):
1. resource_id resolves in the ResourceRegistry   -> UNKNOWN_RESOURCE
2. start < end                                    -> INVALID_RANGE
3. range changed while prior.editable is False    -> NOT_EDITABLE
4. lane changed while prior.resource_editable
   is False                                       -> RESOURCE_NOT_EDITABLE
5. registered extra rules, in registration order

This validator does NOT:
- Touch the store
- Generate ids
- Log decisions (the dispatcher does)

Same inputs, same result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from timeline.events.models import Event
from timeline.events.snapshot import EventSnapshot
from timeline.rejection import ReasonCode, RejectionReason
from timeline.resources.registry import ResourceRegistry
from timeline.time.instants import format_instant

logger = logging.getLogger("timeline.validation")


# A rule is a callable:
#   (candidate, prior, snapshot) -> Optional[RejectionReason]
#   prior is None for new events; snapshot is the store state the
#   candidate would join.
ValidationRule = Callable[
    [Event, Optional[Event], EventSnapshot],
    Optional[RejectionReason],
]


# ══════════════════════════════════════════════════════════════
# VALIDATION RESULT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ValidationResult:
    """
    Either the accepted candidate or the reason it was refused.

    Invariants:
        - exactly one of event / reason is set
    """

    event: Optional[Event] = None
    reason: Optional[RejectionReason] = None

    def __post_init__(self):
        if (self.event is None) == (self.reason is None):
            raise ValueError(
                "ValidationResult must carry exactly one of event or reason."
            )

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @classmethod
    def accept(cls, event: Event) -> "ValidationResult":
        return cls(event=event)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "ValidationResult":
        return cls(reason=reason)


# ══════════════════════════════════════════════════════════════
# VALIDATOR
# ══════════════════════════════════════════════════════════════

class Validator:
    """
    Invariant gate in front of the EventStore.

    Usage:
        validator = Validator(registry)
        validator.register_rule(no_overlap_rule)

        result = validator.validate(candidate, prior=current)
        # result.is_valid, result.event / result.reason
    """

    def __init__(self, registry: ResourceRegistry):
        self._registry = registry
        self._rules: List[ValidationRule] = []

    @property
    def registry(self) -> ResourceRegistry:
        return self._registry

    def register_rule(self, rule: ValidationRule) -> None:
        """Append an extra rule, evaluated after the built-in checks."""
        if not callable(rule):
            raise TypeError(
                f"Rule must be callable, got {type(rule).__name__}."
            )
        self._rules.append(rule)

        rule_name = getattr(rule, "__qualname__", str(rule))
        logger.debug(f"Validation rule registered: {rule_name}")

    def validate(
        self,
        candidate: Event,
        prior: Optional[Event] = None,
        snapshot: Optional[EventSnapshot] = None,
    ) -> ValidationResult:
        if not isinstance(candidate, Event):
            raise TypeError(
                f"Expected Event, got {type(candidate).__name__}."
            )

        # ── 1. Resource resolves ──────────────────────────────
        if self._registry.lookup(candidate.resource_id) is None:
            return ValidationResult.reject(RejectionReason(
                code=ReasonCode.UNKNOWN_RESOURCE,
                message=f"Resource '{candidate.resource_id}' is not registered.",
                rule_name="resource_must_exist",
                details={"resource_id": candidate.resource_id},
            ))

        # ── 2. Positive duration ──────────────────────────────
        if not candidate.start < candidate.end:
            return ValidationResult.reject(RejectionReason(
                code=ReasonCode.INVALID_RANGE,
                message=(
                    f"Event start ({format_instant(candidate.start)}) must be "
                    f"before end ({format_instant(candidate.end)})."
                ),
                rule_name="range_must_be_positive",
                details={
                    "event_id": candidate.id,
                    "start": format_instant(candidate.start),
                    "end": format_instant(candidate.end),
                },
            ))

        if prior is not None:
            # ── 3. Range lock ─────────────────────────────────
            if not prior.editable and not prior.same_range(candidate):
                return ValidationResult.reject(RejectionReason(
                    code=ReasonCode.NOT_EDITABLE,
                    message=f"Event '{prior.id}' is not editable.",
                    rule_name="range_must_be_editable",
                    details={"event_id": prior.id},
                ))

            # ── 4. Lane lock ──────────────────────────────────
            if (
                not prior.resource_editable
                and prior.resource_id != candidate.resource_id
            ):
                return ValidationResult.reject(RejectionReason(
                    code=ReasonCode.RESOURCE_NOT_EDITABLE,
                    message=(
                        f"Event '{prior.id}' cannot change resource."
                    ),
                    rule_name="resource_must_be_editable",
                    details={
                        "event_id": prior.id,
                        "resource_id": prior.resource_id,
                        "target_resource_id": candidate.resource_id,
                    },
                ))

        # ── 5. Extra rules ────────────────────────────────────
        if self._rules:
            view = snapshot if snapshot is not None else EventSnapshot()
            for rule in self._rules:
                rejection = rule(candidate, prior, view)
                if rejection is not None:
                    if not isinstance(rejection, RejectionReason):
                        raise TypeError(
                            f"Rule must return RejectionReason or None, "
                            f"got {type(rejection).__name__}."
                        )
                    return ValidationResult.reject(rejection)

        return ValidationResult.accept(candidate)
