"""
Timeline - Rejection Model
==========================
Structured reasons for refused mutations.

Every rejection must be:
- Deterministic (same input, same rejection)
- Machine-readable (code)
- Human-readable (message)
- Attributed (rule_name names the check that refused)

Rejections are values, not exceptions. They travel inside
ValidationResult, StoreResult and IntentOutcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RejectionReason:
    """
    Structured reason for a refused mutation.

    Fields:
        code:       Machine-readable code (see ReasonCode).
        message:    Human-readable explanation.
        rule_name:  Name of the check that produced the rejection.
        details:    Extra machine-readable context (ids, ranges).
    """

    code: str
    message: str
    rule_name: str
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.rule_name or not isinstance(self.rule_name, str):
            raise ValueError("rule_name must be a non-empty string.")

        if not isinstance(self.details, dict):
            raise TypeError("details must be a dict.")

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "rule_name": self.rule_name,
            "details": dict(self.details),
        }


# ══════════════════════════════════════════════════════════════
# STANDARD REJECTION CODES
# ══════════════════════════════════════════════════════════════

class ReasonCode:
    """
    Known rejection codes. Extensible by custom validation rules.

    Convention: SCREAMING_SNAKE_CASE.
    """

    # ── Store ─────────────────────────────────────────────────
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_ID = "DUPLICATE_ID"

    # ── Event invariants ──────────────────────────────────────
    UNKNOWN_RESOURCE = "UNKNOWN_RESOURCE"
    INVALID_RANGE = "INVALID_RANGE"
    NOT_EDITABLE = "NOT_EDITABLE"
    RESOURCE_NOT_EDITABLE = "RESOURCE_NOT_EDITABLE"

    # ── Intent shape ──────────────────────────────────────────
    INVALID_INSTANT = "INVALID_INSTANT"

    # ── Calendar switches ─────────────────────────────────────
    EDITING_DISABLED = "EDITING_DISABLED"
    SELECTION_DISABLED = "SELECTION_DISABLED"

    # ── Optional rules ────────────────────────────────────────
    OVERLAPPING_EVENT = "OVERLAPPING_EVENT"
