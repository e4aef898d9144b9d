"""
Timeline Validation - Public API
================================
"""

from timeline.validation.rules import no_overlap_rule
from timeline.validation.validator import (
    ValidationResult,
    ValidationRule,
    Validator,
)

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "Validator",
    "no_overlap_rule",
]
