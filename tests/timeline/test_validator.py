"""
Timeline Validator - Tests
==========================
Check order, first-failure-wins, lock flags, extra rules.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from timeline.events import Event, EventSnapshot
from timeline.rejection import ReasonCode, RejectionReason
from timeline.resources import Resource, ResourceRegistry
from timeline.validation import ValidationResult, Validator, no_overlap_rule

T0 = datetime(2026, 2, 25, 9, 0, tzinfo=timezone.utc)


def h(hours: float) -> datetime:
    return T0 + timedelta(hours=hours)


def make_event(event_id="evt-1", resource_id="res-a", start=2, end=6, **kw):
    return Event(
        id=event_id, resource_id=resource_id, start=h(start), end=h(end), **kw
    )


@pytest.fixture
def registry():
    return ResourceRegistry([
        Resource(id="res-a", title="Elliot"),
        Resource(id="res-b", title="Billie"),
    ])


@pytest.fixture
def validator(registry):
    return Validator(registry)


# ══════════════════════════════════════════════════════════════
# REGISTRY
# ══════════════════════════════════════════════════════════════

class TestResourceRegistry:
    def test_lookup(self, registry):
        assert registry.lookup("res-a").title == "Elliot"
        assert registry.lookup("res-z") is None

    def test_order_and_membership(self, registry):
        assert [r.id for r in registry.list()] == ["res-a", "res-b"]
        assert "res-b" in registry
        assert len(registry) == 2

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            ResourceRegistry([
                Resource(id="res-a", title="One"),
                Resource(id="res-a", title="Two"),
            ])

    def test_titles_need_not_be_unique(self):
        registry = ResourceRegistry([
            Resource(id="res-a", title="Same"),
            Resource(id="res-b", title="Same"),
        ])
        assert len(registry) == 2


# ══════════════════════════════════════════════════════════════
# BUILT-IN CHECKS
# ══════════════════════════════════════════════════════════════

class TestBuiltInChecks:
    def test_valid_new_event(self, validator):
        event = make_event()
        result = validator.validate(event)
        assert result.is_valid
        assert result.event is event

    def test_unknown_resource(self, validator):
        result = validator.validate(make_event(resource_id="res-z"))
        assert result.reason.code == ReasonCode.UNKNOWN_RESOURCE

    def test_unknown_resource_checked_before_range(self, validator):
        result = validator.validate(make_event(resource_id="res-z", start=6, end=2))
        assert result.reason.code == ReasonCode.UNKNOWN_RESOURCE

    @pytest.mark.parametrize("start,end", [(6, 2), (4, 4)])
    def test_non_positive_range(self, validator, start, end):
        result = validator.validate(make_event(start=start, end=end))
        assert result.reason.code == ReasonCode.INVALID_RANGE

    def test_not_editable_range_change(self, validator):
        prior = make_event(editable=False)
        candidate = prior.with_changes(start=h(3), end=h(7))
        result = validator.validate(candidate, prior=prior)
        assert result.reason.code == ReasonCode.NOT_EDITABLE

    def test_not_editable_allows_lane_change(self, validator):
        prior = make_event(editable=False)
        candidate = prior.with_changes(resource_id="res-b")
        assert validator.validate(candidate, prior=prior).is_valid

    def test_resource_not_editable(self, validator):
        prior = make_event(resource_editable=False)
        candidate = prior.with_changes(resource_id="res-b")
        result = validator.validate(candidate, prior=prior)
        assert result.reason.code == ReasonCode.RESOURCE_NOT_EDITABLE

    def test_resource_not_editable_allows_range_change(self, validator):
        prior = make_event(resource_editable=False)
        candidate = prior.with_changes(start=h(1), end=h(3))
        assert validator.validate(candidate, prior=prior).is_valid

    def test_range_lock_checked_before_lane_lock(self, validator):
        prior = make_event(editable=False, resource_editable=False)
        candidate = prior.with_changes(resource_id="res-b", start=h(3), end=h(7))
        result = validator.validate(candidate, prior=prior)
        assert result.reason.code == ReasonCode.NOT_EDITABLE

    def test_deterministic(self, validator):
        candidate = make_event(start=6, end=2)
        assert validator.validate(candidate) == validator.validate(candidate)

    def test_requires_event(self, validator):
        with pytest.raises(TypeError):
            validator.validate({"id": "evt-1"})


# ══════════════════════════════════════════════════════════════
# EXTRA RULES
# ══════════════════════════════════════════════════════════════

class TestExtraRules:
    def test_rules_run_after_built_ins(self, validator):
        calls = []

        def recording_rule(candidate, prior, snapshot):
            calls.append(candidate.id)
            return None

        validator.register_rule(recording_rule)
        validator.validate(make_event(start=6, end=2))
        assert calls == []

        validator.validate(make_event())
        assert calls == ["evt-1"]

    def test_first_rule_rejection_wins(self, validator):
        def deny(candidate, prior, snapshot):
            return RejectionReason(code="LANE_FROZEN", message="frozen", rule_name="deny")

        def never(candidate, prior, snapshot):
            raise AssertionError("should not run")

        validator.register_rule(deny)
        validator.register_rule(never)
        result = validator.validate(make_event())
        assert result.reason.code == "LANE_FROZEN"

    def test_rule_must_return_reason_or_none(self, validator):
        validator.register_rule(lambda c, p, s: "nope")
        with pytest.raises(TypeError):
            validator.validate(make_event())

    def test_rule_must_be_callable(self, validator):
        with pytest.raises(TypeError):
            validator.register_rule("not callable")


class TestNoOverlapRule:
    def _snapshot(self):
        return EventSnapshot(events=(
            make_event("evt-1", "res-a", 2, 6),
            make_event("evt-2", "res-b", 2, 6),
        ))

    def test_overlap_on_same_lane(self):
        reason = no_overlap_rule(make_event("new", "res-a", 5, 7), None, self._snapshot())
        assert reason.code == ReasonCode.OVERLAPPING_EVENT
        assert reason.details["conflicting_event_id"] == "evt-1"

    def test_touching_ranges_allowed(self):
        assert no_overlap_rule(make_event("new", "res-a", 6, 8), None, self._snapshot()) is None

    def test_other_lane_ignored(self):
        snapshot = EventSnapshot(events=(make_event("evt-1", "res-a", 2, 6),))
        assert no_overlap_rule(make_event("new", "res-b", 3, 4), None, snapshot) is None

    def test_own_prior_version_ignored(self):
        snapshot = self._snapshot()
        prior = snapshot.get("evt-1")
        candidate = prior.with_changes(start=h(3), end=h(5))
        assert no_overlap_rule(candidate, prior, snapshot) is None


# ══════════════════════════════════════════════════════════════
# RESULT CONTRACT
# ══════════════════════════════════════════════════════════════

class TestValidationResult:
    def test_exactly_one_of_event_or_reason(self):
        with pytest.raises(ValueError):
            ValidationResult()
        with pytest.raises(ValueError):
            ValidationResult(
                event=make_event(),
                reason=RejectionReason(code="X", message="x", rule_name="r"),
            )
