"""
Timeline Event Store - Tests
============================
Copy-on-write snapshots, replace/insert results, identity sharing.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from timeline.events import Event, EventSnapshot, EventStore, StoreResult
from timeline.rejection import ReasonCode, RejectionReason

T0 = datetime(2026, 2, 25, 9, 0, tzinfo=timezone.utc)


def h(hours: float) -> datetime:
    return T0 + timedelta(hours=hours)


def make_event(event_id="evt-1", resource_id="res-a", start=2, end=6, **kw):
    return Event(
        id=event_id,
        resource_id=resource_id,
        start=h(start),
        end=h(end),
        title=kw.pop("title", f"Event {event_id}"),
        **kw,
    )


@pytest.fixture
def store():
    return EventStore([
        make_event("evt-1", "res-a", 2, 6),
        make_event("evt-2", "res-b", 1, 3),
    ])


# ══════════════════════════════════════════════════════════════
# EVENT MODEL
# ══════════════════════════════════════════════════════════════

class TestEventModel:
    def test_frozen(self):
        event = make_event()
        with pytest.raises(Exception):
            event.title = "changed"

    def test_naive_instants_become_utc(self):
        event = Event(
            id="evt-1",
            resource_id="res-a",
            start=datetime(2026, 2, 25, 11, 0),
            end=datetime(2026, 2, 25, 12, 0),
        )
        assert event.start.tzinfo is timezone.utc
        assert event.start == h(2)

    def test_inverted_range_can_be_constructed(self):
        event = make_event(start=6, end=2)
        assert event.start > event.end

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            make_event(event_id="")

    def test_non_bool_flags_rejected(self):
        with pytest.raises(TypeError):
            make_event(editable="yes")

    def test_render_key(self):
        event = make_event("evt-9", "res-b")
        assert event.render_key == "event-evt-9-resource-res-b"
        assert event.composite_key == ("evt-9", "res-b")

    def test_dict_shape(self):
        data = make_event().to_dict()
        assert data["start"] == "2026-02-25T11:00:00+00:00"
        assert Event.from_dict(data) == make_event()

    def test_from_dict_accepts_z_suffix(self):
        event = Event.from_dict({
            "id": "evt-1",
            "resource_id": "res-a",
            "start": "2026-02-25T11:00:00Z",
            "end": "2026-02-25T15:00:00Z",
        })
        assert event.start == h(2)
        assert event.editable is True
        assert event.resource_editable is True


# ══════════════════════════════════════════════════════════════
# SNAPSHOT
# ══════════════════════════════════════════════════════════════

class TestEventSnapshot:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            EventSnapshot(events=(make_event("x"), make_event("x")))

    def test_requires_tuple(self):
        with pytest.raises(TypeError):
            EventSnapshot(events=[make_event()])

    def test_has_key_tracks_lane(self, store):
        snapshot = store.snapshot
        assert snapshot.has_key("evt-1", "res-a")
        assert not snapshot.has_key("evt-1", "res-b")
        assert ("evt-2", "res-b") in snapshot.composite_keys()

    def test_for_resource(self, store):
        ids = [e.id for e in store.snapshot.for_resource("res-a")]
        assert ids == ["evt-1"]


# ══════════════════════════════════════════════════════════════
# REPLACE
# ══════════════════════════════════════════════════════════════

class TestReplace:
    def test_replace_produces_new_snapshot(self, store):
        before = store.snapshot
        result = store.replace("evt-1", lambda e: e.with_changes(resource_id="res-b"))

        assert result.ok
        assert result.snapshot is not before
        assert result.snapshot.version == before.version + 1
        assert store.get("evt-1").resource_id == "res-b"

    def test_old_snapshot_unchanged(self, store):
        before = store.snapshot
        store.replace("evt-1", lambda e: e.with_changes(title="moved"))

        assert before.get("evt-1").title == "Event evt-1"
        assert store.get("evt-1").title == "moved"

    def test_other_events_kept_by_identity(self, store):
        untouched = store.get("evt-2")
        result = store.replace("evt-1", lambda e: e.with_changes(title="x"))
        assert result.snapshot.get("evt-2") is untouched

    def test_order_preserved(self, store):
        store.replace("evt-1", lambda e: e.with_changes(title="x"))
        assert [e.id for e in store.list()] == ["evt-1", "evt-2"]

    def test_not_found(self, store):
        before = store.snapshot
        result = store.replace("missing", lambda e: e)

        assert not result.ok
        assert result.reason.code == ReasonCode.NOT_FOUND
        assert result.snapshot is before

    def test_equal_update_is_not_a_commit(self, store):
        before = store.snapshot
        result = store.replace("evt-1", lambda e: e.with_changes())

        assert result.ok
        assert result.snapshot is before
        assert result.snapshot.version == before.version

    def test_updater_must_return_event(self, store):
        with pytest.raises(TypeError):
            store.replace("evt-1", lambda e: None)

    def test_updater_cannot_change_id(self, store):
        with pytest.raises(ValueError):
            store.replace("evt-1", lambda e: e.with_changes(id="evt-99"))


# ══════════════════════════════════════════════════════════════
# INSERT
# ══════════════════════════════════════════════════════════════

class TestInsert:
    def test_insert_appends(self, store):
        result = store.insert(make_event("evt-3", "res-a", 7, 8))
        assert result.ok
        assert [e.id for e in store.list()] == ["evt-1", "evt-2", "evt-3"]

    def test_duplicate_id(self, store):
        before = store.list()
        result = store.insert(make_event("evt-1", "res-b", 7, 8))

        assert not result.ok
        assert result.reason.code == ReasonCode.DUPLICATE_ID
        assert store.list() == before

    def test_insert_requires_event(self, store):
        with pytest.raises(TypeError):
            store.insert({"id": "evt-3"})


# ══════════════════════════════════════════════════════════════
# STORE RESULT CONTRACT
# ══════════════════════════════════════════════════════════════

class TestStoreResult:
    def test_success_requires_event(self):
        with pytest.raises(ValueError):
            StoreResult(snapshot=EventSnapshot())

    def test_failure_cannot_carry_event(self):
        reason = RejectionReason(
            code=ReasonCode.NOT_FOUND, message="x", rule_name="event_store"
        )
        with pytest.raises(ValueError):
            StoreResult(snapshot=EventSnapshot(), event=make_event(), reason=reason)
