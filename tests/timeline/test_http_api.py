"""
Timeline HTTP API - Handler Contract Tests
==========================================
Framework-agnostic handlers over an in-memory dispatcher.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from timeline.events import Event
from timeline.http_api import (
    DropHttpRequest,
    HttpApiDependencies,
    HttpApiResponse,
    ResizeHttpRequest,
    SelectHttpRequest,
    error_response,
    get_timeline,
    http_status_for,
    list_resources,
    post_drop,
    post_resize,
    post_select,
)
from timeline.intents import SequenceIdProvider, build_dispatcher
from timeline.publishing import SnapshotPublisher
from timeline.rejection import ReasonCode
from timeline.resources import Resource, ResourceRegistry
from timeline.time import FixedClock

T0 = datetime(2026, 2, 25, 9, 0, tzinfo=timezone.utc)


def h(hours: float) -> datetime:
    return T0 + timedelta(hours=hours)


@pytest.fixture
def deps():
    registry = ResourceRegistry([
        Resource(id="res-a", title="Elliot"),
        Resource(id="res-b", title="Billie"),
    ])
    publisher = SnapshotPublisher()
    dispatcher = build_dispatcher(
        registry,
        [Event(id="evt-1", resource_id="res-a", start=h(2), end=h(6), title="Shift")],
        id_provider=SequenceIdProvider(prefix="new"),
        publisher=publisher,
        clock=FixedClock(T0),
    )
    return HttpApiDependencies(
        registry=registry, dispatcher=dispatcher, publisher=publisher
    )


class TestReads:
    def test_timeline_lanes(self, deps):
        payload = get_timeline(deps)

        assert payload["ok"] is True
        data = payload["data"]
        assert data["version"] == 0
        assert [lane["resource"]["id"] for lane in data["lanes"]] == ["res-a", "res-b"]
        lane_a, lane_b = data["lanes"]
        assert lane_a["events"][0]["render_key"] == "event-evt-1-resource-res-a"
        assert lane_b["events"] == []

    def test_timeline_reports_subscribers(self, deps):
        assert get_timeline(deps)["data"]["subscribers"] == 0

        deps.publisher.subscribe(lambda snapshot, outcome: None)
        assert get_timeline(deps)["data"]["subscribers"] == 1

    def test_resources(self, deps):
        payload = list_resources(deps)
        assert payload["data"]["resources"] == [
            {"id": "res-a", "title": "Elliot"},
            {"id": "res-b", "title": "Billie"},
        ]


class TestWrites:
    def test_drop_success(self, deps):
        payload = post_drop(
            DropHttpRequest(event_id="evt-1", target_resource_id="res-b", start=h(2), end=h(6)),
            deps,
        )
        assert http_status_for(payload) == 200
        assert payload["data"]["event"]["render_key"] == "event-evt-1-resource-res-b"
        assert payload["data"]["version"] == 1

        lanes = get_timeline(deps)["data"]["lanes"]
        assert lanes[0]["events"] == []
        assert lanes[1]["events"][0]["id"] == "evt-1"

    def test_drop_not_found(self, deps):
        payload = post_drop(
            DropHttpRequest(event_id="nope", start=h(2), end=h(6)), deps
        )
        assert payload["ok"] is False
        assert payload["error"]["code"] == ReasonCode.NOT_FOUND
        assert http_status_for(payload) == 404

    def test_resize_rejected(self, deps):
        payload = post_resize(
            ResizeHttpRequest(event_id="evt-1", start=h(6), end=h(2)), deps
        )
        assert payload["error"]["code"] == ReasonCode.INVALID_RANGE
        assert payload["error"]["details"]["rule_name"] == "range_must_be_positive"
        assert payload["error"]["details"]["kind"] == "resize"
        assert http_status_for(payload) == 409

    def test_select_creates(self, deps):
        payload = post_select(
            SelectHttpRequest(
                resource_id="res-a",
                start_str="2026-02-25T10:00:00Z",
                end_str="2026-02-25T12:00:00Z",
                title="Booked",
            ),
            deps,
        )
        assert payload["ok"] is True
        event = payload["data"]["event"]
        assert event["id"] == "new-1"
        assert event["title"] == "Booked"
        assert len(payload["data"]["events"]) == 2

    def test_select_bad_instant_is_400(self, deps):
        payload = post_select(
            SelectHttpRequest(resource_id="res-a", start_str="soon", end_str="later"),
            deps,
        )
        assert payload["error"]["code"] == ReasonCode.INVALID_INSTANT
        assert http_status_for(payload) == 400


class TestContracts:
    def test_drop_request_requires_event_id(self):
        with pytest.raises(ValueError):
            DropHttpRequest(event_id="", start=h(1), end=h(2))

    def test_select_request_requires_strings(self):
        with pytest.raises(ValueError):
            SelectHttpRequest(resource_id="res-a", start_str=h(1), end_str="x")

    def test_error_response_shape(self):
        payload = error_response(code="INVALID_REQUEST", message="bad")
        assert payload == {
            "ok": False,
            "error": {"code": "INVALID_REQUEST", "message": "bad", "details": {}},
        }
        assert http_status_for(payload) == 400

    def test_failed_response_requires_error(self):
        with pytest.raises(ValueError):
            HttpApiResponse(ok=False).to_dict()
