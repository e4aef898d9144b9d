"""
Manual smoke runner for the timeline Django adapter endpoints.

Replays the drag-and-drop scenario against a running server:
move the dev event to the second lane, create an event by selection,
then try an inverted resize.

Usage:
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000
"""

from __future__ import annotations

import argparse
import json
from urllib import error, request


DEV_RESOURCE_A_ID = "a59b98d6-3a5d-492f-95eb-d8b9b51d7817"
DEV_RESOURCE_B_ID = "f1a3ed14-93ae-4090-9228-781734f64a5f"
DEV_EVENT_ID = "42ac857c-6836-4419-95d8-f37c364c9f38"


def _call(
    *,
    method: str,
    url: str,
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    req_headers = {}
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=req_headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            status = response.status
            payload = json.loads(response.read().decode("utf-8"))
            return status, payload
    except error.HTTPError as exc:
        payload = json.loads(exc.read().decode("utf-8"))
        return exc.code, payload


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True))


def _dev_event(payload: dict) -> dict:
    for event in payload["data"]["events"]:
        if event["id"] == DEV_EVENT_ID:
            return event
    raise SystemExit(f"dev event {DEV_EVENT_ID} not found in timeline")


def run(base_url: str) -> None:
    api = base_url.rstrip("/") + "/v1"

    status, payload = _call(method="GET", url=f"{api}/timeline")
    _print_case("timeline", status, payload)
    event = _dev_event(payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/intents/drop",
        body={
            "event_id": DEV_EVENT_ID,
            "target_resource_id": DEV_RESOURCE_B_ID,
            "start": event["start"],
            "end": event["end"],
        },
    )
    _print_case("drop-to-second-lane", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/intents/select",
        body={
            "resource_id": DEV_RESOURCE_A_ID,
            "start": event["start"],
            "end": event["end"],
        },
    )
    _print_case("select-create", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/intents/resize",
        body={
            "event_id": DEV_EVENT_ID,
            "start": event["end"],
            "end": event["start"],
        },
    )
    _print_case("resize-inverted", status, payload)

    status, payload = _call(method="GET", url=f"{api}/timeline")
    _print_case("timeline-after", status, payload)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Server base URL.",
    )
    args = parser.parse_args()
    run(args.base_url)


if __name__ == "__main__":
    main()
