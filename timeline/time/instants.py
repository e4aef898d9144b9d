"""
Timeline Time - Instants
========================
Parsing and formatting of the absolute instants carried by events.

Rules:
- Every instant held by the engine is timezone-aware
- Naive datetimes are interpreted as UTC
- Aware datetimes are normalised to UTC
- ISO-8601 strings accept a trailing 'Z' for UTC
- No hidden clock access
"""

from __future__ import annotations

from datetime import datetime, timezone


def ensure_aware(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; convert aware values to UTC."""
    if not isinstance(value, datetime):
        raise TypeError(
            f"instant must be datetime, got {type(value).__name__}."
        )
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_instant(value) -> datetime:
    """
    Parse an instant from a datetime or an ISO-8601 string.

    '2026-02-25T09:00:00Z'      -> 2026-02-25 09:00:00+00:00
    '2026-02-25T11:00:00+02:00' -> 2026-02-25 09:00:00+00:00
    '2026-02-25T09:00:00'       -> treated as UTC

    Raises:
        ValueError: empty or malformed string.
        TypeError:  neither datetime nor str.
    """
    if isinstance(value, datetime):
        return ensure_aware(value)

    if not isinstance(value, str):
        raise TypeError(
            f"instant must be datetime or ISO-8601 string, "
            f"got {type(value).__name__}."
        )

    text = value.strip()
    if not text:
        raise ValueError("instant string must be non-empty.")

    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"'{value}' is not an ISO-8601 instant.") from exc

    return ensure_aware(parsed)


def format_instant(value: datetime) -> str:
    """Serialize an instant as ISO-8601 in UTC."""
    return ensure_aware(value).isoformat()
