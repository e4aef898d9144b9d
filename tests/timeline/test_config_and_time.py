"""
Timeline Config & Time - Tests
==============================
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from timeline.config import TimelineSettings, settings_from_mapping
from timeline.time import FixedClock, format_instant, parse_instant


# ══════════════════════════════════════════════════════════════
# SETTINGS
# ══════════════════════════════════════════════════════════════

class TestTimelineSettings:
    def test_defaults(self):
        settings = TimelineSettings()
        assert settings.editable
        assert settings.event_resource_editable
        assert settings.selectable
        assert settings.allow_overlap
        assert settings.id_retry_limit >= 1

    def test_from_mapping_case_insensitive(self):
        settings = settings_from_mapping({"EDITABLE": False, "selectable": False})
        assert settings.editable is False
        assert settings.selectable is False

    def test_empty_mapping(self):
        assert settings_from_mapping(None) == TimelineSettings()
        assert settings_from_mapping({}) == TimelineSettings()

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            settings_from_mapping({"editabel": False})

    def test_flag_types(self):
        with pytest.raises(TypeError):
            TimelineSettings(editable="no")

    @pytest.mark.parametrize("limit", [0, -1, True, "3"])
    def test_retry_limit(self, limit):
        with pytest.raises(ValueError):
            TimelineSettings(id_retry_limit=limit)


# ══════════════════════════════════════════════════════════════
# INSTANTS
# ══════════════════════════════════════════════════════════════

class TestInstants:
    def test_z_suffix(self):
        parsed = parse_instant("2026-02-25T09:00:00Z")
        assert parsed == datetime(2026, 2, 25, 9, 0, tzinfo=timezone.utc)

    def test_offset_normalised_to_utc(self):
        parsed = parse_instant("2026-02-25T11:00:00+02:00")
        assert parsed.utcoffset() == timedelta(0)
        assert format_instant(parsed) == "2026-02-25T09:00:00+00:00"
        assert parsed == datetime(2026, 2, 25, 9, 0, tzinfo=timezone.utc)

    def test_naive_string_is_utc(self):
        assert parse_instant("2026-02-25T09:00:00").tzinfo == timezone.utc

    def test_datetime_passthrough(self):
        value = datetime(2026, 2, 25, 9, 0, tzinfo=timezone.utc)
        assert parse_instant(value) == value

    def test_aware_datetime_converted_to_utc(self):
        value = datetime(2026, 2, 25, 11, 0, tzinfo=timezone(timedelta(hours=2)))
        parsed = parse_instant(value)
        assert parsed.tzinfo == timezone.utc
        assert parsed.hour == 9

    @pytest.mark.parametrize("value", ["", "   ", "next tuesday", "2026-13-45"])
    def test_malformed(self, value):
        with pytest.raises(ValueError):
            parse_instant(value)

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            parse_instant(1700000000)

    def test_format(self):
        value = datetime(2026, 2, 25, 9, 0)
        assert format_instant(value) == "2026-02-25T09:00:00+00:00"


class TestFixedClock:
    def test_requires_aware(self):
        with pytest.raises(ValueError):
            FixedClock(datetime(2026, 1, 1))

    def test_advance(self):
        clock = FixedClock(datetime(2026, 1, 1, tzinfo=timezone.utc))
        clock.advance(3600)
        assert clock.now_utc().hour == 1
