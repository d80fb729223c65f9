"""Tests for ImageEntry serialization, display names, and date formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from core.models import (
    UNKNOWN_CONTACT,
    ImageEntry,
    TimelineRange,
    contact_display_name,
    short_date,
    short_datetime,
)


class TestImageEntry:
    def test_to_dict_uses_persisted_field_names(self, now):
        entry = ImageEntry(path="/g/a.jpg", date=now, contact_id="WA0001")
        assert entry.to_dict() == {"path": "/g/a.jpg", "date": "2024-05-10T12:00:00", "contactId": "WA0001"}

    def test_from_dict_round_trip(self, now):
        entry = ImageEntry(path="/g/a.jpg", date=now.replace(microsecond=123456), contact_id="WA0001")
        assert ImageEntry.from_dict(entry.to_dict()) == entry

    def test_missing_contact_defaults_to_unknown(self, now):
        entry = ImageEntry.from_dict({"path": "/g/a.jpg", "date": now.isoformat()})
        assert entry.contact_id == UNKNOWN_CONTACT

    def test_empty_contact_defaults_to_unknown(self, now):
        entry = ImageEntry.from_dict({"path": "/g/a.jpg", "date": now.isoformat(), "contactId": ""})
        assert entry.contact_id == UNKNOWN_CONTACT

    @pytest.mark.parametrize("raw", [None, "", "yesterday", 12345])
    def test_bad_date_falls_back_to_now(self, raw, now):
        entry = ImageEntry.from_dict({"path": "/g/a.jpg", "date": raw, "contactId": "WA1"}, now=now)
        assert entry.date == now

    def test_aware_date_is_normalised_to_naive(self):
        aware = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)
        entry = ImageEntry.from_dict({"path": "/g/a.jpg", "date": aware.isoformat()})
        assert entry.date.tzinfo is None
        assert entry.date == aware.astimezone().replace(tzinfo=None)

    def test_utc_z_suffix_is_parsed(self):
        entry = ImageEntry.from_dict({"path": "/g/a.jpg", "date": "2024-05-10T12:00:00.123Z"})
        expected = datetime(2024, 5, 10, 12, 0, 0, 123000, tzinfo=timezone.utc)
        assert entry.date == expected.astimezone().replace(tzinfo=None)

    @pytest.mark.parametrize("payload", [{}, {"path": ""}, {"path": 3}])
    def test_unusable_path_raises(self, payload):
        with pytest.raises(ValueError):
            ImageEntry.from_dict(payload)

    def test_file_name(self, now):
        assert ImageEntry(path="/g/IMG-WA1.jpg", date=now).file_name == "IMG-WA1.jpg"


class TestDisplay:
    def test_contact_display_name(self):
        assert contact_display_name("Unknown") == "Unknown"
        assert contact_display_name("WA0001") == "WA0001"

    def test_timeline_windows(self):
        assert TimelineRange.TODAY.window == timedelta(hours=24)
        assert TimelineRange.WEEK.window == timedelta(days=7)
        assert TimelineRange.MONTH.window == timedelta(days=30)

    def test_short_date_today_shows_time(self, now):
        assert short_date(now.replace(hour=9, minute=5), now=now) == "09:05"

    def test_short_date_other_day_shows_month_day(self, now):
        assert short_date(now - timedelta(days=3), now=now) == "5/7"

    def test_short_datetime(self, now):
        assert short_datetime(now.replace(hour=7, minute=3)) == "2024-05-10 07:03"
