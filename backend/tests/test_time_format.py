"""Tests for the fixed-offset wire timestamp format."""

from datetime import datetime, timedelta, timezone

from emulator.core.timefmt import format_datetime


class TestFormatDateTime:
    """Test cases for format_datetime."""

    def test_appends_fixed_offset(self):
        assert format_datetime(datetime(2025, 6, 5, 12, 0, 0)) == "2025-06-05T12:00:00+03:00"

    def test_none_passes_through(self):
        assert format_datetime(None) is None

    def test_drops_microseconds(self):
        value = datetime(2025, 1, 2, 3, 4, 5, 678901)

        assert format_datetime(value) == "2025-01-02T03:04:05+03:00"

    def test_offset_is_appended_not_converted(self):
        """An aware value keeps its wall clock and only gets the +03:00 suffix."""
        value = datetime(2025, 6, 5, 12, 0, 0, tzinfo=timezone.utc)

        assert format_datetime(value) == "2025-06-05T12:00:00+03:00"

    def test_round_trip_preserves_local_time(self):
        value = datetime(2024, 12, 31, 23, 59, 59)

        formatted = format_datetime(value)
        parsed = datetime.fromisoformat(formatted)

        assert formatted.endswith("+03:00")
        assert parsed.replace(tzinfo=None) == value
        assert parsed.utcoffset() == timedelta(hours=3)
