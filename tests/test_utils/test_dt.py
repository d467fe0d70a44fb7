"""Tests for datetime utilities."""
from datetime import datetime, timedelta, timezone

from hourlywolves.utils.dt import as_utc, format_rfc3339, get_utc_now


class TestAsUtc:
    """Tests for as_utc."""

    def test_naive_is_tagged_utc(self):
        """Naive datetimes are assumed to be UTC."""
        result = as_utc(datetime(2024, 3, 7, 9))

        assert result == datetime(2024, 3, 7, 9, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_aware_is_converted(self):
        """Aware datetimes are converted, not relabelled."""
        jst = timezone(timedelta(hours=9))
        result = as_utc(datetime(2024, 3, 7, 18, tzinfo=jst))

        assert result.hour == 9
        assert result.tzinfo is timezone.utc


class TestFormatRfc3339:
    """Tests for format_rfc3339."""

    def test_format_utc(self):
        assert format_rfc3339(datetime(2023, 1, 1, tzinfo=timezone.utc)) == '2023-01-01T00:00:00+00:00'

    def test_format_keeps_microseconds(self):
        dt = datetime(2024, 3, 7, 9, 30, 0, 123456, tzinfo=timezone.utc)
        assert format_rfc3339(dt) == '2024-03-07T09:30:00.123456+00:00'


def test_get_utc_now_is_aware():
    """get_utc_now returns an aware UTC datetime."""
    assert get_utc_now().tzinfo is timezone.utc
