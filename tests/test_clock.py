# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Tests for timezone-aware calendar arithmetic."""

from datetime import datetime, timezone

import pytest

from affect.clock import (
    day_range, local_date, local_hour, resolve_timezone, shift_day, today_and_yesterday,
)
from affect.schemas import MoodmapTimezoneError, MoodmapValidationError


class TestResolveTimezone:

    def test_known_zone(self):
        assert resolve_timezone("Europe/Belgrade").key == "Europe/Belgrade"

    @pytest.mark.parametrize("name", ["Mars/Olympus", "", "   ", "../etc"])
    def test_unknown_zone_raises(self, name):
        """No silent fallback to UTC."""
        with pytest.raises(MoodmapTimezoneError):
            resolve_timezone(name)

    def test_timezone_error_is_validation_error(self):
        assert issubclass(MoodmapTimezoneError, MoodmapValidationError)


class TestLocalDate:

    @pytest.mark.parametrize("ts,tz,expected", [
        ("2024-01-15T03:30:00Z", "UTC", "2024-01-15"),
        ("2024-01-15T03:30:00Z", "America/New_York", "2024-01-14"),
        ("2024-01-14T16:00:00Z", "Asia/Tokyo", "2024-01-15"),
        ("2024-01-14T14:59:59+00:00", "Asia/Tokyo", "2024-01-14"),
    ])
    def test_date_depends_on_zone(self, ts, tz, expected):
        assert local_date(ts, tz) == expected

    def test_naive_string_is_utc(self):
        assert local_date("2024-01-15T03:30:00", "America/New_York") == "2024-01-14"

    def test_naive_datetime_rejected(self):
        with pytest.raises(MoodmapValidationError):
            local_date(datetime(2024, 1, 15, 3, 30), "UTC")

    def test_local_hour(self):
        assert local_hour("2024-07-01T12:00:00Z", "Europe/Belgrade") == 14
        assert local_hour("2024-01-01T12:00:00Z", "Europe/Belgrade") == 13


class TestTodayAndYesterday:

    def test_crosses_month_in_leap_year(self):
        now = datetime(2024, 3, 1, 2, 0, tzinfo=timezone.utc)
        assert today_and_yesterday(now, "America/Los_Angeles") == ("2024-02-29", "2024-02-28")

    def test_utc(self):
        now = datetime(2024, 3, 1, 2, 0, tzinfo=timezone.utc)
        assert today_and_yesterday(now, "UTC") == ("2024-03-01", "2024-02-29")


class TestDayMath:

    def test_shift_day(self):
        assert shift_day("2023-12-31", 1) == "2024-01-01"
        assert shift_day("2024-03-01", -1) == "2024-02-29"

    def test_day_range_oldest_first(self):
        assert day_range("2024-01-02", 3) == ["2023-12-31", "2024-01-01", "2024-01-02"]

    def test_day_range_needs_a_day(self):
        with pytest.raises(MoodmapValidationError):
            day_range("2024-01-02", 0)

    def test_bad_date_rejected(self):
        with pytest.raises(MoodmapValidationError):
            shift_day("2024-13-01", 1)

    @pytest.mark.parametrize("days", [10**7, -10**7])
    def test_shift_off_calendar_rejected(self, days):
        with pytest.raises(MoodmapValidationError):
            shift_day("2024-01-01", days)

    def test_day_range_too_long_rejected(self):
        with pytest.raises(MoodmapValidationError):
            day_range("2024-01-01", 10**7)
