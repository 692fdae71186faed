# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Tests for current and longest check-in streaks."""

from datetime import datetime, timezone

import pytest

from affect.schemas import EmotionEntry, MoodmapValidationError
from affect.streaks import current_streak, longest_streak, streak


def _entry(day, created_at=None, n=0):
    return EmotionEntry(
        id=f"{day}-{n}",
        quadrant="low-pleasant",
        emotion="Calm",
        entry_date=day,
        created_at=created_at or f"{day}T12:00:00+00:00",
    )


FIVE_DAYS = {"2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05"}


class TestStreak:

    def test_five_consecutive_days(self):
        assert streak(FIVE_DAYS, "2024-01-05", "2024-01-04") == 5

    def test_gap_breaks_the_run(self):
        dates = FIVE_DAYS - {"2024-01-03"}
        assert streak(dates, "2024-01-05", "2024-01-04") == 2

    def test_alive_through_yesterday(self):
        """No check-in yet today doesn't end the streak."""
        assert streak(FIVE_DAYS, "2024-01-06", "2024-01-05") == 5

    def test_zero_when_neither_today_nor_yesterday(self):
        assert streak(FIVE_DAYS, "2024-01-07", "2024-01-06") == 0

    def test_empty_history(self):
        assert streak(set(), "2024-01-07", "2024-01-06") == 0

    def test_crosses_year_boundary(self):
        assert streak({"2023-12-30", "2023-12-31", "2024-01-01"}, "2024-01-01", "2023-12-31") == 3

    def test_invalid_today_rejected(self):
        with pytest.raises(MoodmapValidationError):
            streak(FIVE_DAYS, "01/05/2024", "2024-01-04")


class TestCurrentStreak:

    def test_duplicates_count_once(self):
        entries = [_entry("2024-01-04"), _entry("2024-01-05", n=1), _entry("2024-01-05", n=2)]
        now = datetime(2024, 1, 5, 20, 0, tzinfo=timezone.utc)
        assert current_streak(entries, now, "UTC") == 2

    def test_timezone_decides_today(self):
        """01:00 in Tokyo is already the 17th there, so the 15th is two days back."""
        entries = [_entry("2024-01-14"), _entry("2024-01-15")]
        now = datetime(2024, 1, 16, 16, 0, tzinfo=timezone.utc)
        assert current_streak(entries, now, "UTC") == 2
        assert current_streak(entries, now, "Asia/Tokyo") == 0

    def test_uses_stored_entry_date(self):
        """entry_date is fixed at creation and never recomputed from created_at."""
        entries = [
            _entry("2024-01-14", created_at="2024-01-15T03:00:00Z"),
            _entry("2024-01-15", created_at="2024-01-15T20:00:00Z"),
        ]
        now = datetime(2024, 1, 15, 21, 0, tzinfo=timezone.utc)
        assert current_streak(entries, now, "UTC") == 2

    def test_iso_string_now(self):
        assert current_streak([_entry("2024-01-05")], "2024-01-05T08:00:00Z", "UTC") == 1


class TestLongestStreak:

    def test_longest_run_anywhere(self):
        dates = ["2024-01-01", "2024-01-02", "2024-01-10", "2024-01-11", "2024-01-12", "2024-01-20"]
        assert longest_streak(dates) == 3

    def test_duplicates_and_order_dont_matter(self):
        assert longest_streak(["2024-01-02", "2024-01-01", "2024-01-02"]) == 2

    def test_empty(self):
        assert longest_streak([]) == 0
