# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Tests for time-of-day bucketing and per-bucket quadrant distribution."""

import pytest

from affect.config import AnalyticsConfig
from affect.schemas import EmotionEntry, MoodmapTimezoneError
from affect.time_buckets import BUCKETS, bucket, bucket_for_hour, distribution


def _entry(created_at, quadrant="low-pleasant", n=0):
    return EmotionEntry(
        id=f"e{n}",
        quadrant=quadrant,
        emotion="Calm",
        entry_date=created_at[:10],
        created_at=created_at,
    )


class TestBucketForHour:

    @pytest.mark.parametrize("hour,expected", [
        (0, "night"), (5, "night"),
        (6, "morning"), (11, "morning"),
        (12, "afternoon"), (16, "afternoon"),
        (17, "evening"), (20, "evening"),
        (21, "night"), (23, "night"),
    ])
    def test_default_boundaries(self, hour, expected):
        assert bucket_for_hour(hour) == expected

    def test_custom_boundaries(self):
        cfg = AnalyticsConfig(morning_start=5, afternoon_start=12, evening_start=18, night_start=22)
        assert bucket_for_hour(5, cfg) == "morning"
        assert bucket_for_hour(17, cfg) == "afternoon"
        assert bucket_for_hour(22, cfg) == "night"


class TestBucket:

    def test_uses_local_hour(self):
        ts = "2024-01-15T03:30:00Z"
        assert bucket(ts, "UTC") == "night"
        assert bucket(ts, "Asia/Tokyo") == "afternoon"  # 12:30 local
        assert bucket(ts, "America/New_York") == "night"  # 22:30 the day before

    def test_unknown_zone_raises(self):
        with pytest.raises(MoodmapTimezoneError):
            bucket("2024-01-15T03:30:00Z", "Nowhere/Special")


class TestDistribution:

    def test_all_buckets_present_in_order(self):
        stats = distribution([], "UTC")
        assert tuple(stats) == BUCKETS

    def test_empty_bucket_has_no_percentages(self):
        stats = distribution([_entry("2024-01-15T08:00:00Z")], "UTC")
        assert stats["evening"].count == 0
        assert stats["evening"].percentages is None
        assert stats["evening"].dominant is None

    def test_percentages_are_within_bucket(self):
        entries = [
            _entry("2024-01-15T08:00:00Z", "high-pleasant", 1),
            _entry("2024-01-15T09:00:00Z", "high-pleasant", 2),
            _entry("2024-01-15T10:00:00Z", "low-unpleasant", 3),
            _entry("2024-01-15T18:00:00Z", "low-unpleasant", 4),
        ]
        stats = distribution(entries, "UTC")
        morning = stats["morning"]
        assert morning.count == 3
        assert morning.counts["high-pleasant"] == 2
        assert sum(morning.percentages.values()) == pytest.approx(100.0)
        assert morning.percentages["high-pleasant"] == pytest.approx(200 / 3)
        assert morning.dominant == "high-pleasant"
        assert stats["evening"].percentages["low-unpleasant"] == pytest.approx(100.0)

    def test_timezone_moves_entries_between_buckets(self):
        entries = [_entry("2024-01-15T03:30:00Z")]
        assert distribution(entries, "UTC")["night"].count == 1
        assert distribution(entries, "Asia/Tokyo")["afternoon"].count == 1

    def test_unknown_zone_raises_even_without_entries(self):
        with pytest.raises(MoodmapTimezoneError):
            distribution([], "Nowhere/Special")
