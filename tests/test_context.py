# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Tests for context-tag correlations and the insight heuristics."""

import pytest

from affect.config import AnalyticsConfig
from affect.context import correlate, insights
from affect.schemas import EmotionEntry, MoodmapValidationError

_counter = iter(range(10_000))


def _entry(quadrant, **context):
    n = next(_counter)
    return EmotionEntry(
        id=f"e{n}",
        quadrant=quadrant,
        emotion="Calm",
        context=context or None,
        entry_date="2024-01-15",
        created_at="2024-01-15T12:00:00Z",
    )


# ============================================================================
# correlate
# ============================================================================

class TestCorrelate:

    def test_groups_by_value(self):
        entries = [
            _entry("high-pleasant", who="Alice"),
            _entry("high-pleasant", who="Alice"),
            _entry("low-unpleasant", who="Alice"),
            _entry("low-pleasant", who="Bob"),
        ]
        stats = correlate(entries, "who")
        assert [s.value for s in stats] == ["Alice", "Bob"]
        alice = stats[0]
        assert alice.count == 3
        assert alice.counts["high-pleasant"] == 2
        assert alice.dominant == "high-pleasant"
        assert sum(alice.percentages.values()) == pytest.approx(100.0)

    def test_missing_and_blank_values_excluded(self):
        entries = [
            _entry("high-pleasant", who="Alice"),
            _entry("high-pleasant"),
            _entry("high-pleasant", who="   "),
            _entry("high-pleasant", what="Working"),
        ]
        stats = correlate(entries, "who")
        assert [(s.value, s.count) for s in stats] == [("Alice", 1)]

    def test_sorted_by_count_then_first_seen(self):
        entries = [
            _entry("low-pleasant", what="Reading"),
            _entry("low-pleasant", what="Cooking"),
            _entry("low-pleasant", what="Working"),
            _entry("low-pleasant", what="Working"),
            _entry("low-pleasant", what="Cooking"),
        ]
        assert [s.value for s in correlate(entries, "what")] == ["Cooking", "Working", "Reading"]

    def test_dominant_tie_uses_quadrant_order(self):
        entries = [_entry("low-pleasant", who="Sam"), _entry("high-unpleasant", who="Sam")]
        assert correlate(entries, "who")[0].dominant == "high-unpleasant"

    def test_field_name_spellings(self):
        entries = [_entry("low-pleasant", sleepHours="7-8h")]
        assert correlate(entries, "sleepHours") == correlate(entries, "sleep_hours")
        assert correlate(entries, "sleepHours")[0].value == "7-8h"

    def test_unknown_field_raises(self):
        with pytest.raises(MoodmapValidationError):
            correlate([], "mood")

    def test_no_entries(self):
        assert correlate([], "body") == []


# ============================================================================
# insights
# ============================================================================

class TestInsights:

    def test_sleep_and_activity(self):
        entries = [
            _entry("low-pleasant", sleepHours="7-8h", physicalActivity="Walk"),
            _entry("high-pleasant", sleepHours="7-8h", physicalActivity="Walk"),
            _entry("high-unpleasant", physicalActivity="Walk"),
        ]
        assert insights(entries) == [
            "You felt calmer with 7-8h of sleep",
            "Walk often makes you feel good",
        ]

    def test_what_never_produces_an_insight(self):
        entries = [_entry("high-pleasant", what="Working") for _ in range(5)]
        assert insights(entries) == []

    def test_single_sample_is_not_enough(self):
        entries = [
            _entry("high-pleasant", sleepHours="9h+"),
            _entry("high-pleasant", physicalActivity="Yoga"),
        ]
        assert insights(entries) == []

    def test_sleep_needs_more_pleasant_than_unpleasant(self):
        entries = [
            _entry("high-pleasant", sleepHours="<5h"),
            _entry("low-unpleasant", sleepHours="<5h"),
        ]
        assert insights(entries) == []

    def test_activity_ratio_is_inclusive(self):
        entries = (
            [_entry("high-pleasant", physicalActivity="Gym") for _ in range(3)]
            + [_entry("high-unpleasant", physicalActivity="Gym") for _ in range(2)]
        )
        assert insights(entries) == ["Gym often makes you feel good"]

    def test_activity_below_ratio(self):
        entries = [
            _entry("high-pleasant", physicalActivity="Run"),
            _entry("low-unpleasant", physicalActivity="Run"),
        ]
        assert insights(entries) == []

    def test_no_activity_preset_skipped(self):
        entries = [_entry("low-pleasant", physicalActivity="None") for _ in range(3)]
        assert insights(entries) == []

    def test_capped_without_reordering(self):
        entries = []
        for hours in ("7-8h", "8-9h"):
            entries += [_entry("low-pleasant", sleepHours=hours) for _ in range(2)]
        for activity in ("Walk", "Gym"):
            entries += [_entry("high-pleasant", physicalActivity=activity) for _ in range(2)]

        assert len(insights(entries, limit=10)) == 4
        assert insights(entries) == [
            "You felt calmer with 7-8h of sleep",
            "You felt calmer with 8-9h of sleep",
            "Walk often makes you feel good",
        ]
        assert insights(entries, limit=1) == ["You felt calmer with 7-8h of sleep"]
        assert insights(entries, limit=0) == []

    def test_thresholds_from_config(self):
        entries = [_entry("high-pleasant", physicalActivity="Swim")]
        cfg = AnalyticsConfig(min_samples=1)
        assert insights(entries, config=cfg) == ["Swim often makes you feel good"]

    def test_negative_limit_rejected(self):
        with pytest.raises(MoodmapValidationError):
            insights([], limit=-1)
