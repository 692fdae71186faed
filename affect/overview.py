# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Overview — the headline numbers of the patterns view.

Date-range filtering, quadrant and emotion tallies, per-day counts, the
calendar map, and the rolling weekly snapshot. Like the other analytics
modules, everything takes `now` and a timezone from the caller.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Tuple

from affect.clock import Timestamp, day_range, shift_day, today_and_yesterday
from affect.config import AnalyticsConfig, get_config
from affect.context import insights
from affect.schemas import DayStats, EmotionEntry, MoodmapValidationError, Quadrant, WeeklySnapshot
from affect.space import count_quadrants, dominant, quadrant_info
from affect.streaks import longest_streak, streak
from affect.time_buckets import distribution

logger = logging.getLogger("moodmap.overview")

WEEK = 7


def filter_range(entries: Iterable[EmotionEntry], today: str, days: int) -> List[EmotionEntry]:
    """Entries from the last `days` calendar days, today included."""
    if days < 1:
        raise MoodmapValidationError(f"days must be >= 1, got {days}")
    cutoff = shift_day(today, -(days - 1))
    return [e for e in entries if cutoff <= e.entry_date <= today]


def quadrant_counts(entries: Iterable[EmotionEntry]) -> Dict[str, int]:
    return count_quadrants(e.quadrant for e in entries)


def dominant_quadrant(entries: Iterable[EmotionEntry]) -> Optional[Quadrant]:
    return dominant(quadrant_counts(entries))


def top_emotions(entries: Iterable[EmotionEntry], limit: Optional[int] = None) -> List[Tuple[str, int]]:
    """Most frequent emotion words. Equal counts keep first-seen order."""
    cap = get_config().top_emotion_limit if limit is None else limit
    tally = Counter(e.emotion for e in entries if e.emotion)
    # Counter preserves insertion order and most_common() is a stable sort
    return tally.most_common(cap)


def daily_counts(entries: Iterable[EmotionEntry], today: str, days: int = WEEK) -> List[Tuple[str, int]]:
    """(date, check-in count) for each of the last `days` days, oldest first."""
    per_day = Counter(e.entry_date for e in entries)
    return [(d, per_day.get(d, 0)) for d in day_range(today, days)]


def calendar(entries: Iterable[EmotionEntry]) -> Dict[str, DayStats]:
    """Date → count and dominant quadrant, for every date that has entries."""
    by_date: Dict[str, List[str]] = {}
    for e in entries:
        by_date.setdefault(e.entry_date, []).append(e.quadrant)
    return {
        d: DayStats(date=d, count=len(qs), dominant=dominant(count_quadrants(qs)))
        for d, qs in sorted(by_date.items())
    }


def weekly_snapshot(entries: Iterable[EmotionEntry], now: Timestamp, timezone: str) -> WeeklySnapshot:
    """
    Rolling seven-day summary.

    The streak counts across the whole history; everything else looks at the
    seven calendar days ending today.
    """
    entries = list(entries)
    today, yesterday = today_and_yesterday(now, timezone)
    week = filter_range(entries, today, WEEK)

    current = streak({e.entry_date for e in entries}, today, yesterday)
    top = top_emotions(week, limit=1)
    top_emotion = top[0][0] if top else None
    lead = dominant_quadrant(week)
    average = len(week) / WEEK

    messages = []
    if current > 0:
        messages.append(f"{current} day streak! Keep it going.")
    if top_emotion:
        messages.append(f'"{top_emotion}" is your top feeling this week')
    if week:
        messages.append(f"You're checking in {average:.1f}x per day on average")
    if lead:
        messages.append(f'Most time spent in "{quadrant_info(lead).label}" zone')
    if not messages:
        messages.append("Start tracking to unlock insights!")

    return WeeklySnapshot(
        streak=current,
        total_this_week=len(week),
        top_emotion=top_emotion,
        dominant_quadrant=lead,
        average_per_day=average,
        messages=messages,
    )


def summarize(
    entries: Iterable[EmotionEntry],
    now: Timestamp,
    timezone: str,
    days: Optional[int] = None,
    config: Optional[AnalyticsConfig] = None,
) -> Dict[str, Any]:
    """
    Everything the patterns view shows, computed against one `now`.

    Range-limited: totals, tallies, time-of-day and insights.
    Whole history: current and longest streak.
    """
    cfg = config or get_config()
    span = cfg.overview_days if days is None else days
    entries = list(entries)
    today, yesterday = today_and_yesterday(now, timezone)
    in_range = filter_range(entries, today, span)
    all_dates = {e.entry_date for e in entries}

    summary = {
        "today": today,
        "timezone": timezone,
        "days": span,
        "total": len(in_range),
        "streak": streak(all_dates, today, yesterday),
        "longest_streak": longest_streak(all_dates),
        "quadrant_counts": quadrant_counts(in_range),
        "most_common": dominant_quadrant(in_range),
        "top_emotions": top_emotions(in_range, limit=cfg.top_emotion_limit),
        "daily": daily_counts(in_range, today, WEEK),
        "time_of_day": distribution(in_range, timezone, cfg),
        "insights": insights(in_range, config=cfg),
    }
    logger.debug("Summary for %s (%s, %dd): %d entries", today, timezone, span, summary["total"])
    return summary
