# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Pattern tools — streaks, time of day, context correlations, insights, overviews.

Every tool reads the journal once and computes against a single `now`.
"""

import json
import logging
from typing import Optional

from moodmap_mcp._app import tool
from moodmap_mcp.tools._shared import get_store, pct, resolve_now, resolve_tz
from affect.clock import today_and_yesterday
from affect.context import correlate, insights
from affect.overview import calendar, filter_range, summarize, weekly_snapshot
from affect.schemas import MoodmapValidationError
from affect.space import QUADRANT_ORDER, quadrant_info
from affect.streaks import current_streak, longest_streak
from affect.time_buckets import distribution

logger = logging.getLogger("moodmap.tools.patterns")


@tool()
def moodmap_streak(timezone: Optional[str] = None, now: Optional[str] = None) -> str:
    """
    Current and longest check-in streak.

    Args:
        timezone: IANA zone for "today" (default from settings)
        now: ISO-8601 instant with UTC offset to compute against (default: current time)
    """
    try:
        tz = resolve_tz(timezone)
        entries = get_store().all()
        current = current_streak(entries, resolve_now(now), tz)
    except MoodmapValidationError as e:
        return f"Error: {e}"
    best = longest_streak(e.entry_date for e in entries)
    return f"Current streak: {current} day(s)\nLongest streak: {best} day(s)"


@tool()
def moodmap_time_of_day(
    timezone: Optional[str] = None,
    days: Optional[int] = None,
    now: Optional[str] = None,
) -> str:
    """
    Quadrant mix per time of day (morning, afternoon, evening, night).

    Args:
        timezone: IANA zone used to read each check-in's local hour
        days: Only look at the last N days (default: all history)
        now: ISO-8601 instant with UTC offset for the range end (default: current time)
    """
    try:
        tz = resolve_tz(timezone)
        entries = get_store().all()
        if days is not None:
            today, _ = today_and_yesterday(resolve_now(now), tz)
            entries = filter_range(entries, today, days)
        stats = distribution(entries, tz)
    except MoodmapValidationError as e:
        return f"Error: {e}"

    lines = []
    for name, s in stats.items():
        if s.percentages is None:
            lines.append(f"{name}: no data")
            continue
        mix = ", ".join(f"{q} {pct(s.percentages[q])}" for q in QUADRANT_ORDER)
        lines.append(f"{name} ({s.count}): {mix}")
    return "\n".join(lines)


@tool()
def moodmap_correlate(field: str) -> str:
    """
    Quadrant mix per value of one context field, most common first.

    Args:
        field: "who", "what", "body", "sleepHours" or "physicalActivity"
    """
    try:
        stats = correlate(get_store().all(), field)
    except MoodmapValidationError as e:
        return f"Error: {e}"
    if not stats:
        return f"No check-ins with '{field}' recorded."
    return "\n".join(
        f"{s.value} ({s.count}): mostly {quadrant_info(s.dominant).label}"
        for s in stats
    )


@tool()
def moodmap_insights(limit: Optional[int] = None) -> str:
    """
    Short observations about what tends to go with feeling good.

    Args:
        limit: Max insights (default from settings, usually 3)
    """
    try:
        found = insights(get_store().all(), limit=limit)
    except MoodmapValidationError as e:
        return f"Error: {e}"
    if not found:
        return "Not enough data for insights yet."
    return "\n".join(f"- {line}" for line in found)


@tool()
def moodmap_weekly(timezone: Optional[str] = None, now: Optional[str] = None) -> str:
    """
    Rolling seven-day snapshot.

    Args:
        timezone: IANA zone for "today"
        now: ISO-8601 instant with UTC offset to compute against
    """
    try:
        tz = resolve_tz(timezone)
        snap = weekly_snapshot(get_store().all(), resolve_now(now), tz)
    except MoodmapValidationError as e:
        return f"Error: {e}"
    return "\n".join(snap.messages)


@tool()
def moodmap_calendar(start: Optional[str] = None, end: Optional[str] = None) -> str:
    """
    Check-in count and leading quadrant per day.

    Args:
        start: First date, YYYY-MM-DD (default: earliest entry)
        end: Last date, YYYY-MM-DD (default: latest entry)
    """
    store = get_store()
    try:
        entries = store.between(start or "0001-01-01", end or "9999-12-31")
    except MoodmapValidationError as e:
        return f"Error: {e}"
    days = calendar(entries)
    if not days:
        return "No check-ins in range."
    return "\n".join(
        f"{d.date}: {d.count} check-in(s), {d.dominant}" for d in days.values()
    )


@tool()
def moodmap_summary(
    timezone: Optional[str] = None,
    days: Optional[int] = None,
    now: Optional[str] = None,
) -> str:
    """
    Everything the patterns view shows, as JSON.

    Args:
        timezone: IANA zone for "today" and time-of-day buckets
        days: Range in days (default from settings, usually 30)
        now: ISO-8601 instant with UTC offset to compute against

    Returns:
        JSON object with totals, streaks, tallies, daily counts, buckets, insights
    """
    try:
        tz = resolve_tz(timezone)
        summary = summarize(get_store().all(), resolve_now(now), tz, days=days)
    except MoodmapValidationError as e:
        return f"Error: {e}"
    summary["time_of_day"] = {b: s.model_dump() for b, s in summary["time_of_day"].items()}
    logger.info("Summary served: %d entries over %d days", summary["total"], summary["days"])
    return json.dumps(summary, indent=2)
