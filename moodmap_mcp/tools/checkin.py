# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Check-in tools: place a point, find the words for it, save it, and what to try next."""

import logging
from typing import Optional

from moodmap_mcp._app import tool
from moodmap_mcp.tools._shared import get_store, resolve_now, resolve_tz
from affect.config import get_config
from affect.matcher import resolve_checkin, search, suggest
from affect.schemas import MoodmapValidationError
from affect.space import classify, make_coordinate, quadrant_info
from affect.store import new_entry
from affect.strategies import recommend

logger = logging.getLogger("moodmap.tools.checkin")


@tool()
def moodmap_classify(energy: float, pleasantness: float) -> str:
    """
    Which quadrant a slider position falls in.

    Args:
        energy: 0-100, low to high energy
        pleasantness: 0-100, unpleasant to pleasant

    Returns:
        Quadrant id, label and description
    """
    try:
        q = classify(make_coordinate(energy, pleasantness))
    except MoodmapValidationError as e:
        return f"Error: {e}"
    info = quadrant_info(q)
    return f"{q} ({info.label}): {info.description}"


@tool()
def moodmap_suggest(energy: float, pleasantness: float, k: Optional[int] = None) -> str:
    """
    Emotion words closest to a slider position, nearest first.

    Args:
        energy: 0-100
        pleasantness: 0-100
        k: How many words (default from settings, usually 4)

    Returns:
        One line per word with its quadrant and distance
    """
    count = get_config().suggestion_count if k is None else k
    try:
        results = suggest(make_coordinate(energy, pleasantness), k=count)
    except MoodmapValidationError as e:
        return f"Error: {e}"
    if not results:
        return "No suggestions."
    return "\n".join(
        f"{s.emotion} ({s.quadrant}, distance {s.distance:.1f})" for s in results
    )


@tool()
def moodmap_search(query: str, limit: Optional[int] = None) -> str:
    """
    Find emotion words containing some text (case-insensitive).

    Args:
        query: Text to look for, e.g. "calm"
        limit: Max results (default from settings, usually 8)

    Returns:
        Matching words in catalog order
    """
    cap = get_config().search_limit if limit is None else limit
    try:
        results = search(query, limit=cap)
    except MoodmapValidationError as e:
        return f"Error: {e}"
    if not results:
        return f"No emotions match '{query}'."
    return "\n".join(f"{e.emotion} ({e.quadrant})" for e in results)


@tool()
def moodmap_checkin(
    energy: float,
    pleasantness: float,
    emotion: Optional[str] = None,
    note: Optional[str] = None,
    who: Optional[str] = None,
    what: Optional[str] = None,
    body: Optional[str] = None,
    sleep_hours: Optional[str] = None,
    physical_activity: Optional[str] = None,
    intensity: Optional[float] = None,
    timezone: Optional[str] = None,
    now: Optional[str] = None,
) -> str:
    """
    Save a check-in.

    Without an emotion, the closest word to the sliders is used and its
    quadrant is saved. A chosen word keeps its own quadrant.

    Args:
        energy: 0-100
        pleasantness: 0-100
        emotion: Word the user picked (optional)
        note: Free-text note
        who: Who they were with
        what: What they were doing
        body: How their body felt
        sleep_hours: Sleep last night, e.g. "7-8h"
        physical_activity: e.g. "Walk", "Gym", "None"
        intensity: Optional intensity rating
        timezone: IANA zone that decides the entry's calendar date
        now: ISO-8601 instant with UTC offset of the check-in (default: current time)

    Returns:
        The saved entry
    """
    try:
        tz = resolve_tz(timezone)
        created = resolve_now(now)
        choice = resolve_checkin(make_coordinate(energy, pleasantness), selected=emotion)
        context = {
            k: v for k, v in (
                ("who", who), ("what", what), ("body", body),
                ("sleepHours", sleep_hours), ("physicalActivity", physical_activity),
            ) if v
        }
        entry = new_entry(
            emotion=choice.emotion,
            quadrant=choice.quadrant,
            created_at=created,
            timezone=tz,
            note=note,
            context=context or None,
            intensity=intensity,
        )
    except MoodmapValidationError as e:
        logger.warning("Check-in rejected: %s", e)
        return f"Error: {e}"

    get_store().append(entry)
    lines = [
        f"Saved: {entry.emotion} ({quadrant_info(entry.quadrant).label})",
        f"Date: {entry.entry_date}",
        f"Id: {entry.id}",
    ]
    if choice.source == "suggested":
        lines.append("Word suggested from slider position.")
    return "\n".join(lines)


@tool()
def moodmap_strategies(quadrant: str, limit: Optional[int] = None) -> str:
    """
    Regulation strategies for a quadrant.

    Args:
        quadrant: "high-pleasant", "high-unpleasant", "low-unpleasant" or "low-pleasant"
        limit: Max strategies (default from settings, usually 3)

    Returns:
        Strategy titles, durations and descriptions
    """
    try:
        picks = recommend(quadrant, limit=limit)
    except MoodmapValidationError as e:
        return f"Error: {e}"
    if not picks:
        return "No strategies for this quadrant."
    return "\n".join(f"{s.title} ({s.duration}): {s.description}" for s in picks)
