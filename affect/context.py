# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Context correlations — who you were with, what you were doing, how you slept,
and which quadrant those check-ins landed in.

Pure analysis functions that take entries in and return results — no side
effects, no file I/O.
"""

import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from affect.config import AnalyticsConfig, get_config
from affect.schemas import EmotionEntry, MoodmapValidationError, TagStats
from affect.space import PLEASANT_QUADRANTS, UNPLEASANT_QUADRANTS, count_quadrants, dominant, to_percentages

logger = logging.getLogger("moodmap.context")

# Accepted field names → EntryContext attribute. Both the stored camelCase
# spelling and the Python one work.
CONTEXT_FIELDS: Dict[str, str] = {
    "who": "who",
    "what": "what",
    "body": "body",
    "sleepHours": "sleep_hours",
    "sleep_hours": "sleep_hours",
    "physicalActivity": "physical_activity",
    "physical_activity": "physical_activity",
}

# Activity preset meaning "didn't move". Never reported as a mood lift.
NO_ACTIVITY = "none"


def _attr_for(field: str) -> str:
    try:
        return CONTEXT_FIELDS[field]
    except KeyError:
        logger.warning("Rejected unknown context field %r", field)
        raise MoodmapValidationError(
            f"Unknown context field {field!r}. Expected one of: who, what, body, sleepHours, physicalActivity"
        ) from None


def _value(entry: EmotionEntry, attr: str) -> Optional[str]:
    if entry.context is None:
        return None
    raw = getattr(entry.context, attr, None)
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def correlate(entries: Iterable[EmotionEntry], field: str) -> List[TagStats]:
    """
    Quadrant breakdown per distinct value of one context field.

    Entries without the field are left out entirely — there is no "missing"
    bucket. Sorted by count, most common first; equal counts keep the order
    the values first appeared in.
    """
    attr = _attr_for(field)

    grouped: "OrderedDict[str, List[str]]" = OrderedDict()
    for entry in entries:
        value = _value(entry, attr)
        if value is None:
            continue
        grouped.setdefault(value, []).append(entry.quadrant)

    stats = []
    for value, quadrants in grouped.items():
        counts = count_quadrants(quadrants)
        stats.append(TagStats(
            value=value,
            count=len(quadrants),
            counts=counts,
            percentages=to_percentages(counts),
            dominant=dominant(counts),
        ))

    stats.sort(key=lambda s: -s.count)
    return stats


def _pleasant(stats: TagStats) -> int:
    return sum(stats.counts[q] for q in PLEASANT_QUADRANTS)


def _unpleasant(stats: TagStats) -> int:
    return sum(stats.counts[q] for q in UNPLEASANT_QUADRANTS)


def insights(
    entries: Iterable[EmotionEntry],
    limit: Optional[int] = None,
    config: Optional[AnalyticsConfig] = None,
) -> List[str]:
    """
    Short natural-language observations about what goes with feeling good.

    Heuristics, in emission order:
      1. sleep    — pleasant check-ins outnumber unpleasant for a sleep amount
      2. activity — at least good_mood_ratio of check-ins after an activity are pleasant
    A value needs min_samples check-ins before it can say anything. The list
    is cut to `limit` (config.insight_limit by default) without reordering.
    """
    cfg = config or get_config()
    cap = cfg.insight_limit if limit is None else limit
    if cap < 0:
        raise MoodmapValidationError(f"limit must be >= 0, got {cap}")

    entries = list(entries)
    found: List[str] = []

    for stats in correlate(entries, "sleepHours"):
        if stats.count >= cfg.min_samples and _pleasant(stats) > _unpleasant(stats):
            found.append(f"You felt calmer with {stats.value} of sleep")

    for stats in correlate(entries, "physicalActivity"):
        if stats.value.lower() == NO_ACTIVITY:
            continue
        if stats.count >= cfg.min_samples and _pleasant(stats) / stats.count >= cfg.good_mood_ratio:
            found.append(f"{stats.value} often makes you feel good")

    logger.debug("Insights: %d found, returning %d", len(found), min(len(found), cap))
    return found[:cap]
