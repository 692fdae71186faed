# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Streaks — consecutive calendar days with at least one check-in.

A streak is alive if there's an entry today or yesterday. Missing both means
it's already broken, even before counting. Dates are the entries' stored
entry_date strings; "today" comes from the caller's clock in the user's
timezone (see affect.clock).
"""

import logging
from typing import AbstractSet, Iterable

from affect.clock import Timestamp, shift_day, today_and_yesterday
from affect.schemas import EmotionEntry, parse_date

logger = logging.getLogger("moodmap.streaks")


def streak(entry_dates: AbstractSet[str], today: str, yesterday: str) -> int:
    """
    Current streak length.

    Starts at today if checked in, else yesterday, and walks back one day at
    a time until the first gap. Several entries on one date are one day.
    """
    parse_date(today)
    parse_date(yesterday)

    if today in entry_dates:
        day = today
    elif yesterday in entry_dates:
        day = yesterday
    else:
        return 0

    count = 0
    while day in entry_dates:
        count += 1
        day = shift_day(day, -1)
    return count


def current_streak(entries: Iterable[EmotionEntry], now: Timestamp, timezone: str) -> int:
    """streak() over a list of entries, with today/yesterday taken from `now` in `timezone`."""
    dates = {e.entry_date for e in entries}
    today, yesterday = today_and_yesterday(now, timezone)
    result = streak(dates, today, yesterday)
    logger.debug("Streak for %s (%s): %d over %d distinct days", today, timezone, result, len(dates))
    return result


def longest_streak(entry_dates: Iterable[str]) -> int:
    """Longest run of consecutive dates anywhere in the history."""
    ordinals = sorted({parse_date(d).toordinal() for d in entry_dates})
    if not ordinals:
        return 0

    best = run = 1
    for prev, cur in zip(ordinals, ordinals[1:]):
        run = run + 1 if cur == prev + 1 else 1
        best = max(best, run)
    return best
