# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Clock — calendar arithmetic in the user's timezone.

Nothing in the engine reads the system clock. Callers pass one `now` and one
IANA timezone name through a whole computation, and every "what day is it"
question is answered here, in that timezone. Never UTC, never the host's
local zone: a streak computed in the wrong zone skips or doubles a day near
midnight.
"""

import logging
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import List, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from affect.schemas import MoodmapTimezoneError, MoodmapValidationError, parse_date, parse_timestamp

logger = logging.getLogger("moodmap.clock")

Timestamp = Union[datetime, str]


@lru_cache(maxsize=64)
def resolve_timezone(name: str) -> ZoneInfo:
    """Resolve an IANA zone name. Unknown names raise — there is no UTC fallback."""
    if not name or not name.strip():
        raise MoodmapTimezoneError("Timezone name is empty")
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning("Unknown timezone %r", name)
        raise MoodmapTimezoneError(f"Unknown timezone: {name!r}") from e


def _aware(ts: Timestamp) -> datetime:
    if isinstance(ts, str):
        return parse_timestamp(ts)
    if ts.tzinfo is None:
        raise MoodmapValidationError(
            "Naive datetime passed where an absolute instant is required; "
            "attach a tzinfo (e.g. datetime.now(timezone.utc))"
        )
    return ts


def to_local(ts: Timestamp, timezone: str) -> datetime:
    """Convert an instant to wall-clock time in `timezone`."""
    return _aware(ts).astimezone(resolve_timezone(timezone))


def local_date(ts: Timestamp, timezone: str) -> str:
    """The "YYYY-MM-DD" calendar date of an instant, as seen in `timezone`."""
    return to_local(ts, timezone).date().isoformat()


def local_hour(ts: Timestamp, timezone: str) -> int:
    return to_local(ts, timezone).hour


def today_and_yesterday(now: Timestamp, timezone: str) -> Tuple[str, str]:
    """Today's and yesterday's dates in `timezone` for the injected `now`."""
    today = to_local(now, timezone).date()
    return today.isoformat(), (today - timedelta(days=1)).isoformat()


def shift_day(day: Union[str, date], days: int) -> str:
    """Move a calendar date by whole days. Pure date math, no timezone involved."""
    d = parse_date(day) if isinstance(day, str) else day
    try:
        return (d + timedelta(days=days)).isoformat()
    except OverflowError as e:
        raise MoodmapValidationError(f"Shifting {d.isoformat()} by {days} days leaves the calendar") from e


def day_range(end: str, days: int) -> List[str]:
    """The `days` calendar dates ending at `end`, oldest first."""
    if days < 1:
        raise MoodmapValidationError(f"Day range must cover at least one day, got {days}")
    shift_day(end, -(days - 1))
    end_d = parse_date(end)
    return [(end_d - timedelta(days=n)).isoformat() for n in range(days - 1, -1, -1)]
