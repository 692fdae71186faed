# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Time-of-day buckets — when in the day each feeling tends to show up.

Buckets by local hour in the user's timezone (defaults, see AnalyticsConfig):
    morning    06:00-11:59
    afternoon  12:00-16:59
    evening    17:00-20:59
    night      21:00-05:59
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from affect.clock import Timestamp, local_hour, resolve_timezone
from affect.config import AnalyticsConfig, get_config
from affect.schemas import Bucket, BucketStats, EmotionEntry
from affect.space import count_quadrants, dominant, to_percentages

logger = logging.getLogger("moodmap.time_buckets")

BUCKETS: Tuple[Bucket, ...] = ("morning", "afternoon", "evening", "night")


def bucket_for_hour(hour: int, config: Optional[AnalyticsConfig] = None) -> Bucket:
    cfg = config or get_config()
    if cfg.morning_start <= hour < cfg.afternoon_start:
        return "morning"
    if cfg.afternoon_start <= hour < cfg.evening_start:
        return "afternoon"
    if cfg.evening_start <= hour < cfg.night_start:
        return "evening"
    return "night"


def bucket(timestamp: Timestamp, timezone: str, config: Optional[AnalyticsConfig] = None) -> Bucket:
    """Which bucket an instant falls in, by its local hour in `timezone`."""
    return bucket_for_hour(local_hour(timestamp, timezone), config)


def distribution(
    entries: Iterable[EmotionEntry],
    timezone: str,
    config: Optional[AnalyticsConfig] = None,
) -> Dict[Bucket, BucketStats]:
    """
    Per-bucket quadrant breakdown.

    Percentages are over the entries in that bucket only. A bucket with no
    entries reports percentages=None ("no data"), not a row of zeros.
    """
    cfg = config or get_config()
    resolve_timezone(timezone)

    grouped: Dict[Bucket, List[str]] = {b: [] for b in BUCKETS}
    for entry in entries:
        grouped[bucket(entry.created_at, timezone, cfg)].append(entry.quadrant)

    result: Dict[Bucket, BucketStats] = {}
    for b in BUCKETS:
        counts = count_quadrants(grouped[b])
        result[b] = BucketStats(
            bucket=b,
            count=len(grouped[b]),
            counts=counts,
            percentages=to_percentages(counts),
            dominant=dominant(counts),
        )

    logger.debug("Bucket counts (%s): %s", timezone, {b: s.count for b, s in result.items()})
    return result
