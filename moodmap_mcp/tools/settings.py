# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Settings tool — view or change the persisted analytics settings."""

from typing import Optional

from moodmap_mcp._app import tool
from affect.config import get_config, update_config
from affect.schemas import MoodmapValidationError


@tool()
def moodmap_settings(
    timezone: Optional[str] = None,
    insight_limit: Optional[int] = None,
    min_samples: Optional[int] = None,
    good_mood_ratio: Optional[float] = None,
) -> str:
    """
    Show settings, or save new values for any that are given.

    Args:
        timezone: Default IANA zone when a tool call names none
        insight_limit: Max insights returned
        min_samples: Check-ins a context value needs before it yields an insight
        good_mood_ratio: Pleasant share (0-1] an activity needs to count as a mood lift

    Returns:
        The settings now in effect
    """
    changes = {
        k: v for k, v in (
            ("default_timezone", timezone),
            ("insight_limit", insight_limit),
            ("min_samples", min_samples),
            ("good_mood_ratio", good_mood_ratio),
        ) if v is not None
    }
    try:
        cfg = update_config(**changes) if changes else get_config()
    except MoodmapValidationError as e:
        return f"Error: {e}"

    return "\n".join([
        f"Timezone: {cfg.default_timezone}",
        f"Insight limit: {cfg.insight_limit}",
        f"Min samples: {cfg.min_samples}",
        f"Good mood ratio: {cfg.good_mood_ratio}",
    ])
