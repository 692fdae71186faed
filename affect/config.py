# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Analytics configuration — tuning constants for buckets, insights and ranking.

The literal values are the product's shipped thresholds. They are not
derived from any policy, so they live here instead of inside the math.

Overrides come from the optional settings file (core.paths settings_file):

    {"good_mood_ratio": 0.7, "insight_limit": 2}

Unknown keys are ignored; an invalid file falls back to defaults with a
warning. The config is loaded once per process and handed out by reference;
update_config() writes overrides back to the file.
"""

import logging
import os
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from core.paths import get_paths
from affect.clock import resolve_timezone
from affect.schemas import MoodmapValidationError, load_validated, save_validated

logger = logging.getLogger("moodmap.config")


class AnalyticsConfig(BaseModel):
    """Immutable engine settings."""
    model_config = {"frozen": True, "extra": "ignore"}

    # Time-of-day buckets: local hour where each bucket starts.
    # Night wraps midnight: night_start..23 and 0..morning_start-1.
    morning_start: int = Field(6, ge=0, le=23)
    afternoon_start: int = Field(12, ge=0, le=23)
    evening_start: int = Field(17, ge=0, le=23)
    night_start: int = Field(21, ge=0, le=23)

    # Insight gating
    min_samples: int = Field(2, ge=1)
    good_mood_ratio: float = Field(0.6, gt=0, le=1)
    insight_limit: int = Field(3, ge=0)

    # Ranking / display sizes
    suggestion_count: int = Field(4, ge=1)
    search_limit: int = Field(8, ge=1)
    strategy_limit: int = Field(3, ge=1)
    top_emotion_limit: int = Field(5, ge=1)
    overview_days: int = Field(30, ge=1)

    # Fallback for surfaces with no user setting (CLI, MCP tools).
    # The analytics functions themselves always take an explicit timezone.
    default_timezone: str = "UTC"

    @model_validator(mode="after")
    def _check_bucket_order(self):
        starts = (self.morning_start, self.afternoon_start, self.evening_start, self.night_start)
        if list(starts) != sorted(set(starts)):
            raise ValueError(f"Bucket start hours must be strictly increasing, got {starts}")
        return self


_instance: Optional[AnalyticsConfig] = None


def load_config() -> AnalyticsConfig:
    """Read settings overrides (if any) on top of the defaults."""
    path = get_paths().settings_file
    config = load_validated(path, AnalyticsConfig)

    env_tz = os.environ.get("MOODMAP_TIMEZONE")
    if env_tz:
        config = config.model_copy(update={"default_timezone": env_tz})

    logger.debug("Loaded analytics config from %s: %s", path, config.model_dump())
    return config


def get_config() -> AnalyticsConfig:
    """Return the process-wide config (lazy-init)."""
    global _instance
    if _instance is None:
        _instance = load_config()
    return _instance


def configure(config: AnalyticsConfig) -> AnalyticsConfig:
    """Install an explicit config. Used by tests and the CLI."""
    global _instance
    _instance = config
    return _instance


def reset() -> None:
    """Drop the cached config so the next get_config() reloads."""
    global _instance
    _instance = None


def update_config(**changes: Any) -> AnalyticsConfig:
    """
    Apply overrides on top of the settings file, save it, and install the result.

    Starts from the file (not the env-adjusted config) so MOODMAP_TIMEZONE
    is never written back to disk.
    """
    path = get_paths().settings_file
    stored = load_validated(path, AnalyticsConfig)
    try:
        updated = AnalyticsConfig.model_validate({**stored.model_dump(), **changes})
    except ValidationError as e:
        logger.warning("Rejected settings update %s: %s", changes, e)
        raise MoodmapValidationError(f"Invalid settings: {e}") from e
    resolve_timezone(updated.default_timezone)

    save_validated(path, updated)
    logger.info("Saved settings to %s: %s", path, changes)
    reset()
    return get_config()
