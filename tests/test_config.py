# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Tests for analytics settings loading and overrides."""

import json

import pytest
from pydantic import ValidationError

from affect import config as affect_config
from affect.config import AnalyticsConfig, get_config, load_config, update_config
from affect.schemas import MoodmapTimezoneError, MoodmapValidationError
from core.paths import get_paths


class TestAnalyticsConfig:

    def test_defaults(self):
        cfg = AnalyticsConfig()
        assert (cfg.morning_start, cfg.afternoon_start, cfg.evening_start, cfg.night_start) == (6, 12, 17, 21)
        assert cfg.min_samples == 2
        assert cfg.good_mood_ratio == 0.6
        assert cfg.insight_limit == 3
        assert cfg.suggestion_count == 4
        assert cfg.default_timezone == "UTC"

    def test_bucket_starts_must_increase(self):
        with pytest.raises(ValidationError):
            AnalyticsConfig(morning_start=12, afternoon_start=12)

    def test_ratio_bounds(self):
        with pytest.raises(ValidationError):
            AnalyticsConfig(good_mood_ratio=1.5)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            AnalyticsConfig().insight_limit = 5


class TestLoadConfig:

    def test_no_settings_file(self):
        assert load_config() == AnalyticsConfig()

    def test_settings_file_overrides(self):
        get_paths().settings_file.write_text(json.dumps({"insight_limit": 1, "unknown": True}))
        cfg = load_config()
        assert cfg.insight_limit == 1
        assert cfg.min_samples == 2

    def test_invalid_settings_fall_back(self):
        get_paths().settings_file.write_text(json.dumps({"good_mood_ratio": 7}))
        assert load_config() == AnalyticsConfig()

    def test_env_timezone(self, monkeypatch):
        monkeypatch.setenv("MOODMAP_TIMEZONE", "Europe/Belgrade")
        assert load_config().default_timezone == "Europe/Belgrade"

    def test_cached_until_reset(self):
        first = get_config()
        assert get_config() is first
        affect_config.reset()
        assert get_config() is not first

    def test_configure(self):
        cfg = AnalyticsConfig(insight_limit=9)
        affect_config.configure(cfg)
        assert get_config() is cfg


class TestUpdateConfig:

    def test_writes_settings_file(self):
        cfg = update_config(insight_limit=1)
        assert cfg.insight_limit == 1
        assert get_config() is cfg
        saved = json.loads(get_paths().settings_file.read_text())
        assert saved["insight_limit"] == 1
        assert saved["min_samples"] == 2

    def test_keeps_earlier_overrides(self):
        update_config(insight_limit=1)
        update_config(min_samples=4)
        assert (load_config().insight_limit, load_config().min_samples) == (1, 4)

    def test_invalid_value_not_written(self):
        with pytest.raises(MoodmapValidationError):
            update_config(good_mood_ratio=7)
        assert not get_paths().settings_file.exists()

    def test_unknown_timezone_not_written(self):
        with pytest.raises(MoodmapTimezoneError):
            update_config(default_timezone="Mars/Base")
        assert not get_paths().settings_file.exists()

    def test_env_timezone_not_persisted(self, monkeypatch):
        monkeypatch.setenv("MOODMAP_TIMEZONE", "Europe/Belgrade")
        cfg = update_config(insight_limit=5)
        assert cfg.default_timezone == "Europe/Belgrade"
        saved = json.loads(get_paths().settings_file.read_text())
        assert saved["default_timezone"] == "UTC"
