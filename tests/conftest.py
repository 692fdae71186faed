# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Test configuration — paths and settings isolation for tests."""

import pytest

from core.paths import configure, reset
from affect import config as affect_config


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path, monkeypatch):
    """Route all Moodmap data to a temp directory for test isolation."""
    monkeypatch.delenv("MOODMAP_TIMEZONE", raising=False)
    monkeypatch.delenv("MOODMAP_DATA_DIR", raising=False)
    paths = configure(tmp_path)
    paths.ensure_dirs()
    affect_config.reset()
    yield paths
    affect_config.reset()
    reset()
