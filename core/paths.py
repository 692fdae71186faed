# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Moodmap Paths — single source of truth for all data file locations.

Resolution order:
  1. configure(data_dir) (CLI --data-dir, tests)
  2. MOODMAP_DATA_DIR environment variable
  3. Default: ~/.moodmap/

Usage:
    from core.paths import get_paths
    p = get_paths()
    p.entries_journal   # ~/.moodmap/moodmap-entries.jsonl
    p.settings_file     # ~/.moodmap/moodmap-settings.json

For tests:
    from core.paths import configure
    configure(tmp_path)  # all paths now rooted under tmp_path
"""

import os
from pathlib import Path
from typing import Optional


class MoodmapPaths:
    """Central registry of every file and directory Moodmap uses."""

    def __init__(self, data_dir: Optional[Path] = None):
        if data_dir is not None:
            self._root = Path(data_dir)
        else:
            env = os.environ.get("MOODMAP_DATA_DIR")
            if env:
                self._root = Path(env).expanduser()
            else:
                self._root = Path.home() / ".moodmap"

    # ------------------------------------------------------------------
    # Root
    # ------------------------------------------------------------------
    @property
    def data_dir(self) -> Path:
        return self._root

    # ------------------------------------------------------------------
    # Check-in data
    # ------------------------------------------------------------------
    @property
    def entries_journal(self) -> Path:
        return self._root / "moodmap-entries.jsonl"

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    @property
    def settings_file(self) -> Path:
        return self._root / "moodmap-settings.json"

    # ------------------------------------------------------------------
    # Logs
    # ------------------------------------------------------------------
    @property
    def engine_log(self) -> Path:
        return self._root / "moodmap-engine.log"

    # ------------------------------------------------------------------
    # Directory creation
    # ------------------------------------------------------------------
    def ensure_dirs(self) -> None:
        """Create all required directories."""
        self.data_dir.mkdir(parents=True, exist_ok=True)


# ===========================================================================
# Singleton
# ===========================================================================

_instance: Optional[MoodmapPaths] = None


def get_paths() -> MoodmapPaths:
    """Return the global MoodmapPaths singleton (lazy-init)."""
    global _instance
    if _instance is None:
        _instance = MoodmapPaths()
    return _instance


def configure(data_dir: Path) -> MoodmapPaths:
    """
    Override the global paths singleton. Used by tests and CLI --data-dir.

    Returns the new instance for convenience.
    """
    global _instance
    _instance = MoodmapPaths(data_dir=data_dir)
    return _instance


def reset() -> None:
    """Reset singleton so next get_paths() re-reads env."""
    global _instance
    _instance = None
