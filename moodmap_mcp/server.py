#!/usr/bin/env python3
# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Moodmap MCP Server

Tools are organized into domain modules under moodmap_mcp/tools/.
Importing each module registers its tools via the profile-aware @tool() decorator.

Profiles:
  --profile full  → every tool as its own schema
  --profile lean  → core schemas + 1 moodmap_do meta-tool (default)

Tools:
- checkin:  moodmap_classify, moodmap_suggest, moodmap_search, moodmap_checkin, moodmap_strategies
- patterns: moodmap_streak, moodmap_time_of_day, moodmap_correlate, moodmap_insights,
            moodmap_weekly, moodmap_calendar, moodmap_summary
- settings: moodmap_settings
"""

import atexit
import importlib
import logging
import os as _os
import sys as _sys

from moodmap_mcp._app import mcp, get_profile, set_profile, shutdown_executor

logger = logging.getLogger("moodmap.server")

# Must happen before tool module imports: @tool() reads the profile.
_env_profile = _os.environ.get("MOODMAP_PROFILE")
if _env_profile and _env_profile != get_profile():
    set_profile(_env_profile)

_MODULE_IMPORTS = {
    "checkin":  "moodmap_mcp.tools.checkin",
    "patterns": "moodmap_mcp.tools.patterns",
    "settings": "moodmap_mcp.tools.settings",
}

_loaded_modules: list = []

for _mod_name, _import_path in _MODULE_IMPORTS.items():
    importlib.import_module(_import_path)
    _loaded_modules.append(_mod_name)

logger.info(
    "Profile %s — %d modules loaded: %s",
    get_profile(), len(_loaded_modules), ", ".join(_loaded_modules),
)
# stderr, so it doesn't interfere with MCP stdio
print(f"Moodmap ({get_profile()}) — {len(_loaded_modules)} modules active", file=_sys.stderr)

if get_profile() == "lean":
    import moodmap_mcp.tools.meta

atexit.register(shutdown_executor)


if __name__ == "__main__":
    mcp.run()
