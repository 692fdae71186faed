# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Shared FastMCP application instance and profile-aware tool registration.

Profile system:
  - "full"  — every tool registered as its own MCP schema
  - "lean"  — core check-in tools + 1 moodmap_do meta-tool

All sync tool handlers are wrapped in async def + run_in_executor so
concurrent MCP calls don't block each other. The raw sync function is
kept in _TOOL_REGISTRY for moodmap_do direct dispatch and for tests.
"""

import asyncio
import functools
import logging
from concurrent.futures import ThreadPoolExecutor

from core.paths import get_paths

# Central logging config: all moodmap.* loggers route here
_log_path = get_paths().engine_log
_log_path.parent.mkdir(parents=True, exist_ok=True)
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.FileHandler(str(_log_path)),
    ],
)

from mcp.server.fastmcp import FastMCP

mcp = FastMCP("moodmap")

_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="moodmap-tool")

logger = logging.getLogger("moodmap.app")

# ---------------------------------------------------------------------------
# Profile system
# ---------------------------------------------------------------------------

_PROFILE: str = "lean"  # default; overridden by set_profile() before imports

_CORE_TOOLS: frozenset = frozenset({
    "moodmap_classify",
    "moodmap_suggest",
    "moodmap_checkin",
    "moodmap_summary",
})

# Keys are the function name (e.g. "moodmap_streak"), values are the
# RAW SYNC function, even when an async wrapper is registered with MCP.
_TOOL_REGISTRY: dict = {}


def set_profile(profile: str) -> None:
    """Set the tool profile before tool modules are imported."""
    global _PROFILE
    if profile not in ("lean", "full"):
        raise ValueError(f"Unknown profile {profile!r} (expected 'lean' or 'full')")
    _PROFILE = profile


def get_profile() -> str:
    return _PROFILE


def tool():
    """Profile-aware decorator replacing @mcp.tool().

    - Always stores the raw sync function in _TOOL_REGISTRY.
    - In "full" mode, or for core tools, registers an async wrapper with MCP.
    - Otherwise returns the raw function (reachable through moodmap_do only).
    """
    def decorator(fn):
        name = fn.__name__
        _TOOL_REGISTRY[name] = fn

        if _PROFILE == "full" or name in _CORE_TOOLS:
            if not asyncio.iscoroutinefunction(fn):
                @functools.wraps(fn)
                async def async_wrapper(**kwargs):
                    loop = asyncio.get_running_loop()
                    return await loop.run_in_executor(
                        _executor, lambda: fn(**kwargs)
                    )
                register_fn = async_wrapper
            else:
                register_fn = fn
            mcp.tool()(register_fn)

        return fn

    return decorator


def shutdown_executor() -> None:
    """Graceful shutdown of the tool executor pool."""
    _executor.shutdown(wait=False)
    logger.info("Tool executor pool shut down")
