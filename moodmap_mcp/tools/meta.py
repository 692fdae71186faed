# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Meta-tool: moodmap_do — dispatches to any registered tool by short name.

Only loaded in lean profile. Registered directly via @mcp.tool() so it
always gets a full MCP schema. Dispatched tools run in the executor.
"""

import asyncio
import inspect
import json

from moodmap_mcp._app import mcp, _TOOL_REGISTRY, _CORE_TOOLS, _executor


def dispatch(tool: str, params: str = "{}"):
    """Resolve a short tool name and its JSON params to (fn, kwargs), or an error string."""
    name = tool.strip()
    if name.startswith("moodmap_"):
        name = name[len("moodmap_"):]

    fn = _TOOL_REGISTRY.get(f"moodmap_{name}")
    if fn is None:
        available = sorted(
            k.replace("moodmap_", "")
            for k in _TOOL_REGISTRY
            if k not in _CORE_TOOLS
        )
        return (
            f"Unknown tool: '{name}'\n\n"
            f"Available tools ({len(available)}):\n"
            + "\n".join(f"  {t}" for t in available)
        )

    try:
        kwargs = json.loads(params)
    except json.JSONDecodeError as e:
        return f"Invalid JSON in params: {e}\n\nGot: {params[:200]}"

    if not isinstance(kwargs, dict):
        return f"params must be a JSON object, got {type(kwargs).__name__}"

    sig = inspect.signature(fn)
    try:
        sig.bind(**kwargs)
    except TypeError as e:
        param_info = []
        for pname, param in sig.parameters.items():
            if param.default is inspect.Parameter.empty:
                param_info.append(f"  {pname} (required)")
            else:
                param_info.append(f"  {pname} = {param.default!r}")
        return (
            f"Parameter error for '{name}': {e}\n\n"
            f"Expected signature:\n" + "\n".join(param_info)
        )

    return fn, kwargs


@mcp.tool()
async def moodmap_do(tool: str, params: str = "{}") -> str:
    """
    Run any Moodmap tool by short name. Use this to reach tools not loaded
    as individual schemas in lean profile.

    Args:
        tool: Tool name without "moodmap_" prefix, e.g. "streak", "insights".
        params: JSON string of parameters. Example: '{"field": "who"}'

    Available tools and key params:

    CHECK-IN:
      search(query, limit)
      strategies(quadrant, limit)

    PATTERNS:
      streak(timezone, now)
      time_of_day(timezone, days, now)
      correlate(field)  — who | what | body | sleepHours | physicalActivity
      insights(limit)
      weekly(timezone, now)
      calendar(start, end)

    SETTINGS:
      settings(timezone, insight_limit, min_samples, good_mood_ratio)

    Returns:
        Tool output or error message
    """
    resolved = dispatch(tool, params)
    if isinstance(resolved, str):
        return resolved
    fn, kwargs = resolved

    try:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_executor, lambda: fn(**kwargs))
    except Exception as e:
        return f"Error running '{tool}': {type(e).__name__}: {e}"
