# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Moodmap CLI — run the MCP server, or query the engine from a shell.

Usage:
    moodmap serve                          Start MCP server (stdio)
    moodmap serve --profile full           Start with every tool schema
    moodmap classify 80 85                 Quadrant for a slider position
    moodmap suggest 80 85 [-k 4]           Closest emotion words
    moodmap search calm                    Emotion words containing "calm"
    moodmap checkin 80 85 [--emotion W]    Save a check-in
    moodmap streak [--timezone TZ]         Current and longest streak
    moodmap insights                       What goes with feeling good
    moodmap weekly [--timezone TZ]         Rolling seven-day snapshot
    moodmap summary [--days N]             Patterns overview as JSON
    moodmap settings [--timezone TZ]       Show or change saved settings
    moodmap --data-dir PATH                Override data directory
"""

import argparse
import os
import sys
from pathlib import Path


def _serve(data_dir: Path, profile: str = "lean") -> None:
    """Start the MCP server over stdio."""
    from core.paths import configure

    configure(data_dir).ensure_dirs()

    # Set profile BEFORE importing server (which imports tool modules)
    from moodmap_mcp._app import set_profile
    set_profile(profile)

    from moodmap_mcp.server import mcp
    mcp.run()


def _run_tool(data_dir: Path, name: str, **kwargs) -> int:
    """Run one tool function in-process and print its output."""
    from core.paths import configure

    configure(data_dir).ensure_dirs()

    import moodmap_mcp.tools.checkin  # noqa: F401  registers tools
    import moodmap_mcp.tools.patterns  # noqa: F401
    import moodmap_mcp.tools.settings  # noqa: F401
    from moodmap_mcp._app import _TOOL_REGISTRY

    output = _TOOL_REGISTRY[name](**kwargs)
    print(output)
    return 1 if output.startswith("Error:") else 0


def _add_clock_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--timezone", default=None,
                   help="IANA timezone (default: $MOODMAP_TIMEZONE or settings, else UTC)")
    p.add_argument("--now", default=None,
                   help="ISO-8601 instant with UTC offset, e.g. 2024-01-15T09:00:00Z (default: current time)")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="moodmap",
        description="Moodmap — affective check-ins and mood pattern analytics",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Override data directory (default: $MOODMAP_DATA_DIR or ~/.moodmap/)",
    )
    parser.add_argument(
        "--version", action="store_true",
        help="Show version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_parser = sub.add_parser("serve", help="Start MCP server (stdio)")
    serve_parser.add_argument("--profile", choices=["lean", "full"], default=None,
                              help="Tool profile: lean (core schemas + moodmap_do, default) or full")

    # classify / suggest
    classify_parser = sub.add_parser("classify", help="Quadrant for a slider position")
    classify_parser.add_argument("energy", type=float)
    classify_parser.add_argument("pleasantness", type=float)

    suggest_parser = sub.add_parser("suggest", help="Closest emotion words")
    suggest_parser.add_argument("energy", type=float)
    suggest_parser.add_argument("pleasantness", type=float)
    suggest_parser.add_argument("-k", type=int, default=None, help="How many words")

    search_parser = sub.add_parser("search", help="Search emotion words")
    search_parser.add_argument("query")
    search_parser.add_argument("--limit", type=int, default=None)

    # checkin
    checkin_parser = sub.add_parser("checkin", help="Save a check-in")
    checkin_parser.add_argument("energy", type=float)
    checkin_parser.add_argument("pleasantness", type=float)
    checkin_parser.add_argument("--emotion", default=None, help="Chosen word (default: best match)")
    checkin_parser.add_argument("--note", default=None)
    checkin_parser.add_argument("--who", default=None)
    checkin_parser.add_argument("--what", default=None)
    checkin_parser.add_argument("--sleep", default=None, dest="sleep_hours")
    checkin_parser.add_argument("--activity", default=None, dest="physical_activity")
    _add_clock_args(checkin_parser)

    # patterns
    streak_parser = sub.add_parser("streak", help="Current and longest streak")
    _add_clock_args(streak_parser)

    insights_parser = sub.add_parser("insights", help="What goes with feeling good")
    insights_parser.add_argument("--limit", type=int, default=None)

    weekly_parser = sub.add_parser("weekly", help="Rolling seven-day snapshot")
    _add_clock_args(weekly_parser)

    summary_parser = sub.add_parser("summary", help="Patterns overview as JSON")
    summary_parser.add_argument("--days", type=int, default=None)
    _add_clock_args(summary_parser)

    # settings
    settings_parser = sub.add_parser("settings", help="Show or change saved settings")
    settings_parser.add_argument("--timezone", default=None, help="Default IANA timezone")
    settings_parser.add_argument("--insight-limit", type=int, default=None, dest="insight_limit")
    settings_parser.add_argument("--min-samples", type=int, default=None, dest="min_samples")
    settings_parser.add_argument("--good-mood-ratio", type=float, default=None, dest="good_mood_ratio")

    args = parser.parse_args()

    if args.version:
        try:
            from importlib.metadata import version
            print(f"moodmap {version('moodmap')}")
        except Exception:
            print("moodmap (version unknown — not installed via pip)")
        sys.exit(0)

    # Resolve data dir: flag → env → default
    if args.data_dir:
        data_dir = args.data_dir.expanduser().resolve()
    else:
        env = os.environ.get("MOODMAP_DATA_DIR")
        data_dir = Path(env).expanduser().resolve() if env else Path.home() / ".moodmap"

    if args.command == "serve":
        profile = args.profile or os.environ.get("MOODMAP_PROFILE", "lean")
        _serve(data_dir, profile=profile)
        return

    if args.command == "classify":
        code = _run_tool(data_dir, "moodmap_classify",
                         energy=args.energy, pleasantness=args.pleasantness)
    elif args.command == "suggest":
        code = _run_tool(data_dir, "moodmap_suggest",
                         energy=args.energy, pleasantness=args.pleasantness, k=args.k)
    elif args.command == "search":
        code = _run_tool(data_dir, "moodmap_search", query=args.query, limit=args.limit)
    elif args.command == "checkin":
        code = _run_tool(
            data_dir, "moodmap_checkin",
            energy=args.energy, pleasantness=args.pleasantness,
            emotion=args.emotion, note=args.note, who=args.who, what=args.what,
            sleep_hours=args.sleep_hours, physical_activity=args.physical_activity,
            timezone=args.timezone, now=args.now,
        )
    elif args.command == "streak":
        code = _run_tool(data_dir, "moodmap_streak", timezone=args.timezone, now=args.now)
    elif args.command == "insights":
        code = _run_tool(data_dir, "moodmap_insights", limit=args.limit)
    elif args.command == "weekly":
        code = _run_tool(data_dir, "moodmap_weekly", timezone=args.timezone, now=args.now)
    elif args.command == "summary":
        code = _run_tool(data_dir, "moodmap_summary",
                         timezone=args.timezone, days=args.days, now=args.now)
    elif args.command == "settings":
        code = _run_tool(data_dir, "moodmap_settings",
                         timezone=args.timezone, insight_limit=args.insight_limit,
                         min_samples=args.min_samples, good_mood_ratio=args.good_mood_ratio)
    else:
        parser.print_help()
        code = 1

    sys.exit(code)


if __name__ == "__main__":
    main()
