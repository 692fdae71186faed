# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Helpers shared by the tool modules: store access, clock and timezone defaults."""

from datetime import datetime, timezone as dt_timezone
from typing import Optional

from core.paths import get_paths
from affect.clock import resolve_timezone
from affect.config import get_config
from affect.schemas import parse_timestamp
from affect.store import JournalEntryStore


def get_store() -> JournalEntryStore:
    """The journal under the configured data dir."""
    return JournalEntryStore(get_paths().entries_journal)


def resolve_tz(timezone: Optional[str]) -> str:
    """Explicit zone, else the configured default. Validated either way."""
    name = timezone or get_config().default_timezone
    resolve_timezone(name)
    return name


def resolve_now(now: Optional[str]) -> datetime:
    """Parse an ISO instant, or read the wall clock when none is given."""
    if now:
        return parse_timestamp(now, assume_utc=False)
    return datetime.now(dt_timezone.utc)


def pct(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:.0f}%"
