# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Moodmap Schema Registry — Pydantic models for everything the engine reads or returns.

Single source of truth for coordinates, catalog rows, check-in entries and
the analytics result shapes. Catches field drift and out-of-range values at
the boundary, before any ranking or aggregation math runs.

Usage:
    from affect.schemas import Coordinate, EmotionEntry

    c = Coordinate(energy=80, pleasantness=85)
    entry = EmotionEntry.model_validate(row)

Entry-like models use extra="allow" so rows written by newer clients with
unknown fields won't break — we just won't validate those extra fields.
Result models are frozen: analytics hand out values, never shared state.
"""

from datetime import date, datetime, timezone
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


Quadrant = Literal["high-pleasant", "high-unpleasant", "low-unpleasant", "low-pleasant"]
Bucket = Literal["morning", "afternoon", "evening", "night"]


# ============================================================================
# Base config
# ============================================================================

class MoodmapModel(BaseModel):
    """Base for stored Moodmap records. Allows extra fields for forward compat."""
    model_config = {"extra": "allow"}


class FrozenModel(BaseModel):
    """Base for immutable values handed out by the engine."""
    model_config = {"frozen": True, "extra": "forbid"}


# ============================================================================
# Custom exceptions: standardized error handling across the engine
# ============================================================================

class MoodmapValidationError(ValueError):
    """Raised when input fails a precondition (range, field name, date format)."""


class MoodmapTimezoneError(MoodmapValidationError):
    """Raised when an IANA timezone name can't be resolved. Never falls back to UTC."""


class MoodmapNotFoundError(Exception):
    """Raised when a requested entry doesn't exist in a store."""


# ============================================================================
# AFFECTIVE SPACE
# ============================================================================

class Coordinate(FrozenModel):
    """A point in affective space. Both axes 0-100, 50/50 is the origin."""
    energy: float = Field(ge=0, le=100)
    pleasantness: float = Field(ge=0, le=100)


class QuadrantInfo(FrozenModel):
    """Static display metadata for one quadrant."""
    id: Quadrant
    label: str
    description: str
    color: str
    bg_color: str
    border_color: str
    emotions: Tuple[str, ...]


class CatalogEmotion(FrozenModel):
    """Reference point used for distance ranking. Not persisted per user."""
    emotion: str
    quadrant: Quadrant
    energy: float
    pleasantness: float


class Suggestion(FrozenModel):
    """A catalog emotion plus its distance to the query coordinate."""
    emotion: str
    quadrant: Quadrant
    energy: float
    pleasantness: float
    distance: float


class CheckinChoice(FrozenModel):
    """The (emotion, quadrant) pair a completed check-in should be saved with."""
    emotion: str
    quadrant: Quadrant
    source: Literal["selected", "suggested"]


# ============================================================================
# CHECK-IN ENTRIES
# ============================================================================

class EntryContext(MoodmapModel):
    """Free-form context tags attached to a check-in."""
    model_config = {"extra": "allow", "populate_by_name": True}

    who: Optional[str] = None
    what: Optional[str] = None
    body: Optional[str] = None
    sleep_hours: Optional[str] = Field(None, alias="sleepHours")
    physical_activity: Optional[str] = Field(None, alias="physicalActivity")


def parse_timestamp(value: str, assume_utc: bool = True) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    A trailing "Z" is accepted. Naive timestamps are taken as UTC, since
    stored rows come from a server clock, not the user's wall clock. Pass
    assume_utc=False for user-supplied instants, where a missing offset is
    an error.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError as e:
        raise MoodmapValidationError(f"Invalid ISO-8601 timestamp: {value!r}") from e
    if dt.tzinfo is None:
        if not assume_utc:
            raise MoodmapValidationError(
                f"Timestamp {value!r} has no UTC offset; add one (e.g. 'Z' or '+02:00')"
            )
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_date(value: str) -> date:
    """Parse a "YYYY-MM-DD" calendar date. Other ISO spellings (20240105) are rejected."""
    try:
        d = date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise MoodmapValidationError(f"Invalid calendar date (want YYYY-MM-DD): {value!r}") from e
    if d.isoformat() != value:
        raise MoodmapValidationError(f"Invalid calendar date (want YYYY-MM-DD): {value!r}")
    return d


class EmotionEntry(MoodmapModel):
    """
    One persisted check-in.

    entry_date is fixed from created_at in the user's timezone when the entry
    is created and never recomputed, so history stays stable if the user
    later changes timezone.
    """
    id: str
    quadrant: Quadrant
    emotion: str
    intensity: Optional[float] = None
    note: Optional[str] = None
    context: Optional[EntryContext] = None
    entry_date: str
    created_at: str

    @field_validator("entry_date")
    @classmethod
    def _check_entry_date(cls, v: str) -> str:
        parse_date(v)
        return v

    @field_validator("created_at")
    @classmethod
    def _check_created_at(cls, v: str) -> str:
        parse_timestamp(v)
        return v

    @property
    def created(self) -> datetime:
        return parse_timestamp(self.created_at)


# ============================================================================
# ANALYTICS RESULTS
# ============================================================================

class BucketStats(FrozenModel):
    """Quadrant breakdown for one time-of-day bucket. percentages is None when empty."""
    bucket: Bucket
    count: int
    counts: Dict[str, int]
    percentages: Optional[Dict[str, float]] = None
    dominant: Optional[Quadrant] = None


class TagStats(FrozenModel):
    """Quadrant breakdown for one distinct context value."""
    value: str
    count: int
    counts: Dict[str, int]
    percentages: Dict[str, float]
    dominant: Quadrant


class DayStats(FrozenModel):
    """Calendar cell: how many check-ins on a date and which quadrant led."""
    date: str
    count: int
    dominant: Optional[Quadrant] = None


class Strategy(FrozenModel):
    """A short regulation exercise and the quadrants it helps with."""
    id: str
    title: str
    description: str
    duration: str
    type: Literal["breathing", "grounding", "cognitive", "movement", "mindfulness"]
    target_quadrants: Tuple[Quadrant, ...]


class WeeklySnapshot(FrozenModel):
    """Rolling seven-day summary with display-ready messages."""
    streak: int
    total_this_week: int
    top_emotion: Optional[str] = None
    dominant_quadrant: Optional[Quadrant] = None
    average_per_day: float
    messages: List[str]


# ============================================================================
# UTILITY: validated load/save helpers
# ============================================================================

import json
import logging
import os
from pathlib import Path
from typing import Any, Type, TypeVar

logger = logging.getLogger("moodmap.schemas")

T = TypeVar("T", bound=BaseModel)


def load_validated(path: Path, schema: Type[T], default: Any = None) -> T:
    """
    Load JSON from file and validate against schema.

    Args:
        path: Path to JSON file
        schema: Pydantic model class to validate against
        default: Default value if file doesn't exist or is invalid.
                 If None, returns schema() with all defaults.
    """
    if not path.exists():
        if default is not None:
            return schema.model_validate(default)
        return schema()

    try:
        data = json.loads(path.read_text())
        return schema.model_validate(data)
    except (json.JSONDecodeError, ValueError) as e:
        logger.warning("Ignoring invalid %s at %s: %s", schema.__name__, path, e)
        if default is not None:
            return schema.model_validate(default)
        return schema()


def _atomic_rename(tmp: Path, dest: Path):
    """Flush, fsync, then rename — crash-safe atomic write."""
    fd = os.open(str(tmp), os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)
    os.replace(str(tmp), str(dest))


def save_validated(path: Path, model: BaseModel, atomic: bool = True):
    """
    Save a validated model to JSON file.

    Args:
        path: Destination path
        model: Pydantic model instance
        atomic: If True, write to .tmp then rename (default: True)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = model.model_dump_json(indent=2, by_alias=True)

    if atomic:
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(content)
        _atomic_rename(tmp, path)
    else:
        path.write_text(content)


def load_validated_jsonl(path: Path, schema: Type[T]) -> List[T]:
    """Load a JSONL file, validating each line. Bad lines are skipped and logged."""
    if not path.exists():
        return []

    items: List[T] = []
    with open(path) as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                items.append(schema.model_validate(json.loads(line)))
            except (json.JSONDecodeError, ValueError) as e:
                logger.warning("Skipping %s line %d: %s", path.name, lineno, e)
    return items


def append_jsonl(path: Path, model: BaseModel) -> None:
    """Append one model as a JSON line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a") as f:
        f.write(model.model_dump_json(by_alias=True, exclude_none=True) + "\n")
