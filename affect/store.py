# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Entry stores — read access to check-in history.

The analytics modules only ever read. Creating, editing and deleting entries
belongs to whatever owns persistence; this module gives the engine a small
interface over that, plus two concrete stores:

- InMemoryEntryStore: a snapshot list (tests, one-off computations)
- JournalEntryStore:  append-only JSONL journal under the data dir
"""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from pydantic import ValidationError

from affect.clock import local_date
from affect.schemas import (
    EmotionEntry, EntryContext, MoodmapNotFoundError, MoodmapValidationError, Quadrant,
    append_jsonl, load_validated_jsonl, parse_date,
)

logger = logging.getLogger("moodmap.store")


class EntryStore(ABC):
    """Read-only view over persisted check-ins."""

    @abstractmethod
    def all(self) -> List[EmotionEntry]:
        """Every entry, in stored order."""

    def get(self, entry_id: str) -> EmotionEntry:
        for entry in self.all():
            if entry.id == entry_id:
                return entry
        raise MoodmapNotFoundError(f"No entry with id {entry_id!r}")

    def between(self, start_date: str, end_date: str) -> List[EmotionEntry]:
        """Entries whose entry_date falls in [start_date, end_date], inclusive."""
        parse_date(start_date)
        parse_date(end_date)
        return [e for e in self.all() if start_date <= e.entry_date <= end_date]

    def dates(self) -> Set[str]:
        """Distinct calendar dates with at least one entry."""
        return {e.entry_date for e in self.all()}

    def __len__(self) -> int:
        return len(self.all())


class InMemoryEntryStore(EntryStore):
    """Immutable snapshot of a list of entries."""

    def __init__(self, entries: Iterable[EmotionEntry] = ()):
        self._entries = tuple(entries)

    def all(self) -> List[EmotionEntry]:
        return list(self._entries)


class JournalEntryStore(EntryStore):
    """
    JSONL-backed store. One EmotionEntry per line, appended, never rewritten.

    Lines that fail validation are skipped with a warning so one bad row
    can't hide the rest of the history.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def all(self) -> List[EmotionEntry]:
        entries = load_validated_jsonl(self.path, EmotionEntry)
        logger.debug("Loaded %d entries from %s", len(entries), self.path)
        return entries

    def append(self, entry: EmotionEntry) -> EmotionEntry:
        append_jsonl(self.path, entry)
        logger.info("Appended entry %s (%s, %s) for %s",
                    entry.id, entry.emotion, entry.quadrant, entry.entry_date)
        return entry


def new_entry(
    emotion: str,
    quadrant: Quadrant,
    created_at: datetime,
    timezone: str,
    note: Optional[str] = None,
    context: Optional[Dict[str, str]] = None,
    intensity: Optional[float] = None,
    entry_id: Optional[str] = None,
) -> EmotionEntry:
    """
    Build an entry for a completed check-in.

    entry_date is computed here, once, from created_at in the user's
    timezone. Later timezone changes never touch it.
    """
    entry_date = local_date(created_at, timezone)
    try:
        ctx = EntryContext.model_validate(context) if context else None
        return EmotionEntry(
            id=entry_id or uuid.uuid4().hex,
            quadrant=quadrant,
            emotion=emotion,
            intensity=intensity,
            note=note,
            context=ctx,
            entry_date=entry_date,
            created_at=created_at.isoformat(),
        )
    except ValidationError as e:
        logger.warning("Rejected entry %r (%s): %s", emotion, quadrant, e)
        raise MoodmapValidationError(f"Invalid check-in entry: {e}") from e
