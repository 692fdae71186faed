"""Moodmap affect engine - classification, matching and pattern analytics."""
from .schemas import (
    Coordinate, CatalogEmotion, EmotionEntry, EntryContext,
    MoodmapValidationError, MoodmapTimezoneError, MoodmapNotFoundError,
)
from .space import QUADRANTS, QUADRANT_ORDER, CATALOG, classify, classify_values, make_coordinate
from .matcher import suggest, best_match, search, resolve_checkin
from .streaks import streak, current_streak, longest_streak
from .time_buckets import bucket, distribution
from .context import correlate, insights
from .overview import summarize, weekly_snapshot
from .store import EntryStore, InMemoryEntryStore, JournalEntryStore, new_entry
from .strategies import recommend
