# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Emotion Matcher — the words for where the sliders are.

Ranks catalog emotions by straight-line distance to a coordinate, and does
plain substring search over the vocabulary. Equal distances keep catalog
order, so the same sliders always suggest the same words.
"""

import logging
import math
from typing import List, Optional, Sequence

from affect.schemas import CatalogEmotion, CheckinChoice, Coordinate, MoodmapValidationError, Suggestion
from affect.space import CATALOG, classify

logger = logging.getLogger("moodmap.matcher")


def _distance(c: Coordinate, e: CatalogEmotion) -> float:
    return math.sqrt((e.energy - c.energy) ** 2 + (e.pleasantness - c.pleasantness) ** 2)


def suggest(
    c: Coordinate,
    catalog: Sequence[CatalogEmotion] = CATALOG,
    k: int = 4,
) -> List[Suggestion]:
    """
    Find the k catalog emotions closest to a coordinate.

    Returns min(k, len(catalog)) suggestions sorted by non-decreasing
    distance. Ties are broken by catalog position (first-inserted wins).
    """
    if k < 0:
        raise MoodmapValidationError(f"k must be >= 0, got {k}")

    scored = sorted(
        ((_distance(c, e), i, e) for i, e in enumerate(catalog)),
        key=lambda row: (row[0], row[1]),
    )
    return [
        Suggestion(
            emotion=e.emotion,
            quadrant=e.quadrant,
            energy=e.energy,
            pleasantness=e.pleasantness,
            distance=dist,
        )
        for dist, _, e in scored[:k]
    ]


def best_match(c: Coordinate, catalog: Sequence[CatalogEmotion] = CATALOG) -> Optional[Suggestion]:
    """The single closest emotion — what's suggested before the user picks a word."""
    top = suggest(c, catalog, k=1)
    return top[0] if top else None


def search(query: str, catalog: Sequence[CatalogEmotion] = CATALOG, limit: int = 8) -> List[CatalogEmotion]:
    """
    Case-insensitive substring search on emotion names.

    Results keep catalog order (not relevance-ranked). A blank query returns
    nothing rather than the whole catalog.
    """
    if limit < 0:
        raise MoodmapValidationError(f"limit must be >= 0, got {limit}")
    needle = (query or "").strip().lower()
    if not needle:
        return []
    return [e for e in catalog if needle in e.emotion.lower()][:limit]


def find(emotion: str, catalog: Sequence[CatalogEmotion] = CATALOG) -> List[CatalogEmotion]:
    """Every catalog row for a word (a word can live in two quadrants)."""
    target = emotion.strip().lower()
    return [e for e in catalog if e.emotion.lower() == target]


def resolve_checkin(
    c: Coordinate,
    selected: Optional[str] = None,
    catalog: Sequence[CatalogEmotion] = CATALOG,
) -> CheckinChoice:
    """
    Decide which (emotion, quadrant) a check-in is saved with.

    No word tapped: the best match drives both emotion and quadrant, not the
    raw slider quadrant. A tapped word keeps its own quadrant; if the word
    sits in more than one quadrant, the occurrence nearest the sliders wins.
    Words outside the catalog fall back to the slider quadrant.
    """
    if selected and selected.strip():
        word = selected.strip()
        rows = find(word, catalog)
        if rows:
            nearest = min(enumerate(rows), key=lambda pair: (_distance(c, pair[1]), pair[0]))[1]
            return CheckinChoice(emotion=nearest.emotion, quadrant=nearest.quadrant, source="selected")
        logger.debug("Selected word %r not in catalog, using slider quadrant", word)
        return CheckinChoice(emotion=word, quadrant=classify(c), source="selected")

    match = best_match(c, catalog)
    if match is None:
        raise MoodmapValidationError("Cannot suggest an emotion from an empty catalog")
    return CheckinChoice(emotion=match.emotion, quadrant=match.quadrant, source="suggested")
