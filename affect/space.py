# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Moodmap Affective Space — the map every check-in is placed on.

Two axes, both 0-100:
- energy        (low → high)
- pleasantness  (unpleasant → pleasant)

50/50 is the origin. The four quadrants around it each carry a fixed
vocabulary of 25 emotion words; the catalog spreads those words over the
quadrant's sub-range so nearest-match ranking has something to rank.

Everything here is built once at import and never mutated.
"""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from affect.schemas import (
    CatalogEmotion, Coordinate, MoodmapValidationError, Quadrant, QuadrantInfo,
)

logger = logging.getLogger("moodmap.space")

ORIGIN = 50.0

# Canonical quadrant order. Every tie-break in the engine falls back to it.
QUADRANT_ORDER: Tuple[Quadrant, ...] = (
    "high-pleasant",
    "high-unpleasant",
    "low-unpleasant",
    "low-pleasant",
)

PLEASANT_QUADRANTS = frozenset({"high-pleasant", "low-pleasant"})
UNPLEASANT_QUADRANTS = frozenset({"high-unpleasant", "low-unpleasant"})
HIGH_ENERGY_QUADRANTS = frozenset({"high-pleasant", "high-unpleasant"})


# ============================================================================
# QUADRANT METADATA
# ============================================================================

QUADRANTS: Mapping[Quadrant, QuadrantInfo] = MappingProxyType({
    "high-pleasant": QuadrantInfo(
        id="high-pleasant",
        label="High Energy, Pleasant",
        description="Energized and positive",
        color="hsl(45, 93%, 47%)",
        bg_color="hsl(45, 93%, 95%)",
        border_color="hsl(45, 93%, 70%)",
        emotions=(
            "Excited", "Joyful", "Inspired", "Energetic", "Enthusiastic",
            "Optimistic", "Proud", "Thrilled", "Elated", "Ecstatic",
            "Hopeful", "Passionate", "Confident", "Amazed", "Playful",
            "Grateful", "Amused", "Cheerful", "Blissful", "Motivated",
            "Alive", "Radiant", "Vibrant", "Exhilarated", "Empowered",
        ),
    ),
    "high-unpleasant": QuadrantInfo(
        id="high-unpleasant",
        label="High Energy, Unpleasant",
        description="Energized but uncomfortable",
        color="hsl(0, 72%, 51%)",
        bg_color="hsl(0, 72%, 95%)",
        border_color="hsl(0, 72%, 75%)",
        emotions=(
            "Anxious", "Angry", "Frustrated", "Stressed", "Overwhelmed",
            "Irritated", "Panicked", "Furious", "Agitated", "Restless",
            "Nervous", "Tense", "Worried", "Annoyed", "Impatient",
            "Fearful", "Enraged", "Hostile", "Jealous", "Defensive",
            "Alarmed", "Shocked", "Resentful", "Bitter", "Apprehensive",
        ),
    ),
    "low-unpleasant": QuadrantInfo(
        id="low-unpleasant",
        label="Low Energy, Unpleasant",
        description="Low energy and uncomfortable",
        color="hsl(215, 20%, 45%)",
        bg_color="hsl(215, 20%, 95%)",
        border_color="hsl(215, 20%, 70%)",
        emotions=(
            "Sad", "Tired", "Depressed", "Lonely", "Drained",
            "Hopeless", "Discouraged", "Bored", "Disappointed", "Guilty",
            "Ashamed", "Exhausted", "Empty", "Melancholy", "Numb",
            "Indifferent", "Apathetic", "Grief-stricken", "Dejected", "Withdrawn",
            "Defeated", "Gloomy", "Isolated", "Vulnerable", "Lost",
        ),
    ),
    "low-pleasant": QuadrantInfo(
        id="low-pleasant",
        label="Low Energy, Pleasant",
        description="Calm and positive",
        color="hsl(142, 52%, 45%)",
        bg_color="hsl(142, 52%, 95%)",
        border_color="hsl(142, 52%, 70%)",
        emotions=(
            "Calm", "Content", "Relaxed", "Peaceful", "Grateful",
            "Serene", "Comfortable", "Satisfied", "Secure", "Cozy",
            "Tranquil", "Mellow", "Rested", "Thoughtful", "Appreciative",
            "Centered", "Grounded", "Balanced", "Soft", "Tender",
            "Soothed", "At ease", "Still", "Hopeful", "Loving",
        ),
    ),
})


# ============================================================================
# CATALOG: each emotion is a point in (energy, pleasantness) space
# ============================================================================

# Sub-range layout: words step diagonally in 5 slots of 8 points each,
# starting 10 points in from the edge (low side) or 10 past the origin (high side).
_LOW_START = 10.0
_HIGH_START = 60.0
_SLOTS = 5
_STEP = 8.0


def build_catalog(quadrants: Mapping[Quadrant, QuadrantInfo] = QUADRANTS) -> Tuple[CatalogEmotion, ...]:
    """
    Build the ranking catalog from quadrant vocabularies.

    Deterministic: word i of a quadrant sits at start + (i % 5) * 8 on both
    axes, where start depends on which side of the origin the quadrant is.
    A word listed under two quadrants gets one row per quadrant.
    """
    rows: List[CatalogEmotion] = []
    for qid in QUADRANT_ORDER:
        info = quadrants[qid]
        e_start = _HIGH_START if qid in HIGH_ENERGY_QUADRANTS else _LOW_START
        p_start = _HIGH_START if qid in PLEASANT_QUADRANTS else _LOW_START
        for i, word in enumerate(info.emotions):
            offset = (i % _SLOTS) * _STEP
            rows.append(CatalogEmotion(
                emotion=word,
                quadrant=qid,
                energy=e_start + offset,
                pleasantness=p_start + offset,
            ))
    return tuple(rows)


CATALOG: Tuple[CatalogEmotion, ...] = build_catalog()


# ============================================================================
# CLASSIFICATION
# ============================================================================

def make_coordinate(energy: float, pleasantness: float) -> Coordinate:
    """Build a Coordinate, rejecting anything outside [0, 100] on either axis."""
    try:
        return Coordinate(energy=energy, pleasantness=pleasantness)
    except ValidationError as e:
        logger.warning("Rejected coordinate energy=%r pleasantness=%r", energy, pleasantness)
        raise MoodmapValidationError(
            f"Coordinate out of range (both axes must be 0-100): "
            f"energy={energy!r}, pleasantness={pleasantness!r}"
        ) from e


def classify(c: Coordinate) -> Quadrant:
    """
    Map a coordinate to its quadrant.

    Both thresholds are inclusive on the high / pleasant side, so exactly 50
    always lands in a high or pleasant quadrant.
    """
    if c.energy >= ORIGIN:
        return "high-pleasant" if c.pleasantness >= ORIGIN else "high-unpleasant"
    return "low-pleasant" if c.pleasantness >= ORIGIN else "low-unpleasant"


def classify_values(energy: float, pleasantness: float) -> Quadrant:
    """classify() for raw slider values."""
    return classify(make_coordinate(energy, pleasantness))


def quadrant_info(quadrant: str) -> QuadrantInfo:
    """Look up display metadata for a quadrant id."""
    try:
        return QUADRANTS[quadrant]
    except KeyError:
        raise MoodmapValidationError(
            f"Unknown quadrant {quadrant!r}. Expected one of: {', '.join(QUADRANT_ORDER)}"
        ) from None


def is_pleasant(quadrant: str) -> bool:
    return quadrant in PLEASANT_QUADRANTS


# ============================================================================
# QUADRANT TALLIES, shared by the analytics modules
# ============================================================================

def count_quadrants(quadrants: Iterable[str]) -> Dict[str, int]:
    """Count quadrant ids into a dict with every quadrant present, in canonical order."""
    tally = Counter(quadrants)
    return {q: tally.get(q, 0) for q in QUADRANT_ORDER}


def to_percentages(counts: Mapping[str, int]) -> Optional[Dict[str, float]]:
    """Convert counts to percentages of their total. None when there's nothing to divide."""
    total = sum(counts.values())
    if total == 0:
        return None
    return {q: counts.get(q, 0) * 100.0 / total for q in QUADRANT_ORDER}


def dominant(counts: Mapping[str, int]) -> Optional[Quadrant]:
    """Highest-count quadrant; ties go to the earlier quadrant in QUADRANT_ORDER."""
    best: Optional[Quadrant] = None
    best_count = 0
    for q in QUADRANT_ORDER:
        n = counts.get(q, 0)
        if n > best_count:
            best, best_count = q, n
    return best
