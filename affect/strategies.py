# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Regulation strategies and which quadrants they're offered for."""

from typing import List, Optional, Tuple

from affect.config import get_config
from affect.schemas import MoodmapValidationError, Strategy
from affect.space import quadrant_info

STRATEGIES: Tuple[Strategy, ...] = (
    Strategy(
        id="box-breathing",
        title="Box Breathing",
        description="A calming technique: breathe in for 4 seconds, hold for 4, exhale for 4, hold for 4.",
        duration="2-3 min",
        type="breathing",
        target_quadrants=("high-unpleasant",),
    ),
    Strategy(
        id="5-4-3-2-1",
        title="5-4-3-2-1 Grounding",
        description="Notice 5 things you see, 4 you hear, 3 you touch, 2 you smell, 1 you taste.",
        duration="3-5 min",
        type="grounding",
        target_quadrants=("high-unpleasant", "low-unpleasant"),
    ),
    Strategy(
        id="body-scan",
        title="Body Scan",
        description="Slowly scan from head to toe, noticing sensations without judgment.",
        duration="5 min",
        type="mindfulness",
        target_quadrants=("high-unpleasant", "low-unpleasant"),
    ),
    Strategy(
        id="reframe-thoughts",
        title="Thought Reframing",
        description="Identify a negative thought and find alternative, balanced perspectives.",
        duration="5 min",
        type="cognitive",
        target_quadrants=("high-unpleasant", "low-unpleasant"),
    ),
    Strategy(
        id="gentle-stretch",
        title="Gentle Stretching",
        description="Simple stretches to release tension and reconnect with your body.",
        duration="3-5 min",
        type="movement",
        target_quadrants=("low-unpleasant", "low-pleasant"),
    ),
    Strategy(
        id="gratitude-moment",
        title="Gratitude Moment",
        description="List 3 things you are grateful for right now, no matter how small.",
        duration="2 min",
        type="cognitive",
        target_quadrants=("low-unpleasant", "low-pleasant"),
    ),
    Strategy(
        id="energizing-breath",
        title="Energizing Breath",
        description="Quick, rhythmic breathing to boost alertness and energy.",
        duration="1-2 min",
        type="breathing",
        target_quadrants=("low-unpleasant", "low-pleasant"),
    ),
    Strategy(
        id="savoring",
        title="Savoring the Moment",
        description="Fully appreciate your current positive state by noticing details.",
        duration="2-3 min",
        type="mindfulness",
        target_quadrants=("high-pleasant", "low-pleasant"),
    ),
)


def recommend(quadrant: str, limit: Optional[int] = None) -> List[Strategy]:
    """Strategies targeting a quadrant, in list order, at most `limit` of them."""
    quadrant_info(quadrant)
    cap = get_config().strategy_limit if limit is None else limit
    if cap < 0:
        raise MoodmapValidationError(f"limit must be >= 0, got {cap}")
    return [s for s in STRATEGIES if quadrant in s.target_quadrants][:cap]
