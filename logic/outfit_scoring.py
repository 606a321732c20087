"""Deterministic scoring for suggestion candidates.

Three sub-scores are summed:

* rating: 10 for a hit, 3 for a mid,
* time: outfit freshness scaled to 0-40, where the least fresh item is
  amplified so one just-worn piece suppresses the whole outfit,
* frequency: 10 down to 0 as the same core items were worn more often.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Mapping, Optional

from logic.deduplication import DeduplicatedOutfit
from logic.freshness import days_since
from models.wardrobe import WardrobeSnapshot

HIT_RATING_SCORE = 10
MID_RATING_SCORE = 3
MAX_TIME_SCORE = 40
AVERAGE_WEIGHT = 0.6
MINIMUM_WEIGHT = 0.4
MINIMUM_EXPONENT = 1.5
RECENTLY_WORN_FRESHNESS = 0.4
DEFAULT_FRESHNESS = 1.0
FREQUENCY_SCORES: Dict[int, int] = {1: 10, 2: 7, 3: 4, 4: 2}
RATIO_TYPES = ("layer", "top", "bottom", "footwear")


@dataclass(frozen=True)
class ScoredOutfit:
    """Score breakdown for one de-duplicated outfit. ``raw_data`` is display-only."""

    outfit_id: str
    rating_score: int
    time_score: int
    frequency_score: int
    raw_data: Dict[str, object] = field(default_factory=dict)

    @property
    def total_score(self) -> int:
        return self.rating_score + self.time_score + self.frequency_score

    def scoring_details(self) -> Dict[str, object]:
        return {
            "ratingScore": self.rating_score,
            "timeScore": self.time_score,
            "frequencyScore": self.frequency_score,
            "rawData": dict(self.raw_data),
        }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rating_score(rating: int) -> int:
    return HIT_RATING_SCORE if rating == 2 else MID_RATING_SCORE


def frequency_score(wear_count: int) -> int:
    return FREQUENCY_SCORES.get(wear_count, 0)


def outfit_freshness(item_freshness: list[float]) -> float:
    """Blend of mean freshness and the amplified minimum freshness."""

    average = sum(item_freshness) / len(item_freshness)
    minimum = min(item_freshness)
    return AVERAGE_WEIGHT * average + MINIMUM_WEIGHT * minimum**MINIMUM_EXPONENT


def time_score(final_freshness: float) -> int:
    return _round_half_up(final_freshness * MAX_TIME_SCORE)


def _wardrobe_ratios(snapshot: WardrobeSnapshot) -> Dict[str, float]:
    return {item_type: snapshot.ratio(item_type) for item_type in RATIO_TYPES}


def score_outfit(
    candidate: DeduplicatedOutfit,
    freshness_map: Mapping[str, float],
    snapshot: WardrobeSnapshot,
    now: datetime,
) -> ScoredOutfit:
    """Score a de-duplicated outfit. Items missing from ``freshness_map`` count as fully fresh."""

    outfit = candidate.outfit
    rating_value = rating_score(outfit.rating)
    days_since_worn: Optional[int] = days_since(now, outfit.wear_date) if outfit.wear_date else None
    raw_data: Dict[str, object] = {
        "daysSinceWorn": days_since_worn,
        "itemCount": len(outfit.items),
        "nonAccessoryItemCount": sum(1 for entry in outfit.items if entry.item_type != "accessory"),
        "coreItemKey": candidate.core_item_key,
        "wardrobeRatios": _wardrobe_ratios(snapshot),
    }

    if not outfit.items:
        raw_data.update(
            {
                "wearCount": 1,
                "avgItemFreshness": 0.0,
                "minItemFreshness": 1.0,
                "recentlyWornItems": 0,
                "outfitFreshness": 1.0,
            }
        )
        return ScoredOutfit(
            outfit_id=outfit.id,
            rating_score=rating_value,
            time_score=0,
            frequency_score=0,
            raw_data=raw_data,
        )

    freshness_values = [freshness_map.get(entry.item_id, DEFAULT_FRESHNESS) for entry in outfit.items]
    final_freshness = outfit_freshness(freshness_values)
    raw_data.update(
        {
            "wearCount": candidate.wear_count,
            "avgItemFreshness": round(sum(freshness_values) / len(freshness_values), 3),
            "minItemFreshness": round(min(freshness_values), 3),
            "recentlyWornItems": sum(1 for value in freshness_values if value < RECENTLY_WORN_FRESHNESS),
            "outfitFreshness": round(final_freshness, 3),
        }
    )
    return ScoredOutfit(
        outfit_id=outfit.id,
        rating_score=rating_value,
        time_score=time_score(final_freshness),
        frequency_score=frequency_score(candidate.wear_count),
        raw_data=raw_data,
    )


__all__ = [
    "ScoredOutfit",
    "frequency_score",
    "outfit_freshness",
    "rating_score",
    "score_outfit",
    "time_score",
]
