"""Evaluation scenarios covering the documented suggestion behaviours."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List

from logic.suggestion_engine import COMPLETE_OUTFITS_ONLY, NO_ELIGIBLE_OUTFITS

EVALUATION_NOW = datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)


@dataclass
class EvaluationScenario:
    name: str
    description: str
    items: List[Dict[str, object]] = field(default_factory=list)
    outfits: List[Dict[str, object]] = field(default_factory=list)
    expectations: Dict[str, object] = field(default_factory=dict)
    now: datetime = EVALUATION_NOW


def _worn(days_ago: int) -> date:
    return (EVALUATION_NOW - timedelta(days=days_ago)).date()


def _item(item_id: str, item_type: str, status: str = "available") -> Dict[str, object]:
    return {"id": item_id, "type": item_type, "status": status}


def _outfit(outfit_id: str, rating: int, worn: date | None, *items: tuple[str, str]) -> Dict[str, object]:
    return {
        "id": outfit_id,
        "rating": rating,
        "wear_date": worn,
        "items": [{"item_id": item_id, "item_type": item_type} for item_id, item_type in items],
    }


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="empty_wardrobe",
        description="No items and no outfits yields an empty last page.",
        expectations={
            "suggestion_ids": [],
            "filter_applied": NO_ELIGIBLE_OUTFITS,
            "last_page": True,
        },
    ),
    EvaluationScenario(
        name="worn_today",
        description="A hit outfit worn today scores on rating and frequency only.",
        items=[_item("top-1", "top"), _item("bottom-1", "bottom"), _item("shoes-1", "footwear")],
        outfits=[
            _outfit("outfit-today", 2, _worn(0), ("top-1", "top"), ("bottom-1", "bottom"), ("shoes-1", "footwear")),
        ],
        expectations={
            "suggestion_ids": ["outfit-today"],
            "time_score": 0,
            "total_score": 20,
            "last_page": True,
        },
    ),
    EvaluationScenario(
        name="repeated_core_items",
        description="Two wears of the same top and bottom collapse to the most recent one.",
        items=[
            _item("top-1", "top"),
            _item("bottom-1", "bottom"),
            _item("shoes-1", "footwear"),
            _item("shoes-2", "footwear"),
        ],
        outfits=[
            _outfit("outfit-old", 1, _worn(60), ("top-1", "top"), ("bottom-1", "bottom"), ("shoes-1", "footwear")),
            _outfit("outfit-recent", 1, _worn(5), ("top-1", "top"), ("bottom-1", "bottom"), ("shoes-2", "footwear")),
        ],
        expectations={
            "suggestion_ids": ["outfit-recent"],
            "wear_count": 2,
            "last_page": True,
        },
    ),
    EvaluationScenario(
        name="missing_footwear",
        description="An outfit without footwear is never suggested but is still listed.",
        items=[_item("top-1", "top"), _item("bottom-1", "bottom")],
        outfits=[_outfit("outfit-barefoot", 2, _worn(10), ("top-1", "top"), ("bottom-1", "bottom"))],
        expectations={
            "suggestion_ids": [],
            "filter_applied": COMPLETE_OUTFITS_ONLY,
            "listed_ids": ["outfit-barefoot"],
        },
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS", "EVALUATION_NOW"]
