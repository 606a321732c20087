"""Wardrobe snapshot and per-type recency thresholds."""

from __future__ import annotations

from typing import Dict, Iterable

from models.item import Item
from models.taxonomy import ITEM_TYPES
from models.wardrobe import RecencyThresholds, WardrobeSnapshot

THRESHOLD_MULTIPLIER = 0.75
MIN_RECENCY_THRESHOLD = 3
EMPTY_TYPE_THRESHOLD = 7
DEFAULT_RECENCY_THRESHOLD = 7


def build_wardrobe_snapshot(available_items: Iterable[Item]) -> WardrobeSnapshot:
    """Count available items per type. An empty wardrobe yields all-zero counts."""

    counts: Dict[str, int] = {item_type: 0 for item_type in ITEM_TYPES}
    total = 0
    for item in available_items:
        counts[item.type] = counts.get(item.type, 0) + 1
        total += 1
    return WardrobeSnapshot(counts=counts, total=total)


def recency_threshold_for_count(count: int) -> float:
    """Days for an item type to recover freshness, given its available count."""

    scaled = count * THRESHOLD_MULTIPLIER if count > 0 else EMPTY_TYPE_THRESHOLD
    return max(scaled, MIN_RECENCY_THRESHOLD)


def compute_recency_thresholds(snapshot: WardrobeSnapshot) -> RecencyThresholds:
    return RecencyThresholds(
        by_type={item_type: recency_threshold_for_count(snapshot.count(item_type)) for item_type in ITEM_TYPES},
        default=DEFAULT_RECENCY_THRESHOLD,
    )


__all__ = [
    "build_wardrobe_snapshot",
    "compute_recency_thresholds",
    "recency_threshold_for_count",
    "THRESHOLD_MULTIPLIER",
    "MIN_RECENCY_THRESHOLD",
    "DEFAULT_RECENCY_THRESHOLD",
]
