"""Eligibility gates applied to outfits before de-duplication and scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, Iterable, List, Optional

from logic.virtual_tags import get_virtual_tag
from models.outfit import Outfit

MIN_SUGGESTION_RATING = 1


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single gate."""

    outfits: List[Outfit]
    removed: Dict[str, str]
    debug: Dict[str, object]


def passes_rating_gate(outfit: Outfit, min_rating: int = MIN_SUGGESTION_RATING) -> bool:
    return outfit.rating >= min_rating


def contains_unavailable_item(outfit: Outfit, unavailable_item_ids: AbstractSet[str]) -> bool:
    return any(entry.item_id in unavailable_item_ids for entry in outfit.items)


def is_complete_outfit(outfit: Outfit) -> bool:
    """At least one top or layer, one bottom and one footwear.

    Outfits with no items at all are exempt; they are scored on rating alone.
    """

    if not outfit.items:
        return True
    types = {entry.item_type for entry in outfit.items}
    return bool(types & {"top", "layer"}) and "bottom" in types and "footwear" in types


def matches_tag(outfit: Outfit, tag_id: Optional[str]) -> bool:
    """Virtual tags are matched by predicate, anything else by stored relation."""

    if not tag_id:
        return True
    virtual_tag = get_virtual_tag(tag_id)
    if virtual_tag is not None:
        return virtual_tag.matches(outfit)
    return outfit.has_tag(tag_id)


def filter_by_availability(
    outfits: Iterable[Outfit],
    unavailable_item_ids: AbstractSet[str],
    min_rating: int = MIN_SUGGESTION_RATING,
) -> FilteringResult:
    """Drop outfits below ``min_rating`` or containing any unavailable item."""

    outfits = list(outfits)
    removed: Dict[str, str] = {}
    kept: List[Outfit] = []
    for outfit in outfits:
        if not passes_rating_gate(outfit, min_rating):
            removed[outfit.id] = "rating below minimum"
        elif contains_unavailable_item(outfit, unavailable_item_ids):
            removed[outfit.id] = "contains unavailable item"
        else:
            kept.append(outfit)

    debug = {
        "input_count": len(outfits),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "min_rating": min_rating,
    }
    return FilteringResult(outfits=kept, removed=removed, debug=debug)


def filter_for_suggestions(outfits: Iterable[Outfit], tag_id: Optional[str] = None) -> FilteringResult:
    """Keep complete outfits that also carry the requested tag, if any."""

    outfits = list(outfits)
    removed: Dict[str, str] = {}
    kept: List[Outfit] = []
    for outfit in outfits:
        if not is_complete_outfit(outfit):
            removed[outfit.id] = "incomplete outfit"
        elif not matches_tag(outfit, tag_id):
            removed[outfit.id] = "tag filter not matched"
        else:
            kept.append(outfit)

    debug = {
        "input_count": len(outfits),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "tag_id": tag_id,
    }
    return FilteringResult(outfits=kept, removed=removed, debug=debug)


__all__ = [
    "FilteringResult",
    "MIN_SUGGESTION_RATING",
    "passes_rating_gate",
    "contains_unavailable_item",
    "is_complete_outfit",
    "matches_tag",
    "filter_by_availability",
    "filter_for_suggestions",
]
