"""Canonical vocabularies for wardrobe items and outfits.

This module centralises the labels shared by the data models, the store and
the suggestion engine so that validation stays consistent across layers.
"""

from typing import Dict, List, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a vocabulary key."""

    return str(value).strip().lower().replace(" ", "_")


ITEM_TYPES: List[str] = ["layer", "top", "bottom", "footwear", "accessory"]
ITEM_STATUSES: List[str] = ["available", "withheld", "retired"]
AVAILABLE_STATUS = "available"

# Outfit ratings: miss, mid, hit.
RATINGS: Dict[int, str] = {0: "miss", 1: "mid", 2: "hit"}

# Item types that define "the same look" for de-duplication.
CORE_ITEM_TYPES: Tuple[str, ...] = ("layer", "top", "bottom")

TAG_STATUSES: List[str] = ["manually_assigned", "suggested"]


def validate_item_type(value: str) -> str:
    """Validate and normalise an item type.

    Raises a :class:`ValueError` if the type is not part of the vocabulary.
    """

    key = _normalize_key(value)
    if key not in ITEM_TYPES:
        raise ValueError(f"Unsupported item type '{value}'. Allowed: {ITEM_TYPES}")
    return key


def validate_status(value: str) -> str:
    """Validate and normalise an item availability status."""

    key = _normalize_key(value)
    if key not in ITEM_STATUSES:
        raise ValueError(f"Unsupported item status '{value}'. Allowed: {ITEM_STATUSES}")
    return key


def validate_rating(value: int) -> int:
    """Validate an outfit rating (0 miss, 1 mid, 2 hit)."""

    rating = int(value)
    if rating not in RATINGS:
        raise ValueError(f"Unsupported rating '{value}'. Allowed: {sorted(RATINGS)}")
    return rating


__all__ = [
    "ITEM_TYPES",
    "ITEM_STATUSES",
    "AVAILABLE_STATUS",
    "RATINGS",
    "CORE_ITEM_TYPES",
    "TAG_STATUSES",
    "validate_item_type",
    "validate_status",
    "validate_rating",
]
