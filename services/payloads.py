"""Client-facing dictionaries for outfits."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from logic.outfit_scoring import DEFAULT_FRESHNESS
from logic.virtual_tags import applicable_virtual_tags
from models.outfit import Outfit


def outfit_payload(outfit: Outfit, freshness: Optional[Mapping[str, float]] = None) -> Dict[str, object]:
    """Serialise an outfit, appending the virtual tags that apply to it.

    When ``freshness`` is given, every item carries its freshness rounded to
    three decimals.
    """

    items: List[Dict[str, object]] = []
    for entry in outfit.items:
        payload: Dict[str, object] = {"itemId": entry.item_id, "itemType": entry.item_type}
        if freshness is not None:
            payload["freshness"] = round(freshness.get(entry.item_id, DEFAULT_FRESHNESS), 3)
        items.append(payload)

    tags = [{"tagId": tag.tag_id, "status": tag.status} for tag in outfit.tags]
    tags.extend({"tagId": tag.id, "status": "manually_assigned"} for tag in applicable_virtual_tags(outfit))

    return {
        "id": outfit.id,
        "rating": outfit.rating,
        "wearDate": outfit.wear_date.isoformat() if outfit.wear_date else None,
        "outfitItems": items,
        "outfitTags": tags,
    }


__all__ = ["outfit_payload"]
