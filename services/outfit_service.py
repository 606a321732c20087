"""General outfit listings that do not apply the suggestion gates."""

from __future__ import annotations

from typing import Any, Dict, List

from logic.deduplication import deduplicate_outfits
from logic.eligibility import matches_tag
from logic.ranking import paginate
from logic.virtual_tags import VIRTUAL_TAGS, is_virtual_tag, virtual_tag_payload
from services.payloads import outfit_payload
from tools.observability import instrument_call
from tools.wardrobe_store import WardrobeStore


class OutfitService:
    def __init__(self, store: WardrobeStore) -> None:
        self.store = store

    @instrument_call("list_outfits")
    def list_outfits(self, user_id: str, page: int = 0, size: int = 10) -> Dict[str, Any]:
        """Worn outfits, newest first. Incomplete outfits are listed too."""

        rows = self.store.list_outfits(user_id, page=page, size=size)
        result = paginate(rows, 0, size)
        return {
            "outfits": [outfit_payload(outfit) for outfit in result.entries],
            "last_page": result.last_page,
        }

    def flattened_outfits(self, user_id: str) -> List[Dict[str, Any]]:
        """Worn outfits with repeated core items collapsed to the most recent wear."""

        unique = deduplicate_outfits(self.store.list_worn_outfits(user_id))
        return [{**outfit_payload(entry.outfit), "wearCount": entry.wear_count} for entry in unique]

    def outfits_by_tag(self, user_id: str, tag_id: str) -> List[Dict[str, Any]]:
        if is_virtual_tag(tag_id):
            outfits = self.store.list_all_outfits(user_id)
        else:
            outfits = self.store.list_worn_outfits(user_id)
        return [outfit_payload(outfit) for outfit in outfits if matches_tag(outfit, tag_id)]

    def list_tags(self, user_id: str) -> List[Dict[str, Any]]:
        """Virtual tags first, then the user's stored tags."""

        stored = [{**tag, "virtual": False} for tag in self.store.list_tags(user_id)]
        return [virtual_tag_payload(tag) for tag in VIRTUAL_TAGS.values()] + stored


__all__ = ["OutfitService"]
