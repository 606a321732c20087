"""Outfit records as logged by the user."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from models.taxonomy import validate_item_type, validate_rating


@dataclass(frozen=True)
class OutfitItem:
    item_id: str
    item_type: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "item_type", validate_item_type(self.item_type))


@dataclass(frozen=True)
class OutfitTag:
    tag_id: str
    status: str = "manually_assigned"


@dataclass
class Outfit:
    """A worn (or planned) combination of items.

    ``wear_date`` is ``None`` for ghost outfits: ideas that were saved but
    never actually worn.
    """

    id: str
    user_id: str
    rating: int
    wear_date: Optional[date] = None
    items: List[OutfitItem] = field(default_factory=list)
    tags: List[OutfitTag] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.rating = validate_rating(self.rating)
        if isinstance(self.wear_date, datetime):
            self.wear_date = self.wear_date.date()
        elif isinstance(self.wear_date, str):
            self.wear_date = date.fromisoformat(self.wear_date)

    @property
    def is_ghost(self) -> bool:
        return self.wear_date is None

    @property
    def item_ids(self) -> List[str]:
        return [entry.item_id for entry in self.items]

    def has_tag(self, tag_id: str) -> bool:
        return any(tag.tag_id == tag_id for tag in self.tags)


def outfit_from_record(record: Dict[str, Any]) -> Outfit:
    """Build an :class:`Outfit` from a loose record.

    Items may be given as ``{"itemId", "itemType"}`` or ``{"item_id", "item_type"}``
    mappings and tags as ``{"tagId"}`` mappings or plain ids.
    """

    items = [
        OutfitItem(
            item_id=str(raw.get("item_id") or raw.get("itemId")),
            item_type=str(raw.get("item_type") or raw.get("itemType")),
        )
        for raw in record.get("items") or []
    ]
    tags = []
    for raw in record.get("tags") or []:
        if isinstance(raw, dict):
            tags.append(
                OutfitTag(
                    tag_id=str(raw.get("tag_id") or raw.get("tagId")),
                    status=str(raw.get("status") or "manually_assigned"),
                )
            )
        else:
            tags.append(OutfitTag(tag_id=str(raw)))

    return Outfit(
        id=str(record["id"]),
        user_id=str(record["user_id"]),
        rating=int(record.get("rating", 1)),
        wear_date=record.get("wear_date") or record.get("wearDate"),
        items=items,
        tags=tags,
    )


__all__ = ["Outfit", "OutfitItem", "OutfitTag", "outfit_from_record"]
