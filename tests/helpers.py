"""Shared builders for engine and store tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Sequence, Tuple

from models.item import Item
from models.outfit import Outfit, OutfitItem, OutfitTag

NOW = datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)
USER = "user-123"


def days_ago(days: int) -> date:
    return (NOW - timedelta(days=days)).date()


def make_item(item_id: str, item_type: str, status: str = "available", user_id: str = USER) -> Item:
    return Item(id=item_id, user_id=user_id, type=item_type, status=status)


def make_outfit(
    outfit_id: str,
    items: Sequence[Tuple[str, str]],
    *,
    rating: int = 1,
    worn: Optional[date] = None,
    tags: Sequence[str] = (),
    user_id: str = USER,
) -> Outfit:
    return Outfit(
        id=outfit_id,
        user_id=user_id,
        rating=rating,
        wear_date=worn,
        items=[OutfitItem(item_id=item_id, item_type=item_type) for item_id, item_type in items],
        tags=[OutfitTag(tag_id=tag_id) for tag_id in tags],
    )


def complete_items(suffix: str = "1") -> list[Tuple[str, str]]:
    return [(f"top-{suffix}", "top"), (f"bottom-{suffix}", "bottom"), (f"shoes-{suffix}", "footwear")]
