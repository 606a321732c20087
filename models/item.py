"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.taxonomy import AVAILABLE_STATUS, validate_item_type, validate_status


@dataclass
class Item:
    """Represents a single garment or accessory owned by a user."""

    id: str
    user_id: str
    type: str
    status: str = AVAILABLE_STATUS
    name: Optional[str] = None
    brand: Optional[str] = None

    def __post_init__(self) -> None:
        self.type = validate_item_type(self.type)
        self.status = validate_status(self.status)

    @property
    def is_available(self) -> bool:
        return self.status == AVAILABLE_STATUS


def item_from_record(record: Dict[str, Any]) -> Item:
    """Factory to build an :class:`Item` from a loose record."""

    missing = [key for key in ("id", "user_id", "type") if not record.get(key)]
    if missing:
        raise ValueError(f"Missing required fields for Item: {missing}")

    return Item(
        id=str(record["id"]),
        user_id=str(record["user_id"]),
        type=str(record["type"]),
        status=str(record.get("status") or AVAILABLE_STATUS),
        name=record.get("name"),
        brand=record.get("brand"),
    )


__all__ = ["Item", "item_from_record"]
