"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.item import Item, item_from_record
from models.outfit import Outfit, OutfitItem, OutfitTag, outfit_from_record
from models.wardrobe import RecencyThresholds, WardrobeSnapshot

__all__ = [
    "Item",
    "item_from_record",
    "Outfit",
    "OutfitItem",
    "OutfitTag",
    "outfit_from_record",
    "RecencyThresholds",
    "WardrobeSnapshot",
]
