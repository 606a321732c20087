"""Collapse outfits that repeat the same core items into one representative."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List

from models.outfit import Outfit
from models.taxonomy import CORE_ITEM_TYPES

KEY_SEPARATOR = "|"


@dataclass(frozen=True)
class DeduplicatedOutfit:
    outfit: Outfit
    core_item_key: str
    wear_count: int


def core_item_key(outfit: Outfit) -> str:
    """Sorted, pipe-joined ids of the outfit's layer/top/bottom items ("" if none)."""

    core_ids = sorted(entry.item_id for entry in outfit.items if entry.item_type in CORE_ITEM_TYPES)
    return KEY_SEPARATOR.join(core_ids)


def _wear_sort_date(outfit: Outfit) -> date:
    # Ghost outfits count as the oldest possible date.
    return outfit.wear_date or date.min


def deduplicate_outfits(outfits: Iterable[Outfit]) -> List[DeduplicatedOutfit]:
    """Keep the most recently worn outfit per core-item key.

    Outfits without core items are singletons and always kept. Each kept
    outfit carries ``wear_count``, the size of its group. On equal wear dates
    the first outfit encountered wins. Input order of survivors is preserved.
    """

    outfits = list(outfits)
    groups: Dict[str, List[Outfit]] = {}
    latest: Dict[str, Outfit] = {}
    keys: Dict[str, str] = {}

    for outfit in outfits:
        key = core_item_key(outfit)
        keys[outfit.id] = key
        if not key:
            continue
        if key not in groups:
            groups[key] = [outfit]
            latest[key] = outfit
            continue
        groups[key].append(outfit)
        if _wear_sort_date(outfit) > _wear_sort_date(latest[key]):
            latest[key] = outfit

    survivors: List[DeduplicatedOutfit] = []
    for outfit in outfits:
        key = keys[outfit.id]
        if not key:
            survivors.append(DeduplicatedOutfit(outfit=outfit, core_item_key=key, wear_count=1))
        elif latest[key] is outfit:
            survivors.append(DeduplicatedOutfit(outfit=outfit, core_item_key=key, wear_count=len(groups[key])))
    return survivors


__all__ = ["DeduplicatedOutfit", "core_item_key", "deduplicate_outfits", "KEY_SEPARATOR"]
