"""System-computed tags that are matched by predicate instead of a stored relation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from models.outfit import Outfit

SYSTEM_USER_ID = "system"


@dataclass(frozen=True)
class TagPredicate:
    id: str
    name: str
    hex_color: str
    matches: Callable[[Outfit], bool]


def _is_idea(outfit: Outfit) -> bool:
    return outfit.wear_date is None


IDEA_TAG = TagPredicate(id="idea_tag", name="Idea", hex_color="#9CA3AF", matches=_is_idea)

VIRTUAL_TAGS: Dict[str, TagPredicate] = {tag.id: tag for tag in (IDEA_TAG,)}


def is_virtual_tag(tag_id: Optional[str]) -> bool:
    return bool(tag_id) and tag_id in VIRTUAL_TAGS


def get_virtual_tag(tag_id: Optional[str]) -> Optional[TagPredicate]:
    if not tag_id:
        return None
    return VIRTUAL_TAGS.get(tag_id)


def applicable_virtual_tags(outfit: Outfit) -> List[TagPredicate]:
    return [tag for tag in VIRTUAL_TAGS.values() if tag.matches(outfit)]


def virtual_tag_payload(tag: TagPredicate) -> Dict[str, object]:
    """Serialise a virtual tag the way stored tags are presented to clients."""

    return {
        "id": tag.id,
        "name": tag.name,
        "hexColor": tag.hex_color,
        "userId": SYSTEM_USER_ID,
        "virtual": True,
    }


__all__ = [
    "TagPredicate",
    "IDEA_TAG",
    "VIRTUAL_TAGS",
    "is_virtual_tag",
    "get_virtual_tag",
    "applicable_virtual_tags",
    "virtual_tag_payload",
]
