"""Derived, per-request wardrobe structures."""

from dataclasses import dataclass, field
from typing import Dict

from models.taxonomy import ITEM_TYPES


@dataclass(frozen=True)
class WardrobeSnapshot:
    """Counts of available items per type."""

    counts: Dict[str, int] = field(default_factory=lambda: {item_type: 0 for item_type in ITEM_TYPES})
    total: int = 0

    def count(self, item_type: str) -> int:
        return self.counts.get(item_type, 0)

    def ratio(self, item_type: str) -> float:
        if not self.total:
            return 0.0
        return self.count(item_type) / self.total


@dataclass(frozen=True)
class RecencyThresholds:
    """Days after which an item of a given type has fully recovered freshness."""

    by_type: Dict[str, float]
    default: float = 7

    def for_type(self, item_type: str) -> float:
        return self.by_type.get(item_type, self.default)

    def as_dict(self) -> Dict[str, float]:
        return {**self.by_type, "default": self.default}
