"""Item freshness: how appealing an item is to wear again, given when it was last worn.

The curve has three phases relative to the item type's recency threshold ``T``:

* rise (``0 < d < T``): a normalised logistic S-curve that stays low for most
  of the window and then climbs to the maximum,
* plateau (``T <= d < 2T``): maximum freshness,
* degradation (``d >= 2T``): linear decay per day, floored at the minimum.

An item worn today (or dated in the future) sits at the minimum; an item that
was never worn is maximally fresh.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Dict, Iterable, Mapping, Optional

from models.item import Item
from models.wardrobe import RecencyThresholds

SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class FreshnessCurve:
    min_freshness: float = 0.01
    max_freshness: float = 1.0
    steepness: float = 7.0
    midpoint: float = 0.7
    degradation_rate: float = 0.05

    def _logistic(self, x: float) -> float:
        return 1 / (1 + math.exp(-self.steepness * (x - self.midpoint)))

    def rise(self, progress: float) -> float:
        """Normalised logistic value mapping ``progress`` in [0, 1] onto [min, max]."""

        start = self._logistic(0.0)
        end = self._logistic(1.0)
        normalised = (self._logistic(progress) - start) / (end - start)
        return self.min_freshness + (self.max_freshness - self.min_freshness) * normalised

    def value(self, days_since_worn: float, threshold: float) -> float:
        if days_since_worn <= 0:
            return self.min_freshness
        if days_since_worn < threshold:
            freshness = self.rise(days_since_worn / threshold)
        elif days_since_worn < 2 * threshold:
            freshness = self.max_freshness
        else:
            decay = (days_since_worn - 2 * threshold) * self.degradation_rate
            freshness = self.max_freshness - decay
        return min(self.max_freshness, max(self.min_freshness, freshness))


DEFAULT_CURVE = FreshnessCurve()


def days_since(now: datetime, value: date | datetime) -> int:
    """Whole days elapsed from ``value`` to ``now`` (floored).

    Plain dates are taken at midnight in ``now``'s timezone.
    """

    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min, tzinfo=now.tzinfo)
    elif value.tzinfo is None and now.tzinfo is not None:
        value = value.replace(tzinfo=now.tzinfo)
    elif value.tzinfo is not None and now.tzinfo is None:
        now = now.replace(tzinfo=value.tzinfo)
    return math.floor((now - value).total_seconds() / SECONDS_PER_DAY)


def item_freshness(
    days_since_worn: Optional[float],
    threshold: float,
    curve: FreshnessCurve = DEFAULT_CURVE,
) -> float:
    """Freshness in ``[curve.min_freshness, curve.max_freshness]``; ``None`` means never worn."""

    if days_since_worn is None:
        return curve.max_freshness
    return curve.value(days_since_worn, threshold)


def build_freshness_map(
    available_items: Iterable[Item],
    last_worn_dates: Mapping[str, date],
    thresholds: RecencyThresholds,
    now: datetime,
    curve: FreshnessCurve = DEFAULT_CURVE,
) -> Dict[str, float]:
    """Map each available item id to its freshness as of ``now``."""

    freshness: Dict[str, float] = {}
    for item in available_items:
        last_worn = last_worn_dates.get(item.id)
        elapsed = days_since(now, last_worn) if last_worn is not None else None
        freshness[item.id] = item_freshness(elapsed, thresholds.for_type(item.type), curve)
    return freshness


__all__ = [
    "FreshnessCurve",
    "DEFAULT_CURVE",
    "build_freshness_map",
    "days_since",
    "item_freshness",
]
