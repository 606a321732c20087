"""Pure outfit suggestion pipeline.

Snapshot -> freshness -> eligibility -> de-duplication -> scoring -> ranking.
The pipeline performs no I/O and never reads the clock: callers pass the
materialised collections and ``now``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import AbstractSet, Dict, Iterable, List, Mapping, Optional

from logic.deduplication import deduplicate_outfits
from logic.eligibility import MIN_SUGGESTION_RATING, filter_by_availability, filter_for_suggestions
from logic.freshness import DEFAULT_CURVE, FreshnessCurve, build_freshness_map
from logic.outfit_scoring import ScoredOutfit, score_outfit
from logic.ranking import paginate, rank_outfits
from logic.virtual_tags import get_virtual_tag, is_virtual_tag
from logic.wardrobe_snapshot import build_wardrobe_snapshot, compute_recency_thresholds
from models.item import Item
from models.outfit import Outfit
from models.wardrobe import RecencyThresholds, WardrobeSnapshot

logger = logging.getLogger(__name__)

ALGORITHM_VERSION = "v2"
NO_ELIGIBLE_OUTFITS = "no_eligible_outfits_or_all_contain_unavailable_items"
COMPLETE_OUTFITS_ONLY = "complete_outfits_only"
TAG_FILTER = "tag_filter"
VIRTUAL_TAG_FILTER = "virtual_tag_filter"


@dataclass(frozen=True)
class SuggestionPage:
    """One ranked page of suggestions plus the request-scoped derived data."""

    entries: List[ScoredOutfit]
    last_page: bool
    filter_applied: str
    snapshot: WardrobeSnapshot
    thresholds: RecencyThresholds
    freshness: Dict[str, float]
    tag_id: Optional[str] = None
    virtual_tag_name: Optional[str] = None
    diagnostics: Dict[str, object] = field(default_factory=dict)

    def metadata(self) -> Dict[str, object]:
        metadata: Dict[str, object] = {
            "wardrobe_size": self.snapshot.total,
            "recency_threshold": self.thresholds.as_dict(),
            "last_page": self.last_page,
            "algorithm_version": ALGORITHM_VERSION,
            "filter_applied": self.filter_applied,
        }
        if self.virtual_tag_name:
            metadata["virtual_tag_name"] = self.virtual_tag_name
        if self.tag_id:
            metadata["tagId"] = self.tag_id
        return metadata


def _success_filter(tag_id: Optional[str]) -> str:
    if is_virtual_tag(tag_id):
        return VIRTUAL_TAG_FILTER
    if tag_id:
        return TAG_FILTER
    return COMPLETE_OUTFITS_ONLY


def generate_suggestions(
    available_items: Iterable[Item],
    unavailable_item_ids: AbstractSet[str],
    last_worn_dates: Mapping[str, date],
    eligible_outfits: Iterable[Outfit],
    *,
    now: datetime,
    page: int = 0,
    size: int = 10,
    tag_id: Optional[str] = None,
    min_rating: int = MIN_SUGGESTION_RATING,
    curve: FreshnessCurve = DEFAULT_CURVE,
) -> SuggestionPage:
    """Rank the user's logged outfits and return the requested page."""

    available_items = list(available_items)
    snapshot = build_wardrobe_snapshot(available_items)
    thresholds = compute_recency_thresholds(snapshot)
    freshness = build_freshness_map(available_items, last_worn_dates, thresholds, now, curve)
    virtual_tag = get_virtual_tag(tag_id)

    def empty(reason: str, diagnostics: Dict[str, object]) -> SuggestionPage:
        logger.info("No suggestions: %s", reason)
        return SuggestionPage(
            entries=[],
            last_page=True,
            filter_applied=reason,
            snapshot=snapshot,
            thresholds=thresholds,
            freshness=freshness,
            tag_id=tag_id,
            virtual_tag_name=virtual_tag.name if virtual_tag else None,
            diagnostics=diagnostics,
        )

    availability = filter_by_availability(eligible_outfits, unavailable_item_ids, min_rating)
    diagnostics: Dict[str, object] = {"availability": availability.debug}
    logger.info(
        "Eligible outfits: %s, available outfits: %s",
        availability.debug["input_count"],
        availability.debug["kept_count"],
    )
    if not availability.outfits:
        return empty(NO_ELIGIBLE_OUTFITS, diagnostics)

    completeness = filter_for_suggestions(availability.outfits, tag_id)
    diagnostics["completeness"] = completeness.debug
    logger.info("Complete outfits: %s", completeness.debug["kept_count"])
    if not completeness.outfits:
        return empty(COMPLETE_OUTFITS_ONLY, diagnostics)

    unique = deduplicate_outfits(completeness.outfits)
    diagnostics["deduplicated_count"] = len(unique)
    logger.debug("Deduplicated outfits: %s", len(unique))

    scored = [score_outfit(candidate, freshness, snapshot, now) for candidate in unique]
    result = paginate(rank_outfits(scored), page, size)

    return SuggestionPage(
        entries=result.entries,
        last_page=result.last_page,
        filter_applied=_success_filter(tag_id),
        snapshot=snapshot,
        thresholds=thresholds,
        freshness=freshness,
        tag_id=tag_id,
        virtual_tag_name=virtual_tag.name if virtual_tag else None,
        diagnostics=diagnostics,
    )


__all__ = [
    "ALGORITHM_VERSION",
    "COMPLETE_OUTFITS_ONLY",
    "NO_ELIGIBLE_OUTFITS",
    "TAG_FILTER",
    "VIRTUAL_TAG_FILTER",
    "SuggestionPage",
    "generate_suggestions",
]
