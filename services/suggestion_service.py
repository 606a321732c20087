"""Suggestion service: fetches the user's wardrobe, runs the engine, hydrates the page."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from logic.eligibility import MIN_SUGGESTION_RATING
from logic.suggestion_engine import SuggestionPage, generate_suggestions
from logic.validation import SuggestionRequest
from services.payloads import outfit_payload
from tools.observability import instrument_call
from tools.wardrobe_store import WardrobeStore
from wardrobe_app.logging_config import get_logger, log_event, operation_context

LOGGER = get_logger(__name__)


class SuggestionService:
    """Builds the suggestion response for one user request."""

    def __init__(self, store: WardrobeStore, min_rating: int = MIN_SUGGESTION_RATING) -> None:
        self.store = store
        self.min_rating = min_rating

    def compute_page(
        self,
        user_id: str,
        *,
        now: datetime,
        page: int = 0,
        size: int = 10,
        tag_id: Optional[str] = None,
    ) -> SuggestionPage:
        """Fetch the engine inputs and rank them without hydrating full outfits."""

        available_items = self.store.list_available_items(user_id)
        unavailable_ids = {item.id for item in self.store.list_unavailable_items(user_id)}
        last_worn = self.store.last_worn_dates_by_item(user_id)
        eligible = self.store.list_eligible_outfits(user_id, self.min_rating)
        return generate_suggestions(
            available_items,
            unavailable_ids,
            last_worn,
            eligible,
            now=now,
            page=page,
            size=size,
            tag_id=tag_id,
            min_rating=self.min_rating,
        )

    @instrument_call("suggest_outfits", input_model=SuggestionRequest)
    def suggest(
        self,
        *,
        user_id: str,
        page: int = 0,
        size: int = 10,
        tag_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """Return one page of ranked outfit suggestions in the client response shape."""

        generated_at = now or datetime.now(timezone.utc)
        with operation_context("service:suggest"):
            result = self.compute_page(user_id, now=generated_at, page=page, size=size, tag_id=tag_id)

            outfit_ids = [entry.outfit_id for entry in result.entries]
            loaded = {outfit.id: outfit for outfit in self.store.load_outfits_by_ids(user_id, outfit_ids)}
            suggestions = []
            for entry in result.entries:
                outfit = loaded.get(entry.outfit_id)
                if outfit is None:
                    continue
                suggestions.append(
                    {
                        **outfit_payload(outfit, result.freshness),
                        "scoringDetails": entry.scoring_details(),
                        "totalScore": entry.total_score,
                    }
                )

            log_event(
                LOGGER,
                logging.INFO,
                "suggestions_generated",
                user_id=user_id,
                page=page,
                size=size,
                returned=len(suggestions),
                last_page=result.last_page,
                filter_applied=result.filter_applied,
            )
            return {
                "suggestions": suggestions,
                "generated_at": generated_at,
                "metadata": result.metadata(),
            }


__all__ = ["SuggestionService"]
