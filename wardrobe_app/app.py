"""Application bootstrap wiring the store and services together."""

from __future__ import annotations

import logging

from services.outfit_service import OutfitService
from services.suggestion_service import SuggestionService
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore
from wardrobe_app.config import AppConfig
from wardrobe_app.logging_config import configure_logging, get_logger, log_event

LOGGER = get_logger(__name__)


class WardrobeApp:
    """Wires together configuration, the wardrobe store and the services."""

    def __init__(self, config: AppConfig | None = None, store: WardrobeStore | None = None) -> None:
        self.config = config or AppConfig.from_env()
        configure_logging(self.config.log_level)

        self.store = store or SQLiteWardrobeStore(self.config.wardrobe_db_path)
        self.suggestions = SuggestionService(self.store, min_rating=self.config.min_rating)
        self.outfits = OutfitService(self.store)

        log_event(
            LOGGER,
            logging.INFO,
            "app_initialised",
            environment=self.config.environment or "local",
            store=type(self.store).__name__,
        )


__all__ = ["WardrobeApp"]
