"""Configuration loading and structured logging tests."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from logic.validation import PageRequest
from tools.observability import instrument_call
from wardrobe_app.config import AppConfig
from wardrobe_app.logging_config import JsonFormatter, correlation_context, redact_for_log


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APP_ENV", "APP_CONFIG_PATH", "APP_CONFIG_DIR", "WARDROBE_DB_PATH", "MIN_RATING", "PORT"):
        monkeypatch.delenv(key, raising=False)


def test_from_env_defaults() -> None:
    config = AppConfig.from_env()
    assert config.environment is None
    assert config.wardrobe_db_path == "data/wardrobe.db"
    assert config.default_page_size == 10
    assert config.max_page_size == 100
    assert config.min_rating == 1


def test_from_env_reads_environment_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_dir = tmp_path / "environments"
    config_dir.mkdir()
    (config_dir / "staging.yaml").write_text(
        "# staging overrides\nwardrobe_db_path: \"/var/lib/wardrobe.db\"\nmin_rating: 2\nport: 9000\n"
    )
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("APP_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("PORT", "9100")

    config = AppConfig.from_env()

    assert config.environment == "staging"
    assert config.wardrobe_db_path == "/var/lib/wardrobe.db"
    assert config.min_rating == 2
    assert config.port == 9100


def test_json_formatter_includes_correlation_and_extra_fields() -> None:
    record = logging.LogRecord("wardrobe", logging.INFO, __file__, 1, "suggestions_generated", None, None)
    record.event = "suggestions_generated"
    record.returned = 3
    record.user_id = "user-123"

    with correlation_context("corr-1"):
        payload = json.loads(JsonFormatter().format(record))

    assert payload["event"] == "suggestions_generated"
    assert payload["correlation_id"] == "corr-1"
    assert payload["returned"] == 3
    assert payload["user_id"] == "[redacted]"


def test_redact_for_log_masks_caller_ids_in_nested_payloads() -> None:
    scrubbed = redact_for_log(
        {"user_id": "user-123", "page": 2, "kwargs": {"user_id": "user-123", "tag_id": None}, "ids": ("a", "b")}
    )
    assert scrubbed == {
        "user_id": "[redacted]",
        "page": 2,
        "kwargs": {"user_id": "[redacted]", "tag_id": None},
        "ids": ["a", "b"],
    }
    assert redact_for_log(datetime(2025, 3, 15, tzinfo=timezone.utc)) == "2025-03-15 00:00:00+00:00"


def test_instrument_call_validates_keyword_arguments() -> None:
    calls = []

    @instrument_call("page", input_model=PageRequest)
    def handler(*, user_id: str, page: int, size: int) -> int:
        calls.append((user_id, page, size))
        return page * size

    assert handler(user_id="u", page="2", size=5) == 10
    assert calls == [("u", 2, 5)]
    with pytest.raises(ValidationError):
        handler(user_id="u", page=0, size=500)
