"""Pydantic schemas for validating service inputs and suggestion responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

MAX_PAGE_SIZE = 100


class PageRequest(BaseModel):
    """Pagination inputs shared by listings and suggestions."""

    user_id: str = Field(min_length=1)
    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1, le=MAX_PAGE_SIZE)


class SuggestionRequest(PageRequest):
    """Input contract for a suggestion page."""

    tag_id: Optional[str] = None
    now: Optional[datetime] = None

    @field_validator("tag_id")
    @classmethod
    def _blank_tag_is_none(cls, tag_id: Optional[str]) -> Optional[str]:
        if tag_id is not None and not tag_id.strip():
            return None
        return tag_id


class SuggestionMetadata(BaseModel):
    wardrobe_size: int
    recency_threshold: Dict[str, float]
    last_page: bool
    algorithm_version: Literal["v2"]
    filter_applied: str
    virtual_tag_name: Optional[str] = None
    tagId: Optional[str] = None


class SuggestionResponse(BaseModel):
    """Shape returned to HTTP clients for a suggestion page."""

    suggestions: List[Dict[str, Any]]
    generated_at: datetime
    metadata: SuggestionMetadata


class ValidationResult(BaseModel):
    """Payload returned to clients when validation fails."""

    status: Literal["invalid_request"] = "invalid_request"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent error payload."""

    return ValidationResult(message=message, details=exc.errors(include_url=False, include_context=False)).model_dump()


__all__ = [
    "PageRequest",
    "SuggestionRequest",
    "SuggestionMetadata",
    "SuggestionResponse",
    "ValidationResult",
    "validation_failure",
    "MAX_PAGE_SIZE",
]
