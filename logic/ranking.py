"""Ranking and over-fetch pagination of scored outfits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, List, Sequence, Tuple, TypeVar

from logic.outfit_scoring import ScoredOutfit

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    entries: List[T]
    last_page: bool


def ranking_key(scored: ScoredOutfit) -> Tuple[int, int, int]:
    # Frequency is ascending on purpose: the last tie-break favours outfits worn more often.
    return (-scored.time_score, -scored.rating_score, scored.frequency_score)


def rank_outfits(scored_outfits: Iterable[ScoredOutfit]) -> List[ScoredOutfit]:
    """Stable sort: time desc, rating desc, frequency asc."""

    return sorted(scored_outfits, key=ranking_key)


def paginate(entries: Sequence[T], page: int, size: int) -> Page[T]:
    """Slice one page, fetching a single extra entry to detect the last page."""

    start = page * size
    window = list(entries[start : start + size + 1])
    last_page = len(window) <= size
    if not last_page:
        window.pop()
    return Page(entries=window, last_page=last_page)


__all__ = ["Page", "paginate", "rank_outfits", "ranking_key"]
