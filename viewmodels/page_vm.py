"""Page view models for club templates and the clubs API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from models import Club


@dataclass(slots=True)
class PageViewModel:
    title: str
    message: str = ""
    clubs: Optional[list[Club]] = None
    favorites: list[Club] = field(default_factory=list)
    favorite_ids: frozenset[str] = frozenset()
    search_query: str = ""
    min_year: str = ""
    max_year: str = ""

    def is_favorite(self, club: Club) -> bool:
        return club.key in self.favorite_ids


@dataclass(slots=True)
class ClubSearchResponse:
    """Paged result for ``/api/clubs``."""
    clubs: list[Club]
    total: int
    page: int
    page_size: int
    total_pages: int

    def to_payload(self) -> dict:
        return {
            "clubs": [club.to_dict() for club in self.clubs],
            "total": self.total,
            "page": self.page,
            "pageSize": self.page_size,
            "totalPages": self.total_pages,
        }
