"""Search and founding-year filtering over the in-memory club list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from models import Club
from .query_params import parse_int


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Search text plus inclusive founding-year bounds.

    ``min_year_text``/``max_year_text`` keep the raw query values so forms
    can be repopulated even when they did not parse.
    """
    search: str = ""
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    min_year_text: str = ""
    max_year_text: str = ""

    @classmethod
    def build(cls, search: str | None = "", min_year: str | None = "", max_year: str | None = "") -> "FilterCriteria":
        min_text = min_year or ""
        max_text = max_year or ""
        return cls(
            search=(search or "").lower(),
            min_year=parse_int(min_text) if min_text else None,
            max_year=parse_int(max_text) if max_text else None,
            min_year_text=min_text,
            max_year_text=max_text,
        )

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "FilterCriteria":
        return cls.build(args.get("search"), args.get("minYear"), args.get("maxYear"))

    @property
    def is_empty(self) -> bool:
        return not self.search and self.min_year is None and self.max_year is None


def club_matches(club: Club, criteria: FilterCriteria) -> bool:
    if criteria.search:
        needle = criteria.search
        if (
            needle not in club.name.lower()
            and needle not in club.short_name.lower()
            and needle not in club.tla.lower()
        ):
            return False
    # founded == 0 means unknown but is compared like any other year
    if criteria.min_year is not None and club.founded < criteria.min_year:
        return False
    if criteria.max_year is not None and club.founded > criteria.max_year:
        return False
    return True


def filter_clubs(clubs: Iterable[Club], criteria: FilterCriteria) -> list[Club]:
    """Keep clubs matching ``criteria``, preserving input order."""
    if criteria.is_empty:
        return list(clubs)
    return [club for club in clubs if club_matches(club, criteria)]


__all__ = ["FilterCriteria", "club_matches", "filter_clubs"]
