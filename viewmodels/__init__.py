"""View model package for presentation-safe data shapes."""

from .page_vm import ClubSearchResponse, PageViewModel

__all__ = ["ClubSearchResponse", "PageViewModel"]
