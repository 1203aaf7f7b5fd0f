"""Page slicing for filtered club lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import ceil
from typing import Generic, Mapping, Sequence, TypeVar

from .query_params import parse_int

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 6
MAX_PAGE_SIZE = 50


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def build(
        cls,
        page=None,
        page_size=None,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "PageRequest":
        """Default anything unusable: page must be >= 1, page_size within 1..max."""
        page_value = parse_int(page)
        if page_value is None or page_value <= 0:
            page_value = DEFAULT_PAGE
        size_value = parse_int(page_size)
        if size_value is None or not 1 <= size_value <= max_page_size:
            size_value = default_page_size
        return cls(page=page_value, page_size=size_value)

    @classmethod
    def from_args(cls, args: Mapping[str, str], **limits) -> "PageRequest":
        return cls.build(args.get("page"), args.get("pageSize"), **limits)


@dataclass(slots=True)
class Page(Generic[T]):
    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 0


def page_of(items: Sequence[T], request: PageRequest) -> Page[T]:
    """Slice ``items`` for an already-validated ``request``; pages past the end are empty."""
    total = len(items)
    total_pages = ceil(total / request.page_size)
    start = min(max((request.page - 1) * request.page_size, 0), total)
    end = min(start + request.page_size, total)
    return Page(
        items=list(items[start:end]),
        total=total,
        page=request.page,
        page_size=request.page_size,
        total_pages=total_pages,
    )


def paginate(
    items: Sequence[T],
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    *,
    max_page_size: int = MAX_PAGE_SIZE,
) -> Page[T]:
    """Validate raw ``page``/``page_size`` values, then slice ``items``."""
    return page_of(items, PageRequest.build(page, page_size, max_page_size=max_page_size))


__all__ = ["DEFAULT_PAGE", "DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "Page", "PageRequest", "page_of", "paginate"]
