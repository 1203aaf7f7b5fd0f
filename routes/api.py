"""JSON endpoints."""

from __future__ import annotations

from services import club_service
from .base import views


@views.get("/api/clubs")
def api_clubs():
    """Search, filter and paginate clubs: ?search=&minYear=&maxYear=&page=&pageSize="""
    return club_service.api_clubs()


__all__ = ["api_clubs"]
