"""Favorites mutations (cookie-backed, no server-side storage)."""

from __future__ import annotations

from extensions import limiter
from services import favorite_service
from .base import favorites_rate_limit, views

# Only POST mutates; every other verb redirects back untouched.
FAVORITE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@views.route("/add-favorite", methods=FAVORITE_METHODS)
@limiter.limit(favorites_rate_limit, methods=["POST"])
def add_favorite():
    return favorite_service.add_favorite()


@views.route("/remove-favorite", methods=FAVORITE_METHODS)
@limiter.limit(favorites_rate_limit, methods=["POST"])
def remove_favorite():
    return favorite_service.remove_favorite()


@views.route("/clear-favorites", methods=FAVORITE_METHODS)
@limiter.limit(favorites_rate_limit, methods=["POST"])
def clear_favorites():
    return favorite_service.clear_favorites()


__all__ = ["add_favorite", "clear_favorites", "remove_favorite"]
