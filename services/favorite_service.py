"""Add / remove / clear favorites, then send the visitor back where they came from."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from flask import redirect, request

from .favorites import (
    FavoriteSet,
    expire_favorites,
    favorites_from_request,
    normalize_club_id,
    persist_favorites,
)

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT = "/"
FAVORITES_REDIRECT = "/favorites"


def _safe_referrer() -> str | None:
    """The Referer header, only when it points back at this host."""
    referrer = request.headers.get("Referer")
    if not referrer:
        return None
    parts = urlsplit(referrer)
    if parts.netloc and parts.netloc != request.host:
        return None
    if parts.scheme and parts.scheme not in {"http", "https"}:
        return None
    return referrer


def redirect_back(default_url: str = DEFAULT_REDIRECT):
    # 303: the follow-up request is always a GET
    return redirect(_safe_referrer() or default_url, code=303)


def _mutate(transform, *, persist_unchanged: bool = False):
    """Apply ``transform`` to the request's favorites and persist the result."""
    if request.method != "POST":
        return redirect_back()
    club_id = normalize_club_id(request.form.get("club_id"))
    if club_id is None:
        return redirect_back()
    current = favorites_from_request(request)
    updated = transform(current, club_id)
    response = redirect_back()
    if updated is current and not persist_unchanged:
        return response
    return persist_favorites(response, updated)


def add_favorite():
    return _mutate(FavoriteSet.add)


def remove_favorite():
    # Always rewritten, which also refreshes the cookie lifetime
    return _mutate(FavoriteSet.remove, persist_unchanged=True)


def clear_favorites():
    if request.method != "POST":
        return redirect_back(FAVORITES_REDIRECT)
    logger.info("Clearing %d favorite(s)", len(favorites_from_request(request)))
    return expire_favorites(redirect_back(FAVORITES_REDIRECT))


__all__ = ["add_favorite", "clear_favorites", "redirect_back", "remove_favorite"]
