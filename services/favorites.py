"""Favorite clubs kept in a client-side cookie.

The cookie holds comma-separated club ids (``"57,61,64"``). Nothing is
stored server-side: each request rebuilds a ``FavoriteSet`` from the
cookie, and mutating routes write the new value back.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from flask import current_app, has_app_context
from werkzeug.http import dump_cookie

COOKIE_NAME = "favorites"
COOKIE_PATH = "/"
COOKIE_MAX_AGE = 30 * 24 * 60 * 60  # 30 days
SEPARATOR = ","

# RFC 6265 cookie-octets minus the separator
_ID_RE = re.compile(r"[\x21\x23-\x2b\x2d-\x3a\x3c-\x5b\x5d-\x7e]+")


@dataclass(frozen=True, slots=True)
class FavoriteSet:
    """Insertion-ordered, duplicate-free club ids (as strings)."""
    ids: tuple[str, ...] = ()

    @classmethod
    def of(cls, ids: Iterable[str]) -> "FavoriteSet":
        return cls(tuple(dict.fromkeys(str(i) for i in ids if i)))

    @classmethod
    def from_cookie(cls, value: str | None) -> "FavoriteSet":
        if not value:
            return cls()
        return cls.of(part for part in value.split(SEPARATOR) if _ID_RE.fullmatch(part))

    def to_cookie(self) -> str:
        return SEPARATOR.join(self.ids)

    def add(self, club_id: str) -> "FavoriteSet":
        if club_id in self.ids:
            return self
        return FavoriteSet(self.ids + (club_id,))

    def remove(self, club_id: str) -> "FavoriteSet":
        if club_id not in self.ids:
            return self
        return FavoriteSet(tuple(i for i in self.ids if i != club_id))

    def as_lookup(self) -> frozenset[str]:
        return frozenset(self.ids)

    def __contains__(self, club_id: object) -> bool:
        return club_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)


def normalize_club_id(raw: str | None) -> str | None:
    """Trimmed form value, or None when it is blank or not a valid cookie token."""
    value = (raw or "").strip()
    if not _ID_RE.fullmatch(value):
        return None
    return value


def _setting(key: str, default):
    if has_app_context():
        return current_app.config.get(key, default)
    return default


def cookie_name() -> str:
    return _setting("FAVORITES_COOKIE_NAME", COOKIE_NAME)


def favorites_from_request(request) -> FavoriteSet:
    return FavoriteSet.from_cookie(request.cookies.get(cookie_name()))


def cookie_header(name: str, favorites: FavoriteSet, **attrs) -> str:
    """``Set-Cookie`` value with the ids comma-joined as-is.

    Werkzeug would octal-escape each comma (``"5\\0542"``); client scripts
    read this cookie, so several ids go out as a quoted literal ``"5,2"``.
    """
    value = favorites.to_cookie()
    if SEPARATOR in value:
        value = f'"{value}"'
    prefix = f"{name}="
    return prefix + value + dump_cookie(name, "", **attrs)[len(prefix):]


def persist_favorites(response, favorites: FavoriteSet):
    """Write ``favorites`` to the response cookie with the standard 30-day lifetime."""
    name = cookie_name()
    response.headers.add(
        "Set-Cookie",
        cookie_header(
            name,
            favorites,
            max_age=_setting("FAVORITES_MAX_AGE", COOKIE_MAX_AGE),
            path=COOKIE_PATH,
            secure=_setting("FAVORITES_COOKIE_SECURE", False),
            httponly=False,
            samesite=_setting("FAVORITES_COOKIE_SAMESITE", "Lax"),
        ),
    )
    return response


def expire_favorites(response):
    """Tell the client to drop the favorites cookie immediately."""
    response.delete_cookie(
        cookie_name(),
        path=COOKIE_PATH,
        secure=_setting("FAVORITES_COOKIE_SECURE", False),
        samesite=_setting("FAVORITES_COOKIE_SAMESITE", "Lax"),
    )
    return response


__all__ = [
    "COOKIE_MAX_AGE",
    "COOKIE_NAME",
    "FavoriteSet",
    "cookie_header",
    "cookie_name",
    "expire_favorites",
    "favorites_from_request",
    "normalize_club_id",
    "persist_favorites",
]
