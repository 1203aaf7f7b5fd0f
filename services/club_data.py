"""Load the club dataset from its JSON file.

No caching: every call re-reads the file, so edits to ``clubs.json`` show
up on the next request.
"""

from __future__ import annotations

import json
import logging
import os

from flask import current_app, has_app_context

from models import Club
from shared.exceptions import ClubDataMalformedError, ClubDataUnavailableError
from .resource_locator import ResourceLocator, default_locator

logger = logging.getLogger(__name__)

DEFAULT_CLUBS_PATH = "data/clubs.json"


def configured_clubs_path() -> str:
    if has_app_context():
        return current_app.config.get("CLUBS_DATA_PATH") or DEFAULT_CLUBS_PATH
    return DEFAULT_CLUBS_PATH


def _read_first(candidates) -> tuple[str, str]:
    last_error: OSError | None = None
    for candidate in candidates:
        try:
            with open(candidate, "r", encoding="utf-8") as handle:
                return str(candidate), handle.read()
        except OSError as exc:
            last_error = exc
    raise ClubDataUnavailableError([str(c) for c in candidates], last_error)


def parse_clubs(text: str, *, path: str | None = None) -> list[Club]:
    """Decode a JSON array of club objects."""
    try:
        raw = json.loads(text)
    except ValueError as exc:
        raise ClubDataMalformedError(f"invalid JSON: {exc}", path=path) from exc
    if not isinstance(raw, list):
        raise ClubDataMalformedError(
            f"expected a JSON array of clubs, got {type(raw).__name__}", path=path
        )
    clubs: list[Club] = []
    for index, entry in enumerate(raw):
        try:
            clubs.append(Club.from_dict(entry))
        except ClubDataMalformedError as exc:
            raise ClubDataMalformedError(f"record {index}: {exc.message}", path=path) from exc
    return clubs


def load_clubs(path: str | os.PathLike | None = None, *, locator: ResourceLocator | None = None) -> list[Club]:
    """Read clubs from the first readable candidate of ``path``.

    Raises ``ClubDataUnavailableError`` listing every attempted path when
    nothing can be read, ``ClubDataMalformedError`` when the content is not
    a JSON array of club objects.
    """
    locator = locator or default_locator
    candidates = locator.file_candidates(path or configured_clubs_path())
    found, text = _read_first(candidates)
    clubs = parse_clubs(text, path=found)
    logger.debug("Loaded %d clubs from %s", len(clubs), found)
    return clubs


def load_clubs_or_empty(path: str | os.PathLike | None = None, *, locator: ResourceLocator | None = None) -> list[Club]:
    """``load_clubs`` for view routes: failures are logged and yield an empty list."""
    try:
        return load_clubs(path, locator=locator)
    except (ClubDataUnavailableError, ClubDataMalformedError) as exc:
        log = current_app.logger if has_app_context() else logger
        log.warning("failed to load clubs: %s", exc)
        return []


__all__ = [
    "DEFAULT_CLUBS_PATH",
    "configured_clubs_path",
    "load_clubs",
    "load_clubs_or_empty",
    "parse_clubs",
]
