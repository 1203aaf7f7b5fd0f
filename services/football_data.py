"""Client helpers for refreshing ``clubs.json`` from football-data.org."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import requests

from models import Club
from shared.exceptions import FootballDataError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.football-data.org/v4"
DEFAULT_TIMEOUT = 10.0

__all__ = [
    "club_from_team",
    "fetch_competition_clubs",
    "write_clubs_file",
]


def _api_request(path: str, *, base_url: str, token: Optional[str], timeout: float, params: dict | None = None) -> dict:
    url = f"{base_url.rstrip('/')}{path}"
    headers = {"X-Auth-Token": token} if token else {}
    try:
        response = requests.get(url, headers=headers, params=params or {}, timeout=timeout)
    except requests.RequestException as exc:
        raise FootballDataError(f"football-data.org unavailable: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        raise FootballDataError(f"football-data.org returned invalid JSON ({response.status_code}).") from exc

    if response.status_code >= 400:
        detail = payload.get("message") if isinstance(payload, dict) else None
        raise FootballDataError(detail or f"football-data.org HTTP {response.status_code}.")
    if not isinstance(payload, dict):
        raise FootballDataError("football-data.org returned an unexpected payload.")
    return payload


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def club_from_team(team: Dict[str, Any]) -> Optional[Club]:
    """Map a v4 ``team`` object to a Club; None when it has no usable id."""
    team_id = team.get("id")
    if isinstance(team_id, bool) or not isinstance(team_id, int):
        return None
    founded = team.get("founded")
    if isinstance(founded, bool) or not isinstance(founded, int):
        founded = 0
    return Club(
        id=team_id,
        name=_text(team.get("name")),
        short_name=_text(team.get("shortName")),
        tla=_text(team.get("tla")),
        website=_text(team.get("website")),
        founded=founded,
        venue=_text(team.get("venue")),
        crest_url=_text(team.get("crest") or team.get("crestUrl")),
    )


def fetch_competition_clubs(
    competition: str,
    *,
    season: Optional[int] = None,
    base_url: Optional[str] = None,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
) -> List[Club]:
    code = (competition or "").strip().upper()
    if not code:
        raise FootballDataError("Competition code is missing.")
    params = {"season": season} if season else None
    payload = _api_request(
        f"/competitions/{code}/teams",
        base_url=base_url or os.getenv("FOOTBALL_DATA_API_URL") or DEFAULT_API_URL,
        token=token or os.getenv("FOOTBALL_DATA_API_TOKEN"),
        timeout=timeout or DEFAULT_TIMEOUT,
        params=params,
    )
    teams = payload.get("teams")
    if not isinstance(teams, list):
        raise FootballDataError(f"No teams returned for competition {code}.")
    clubs: List[Club] = []
    for team in teams:
        club = club_from_team(team) if isinstance(team, dict) else None
        if club is None:
            logger.warning("Skipping team without id in %s: %r", code, team)
            continue
        clubs.append(club)
    return clubs


def write_clubs_file(clubs: Iterable[Club], path: str | os.PathLike) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = [club.to_dict() for club in clubs]
    tmp = target.with_suffix(target.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    tmp.replace(target)
    return target
