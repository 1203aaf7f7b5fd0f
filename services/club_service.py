"""Club listing pages, the clubs JSON API, and the static pages."""

from __future__ import annotations

from typing import Iterable

from flask import current_app, jsonify, render_template, request

from models import Club
from viewmodels.page_vm import ClubSearchResponse, PageViewModel
from .club_data import load_clubs_or_empty
from .club_filters import FilterCriteria, filter_clubs
from .favorites import FavoriteSet, favorites_from_request
from .pagination import PageRequest, page_of

HOME_TITLE = "Accueil"
HOME_MESSAGE = "Bienvenue sur la page d'accueil"
FAVORITES_TITLE = "Mes Favoris"
FAVORITES_MESSAGE = "Vos clubs favoris"
ABOUT_TITLE = "À propos"
ABOUT_MESSAGE = "Ceci est la page à propos"
CONTACT_TITLE = "Contact"
CONTACT_PROMPT = "Envoie-nous un message"


def favorite_clubs(clubs: Iterable[Club], favorites: FavoriteSet) -> list[Club]:
    """Clubs whose decimal id is in ``favorites``, in dataset order."""
    lookup = favorites.as_lookup()
    return [club for club in clubs if club.key in lookup]


def compose_home_page(clubs: list[Club], criteria: FilterCriteria, favorites: FavoriteSet) -> PageViewModel:
    return PageViewModel(
        title=HOME_TITLE,
        message=HOME_MESSAGE,
        clubs=filter_clubs(clubs, criteria),
        favorites=favorite_clubs(clubs, favorites),
        favorite_ids=favorites.as_lookup(),
        search_query=criteria.search,
        min_year=criteria.min_year_text,
        max_year=criteria.max_year_text,
    )


def compose_favorites_page(clubs: list[Club], favorites: FavoriteSet) -> PageViewModel:
    return PageViewModel(
        title=FAVORITES_TITLE,
        message=FAVORITES_MESSAGE,
        favorites=favorite_clubs(clubs, favorites),
        favorite_ids=favorites.as_lookup(),
    )


def compose_static_page(title: str, message: str) -> PageViewModel:
    return PageViewModel(title=title, message=message)


def compose_club_search(clubs: list[Club], criteria: FilterCriteria, page_request: PageRequest) -> ClubSearchResponse:
    page = page_of(filter_clubs(clubs, criteria), page_request)
    return ClubSearchResponse(
        clubs=page.items,
        total=page.total,
        page=page.page,
        page_size=page.page_size,
        total_pages=page.total_pages,
    )


def _page_limits() -> dict[str, int]:
    return {
        "default_page_size": current_app.config.get("CLUBS_DEFAULT_PAGE_SIZE", 6),
        "max_page_size": current_app.config.get("CLUBS_MAX_PAGE_SIZE", 50),
    }


# ---------------------------------------------------------------------------
# Request handlers
# ---------------------------------------------------------------------------

def home_page():
    """Filtered club grid plus the visitor's favorites."""
    clubs = load_clubs_or_empty()
    vm = compose_home_page(clubs, FilterCriteria.from_args(request.args), favorites_from_request(request))
    return render_template("index.html", page=vm)


def favorites_page():
    clubs = load_clubs_or_empty()
    vm = compose_favorites_page(clubs, favorites_from_request(request))
    return render_template("favorites.html", page=vm)


def about_page():
    return render_template("about.html", page=compose_static_page(ABOUT_TITLE, ABOUT_MESSAGE))


def contact_page():
    if request.method == "POST":
        name = request.form.get("name", "")
        msg = request.form.get("msg", "")
        vm = compose_static_page(CONTACT_TITLE, f"Merci {name} pour ton message : {msg}")
    else:
        vm = compose_static_page(CONTACT_TITLE, CONTACT_PROMPT)
    return render_template("contact.html", page=vm)


def api_clubs():
    """Search, filter and paginate clubs as JSON."""
    clubs = load_clubs_or_empty()
    result = compose_club_search(
        clubs,
        FilterCriteria.from_args(request.args),
        PageRequest.from_args(request.args, **_page_limits()),
    )
    return jsonify(result.to_payload())


__all__ = [
    "about_page",
    "api_clubs",
    "compose_club_search",
    "compose_favorites_page",
    "compose_home_page",
    "compose_static_page",
    "contact_page",
    "favorite_clubs",
    "favorites_page",
    "home_page",
]
