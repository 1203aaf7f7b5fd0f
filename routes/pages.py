"""Server-rendered club pages."""

from __future__ import annotations

from extensions import csrf
from services import club_service
from .base import views


@views.route("/")
def home():
    """Club grid with search / founding-year filters and the favorites strip."""
    return club_service.home_page()


@views.route("/favorites")
def favorites_view():
    return club_service.favorites_page()


@views.route("/about", methods=["GET", "POST"])
@csrf.exempt
def about_page():
    # Static page; a POST carries no form and changes nothing
    return club_service.about_page()


@views.route("/contact", methods=["GET", "POST"])
def contact_page():
    return club_service.contact_page()


__all__ = ["about_page", "contact_page", "favorites_view", "home"]
