"""Operational endpoints for health/readiness checks."""

from __future__ import annotations

from flask import current_app, jsonify

from services.club_data import load_clubs
from shared.exceptions import ClubDataMalformedError, ClubDataUnavailableError
from .base import views


@views.route("/healthz", methods=["GET"])
def healthz():
    """Lightweight health probe that requires no external dependencies."""
    return jsonify(status="ok", service="club-tracker"), 200


@views.route("/readyz", methods=["GET"])
def readyz():
    """Readiness probe that verifies the clubs dataset can be loaded."""
    try:
        clubs = load_clubs()
    except (ClubDataUnavailableError, ClubDataMalformedError) as exc:
        current_app.logger.warning("Readiness check failed: %s", exc)
        return jsonify(status="error", reason="dataset"), 503
    return jsonify(status="ok", clubs=len(clubs)), 200


__all__ = ["healthz", "readyz"]
