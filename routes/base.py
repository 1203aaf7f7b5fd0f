"""Shared blueprint and helper utilities for Club Tracker routes."""

from __future__ import annotations

from flask import Blueprint, current_app

views = Blueprint("views", __name__)


def favorites_rate_limit() -> str:
    """Per-client limit for favorites mutations, read from config at request time."""
    return current_app.config.get("FAVORITES_RATELIMIT", "60 per minute")
