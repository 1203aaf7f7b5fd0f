"""Helpers for building static asset URLs."""

from __future__ import annotations

from flask import has_request_context, url_for
from werkzeug.routing import BuildError


def static_url(path: str) -> str:
    """URL for a static asset; plain ``/static/...`` when no static dir was found."""
    clean_path = (path or "").lstrip("/")
    if has_request_context():
        try:
            return url_for("static", filename=clean_path)
        except BuildError:
            pass
    return f"/static/{clean_path}"
