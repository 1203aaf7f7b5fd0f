"""Centralized error handlers for HTML and JSON responses."""

from __future__ import annotations

from flask import current_app, jsonify, render_template, request
from jinja2 import TemplateError


def _wants_json() -> bool:
    return request.path.startswith("/api/") or (
        request.accept_mimetypes["application/json"] > request.accept_mimetypes["text/html"]
    )


def _json_error(code: str, detail: str, status: int):
    payload = {"error": code, "detail": detail}
    return jsonify(payload), status


def _render_error_page(template: str, status: int, fallback: str, **context):
    try:
        return render_template(template, **context), status
    except TemplateError:
        current_app.logger.exception("Error page %s could not be rendered", template)
        return fallback, status


def register_error_handlers(app) -> None:
    """Register error handlers on the Flask app."""

    @app.errorhandler(404)
    def not_found(err):  # type: ignore[no-redef]
        if _wants_json():
            return _json_error("not_found", "Resource not found.", 404)
        return _render_error_page("shared/system/404.html", 404, "Page introuvable", e=err)

    @app.errorhandler(500)
    def internal(err):  # type: ignore[no-redef]
        original = getattr(err, "original_exception", None) or err
        current_app.logger.error("Request failed: %s", original)
        if _wants_json():
            return _json_error("server_error", "A server error occurred.", 500)
        return _render_error_page(
            "shared/system/500.html",
            500,
            "Erreur interne du serveur",
            e=err,
            message="Une erreur est survenue lors de l'affichage de la page.",
        )
