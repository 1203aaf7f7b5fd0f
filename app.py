"""Flask application factory and CLI entry points."""

import json
import logging
from logging.handlers import RotatingFileHandler
import os
import uuid
from pathlib import Path

import click
from flask import Flask, g, has_request_context, request
from flask_talisman import Talisman

from dotenv import load_dotenv; load_dotenv()

from config import Config, INSTANCE_DIR as CONFIG_INSTANCE_DIR
from extensions import compress, csrf, generate_csrf, limiter
from services.resource_locator import ResourceLocator
from shared.assets import static_url
from shared.error_handlers import register_error_handlers
from shared.exceptions import ClubDataMalformedError, ClubDataUnavailableError, FootballDataError


class RequestIdFilter(logging.Filter):
    """Inject request-scoped metadata into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = getattr(g, "request_id", "n/a")
            record.path = request.path
            record.method = request.method
        else:
            record.request_id = getattr(record, "request_id", "startup")
            record.path = getattr(record, "path", "")
            record.method = getattr(record, "method", "")
        return True


class JsonRequestFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "n/a"),
            "path": getattr(record, "path", ""),
            "method": getattr(record, "method", ""),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def _configure_logging(app: Flask) -> None:
    """Configure structured logging with request IDs."""
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    stream_handler = logging.StreamHandler()
    stream_handler.addFilter(RequestIdFilter())
    stream_handler.setFormatter(JsonRequestFormatter())
    stream_handler.setLevel(level)

    handlers = [stream_handler]

    try:
        logs_dir = Path(app.instance_path) / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            logs_dir / "app.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.addFilter(RequestIdFilter())
        file_handler.setFormatter(JsonRequestFormatter())
        file_handler.setLevel(level)
        handlers.append(file_handler)
    except OSError as exc:
        app.logger.warning("Falling back to stream-only logging (file handler unavailable): %s", exc)

    app.logger.handlers = handlers
    app.logger.setLevel(level)
    # Service modules log under their own names; route them through the same handlers.
    for name in ("services", "werkzeug"):
        named = logging.getLogger(name)
        named.handlers = handlers
        named.setLevel(level)


def _resolve_resource_dirs(config) -> tuple[str | None, str | None]:
    locator = ResourceLocator()
    templates_dir = locator.find_dir(config.TEMPLATES_DIR_NAME)
    static_dir = locator.find_dir(config.STATIC_DIR_NAME)
    return (
        str(templates_dir) if templates_dir else None,
        str(static_dir) if static_dir else None,
    )


def _register_cli(app: Flask) -> None:
    from services.club_data import load_clubs
    from services.football_data import fetch_competition_clubs, write_clubs_file

    @app.cli.command("clubs-check")
    @click.option("--path", default=None, help="Dataset path (defaults to CLUBS_DATA_PATH).")
    @click.option("--json", "as_json", is_flag=True, help="Emit a JSON summary.")
    def clubs_check(path, as_json):
        """Load the clubs dataset and report whether it is usable."""
        try:
            clubs = load_clubs(path)
        except ClubDataUnavailableError as exc:
            summary = {"ok": False, "error": "unavailable", "detail": str(exc), "attempted": exc.attempted}
        except ClubDataMalformedError as exc:
            summary = {"ok": False, "error": "malformed", "detail": str(exc)}
        else:
            founded = [club.founded for club in clubs if club.founded]
            summary = {
                "ok": True,
                "clubs": len(clubs),
                "without_founded": len(clubs) - len(founded),
                "oldest": min(founded) if founded else None,
                "newest": max(founded) if founded else None,
            }
        if as_json:
            click.echo(json.dumps(summary, ensure_ascii=False, indent=2))
        elif summary["ok"]:
            click.echo(f"{summary['clubs']} clubs loaded.")
        else:
            click.echo(f"Dataset {summary['error']}: {summary['detail']}", err=True)
        if not summary["ok"]:
            raise SystemExit(1)

    @app.cli.command("clubs-fetch")
    @click.option("--competition", default="PL", show_default=True, help="football-data.org competition code.")
    @click.option("--season", type=int, default=None, help="Season start year.")
    @click.option("--output", default=None, help="Target file (defaults to CLUBS_DATA_PATH).")
    def clubs_fetch(competition, season, output):
        """Download a competition's teams from football-data.org into the dataset file."""
        try:
            clubs = fetch_competition_clubs(
                competition,
                season=season,
                base_url=app.config.get("FOOTBALL_DATA_API_URL"),
                token=app.config.get("FOOTBALL_DATA_API_TOKEN"),
                timeout=app.config.get("FOOTBALL_DATA_HTTP_TIMEOUT"),
            )
        except FootballDataError as exc:
            raise click.ClickException(str(exc)) from exc
        target = write_clubs_file(clubs, output or app.config["CLUBS_DATA_PATH"])
        click.echo(f"Wrote {len(clubs)} clubs to {target}")


def create_app():
    """Create, configure, and return a fully-initialised Flask app."""
    templates_dir, static_dir = _resolve_resource_dirs(Config)
    app = Flask(
        __name__,
        instance_path=str(CONFIG_INSTANCE_DIR),
        instance_relative_config=False,
        template_folder=templates_dir or "templates",
        static_folder=static_dir,
        static_url_path="/static",
    )
    app.config.from_object(Config)
    _configure_logging(app)
    os.makedirs(app.instance_path, exist_ok=True)

    if static_dir:
        app.logger.info("serving static files from %s at /static/", static_dir)
    else:
        app.logger.warning("%s directory not found; static files won't be served", Config.STATIC_DIR_NAME)
    if not templates_dir:
        app.logger.warning("%s directory not found; pages will fail to render", Config.TEMPLATES_DIR_NAME)

    # --- Core extensions ---
    csrf.init_app(app)
    app.jinja_env.globals["csrf_token"] = generate_csrf
    app.jinja_env.globals["static_url"] = static_url
    compress.init_app(app)
    limiter.init_app(app)

    if app.config.get("ENABLE_TALISMAN", True):
        Talisman(
            app,
            content_security_policy=app.config.get("CONTENT_SECURITY_POLICY"),
            force_https=app.config.get("TALISMAN_FORCE_HTTPS", not app.debug),
            session_cookie_secure=app.config.get("SESSION_COOKIE_SECURE", True),
            session_cookie_samesite=app.config.get("SESSION_COOKIE_SAMESITE", "Lax"),
        )

    app.config["TEMPLATES_AUTO_RELOAD"] = bool(app.debug)

    # Blueprints
    from routes import views
    app.register_blueprint(views)
    register_error_handlers(app)
    _register_cli(app)

    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex

    @app.after_request
    def attach_request_id(resp):
        rid = getattr(g, "request_id", None)
        if rid:
            resp.headers.setdefault("X-Request-ID", rid)
        return resp

    @app.after_request
    def security_headers(resp):
        """Attach a minimal set of security-related HTTP headers to each response."""
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "same-origin")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        return resp

    return app


if __name__ == "__main__":
    _app = create_app()
    _app.run(host="127.0.0.1", port=8080, debug=True)
