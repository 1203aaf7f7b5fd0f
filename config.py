from __future__ import annotations
import os
from pathlib import Path

# Absolute project dir
BASE_DIR = Path(__file__).resolve().parent
# Absolute instance dir (defaults to <project>/instance)
INSTANCE_DIR = Path(os.getenv("INSTANCE_DIR", BASE_DIR / "instance")).resolve()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    # Flask basics
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")  # override in prod!
    TEMPLATES_AUTO_RELOAD = False
    SEND_FILE_MAX_AGE_DEFAULT = 86400

    # Dataset + resources (relative paths are searched from the working dir upward)
    CLUBS_DATA_PATH = os.getenv("CLUBS_DATA_PATH", "data/clubs.json")
    STATIC_DIR_NAME = os.getenv("STATIC_DIR_NAME", "data/static")
    TEMPLATES_DIR_NAME = os.getenv("TEMPLATES_DIR_NAME", "templates")

    # Listing defaults
    CLUBS_DEFAULT_PAGE_SIZE = int(os.getenv("CLUBS_DEFAULT_PAGE_SIZE", 6))
    CLUBS_MAX_PAGE_SIZE = int(os.getenv("CLUBS_MAX_PAGE_SIZE", 50))

    # Favorites cookie (readable by client scripts, so not HttpOnly)
    FAVORITES_COOKIE_NAME = os.getenv("FAVORITES_COOKIE_NAME", "favorites")
    FAVORITES_MAX_AGE = int(os.getenv("FAVORITES_MAX_AGE", 30 * 24 * 60 * 60))
    FAVORITES_COOKIE_SAMESITE = "Lax"
    FAVORITES_COOKIE_SECURE = _env_flag("FAVORITES_COOKIE_SECURE", "0")

    # Cookie security
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = _env_flag("SESSION_COOKIE_SECURE", "0")

    # CSRF Protection
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour
    # Only POST changes state; other verbs on the favorites routes just redirect
    WTF_CSRF_METHODS = ["POST"]

    RATELIMIT_ENABLED = _env_flag("RATELIMIT_ENABLED", "1")
    RATELIMIT_STORAGE_URI = os.getenv(
        "RATELIMIT_STORAGE_URI",
        os.getenv("RATELIMIT_REDIS_URI") or os.getenv("REDIS_URL") or "memory://",
    )
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "200 per minute")
    FAVORITES_RATELIMIT = os.getenv("FAVORITES_RATELIMIT", "60 per minute")
    ENABLE_TALISMAN = _env_flag("ENABLE_TALISMAN", "1")
    TALISMAN_FORCE_HTTPS = _env_flag("TALISMAN_FORCE_HTTPS", "0")
    CONTENT_SECURITY_POLICY = {
        "default-src": "'self'",
        "img-src": "'self' data: https://crests.football-data.org",
        "script-src": "'self'",
        "style-src": "'self' 'unsafe-inline'",
        "connect-src": "'self'",
        "font-src": "'self' data:",
    }

    # football-data.org (only used by the clubs-fetch CLI)
    FOOTBALL_DATA_API_URL = os.getenv("FOOTBALL_DATA_API_URL", "https://api.football-data.org/v4")
    FOOTBALL_DATA_API_TOKEN = os.getenv("FOOTBALL_DATA_API_TOKEN")
    FOOTBALL_DATA_HTTP_TIMEOUT = float(os.getenv("FOOTBALL_DATA_HTTP_TIMEOUT", 10))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    TEMPLATES_AUTO_RELOAD = True


class TestingConfig(BaseConfig):
    TESTING = True
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    ENABLE_TALISMAN = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    FAVORITES_COOKIE_SECURE = True
    TALISMAN_FORCE_HTTPS = _env_flag("TALISMAN_FORCE_HTTPS", "1")


def _select_config():
    env = os.getenv("FLASK_ENV")
    if env == "development":
        return DevelopmentConfig
    if env == "testing":
        return TestingConfig
    secret = os.getenv("SECRET_KEY", "dev")
    if not secret or secret == "dev":
        raise RuntimeError("SECRET_KEY must be set to a non-default value in production.")
    return ProductionConfig


# Choose config
Config = _select_config()
