import json
import os
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]

# Isolate all tests to a throwaway instance dir + dataset
TEST_INSTANCE_DIR = ROOT_DIR / ".pytest-instance"
TEST_INSTANCE_DIR.mkdir(parents=True, exist_ok=True)
TEST_CLUBS_PATH = TEST_INSTANCE_DIR / "clubs.json"
os.environ["FLASK_ENV"] = "testing"
os.environ["INSTANCE_DIR"] = str(TEST_INSTANCE_DIR)
os.environ["CLUBS_DATA_PATH"] = str(TEST_CLUBS_PATH)
os.environ["ENABLE_TALISMAN"] = "0"

import app as ct_app  # noqa: E402  pylint:disable=wrong-import-position

create_app = ct_app.create_app

SAMPLE_CLUBS = [
    {"id": 1, "name": "Arsenal FC", "shortName": "Arsenal", "tla": "ARS", "founded": 1886, "venue": "Emirates Stadium"},
    {"id": 2, "name": "Chelsea FC", "shortName": "Chelsea", "tla": "CHE", "founded": 1905, "venue": "Stamford Bridge"},
    {"id": 3, "name": "Liverpool FC", "shortName": "Liverpool", "tla": "LIV", "founded": 1892},
    {"id": 4, "name": "Nowhere Athletic", "shortName": "Nowhere"},
    {"id": 5, "name": "Manchester United FC", "shortName": "Man United", "tla": "MUN", "founded": 1878},
    {"id": 6, "name": "Manchester City FC", "shortName": "Man City", "tla": "MCI", "founded": 1880},
    {"id": 7, "name": "Everton FC", "shortName": "Everton", "tla": "EVE", "founded": 1878},
    {"id": 8, "name": "Brighton & Hove Albion FC", "shortName": "Brighton Hove", "tla": "BHA", "founded": 1901},
]


@pytest.fixture(scope="session")
def app():
    flask_app = create_app()
    flask_app.config.update(
        TESTING=True,
        WTF_CSRF_ENABLED=False,
    )
    return flask_app


@pytest.fixture
def write_clubs(tmp_path):
    """Write a dataset file and return its path."""
    def _write(records=None, *, raw: str | None = None, name: str = "clubs.json") -> Path:
        path = tmp_path / name
        text = raw if raw is not None else json.dumps(SAMPLE_CLUBS if records is None else records)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clubs_path(app, write_clubs, monkeypatch):
    path = write_clubs()
    monkeypatch.setitem(app.config, "CLUBS_DATA_PATH", str(path))
    return path


@pytest.fixture
def client(app, clubs_path):  # noqa: ARG001 - keeps the sample dataset in place for request tests
    return app.test_client()
