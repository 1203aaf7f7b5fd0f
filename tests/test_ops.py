import json

from services import football_data


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "service": "club-tracker"}


def test_readyz_with_dataset(client):
    response = client.get("/readyz")
    assert response.status_code == 200
    assert response.get_json()["clubs"] == 8


def test_readyz_without_dataset(client, app, tmp_path, monkeypatch):
    monkeypatch.setitem(app.config, "CLUBS_DATA_PATH", str(tmp_path / "absent.json"))
    response = client.get("/readyz")
    assert response.status_code == 503
    assert response.get_json() == {"status": "error", "reason": "dataset"}


def test_clubs_check_cli(app, clubs_path):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["clubs-check"])
    assert result.exit_code == 0
    assert "8 clubs loaded." in result.output


def test_clubs_check_cli_json_failure(app, tmp_path):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["clubs-check", "--json", "--path", str(tmp_path / "absent.json")])
    assert result.exit_code == 1
    summary = json.loads(result.output)
    assert summary["ok"] is False
    assert summary["error"] == "unavailable"
    assert summary["attempted"] == [str(tmp_path / "absent.json")]


class _TeamsResponse:
    status_code = 200

    def __init__(self, payload):
        self._payload = payload

    def json(self):
        return self._payload


def test_clubs_fetch_cli_writes_dataset(app, tmp_path, monkeypatch):
    calls = {}

    def fake_get(url, headers=None, params=None, timeout=None):
        calls.update(url=url, headers=headers, params=params)
        team = {"id": 57, "name": "Arsenal FC", "shortName": "Arsenal", "tla": "ARS", "founded": 1886}
        return _TeamsResponse({"teams": [team, {"name": "no id"}]})

    monkeypatch.setattr(football_data.requests, "get", fake_get)
    monkeypatch.setitem(app.config, "FOOTBALL_DATA_API_URL", "https://api.example/v4")
    monkeypatch.setitem(app.config, "FOOTBALL_DATA_API_TOKEN", "secret")
    target = tmp_path / "out" / "clubs.json"

    runner = app.test_cli_runner()
    result = runner.invoke(args=["clubs-fetch", "--competition", "fl1", "--season", "2024", "--output", str(target)])

    assert result.exit_code == 0, result.output
    assert f"Wrote 1 clubs to {target}" in result.output
    assert calls["url"] == "https://api.example/v4/competitions/FL1/teams"
    assert calls["headers"] == {"X-Auth-Token": "secret"}
    assert calls["params"] == {"season": 2024}
    assert json.loads(target.read_text(encoding="utf-8")) == [
        {"id": 57, "name": "Arsenal FC", "shortName": "Arsenal", "tla": "ARS", "founded": 1886}
    ]


def test_clubs_fetch_cli_reports_api_errors(app, tmp_path, monkeypatch):
    def fake_get(url, headers=None, params=None, timeout=None):
        response = _TeamsResponse({"message": "Your API token is invalid."})
        response.status_code = 403
        return response

    monkeypatch.setattr(football_data.requests, "get", fake_get)
    target = tmp_path / "clubs.json"
    result = app.test_cli_runner().invoke(args=["clubs-fetch", "--output", str(target)])

    assert result.exit_code == 1
    assert "Your API token is invalid." in result.output
    assert not target.exists()
