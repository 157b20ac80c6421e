# tests/test_run.py

import json

import pytest

import run


@pytest.fixture(autouse=True)
def no_credentials(monkeypatch, fake_http, tmp_path):
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "")
    monkeypatch.setenv("YELP_API_KEY", "")
    monkeypatch.setenv("DISHES_PATH", str(tmp_path / "missing.json"))


def test_json_output(capsys):
    assert run.main(["--city", "Tokyo", "--json"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["city"] == "Tokyo"
    assert out["meals"][0]["restaurant"] == "Local Local Breakfast Special Restaurant in Tokyo"


def test_pretty_output(capsys):
    assert run.main(["--city", "Tokyo"]) == 0

    out = capsys.readouterr().out
    assert "Welcome to Tokyo!" in out


def test_blank_city_exit_code():
    assert run.main(["--city", "   "]) == 2
