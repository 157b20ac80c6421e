# tests/test_config.py

from pathlib import Path

from core.config import DISHES_PATH, WEATHER_URL, Settings


def test_from_env(monkeypatch):
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "ow")
    monkeypatch.setenv("YELP_API_KEY", " yelp ")
    monkeypatch.setenv("DISHES_PATH", "/tmp/dishes.json")
    monkeypatch.setenv("HTTP_TIMEOUT", "3")

    s = Settings.from_env()

    assert s.openweather_api_key == "ow"
    assert s.yelp_api_key == "yelp"
    assert s.dishes_path == Path("/tmp/dishes.json")
    assert s.http_timeout == 3.0
    assert s.weather_url == WEATHER_URL


def test_blank_values_are_unset(monkeypatch):
    for name in ("OPENWEATHERMAP_API_KEY", "YELP_API_KEY", "DISHES_PATH", "HTTP_TIMEOUT"):
        monkeypatch.setenv(name, "  ")

    s = Settings.from_env()

    assert s.openweather_api_key is None
    assert s.yelp_api_key is None
    assert s.dishes_path == DISHES_PATH
    assert s.http_timeout == 10.0
