# tests/conftest.py

import pytest
import requests

from core.config import Settings
from services.dishes import InMemoryDishCatalog


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.text is not None:
            raise ValueError("not json")
        return self._payload


class FakeHttp:
    """Stand-in for requests.get that records calls and routes by URL."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def __call__(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params or {}, "headers": headers or {}})
        handler = self.routes.get(url)
        if handler is None:
            raise requests.ConnectionError(f"no route to {url}")
        result = handler(params or {}) if callable(handler) else handler
        if isinstance(result, Exception):
            raise result
        return result

    def calls_to(self, url):
        return [c for c in self.calls if c["url"] == url]


@pytest.fixture
def fake_http(monkeypatch):
    fake = FakeHttp()
    monkeypatch.setattr(requests, "get", fake)
    return fake


@pytest.fixture
def settings():
    return Settings(openweather_api_key="ow-key", yelp_api_key="yelp-key")


@pytest.fixture
def catalog():
    return InMemoryDishCatalog({
        "Paris": ["Croissant", "Croque Monsieur", "Coq au Vin", "Macaron"],
        "Lyon": ["Quenelle"],
    })
