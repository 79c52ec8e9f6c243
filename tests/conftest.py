# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - FakeUpstream: in-process stand-in for city-insights/weather-predictions
#   served through httpx.MockTransport
# - An application instance with an isolated recipe store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from lib.recipe_store import RecipeStore
from lib.upstream_client import UpstreamClient

CITY_BASE_URL = "http://upstream.test/cities"
WEATHER_BASE_URL = "http://upstream.test/weather-predictions"
TEST_API_KEY = "test-api-key"


# =============================================================================
# Sample Payloads
# =============================================================================

def city_payload(
    latitude=48.8566,
    longitude=2.3522,
    population=2148000,
    known_for=("Eiffel Tower", "Louvre"),
):
    """City-insights payload in upstream wire format."""
    return {
        "coordinates": {"latitude": latitude, "longitude": longitude},
        "population": population,
        "knownFor": list(known_for),
    }


def predictions(today=(12, 21), tomorrow=(10, 18)):
    """Predictions list in upstream wire format."""
    return [
        {"when": "today", "min": today[0], "max": today[1]},
        {"when": "tomorrow", "min": tomorrow[0], "max": tomorrow[1]},
    ]


# =============================================================================
# Fake Upstream
# =============================================================================

class FakeUpstream:
    """
    Serves city-insights and weather-predictions from in-memory data.

    Attributes:
        cities: city_id -> city-insights payload
        weather: city_id -> predictions list
        city_status / weather_status: force a status code for every call
        requests: every request received, in order
    """

    def __init__(self):
        self.cities: dict[str, object] = {}
        self.weather: dict[str, object] = {}
        self.city_status: int | None = None
        self.weather_status: int | None = None
        self.weather_body: object | None = None
        self.requests: list[httpx.Request] = []

    def add_city(self, city_id: str, payload=None, forecast=None) -> None:
        self.cities[city_id] = payload if payload is not None else city_payload()
        self.weather[city_id] = forecast if forecast is not None else predictions()

    def calls_to(self, service: str) -> list[httpx.Request]:
        if service == "city":
            return [r for r in self.requests if r.url.path.endswith("/insights")]
        return [r for r in self.requests if r.url.path == "/weather-predictions"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.startswith("/cities/") and path.endswith("/insights"):
            if self.city_status is not None:
                return httpx.Response(self.city_status, json={"message": "forced"})
            city_id = path[len("/cities/"):-len("/insights")]
            if city_id not in self.cities:
                return httpx.Response(404, json={"message": "City not found"})
            return httpx.Response(200, json=self.cities[city_id])

        if path == "/weather-predictions":
            if self.weather_status is not None:
                return httpx.Response(self.weather_status, json={"message": "forced"})
            if self.weather_body is not None:
                return httpx.Response(200, json=self.weather_body)
            return httpx.Response(200, json=[
                {"cityId": city_id, "predictions": forecast}
                for city_id, forecast in self.weather.items()
            ])

        return httpx.Response(404)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_upstream():
    """Fake upstream knowing a single city, "42"."""
    fake = FakeUpstream()
    fake.add_city("42")
    return fake


@pytest.fixture
def upstream_client(fake_upstream):
    """UpstreamClient wired to the fake upstream."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_upstream.handler))
    return UpstreamClient(
        api_key=TEST_API_KEY,
        city_base_url=CITY_BASE_URL,
        weather_base_url=WEATHER_BASE_URL,
        http_client=http_client,
    )


@pytest.fixture
def recipe_store():
    """Fresh, empty recipe store."""
    return RecipeStore()


@pytest.fixture
def client(recipe_store, upstream_client):
    """TestClient for an app with an isolated store and the fake upstream."""
    app = create_app(recipe_store=recipe_store, upstream_client=upstream_client)
    with TestClient(app) as test_client:
        yield test_client
