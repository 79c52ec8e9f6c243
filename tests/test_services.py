# =============================================================================
# tests/test_services.py - Service Layer Tests
# =============================================================================
# Tests for InfoService and RecipeService with the fake upstream:
# - Failure kinds for each short-circuit step
# - Exactly one upstream call per step
# - Store untouched on failed creation
# =============================================================================

import asyncio

import pytest

from core.services import InfoService, RecipeService
from lib.result import FailureKind
from tests.conftest import city_payload, predictions

CONTENT = "Slow-cook the onions for forty minutes."


@pytest.fixture
def info_service(recipe_store, upstream_client):
    return InfoService(recipe_store, upstream_client)


@pytest.fixture
def recipe_service(recipe_store, upstream_client):
    return RecipeService(recipe_store, upstream_client)


# =============================================================================
# Failure Kinds
# =============================================================================

class TestFailureKind:
    """Tests for status code mapping."""

    @pytest.mark.parametrize("kind,status", [
        (FailureKind.NOT_FOUND, 404),
        (FailureKind.RECIPE_NOT_FOUND, 404),
        (FailureKind.VALIDATION, 400),
        (FailureKind.SHAPE, 500),
        (FailureKind.UPSTREAM, 500),
    ])
    def test_status_codes(self, kind, status):
        assert kind.status_code == status


# =============================================================================
# Info Aggregation
# =============================================================================

class TestInfoService:
    """Tests for InfoService.get_city_infos."""

    def test_assembles_response(self, info_service, recipe_store):
        recipe = recipe_store.add("42", CONTENT)
        recipe_store.add("7", "Recipe for another city")

        result = asyncio.run(info_service.get_city_infos("42"))

        assert result.ok
        info = result.value
        assert info.coordinates == (48.8566, 2.3522)
        assert info.population == 2148000
        assert info.known_for == ["Eiffel Tower", "Louvre"]
        assert [p.when for p in info.weather_predictions] == ["today", "tomorrow"]
        assert [(r.id, r.content) for r in info.recipes] == [(recipe.id, CONTENT)]

    def test_weather_uses_city_coordinates(self, info_service, fake_upstream):
        fake_upstream.add_city("9", city_payload(latitude=40.5, longitude=-3.7))

        asyncio.run(info_service.get_city_infos("9"))

        request = fake_upstream.calls_to("weather")[0]
        assert request.url.params["lat"] == "40.5"
        assert request.url.params["lon"] == "-3.7"

    def test_each_upstream_called_once(self, info_service, fake_upstream):
        asyncio.run(info_service.get_city_infos("42"))

        assert len(fake_upstream.calls_to("city")) == 1
        assert len(fake_upstream.calls_to("weather")) == 1

    def test_unknown_city(self, info_service, fake_upstream):
        result = asyncio.run(info_service.get_city_infos("404"))

        assert result.failure.kind is FailureKind.NOT_FOUND
        assert fake_upstream.calls_to("weather") == []

    def test_bad_city_shape_stops_before_weather(self, info_service, fake_upstream):
        fake_upstream.add_city("13", {"coordinates": "nowhere", "population": 1, "knownFor": []})

        result = asyncio.run(info_service.get_city_infos("13"))

        assert result.failure.kind is FailureKind.SHAPE
        assert result.failure.message == "Internal server error"
        assert fake_upstream.calls_to("weather") == []

    def test_weather_upstream_error(self, info_service, fake_upstream):
        fake_upstream.weather_status = 502

        result = asyncio.run(info_service.get_city_infos("42"))

        assert result.failure.kind is FailureKind.UPSTREAM

    def test_weather_missing_for_city(self, info_service, fake_upstream):
        fake_upstream.weather_body = [{"cityId": "7", "predictions": predictions()}]

        result = asyncio.run(info_service.get_city_infos("42"))

        assert result.failure.kind is FailureKind.SHAPE
        assert "42" in result.failure.detail

    def test_bad_weather_shape(self, info_service, fake_upstream):
        fake_upstream.add_city("13", forecast=[{"when": "today", "min": 1, "max": 2}])

        result = asyncio.run(info_service.get_city_infos("13"))

        assert result.failure.kind is FailureKind.SHAPE


# =============================================================================
# Recipe Operations
# =============================================================================

class TestRecipeServiceCreate:
    """Tests for RecipeService.create_recipe."""

    def test_creates_recipe(self, recipe_service, recipe_store):
        result = asyncio.run(recipe_service.create_recipe("42", CONTENT))

        assert result.ok
        assert result.value.id == 1
        assert recipe_store.get_by_city_id("42") == [result.value]

    def test_invalid_content_skips_network(self, recipe_service, fake_upstream, recipe_store):
        result = asyncio.run(recipe_service.create_recipe("42", "Short"))

        assert result.failure.kind is FailureKind.VALIDATION
        assert result.failure.message == "Content is too short (minimum 10 characters)"
        assert fake_upstream.requests == []
        assert len(recipe_store) == 0

    def test_unknown_city_leaves_store_unchanged(self, recipe_service, recipe_store):
        result = asyncio.run(recipe_service.create_recipe("404", CONTENT))

        assert result.failure.kind is FailureKind.NOT_FOUND
        assert len(recipe_store) == 0

    def test_upstream_error(self, recipe_service, fake_upstream, recipe_store):
        fake_upstream.city_status = 500

        result = asyncio.run(recipe_service.create_recipe("42", CONTENT))

        assert result.failure.kind is FailureKind.UPSTREAM
        assert len(recipe_store) == 0


class TestRecipeServiceDelete:
    """Tests for RecipeService.delete_recipe."""

    def test_deletes_recipe(self, recipe_service, recipe_store):
        recipe = recipe_store.add("42", CONTENT)

        result = asyncio.run(recipe_service.delete_recipe("42", str(recipe.id)))

        assert result.ok
        assert recipe_store.get_by_id(recipe.id) is None

    def test_unknown_recipe(self, recipe_service):
        result = asyncio.run(recipe_service.delete_recipe("42", "99"))

        assert result.failure.kind is FailureKind.RECIPE_NOT_FOUND
        assert result.failure.message == "Recipe not found"

    def test_non_numeric_recipe_id(self, recipe_service):
        result = asyncio.run(recipe_service.delete_recipe("42", "abc"))

        assert result.failure.kind is FailureKind.RECIPE_NOT_FOUND

    def test_recipe_of_another_city(self, recipe_service, recipe_store, fake_upstream):
        fake_upstream.add_city("7")
        recipe = recipe_store.add("7", CONTENT)

        result = asyncio.run(recipe_service.delete_recipe("42", str(recipe.id)))

        assert result.failure.kind is FailureKind.RECIPE_NOT_FOUND
        assert result.failure.message == "Recipe not found for this city"
        assert recipe_store.get_by_id(recipe.id) == recipe

    def test_city_checked_before_recipe(self, recipe_service, recipe_store):
        recipe = recipe_store.add("404", CONTENT)

        result = asyncio.run(recipe_service.delete_recipe("404", str(recipe.id)))

        assert result.failure.kind is FailureKind.NOT_FOUND
        assert recipe_store.get_by_id(recipe.id) == recipe
