# =============================================================================
# lib/validators.py - Shape Validation and Normalization
# =============================================================================
# Pure functions that check untrusted input before it is used:
# - validate_city_shape: city-insights payload -> CityInfo
# - validate_weather_shape: weather-predictions payload -> WeatherPrediction
# - validate_recipe_content: user-submitted recipe text
#
# Upstream violations raise ShapeError (the handler answers 500), user
# violations raise ContentValidationError (the handler answers 400).
# =============================================================================

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from core.models.city import CityInfo
from core.models.recipe import CONTENT_MAX_LENGTH, CONTENT_MIN_LENGTH
from core.models.weather import WeatherPrediction
from lib.utils import ContentValidationError, ShapeError


# =============================================================================
# Upstream Payloads
# =============================================================================

def validate_city_shape(raw: Any) -> CityInfo:
    """
    Validate and normalize a city-insights payload.

    Args:
        raw: Parsed JSON from the city-insights endpoint

    Returns:
        CityInfo with float coordinates, int population and str labels

    Raises:
        ShapeError: If coordinates, population or knownFor are malformed
    """
    if not isinstance(raw, Mapping):
        raise ShapeError(
            "City payload must be an object",
            details={"type": type(raw).__name__},
        )

    try:
        return CityInfo.model_validate(dict(raw))
    except ValidationError as e:
        raise ShapeError(
            "Invalid city payload from city-insights service",
            details={"errors": _summarize(e)},
        ) from e


def validate_weather_shape(raw: Any, city_id: str | None = None) -> WeatherPrediction:
    """
    Validate and normalize a weather-predictions payload.

    The upstream answers with a list of per-city entries. When city_id is
    given, the entry with a matching "cityId" is used; otherwise the first
    entry. A single {"predictions": [...]} object is also accepted.

    Args:
        raw: Parsed JSON from the weather-predictions endpoint
        city_id: City to select from a multi-city answer

    Returns:
        WeatherPrediction with float min/max for today and tomorrow

    Raises:
        ShapeError: If no usable entry or prediction is found
    """
    entry = _select_weather_entry(raw, city_id)

    predictions = entry.get("predictions")
    if not isinstance(predictions, list):
        raise ShapeError(
            "Weather entry has no predictions list",
            details={"city_id": city_id},
        )

    by_day: dict[str, Any] = {}
    for prediction in predictions:
        if isinstance(prediction, Mapping) and isinstance(prediction.get("when"), str):
            # first entry per day wins
            by_day.setdefault(prediction["when"], prediction)

    missing = [day for day in ("today", "tomorrow") if day not in by_day]
    if missing:
        raise ShapeError(
            "Missing predictions for today or tomorrow",
            details={"city_id": city_id, "missing": missing},
        )

    try:
        return WeatherPrediction.model_validate({
            "today": dict(by_day["today"]),
            "tomorrow": dict(by_day["tomorrow"]),
        })
    except ValidationError as e:
        raise ShapeError(
            "Invalid weather prediction values",
            details={"city_id": city_id, "errors": _summarize(e)},
        ) from e


def _select_weather_entry(raw: Any, city_id: str | None) -> Mapping:
    """Pick the forecast entry for a city out of the upstream answer."""
    if isinstance(raw, Mapping):
        return raw

    if not isinstance(raw, list):
        raise ShapeError(
            "Weather payload must be a list or an object",
            details={"type": type(raw).__name__},
        )

    entries = [entry for entry in raw if isinstance(entry, Mapping)]
    if city_id is not None:
        entries = [entry for entry in entries if str(entry.get("cityId")) == city_id]

    if not entries:
        raise ShapeError(
            "Weather data not found for this city",
            details={"city_id": city_id},
        )
    return entries[0]


def _summarize(error: ValidationError) -> list[str]:
    """Turn pydantic errors into short "field: message" strings."""
    return [
        f"{'.'.join(str(part) for part in err['loc']) or 'payload'}: {err['msg']}"
        for err in error.errors()
    ]


# =============================================================================
# User Input
# =============================================================================

def validate_recipe_content(content: str | None) -> None:
    """
    Check recipe content, first failing rule wins.

    Raises:
        ContentValidationError: With the client-facing message
    """
    if not content:
        raise ContentValidationError("Content is required")

    if len(content) < CONTENT_MIN_LENGTH:
        raise ContentValidationError(
            f"Content is too short (minimum {CONTENT_MIN_LENGTH} characters)"
        )

    if len(content) > CONTENT_MAX_LENGTH:
        raise ContentValidationError(
            f"Content is too long (maximum {CONTENT_MAX_LENGTH} characters)"
        )
