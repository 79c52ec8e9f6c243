# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - city.py: CityInfo (validated city-insights payload)
# - weather.py: DailyForecast / WeatherPrediction (validated forecast)
# - recipe.py: Recipe record and request/response schemas
# - info.py: AggregatedInfoResponse and the error body
#
# These models define the "contract" between API and clients.
# =============================================================================

from .city import CityInfo
from .info import AggregatedInfoResponse, ErrorResponse, WeatherPredictionEntry
from .recipe import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    Recipe,
    RecipeCreateRequest,
    RecipeResponse,
)
from .weather import DailyForecast, WeatherPrediction

__all__ = [
    "AggregatedInfoResponse",
    "CityInfo",
    "CONTENT_MAX_LENGTH",
    "CONTENT_MIN_LENGTH",
    "DailyForecast",
    "ErrorResponse",
    "Recipe",
    "RecipeCreateRequest",
    "RecipeResponse",
    "WeatherPrediction",
    "WeatherPredictionEntry",
]
