# =============================================================================
# core/models/weather.py - Weather Prediction Schemas
# =============================================================================
# Validated view of the weather-predictions upstream payload.
#
# Upstream wire format (one entry per city near the coordinates):
#   [
#       {
#           "cityId": "42",
#           "predictions": [
#               {"when": "today", "min": 12, "max": 21},
#               {"when": "tomorrow", "min": 10, "max": 18}
#           ]
#       }
#   ]
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .fields import coerce_number


class DailyForecast(BaseModel):
    """Min/max temperature for a single day."""

    model_config = {"frozen": True}

    min: float = Field(..., description="Minimum temperature")
    max: float = Field(..., description="Maximum temperature")

    @field_validator("min", "max", mode="before")
    @classmethod
    def validate_temperature(cls, v: Any, info) -> float:
        return coerce_number(v, info.field_name)


class WeatherPrediction(BaseModel):
    """Forecast for today and tomorrow."""

    model_config = {"frozen": True}

    today: DailyForecast
    tomorrow: DailyForecast
