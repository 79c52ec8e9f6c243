# =============================================================================
# core/models/info.py - Aggregated City Info Response
# =============================================================================
# The output contract of GET /cities/{cityId}/infos.
#
# Example:
#   {
#       "coordinates": [48.85, 2.35],
#       "population": 2148000,
#       "knownFor": ["Eiffel Tower"],
#       "weatherPredictions": [
#           {"when": "today", "min": 12.0, "max": 21.0},
#           {"when": "tomorrow", "min": 10.0, "max": 18.0}
#       ],
#       "recipes": [{"id": 1, "content": "Slow-cook the onions..."}]
#   }
# =============================================================================

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .city import CityInfo
from .recipe import Recipe, RecipeResponse
from .weather import WeatherPrediction


class WeatherPredictionEntry(BaseModel):
    """One day of the forecast in the response."""
    when: Literal["today", "tomorrow"]
    min: float
    max: float


class AggregatedInfoResponse(BaseModel):
    """
    City data, forecast and local recipes merged into one document.

    Built per request and never stored. Field names are serialized in
    camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    coordinates: tuple[float, float] = Field(
        ...,
        description="[latitude, longitude]"
    )

    population: int = Field(..., ge=0)

    known_for: list[str] = Field(default_factory=list)

    # Always two entries, ordered [today, tomorrow]
    weather_predictions: list[WeatherPredictionEntry] = Field(
        ...,
        min_length=2,
        max_length=2,
    )

    recipes: list[RecipeResponse] = Field(default_factory=list)

    @classmethod
    def assemble(
        cls,
        city: CityInfo,
        weather: WeatherPrediction,
        recipes: list[Recipe],
    ) -> "AggregatedInfoResponse":
        """Merge validated upstream data with local recipes."""
        return cls(
            coordinates=(city.latitude, city.longitude),
            population=city.population,
            known_for=list(city.known_for),
            weather_predictions=[
                WeatherPredictionEntry(when="today", min=weather.today.min, max=weather.today.max),
                WeatherPredictionEntry(when="tomorrow", min=weather.tomorrow.min, max=weather.tomorrow.max),
            ],
            recipes=[RecipeResponse.from_recipe(recipe) for recipe in recipes],
        )


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str = Field(..., examples=["City not found"])
