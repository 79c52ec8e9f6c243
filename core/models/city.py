# =============================================================================
# core/models/city.py - City Insights Schema
# =============================================================================
# CityInfo is the validated view of a city-insights upstream payload.
#
# Upstream wire format:
#   {
#       "coordinates": {"latitude": 48.85, "longitude": 2.35},
#       "population": 2148000,
#       "knownFor": ["Eiffel Tower", "Louvre"]
#   }
#
# Coordinates are also accepted as a two-element array [lat, lon].
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .fields import coerce_number


class CityInfo(BaseModel):
    """
    City data returned by the city-insights service.

    Read-only and never persisted: fetched fresh on every request.
    """

    model_config = {"populate_by_name": True, "frozen": True}

    # (latitude, longitude)
    coordinates: tuple[float, float] = Field(
        ...,
        description="Latitude and longitude of the city"
    )

    population: int = Field(
        ...,
        ge=0,
        description="Number of inhabitants"
    )

    known_for: list[str] = Field(
        ...,
        alias="knownFor",
        description="Labels the city is known for"
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, v: Any) -> list[float]:
        """Normalize {latitude, longitude} or [lat, lon] to two floats."""
        if isinstance(v, dict):
            if "latitude" not in v or "longitude" not in v:
                raise ValueError("coordinates must contain latitude and longitude")
            v = [v["latitude"], v["longitude"]]

        if not isinstance(v, (list, tuple)):
            raise ValueError("coordinates must be a latitude/longitude pair")
        if len(v) != 2:
            raise ValueError(f"coordinates must have exactly 2 values, got {len(v)}")

        return [coerce_number(item, "coordinates") for item in v]

    @field_validator("population", mode="before")
    @classmethod
    def validate_population(cls, v: Any) -> Any:
        """Reject booleans; integral floats are handled by pydantic."""
        if isinstance(v, bool):
            raise ValueError("population must be an integer, got a boolean")
        return v

    @field_validator("known_for", mode="before")
    @classmethod
    def validate_known_for(cls, v: Any) -> list[str]:
        """Require a sequence and coerce every entry to text."""
        if not isinstance(v, (list, tuple)):
            raise ValueError("knownFor must be a list")
        return [str(item) for item in v]

    # -------------------------------------------------------------------------
    # Helper Methods
    # -------------------------------------------------------------------------

    @property
    def latitude(self) -> float:
        return self.coordinates[0]

    @property
    def longitude(self) -> float:
        return self.coordinates[1]
