# =============================================================================
# core/services/info_service.py - City Info Aggregation
# =============================================================================
# Builds the GET /cities/{cityId}/infos document:
#   city lookup -> shape check -> weather lookup -> shape check
#   -> local recipes -> AggregatedInfoResponse
#
# Each step can end the request early with a tagged failure. Each upstream
# call is attempted exactly once.
# =============================================================================

import logging

from core.models.info import AggregatedInfoResponse
from lib.recipe_store import RecipeStore
from lib.result import Failure, Result
from lib.upstream_client import UpstreamClient
from lib.utils import ShapeError
from lib.validators import validate_city_shape, validate_weather_shape

logger = logging.getLogger(__name__)


class InfoService:
    """
    Orchestrates the upstream client, validators and recipe store for the
    info endpoint.
    """

    def __init__(self, store: RecipeStore, client: UpstreamClient):
        self._store = store
        self._client = client

    async def get_city_infos(self, city_id: str) -> Result[AggregatedInfoResponse]:
        """
        Aggregate city data, forecast and recipes for a city.

        Args:
            city_id: Opaque upstream city identifier

        Returns:
            Result with the assembled response, or a failure:
            - NOT_FOUND if the city-insights service does not know the city
            - UPSTREAM / SHAPE if either service fails or answers garbage
        """
        city_result = await self._client.fetch_city_info(city_id)
        if not city_result.ok:
            return city_result

        try:
            city = validate_city_shape(city_result.value)
        except ShapeError as e:
            return Result.fail(Failure.shape(f"city {city_id!r}: {e}"))

        weather_result = await self._client.fetch_weather(city.latitude, city.longitude)
        if not weather_result.ok:
            return weather_result

        try:
            weather = validate_weather_shape(weather_result.value, city_id)
        except ShapeError as e:
            return Result.fail(Failure.shape(f"weather for city {city_id!r}: {e}"))

        recipes = self._store.get_by_city_id(city_id)

        logger.info(f"Aggregated infos for city {city_id} ({len(recipes)} recipes)")
        return Result.success(AggregatedInfoResponse.assemble(city, weather, recipes))
