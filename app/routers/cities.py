# =============================================================================
# app/routers/cities.py - City Info Endpoint
# =============================================================================
# GET /cities/{cityId}/infos: city insights + weather + local recipes.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import InfoServiceDep
from app.exceptions import failure_response
from core.models.info import AggregatedInfoResponse, ErrorResponse

router = APIRouter()


@router.get(
    "/{city_id}/infos",
    response_model=AggregatedInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "City not found"},
        500: {"model": ErrorResponse, "description": "Upstream or payload error"},
    },
)
async def get_city_infos(city_id: str, service: InfoServiceDep):
    """
    Get aggregated information about a city.

    Returns coordinates, population and labels from the city-insights
    service, today's and tomorrow's forecast, and the recipes stored for
    the city.
    """
    result = await service.get_city_infos(city_id)

    if not result.ok:
        return failure_response(result.failure)

    return result.value
