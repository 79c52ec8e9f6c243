# =============================================================================
# app/routers/recipes.py - Recipe Endpoints
# =============================================================================
# POST   /cities/{cityId}/recipes             create a recipe
# DELETE /cities/{cityId}/recipes/{recipeId}  delete a recipe
#
# Both check that the city exists upstream before touching the store.
# =============================================================================

from fastapi import APIRouter, Response

from app.dependencies import RecipeServiceDep
from app.exceptions import failure_response
from core.models.info import ErrorResponse
from core.models.recipe import RecipeCreateRequest, RecipeResponse

router = APIRouter()


@router.post(
    "/{city_id}/recipes",
    status_code=201,
    response_model=RecipeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid content or body"},
        404: {"model": ErrorResponse, "description": "City not found"},
        500: {"model": ErrorResponse, "description": "Upstream error"},
    },
)
async def create_recipe(
    city_id: str,
    service: RecipeServiceDep,
    body: RecipeCreateRequest | None = None,
):
    """
    Create a recipe for a city.

    Content must be between 10 and 2000 characters.
    """
    content = body.content if body is not None else None
    result = await service.create_recipe(city_id, content)

    if not result.ok:
        return failure_response(result.failure)

    return RecipeResponse.from_recipe(result.value)


@router.delete(
    "/{city_id}/recipes/{recipe_id}",
    status_code=204,
    response_class=Response,
    responses={
        404: {"model": ErrorResponse, "description": "City or recipe not found"},
        500: {"model": ErrorResponse, "description": "Upstream error"},
    },
)
async def delete_recipe(city_id: str, recipe_id: str, service: RecipeServiceDep):
    """
    Delete a recipe.

    A recipe that belongs to another city is reported as not found.
    """
    result = await service.delete_recipe(city_id, recipe_id)

    if not result.ok:
        return failure_response(result.failure)

    return Response(status_code=204)
