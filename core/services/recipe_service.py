# =============================================================================
# core/services/recipe_service.py - Recipe Business Logic
# =============================================================================
# Handles recipe creation and deletion.
# Separates HTTP concerns from storage and upstream checks.
#
# Both operations first confirm the city exists upstream; content is
# validated before any network call.
# =============================================================================

import logging

from core.models.recipe import Recipe
from lib.recipe_store import RecipeStore
from lib.result import Failure, FailureKind, Result
from lib.upstream_client import UpstreamClient
from lib.utils import ContentValidationError, parse_recipe_id
from lib.validators import validate_recipe_content

logger = logging.getLogger(__name__)


class RecipeService:
    """
    Service for recipe operations.

    Provides a clean interface between API routes and the recipe store.
    """

    def __init__(self, store: RecipeStore, client: UpstreamClient):
        self._store = store
        self._client = client

    async def create_recipe(self, city_id: str, content: str | None) -> Result[Recipe]:
        """
        Create a recipe for a city.

        Args:
            city_id: Upstream city identifier
            content: Recipe text from the request body

        Returns:
            Result with the stored Recipe, or a failure:
            - VALIDATION if content is missing, too short or too long
            - NOT_FOUND if the city does not exist upstream
            - UPSTREAM if the existence check could not be completed
        """
        try:
            validate_recipe_content(content)
        except ContentValidationError as e:
            return Result.fail(Failure(FailureKind.VALIDATION, e.message, str(e)))

        exists = await self._client.fetch_city_info(city_id)
        if not exists.ok:
            return exists

        recipe = self._store.add(city_id, content)
        logger.info(f"Created recipe {recipe.id} for city {city_id}")
        return Result.success(recipe)

    async def delete_recipe(self, city_id: str, recipe_id: str | int) -> Result[None]:
        """
        Delete a recipe belonging to a city.

        A recipe stored under another city is reported as not found, the
        same way as an unknown id.

        Args:
            city_id: Upstream city identifier
            recipe_id: Recipe id from the URL path

        Returns:
            Empty Result on success, or a failure:
            - NOT_FOUND if the city does not exist upstream
            - RECIPE_NOT_FOUND if the id is unknown or belongs to another city
            - UPSTREAM if the existence check could not be completed
        """
        exists = await self._client.fetch_city_info(city_id)
        if not exists.ok:
            return exists

        parsed_id = parse_recipe_id(recipe_id)
        recipe = self._store.get_by_id(parsed_id) if parsed_id is not None else None

        if recipe is None:
            return Result.fail(Failure(
                FailureKind.RECIPE_NOT_FOUND,
                "Recipe not found",
                f"Recipe {recipe_id!r} does not exist",
            ))

        if recipe.city_id != city_id:
            return Result.fail(Failure(
                FailureKind.RECIPE_NOT_FOUND,
                "Recipe not found for this city",
                f"Recipe {recipe.id} belongs to city {recipe.city_id!r}, not {city_id!r}",
            ))

        self._store.delete_by_id(recipe.id)
        logger.info(f"Deleted recipe {recipe.id} for city {city_id}")
        return Result.success()
