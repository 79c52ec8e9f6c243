# =============================================================================
# lib/recipe_store.py - In-Memory Recipe Store
# =============================================================================
# Volatile, single-process storage for user-submitted recipes.
#
# One RecipeStore instance is created by the application factory and
# injected into handlers, so tests can build isolated stores.
#
# None of the methods suspend (no awaits), so under the asyncio event loop
# each call runs to completion before another request can touch the store.
#
# Usage:
#   store = RecipeStore()
#   recipe = store.add("42", "Slow-cook the onions for forty minutes.")
#   store.get_by_city_id("42")   # [recipe]
#   store.delete_by_id(recipe.id) # True
# =============================================================================

import logging

from core.models.recipe import Recipe

logger = logging.getLogger(__name__)


class RecipeStore:
    """
    Recipes keyed by auto-incrementing integer id.

    Ids start at 1, are strictly increasing, and are never reused after a
    deletion.
    """

    def __init__(self) -> None:
        # dicts keep insertion order, which get_by_city_id relies on
        self._recipes: dict[int, Recipe] = {}
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._recipes)

    def add(self, city_id: str, content: str) -> Recipe:
        """
        Store a new recipe under the next id.

        Args:
            city_id: Upstream city identifier
            content: Recipe text (already validated)

        Returns:
            The stored Recipe
        """
        self._last_id += 1
        recipe = Recipe(id=self._last_id, content=content, city_id=city_id)
        self._recipes[recipe.id] = recipe
        logger.debug(f"Stored recipe {recipe.id} for city {city_id}")
        return recipe

    def get_by_id(self, recipe_id: int) -> Recipe | None:
        """Return the recipe with this exact id, or None."""
        return self._recipes.get(recipe_id)

    def get_by_city_id(self, city_id: str) -> list[Recipe]:
        """Return all recipes for a city, in insertion order."""
        return [recipe for recipe in self._recipes.values() if recipe.city_id == city_id]

    def delete_by_id(self, recipe_id: int) -> bool:
        """
        Remove a recipe.

        Returns:
            True if a recipe was removed, False if none had this id
        """
        removed = self._recipes.pop(recipe_id, None)
        if removed is None:
            return False
        logger.debug(f"Deleted recipe {recipe_id} for city {removed.city_id}")
        return True
