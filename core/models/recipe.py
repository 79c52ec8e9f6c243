# =============================================================================
# core/models/recipe.py - Recipe Schemas
# =============================================================================
# These models define the API contract for recipe operations:
# - Recipe: Stored record, owned by the RecipeStore
# - RecipeCreateRequest: Body of POST /cities/{cityId}/recipes
# - RecipeResponse: Output for a created or listed recipe
#
# Recipes are scoped to a city and live only as long as the process.
# =============================================================================

from pydantic import BaseModel, Field

CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 2000


class Recipe(BaseModel):
    """
    A user-submitted recipe for a city.

    Frozen: a recipe is never mutated after creation, so its city_id
    stays fixed for its whole lifetime.
    """

    model_config = {"frozen": True}

    id: int = Field(
        ...,
        gt=0,
        description="Auto-incremented identifier, never reused"
    )

    content: str = Field(
        ...,
        description="Recipe text"
    )

    city_id: str = Field(
        ...,
        description="Upstream city identifier this recipe belongs to"
    )


class RecipeCreateRequest(BaseModel):
    """
    Schema for creating a recipe.

    Content rules are checked by the service so that the first failing
    rule determines the error message.

    Example:
        {
            "content": "Slow-cook the onions for forty minutes."
        }
    """

    content: str | None = Field(
        default=None,
        description=f"Recipe text ({CONTENT_MIN_LENGTH}-{CONTENT_MAX_LENGTH} characters)"
    )


class RecipeResponse(BaseModel):
    """
    Recipe as returned to clients.

    Example:
        {
            "id": 1,
            "content": "Slow-cook the onions for forty minutes."
        }
    """

    id: int
    content: str

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeResponse":
        return cls(id=recipe.id, content=recipe.content)
