# =============================================================================
# core/services/ - Business Services
# =============================================================================
# - info_service.py: GET infos aggregation pipeline
# - recipe_service.py: Recipe creation and deletion
# =============================================================================

from .info_service import InfoService
from .recipe_service import RecipeService

__all__ = [
    "InfoService",
    "RecipeService",
]
