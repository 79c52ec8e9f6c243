# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - cities.py: Aggregated city info endpoint
# - recipes.py: Recipe create/delete endpoints
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import cities
from . import health
from . import recipes

__all__ = [
    "cities",
    "health",
    "recipes",
]
