# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The store and upstream client live on app.state (set up by create_app and
# the lifespan handler), so each application instance owns its own.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.info_service import InfoService
from core.services.recipe_service import RecipeService
from lib.recipe_store import RecipeStore
from lib.upstream_client import UpstreamClient


def get_recipe_store(request: Request) -> RecipeStore:
    """Get the application's recipe store."""
    return request.app.state.recipe_store


def get_upstream_client(request: Request) -> UpstreamClient:
    """
    Get the application's upstream client.

    Raises:
        RuntimeError: If the lifespan handler has not created it yet
    """
    client = getattr(request.app.state, "upstream_client", None)
    if client is None:
        raise RuntimeError("Upstream client not initialized")
    return client


# Type aliases for dependency injection
RecipeStoreDep = Annotated[RecipeStore, Depends(get_recipe_store)]
UpstreamClientDep = Annotated[UpstreamClient, Depends(get_upstream_client)]


def get_info_service(store: RecipeStoreDep, client: UpstreamClientDep) -> InfoService:
    return InfoService(store, client)


def get_recipe_service(store: RecipeStoreDep, client: UpstreamClientDep) -> RecipeService:
    return RecipeService(store, client)


InfoServiceDep = Annotated[InfoService, Depends(get_info_service)]
RecipeServiceDep = Annotated[RecipeService, Depends(get_recipe_service)]
