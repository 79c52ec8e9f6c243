# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the City Infos Gateway.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.exceptions import (
    http_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
)
from app.routers import cities, health, recipes
from lib.recipe_store import RecipeStore
from lib.upstream_client import UpstreamClient

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: create the upstream client unless one was injected
    - Shutdown: close the client's connection pool if we created it
    """
    logger.info(f"Starting City Infos Gateway in {settings.ENVIRONMENT} mode")

    owns_client = app.state.upstream_client is None
    if owns_client:
        app.state.upstream_client = UpstreamClient.from_settings(settings)

    yield

    logger.info("Shutting down City Infos Gateway")
    if owns_client:
        await app.state.upstream_client.aclose()
        app.state.upstream_client = None


def create_app(
    recipe_store: RecipeStore | None = None,
    upstream_client: UpstreamClient | None = None,
) -> FastAPI:
    """
    Application factory.

    Args:
        recipe_store: Store to use (a fresh empty one by default)
        upstream_client: Client to use (created at startup by default)

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="City Infos Gateway",
        description=(
            "Aggregates city insights and weather predictions from upstream "
            "services with locally stored recipes."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.state.recipe_store = recipe_store if recipe_store is not None else RecipeStore()
    app.state.upstream_client = upstream_client

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(cities.router, prefix="/cities", tags=["Cities"])
    app.include_router(recipes.router, prefix="/cities", tags=["Recipes"])
    app.include_router(health.router, tags=["Health"])

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server listening on {settings.bind_host}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.bind_host,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )
