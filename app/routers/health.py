# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# /health reports gateway state: whether the upstream client is open and how
# many recipes the store holds. Neither endpoint calls the upstream services,
# so a slow city or weather API never fails a probe.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from app import __version__
from app.config import settings
from app.dependencies import RecipeStoreDep

router = APIRouter()


class GatewayHealthResponse(BaseModel):
    status: str = Field(..., description="'healthy' when the upstream client is open")
    timestamp: str
    environment: str
    version: str
    upstream_client: bool = Field(..., description="Upstream connection pool initialized")
    recipes: int = Field(..., ge=0, description="Recipes currently stored")


@router.get("/health", response_model=GatewayHealthResponse)
async def health_check(request: Request, store: RecipeStoreDep):
    """
    Report gateway state.

    Answers "degraded" outside the lifespan window, when no upstream
    client is available and every city route would fail.
    """
    client_ready = getattr(request.app.state, "upstream_client", None) is not None
    return GatewayHealthResponse(
        status="healthy" if client_ready else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.ENVIRONMENT,
        version=__version__,
        upstream_client=client_ready,
        recipes=len(store),
    )


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    return {"status": "alive"}
