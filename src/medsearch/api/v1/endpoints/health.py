"""Health check endpoint — Service status and indexed collection sizes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from medsearch import __version__
from medsearch.api.deps import get_engine
from medsearch.core.engine import SearchEngine

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="MedSearch server version")
    service: str = Field(description="Service name ('medsearch')")
    collections: dict[str, int] = Field(description="Record count per registered kind, in scan order")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="System Health Check",
)
async def health_check(engine: SearchEngine = Depends(get_engine)) -> HealthResponse:
    """Basic health check with per-collection record counts."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="medsearch",
        collections=engine.registry.counts(),
    )
