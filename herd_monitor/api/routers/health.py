"""
Liveness endpoints. No authentication required.
"""
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from herd_monitor import __version__

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str  # ISO 8601 UTC


@router.get("/", summary="Service info")
async def root():
    return {
        "service": "Herd Monitor API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Returns immediately without touching the spreadsheet."
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )
