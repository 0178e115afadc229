"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from soundrex import __version__
from soundrex.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its provider chain.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    resolver = getattr(request.app.state, "audio_resolver", None)
    providers = [p.provider_name for p in resolver.providers] if resolver else []

    return HealthResponse(
        status="healthy" if providers else "unhealthy",
        version=__version__,
        providers=providers,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    resolver = getattr(request.app.state, "audio_resolver", None)
    return {"ready": resolver is not None}
