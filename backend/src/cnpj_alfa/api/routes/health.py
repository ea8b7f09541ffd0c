"""
Health check endpoint.

Provides system health status for monitoring and load balancers.
"""

from fastapi import APIRouter

from cnpj_alfa import __version__
from cnpj_alfa.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check system health."""
    return HealthResponse(
        status="healthy",
        version=__version__,
    )
