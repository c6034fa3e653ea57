"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter

from socialstream.api.dependencies import Store
from socialstream.config.settings import settings
from socialstream.shared.core.exceptions import ServiceUnavailableError
from socialstream.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
def readiness_check(store: Store):
    """
    Readiness check: the collection store must answer a ping.

    Raises:
        ServiceUnavailableError: If the store is unreachable
    """
    if not store.ping():
        raise ServiceUnavailableError("Collection store unreachable")
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """
    Liveness check.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
