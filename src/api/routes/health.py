"""Health check endpoint for monitoring and deployment verification."""

from fastapi import APIRouter

from src.api.deps import Container
from src.schemas.common import HealthResponse, HealthStatus

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Basic health check to verify the service is running. Used for liveness probes.",
)
async def health_check(container: Container) -> HealthResponse:
    """Return basic health status and the number of stored orders."""
    return HealthResponse(status=HealthStatus.HEALTHY, order_count=container.order_store.count())
