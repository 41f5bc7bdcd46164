"""
Health Endpoint Module.

This module defines the `/health` endpoint used for application health checks.
It provides a simple way to verify that the FastAPI application is running
and responsive, along with the server time at which the request was handled.
"""

import logging

from fastapi import APIRouter

from app.models.status_model import HealthStatus
from app.utils.clock import current_millis

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health Check",
    response_model=HealthStatus,
    response_description="Health status of the API",
)
@router.head("/health", include_in_schema=False)
async def health_check() -> HealthStatus:
    """
    Perform a basic health check.

    Returns a JSON response with:
    - `status`: Static string `"UP"` indicating the API is alive.
    - `timestamp`: Current time as milliseconds since the Unix epoch,
      encoded as a string.

    This endpoint can be used by monitoring tools (e.g., Kubernetes,
    Docker healthchecks, load balancers) to determine whether the
    application is operational.
    """
    timestamp = current_millis()
    logger.debug("Health check at %d", timestamp)
    return HealthStatus(timestamp=str(timestamp))
