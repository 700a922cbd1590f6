"""
HelloAPI - Health Check Route
==============================

What:  Liveness endpoint for Docker health checks and load balancer probes.
How:   The server has no dependencies to probe, so answering at all means
       healthy. Excluded from the access log (see middleware/logging.py).
"""

from fastapi import APIRouter

from helloapi.schemas.demo import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Always returns {\"status\": \"healthy\"} while the process is serving.",
)
async def health_check() -> HealthResponse:
    return HealthResponse()
