"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the lifespan has loaded the dataset
      and built the dispatcher (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      the load balancer
    - Readiness reports dataset counts and rate limiter stats so operators can
      see load without a metrics stack
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "portfolio-mcp"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: dataset loaded, tools registered."""
    state = request.app.state
    dataset = getattr(state, "dataset", None)
    registry = getattr(state, "registry", None)
    if dataset is None or registry is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "startup_incomplete"},
        )
    return {
        "status": "ready",
        "checks": {
            "dataset": dataset.counts(),
            "tools": len(registry),
            "analyticsEvents": len(state.analytics),
            "rateLimiter": state.rate_limiter.stats(),
        },
    }
