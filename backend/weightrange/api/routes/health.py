"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the counter store is unreadable
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from weightrange.services.usage_counter import UsageCounter, get_usage_counter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "weight-range-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(counter: UsageCounter = Depends(get_usage_counter)):
    """Readiness probe — includes counter storage."""
    if not await counter.is_readable():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "counter_store_unreadable",
            },
        )
    return {"status": "ready", "checks": {"counter_store": counter.store.name}}
