"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up

Design Decisions:
    - No readiness probe: the catalog is in memory, there is nothing to wait on
"""

from fastapi import APIRouter, status

from moodtunes import __version__

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "moodtunes-api",
        "version": __version__,
    }
