"""API Index — service metadata and endpoint map at the root path.

Invariants:
    - GET / always returns 200 with message, status and endpoints
"""

from fastapi import APIRouter

from moodtunes.schemas.catalog import ApiIndexResponse

router = APIRouter(tags=["index"])


@router.get("/", response_model=ApiIndexResponse)
async def api_index():
    """Describe the API and list its endpoints."""
    return ApiIndexResponse()
