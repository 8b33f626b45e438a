"""Mood Listing — the mood categories in declaration order."""

from fastapi import APIRouter, Depends

from moodtunes.api.dependencies import get_catalog
from moodtunes.core.catalog import Catalog
from moodtunes.core.recommend import list_moods
from moodtunes.schemas.catalog import MoodResponse

router = APIRouter(prefix="/api/moods", tags=["moods"])


@router.get("", response_model=list[MoodResponse])
async def get_moods(catalog: Catalog = Depends(get_catalog)):
    """List every mood with its description."""
    return [MoodResponse.from_core(m) for m in list_moods(catalog)]
