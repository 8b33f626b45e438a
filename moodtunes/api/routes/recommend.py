"""Recommendation — shuffled, size-capped playlist for one mood.

Invariants:
    - Unknown mood (case-sensitive) → 404 {"error": "Mood not found"}
    - songCount = min(playlist_max_songs, songs with that mood)

Design Decisions:
    - MoodNotFoundError propagates to the global handler instead of being
      turned into an HTTPException here: one place owns the error envelope
"""

import logging

from fastapi import APIRouter, Depends

from moodtunes.api.dependencies import get_app_settings, get_catalog, get_shuffler
from moodtunes.config import Settings
from moodtunes.core.catalog import Catalog
from moodtunes.core.recommend import recommend_playlist
from moodtunes.core.shuffle import Shuffler
from moodtunes.schemas.catalog import PlaylistResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/recommend", tags=["recommend"])


@router.get("/{mood:path}", response_model=PlaylistResponse)
async def recommend(
    mood: str,
    catalog: Catalog = Depends(get_catalog),
    shuffler: Shuffler = Depends(get_shuffler),
    settings: Settings = Depends(get_app_settings),
):
    """Recommend a playlist for the given mood."""
    playlist = recommend_playlist(
        catalog, mood, shuffler, max_songs=settings.playlist_max_songs,
    )
    logger.info(
        "Recommended playlist",
        extra={"mood": mood, "song_count": playlist.song_count},
    )
    return PlaylistResponse.from_core(playlist)
