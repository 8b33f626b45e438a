"""Song Listing & Artist Search — unfiltered and artist-filtered song lists.

Invariants:
    - GET /api/songs returns the whole catalog in declaration order
    - Artist search never 404s: no match is an empty list, slashes included
"""

import logging

from fastapi import APIRouter, Depends

from moodtunes.api.dependencies import get_catalog
from moodtunes.core.catalog import Catalog
from moodtunes.core.recommend import list_songs, search_by_artist
from moodtunes.schemas.catalog import SongResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["songs"])


@router.get("/songs", response_model=list[SongResponse])
async def get_songs(catalog: Catalog = Depends(get_catalog)):
    """List every song in the catalog."""
    return [SongResponse.from_core(s) for s in list_songs(catalog)]


@router.get("/search/artist/{name:path}", response_model=list[SongResponse])
async def search_artist(name: str, catalog: Catalog = Depends(get_catalog)):
    """Case-insensitive substring search on artist names."""
    results = search_by_artist(catalog, name)
    logger.info(
        "Artist search",
        extra={"query": name, "song_count": len(results)},
    )
    return [SongResponse.from_core(s) for s in results]
