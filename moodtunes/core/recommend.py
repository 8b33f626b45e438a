"""Recommendation & Search — pure reads over an immutable Catalog.

Invariants:
    - Playlist songs are a subset of the mood's songs, at most max_songs long
    - Playlist total_duration equals the sum of its songs' durations
    - Artist search is case-insensitive substring match, original order
    - Unknown mood (case-sensitive miss) raises MoodNotFoundError

Design Decisions:
    - Shuffler injected as a parameter: the only source of nondeterminism
    - Returns core dataclasses, not dicts: schemas/ owns the JSON shape
"""

import logging
from dataclasses import dataclass

from moodtunes.core.catalog import Catalog, MoodCategory, Song
from moodtunes.core.domain_types import DurationText, Mood
from moodtunes.core.duration import total_duration
from moodtunes.core.errors import MoodNotFoundError
from moodtunes.core.shuffle import Shuffler

logger = logging.getLogger(__name__)

DEFAULT_PLAYLIST_SIZE = 8


@dataclass(frozen=True)
class Playlist:
    """A mood's description plus the songs selected for it."""
    mood: Mood
    description: str
    songs: tuple[Song, ...]
    total_duration: DurationText

    @property
    def song_count(self) -> int:
        return len(self.songs)


def list_moods(catalog: Catalog) -> list[MoodCategory]:
    """All mood categories, declaration order."""
    return list(catalog.moods.values())


def list_songs(catalog: Catalog) -> list[Song]:
    """Every song, declaration order, unfiltered."""
    return list(catalog.songs)


def recommend_playlist(
    catalog: Catalog,
    mood_name: str,
    shuffler: Shuffler,
    max_songs: int = DEFAULT_PLAYLIST_SIZE,
) -> Playlist:
    """Build a shuffled playlist of at most max_songs songs for one mood."""
    category = catalog.find_mood(mood_name)
    if category is None:
        raise MoodNotFoundError(mood_name)

    candidates = catalog.songs_with_mood(category.name)
    selected = tuple(shuffler.shuffle(candidates)[:max_songs])
    playlist = Playlist(
        mood=category.name,
        description=category.description,
        songs=selected,
        total_duration=total_duration(song.duration for song in selected),
    )
    logger.debug(
        "Built playlist",
        extra={"mood": category.name.value, "song_count": playlist.song_count},
    )
    return playlist


def search_by_artist(catalog: Catalog, query: str) -> list[Song]:
    """Songs whose artist contains query, ignoring case. Empty list on no match."""
    needle = query.lower()
    return [song for song in catalog.songs if needle in song.artist.lower()]
