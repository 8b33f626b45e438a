"""Catalog Schemas — Pydantic response models for songs, moods and playlists.

Invariants:
    - JSON keys are camelCase (songCount, totalDuration, searchArtist)
    - Song JSON carries every catalog field: id, title, artist, mood, genre, tempo, duration

Design Decisions:
    - alias_generator=to_camel: Python stays snake_case, wire format stays camelCase
    - from_core() classmethods: the only place core dataclasses become JSON shapes
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from moodtunes.core.catalog import MoodCategory, Song
from moodtunes.core.recommend import Playlist


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SongResponse(CamelModel):
    """One song as served to clients."""
    id: int
    title: str
    artist: str
    mood: str
    genre: str
    tempo: str
    duration: str

    @classmethod
    def from_core(cls, song: Song) -> "SongResponse":
        return cls(
            id=song.id,
            title=song.title,
            artist=song.artist,
            mood=song.mood.value,
            genre=song.genre,
            tempo=song.tempo,
            duration=song.duration,
        )


class MoodResponse(CamelModel):
    """Mood listing entry — keywords are intentionally not exposed."""
    name: str
    description: str

    @classmethod
    def from_core(cls, category: MoodCategory) -> "MoodResponse":
        return cls(name=category.name.value, description=category.description)


class PlaylistResponse(CamelModel):
    mood: str
    description: str
    song_count: int
    total_duration: str
    songs: list[SongResponse]

    @classmethod
    def from_core(cls, playlist: Playlist) -> "PlaylistResponse":
        return cls(
            mood=playlist.mood.value,
            description=playlist.description,
            song_count=playlist.song_count,
            total_duration=playlist.total_duration,
            songs=[SongResponse.from_core(s) for s in playlist.songs],
        )


class EndpointMap(CamelModel):
    moods: str = "/api/moods"
    recommend: str = "/api/recommend/:mood"
    songs: str = "/api/songs"
    search_artist: str = "/api/search/artist/:name"


class ApiIndexResponse(CamelModel):
    """Root metadata — service name, status and the endpoint map."""
    message: str = "Mood-Based Music Recommender API"
    status: str = "Running"
    endpoints: EndpointMap = Field(default_factory=EndpointMap)
