"""Catalog Schemas — verifies camelCase wire format and core conversion."""

from moodtunes.core.catalog import default_catalog
from moodtunes.core.recommend import recommend_playlist
from moodtunes.core.shuffle import IdentityShuffler
from moodtunes.schemas.catalog import (
    ApiIndexResponse, MoodResponse, PlaylistResponse, SongResponse,
)


def test_song_response_has_every_field():
    song = SongResponse.from_core(default_catalog().songs[3])
    assert song.model_dump(by_alias=True) == {
        "id": 4,
        "title": "Don't Stop Me Now",
        "artist": "Queen",
        "mood": "Happy",
        "genre": "Rock",
        "tempo": "upbeat",
        "duration": "3:29",
    }


def test_mood_response_omits_keywords():
    mood = MoodResponse.from_core(default_catalog().moods["Sad"])
    assert mood.model_dump(by_alias=True) == {
        "name": "Sad",
        "description": "Emotional songs for when you need to let it out",
    }


def test_playlist_response_uses_camel_case():
    playlist = recommend_playlist(default_catalog(), "Sad", IdentityShuffler())
    data = PlaylistResponse.from_core(playlist).model_dump(by_alias=True)
    assert set(data) == {"mood", "description", "songCount", "totalDuration", "songs"}
    assert data["songCount"] == 5
    assert len(data["songs"]) == 5


def test_index_lists_endpoints():
    data = ApiIndexResponse().model_dump(by_alias=True)
    assert data["message"] == "Mood-Based Music Recommender API"
    assert data["status"] == "Running"
    assert data["endpoints"] == {
        "moods": "/api/moods",
        "recommend": "/api/recommend/:mood",
        "songs": "/api/songs",
        "searchArtist": "/api/search/artist/:name",
    }
