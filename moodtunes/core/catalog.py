"""Catalog — the immutable songs + mood categories table.

Invariants:
    - Song ids are unique; songs keep declaration order
    - Mood categories keep declaration order (Happy, Sad, Calm, Energetic)
    - Nothing in the catalog is ever mutated after construction

Design Decisions:
    - Frozen dataclasses + tuples + MappingProxyType: immutability enforced at
      runtime, not by convention
    - Catalog is passed to handlers as a dependency rather than read from a
      module global, so tests can inject their own tables
"""

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from moodtunes.core.domain_types import DurationText, Mood, SongId


@dataclass(frozen=True)
class Song:
    """One catalog entry."""
    id: SongId
    title: str
    artist: str
    mood: Mood
    genre: str
    tempo: str
    duration: DurationText


@dataclass(frozen=True)
class MoodCategory:
    """Mood metadata. Keywords are descriptive only."""
    name: Mood
    description: str
    keywords: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Catalog:
    songs: tuple[Song, ...]
    moods: Mapping[str, MoodCategory]

    def __post_init__(self):
        ids = [song.id for song in self.songs]
        if len(ids) != len(set(ids)):
            raise ValueError("song ids must be unique")
        if not isinstance(self.moods, MappingProxyType):
            object.__setattr__(self, "moods", MappingProxyType(dict(self.moods)))

    def find_mood(self, name: str) -> MoodCategory | None:
        """Exact, case-sensitive lookup by mood name."""
        return self.moods.get(name)

    def songs_with_mood(self, mood: Mood) -> list[Song]:
        return [song for song in self.songs if song.mood == mood]


def _song(
    song_id: int, title: str, artist: str, mood: Mood,
    genre: str, tempo: str, duration: str,
) -> Song:
    return Song(
        SongId(song_id), title, artist, mood, genre, tempo,
        DurationText(duration),
    )


_DEFAULT_SONGS = (
    _song(1, "Happy Together", "The Turtles", Mood.HAPPY, "Pop", "upbeat", "2:55"),
    _song(2, "Walking on Sunshine", "Katrina and The Waves", Mood.HAPPY, "Pop", "upbeat", "3:58"),
    _song(3, "Good Vibrations", "The Beach Boys", Mood.HAPPY, "Rock", "upbeat", "3:36"),
    _song(4, "Don't Stop Me Now", "Queen", Mood.HAPPY, "Rock", "upbeat", "3:29"),
    _song(5, "Uptown Funk", "Mark Ronson ft. Bruno Mars", Mood.HAPPY, "Funk", "upbeat", "4:30"),

    _song(6, "Someone Like You", "Adele", Mood.SAD, "Pop", "slow", "4:45"),
    _song(7, "The Night We Met", "Lord Huron", Mood.SAD, "Indie", "slow", "3:28"),
    _song(8, "Fix You", "Coldplay", Mood.SAD, "Alternative", "slow", "4:54"),
    _song(9, "Hurt", "Johnny Cash", Mood.SAD, "Country", "slow", "3:38"),
    _song(10, "All I Want", "Kodaline", Mood.SAD, "Indie", "slow", "5:06"),

    _song(11, "Weightless", "Marconi Union", Mood.CALM, "Ambient", "slow", "8:10"),
    _song(12, "River Flows in You", "Yiruma", Mood.CALM, "Classical", "moderate", "3:40"),
    _song(13, "Clair de Lune", "Claude Debussy", Mood.CALM, "Classical", "slow", "5:00"),
    _song(14, "Electra", "Airstream", Mood.CALM, "Ambient", "slow", "4:47"),
    _song(15, "Sunset", "Café del Mar", Mood.CALM, "Chillout", "slow", "6:20"),

    _song(16, "Eye of the Tiger", "Survivor", Mood.ENERGETIC, "Rock", "fast", "4:04"),
    _song(17, "Thunder", "Imagine Dragons", Mood.ENERGETIC, "Pop Rock", "fast", "3:07"),
    _song(18, "Titanium", "David Guetta ft. Sia", Mood.ENERGETIC, "EDM", "fast", "4:05"),
    _song(19, "Stronger", "Kanye West", Mood.ENERGETIC, "Hip Hop", "fast", "5:12"),
    _song(20, "Can't Hold Us", "Macklemore & Ryan Lewis", Mood.ENERGETIC, "Hip Hop", "fast", "4:18"),
)

_DEFAULT_MOODS = (
    MoodCategory(
        Mood.HAPPY, "Uplifting songs to boost your mood",
        frozenset({"happy", "joyful", "cheerful", "excited", "positive"}),
    ),
    MoodCategory(
        Mood.SAD, "Emotional songs for when you need to let it out",
        frozenset({"sad", "melancholic", "emotional", "heartbroken", "reflective"}),
    ),
    MoodCategory(
        Mood.CALM, "Soothing songs to help you unwind",
        frozenset({"calm", "peaceful", "relaxing", "chill", "serene"}),
    ),
    MoodCategory(
        Mood.ENERGETIC, "High-energy songs to get you moving",
        frozenset({"energetic", "intense", "motivated", "pumped", "powerful"}),
    ),
)


def build_catalog(
    songs: tuple[Song, ...], moods: tuple[MoodCategory, ...],
) -> Catalog:
    """Build a catalog keyed by mood name, preserving declaration order."""
    return Catalog(
        songs=tuple(songs),
        moods={category.name.value: category for category in moods},
    )


@lru_cache
def default_catalog() -> Catalog:
    """The built-in 20-song catalog. One instance per process."""
    return build_catalog(_DEFAULT_SONGS, _DEFAULT_MOODS)
