"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Mood is a closed set of four values; lookups by name are case-sensitive
    - Mood declaration order is the order moods are listed to clients

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
    - NewType for ids and durations: zero runtime cost, type-checker support
"""

from enum import Enum
from typing import NewType


SongId = NewType("SongId", int)
DurationText = NewType("DurationText", str)   # "M:SS"


class Mood(str, Enum):
    """Categorical tag attached to every song."""
    HAPPY = "Happy"
    SAD = "Sad"
    CALM = "Calm"
    ENERGETIC = "Energetic"
