"""Duration Arithmetic — converts between "M:SS" strings and whole seconds.

Invariants:
    - Minutes are unpadded and never roll over into hours ("75:03" is valid)
    - Seconds are always two digits in formatted output
    - The total of an empty run is "0:00"
"""

from collections.abc import Iterable

from moodtunes.core.domain_types import DurationText
from moodtunes.core.errors import InvalidDurationError


def duration_to_seconds(duration: str) -> int:
    """Parse "M:SS" into total seconds."""
    minutes, sep, seconds = duration.partition(":")
    if not sep or not minutes.isdigit() or not seconds.isdigit():
        raise InvalidDurationError(duration)
    return int(minutes) * 60 + int(seconds)


def seconds_to_duration(total_seconds: int) -> DurationText:
    """Format whole seconds as "M:SS"."""
    minutes, seconds = divmod(total_seconds, 60)
    return DurationText(f"{minutes}:{seconds:02d}")


def total_duration(durations: Iterable[str]) -> DurationText:
    """Sum a run of "M:SS" durations and format the total."""
    return seconds_to_duration(sum(duration_to_seconds(d) for d in durations))
