"""Duration Arithmetic — verifies M:SS parsing, formatting and totals.

Tests:
    - Parsing multiplies minutes by 60
    - Formatting pads seconds, never minutes, and never rolls over into hours
    - Malformed strings raise InvalidDurationError
"""

import pytest

from moodtunes.core.duration import (
    duration_to_seconds, seconds_to_duration, total_duration,
)
from moodtunes.core.errors import InvalidDurationError


def test_parses_minutes_and_seconds():
    assert duration_to_seconds("3:29") == 209
    assert duration_to_seconds("8:10") == 490
    assert duration_to_seconds("0:07") == 7


def test_formats_with_zero_padded_seconds():
    assert seconds_to_duration(65) == "1:05"
    assert seconds_to_duration(600) == "10:00"


def test_formats_zero():
    assert seconds_to_duration(0) == "0:00"


def test_minutes_do_not_roll_over_into_hours():
    assert seconds_to_duration(3 * 3600 + 61) == "181:01"


def test_total_sums_all_durations():
    assert total_duration(["2:55", "3:58", "3:36"]) == "10:29"


def test_total_of_nothing_is_zero():
    assert total_duration([]) == "0:00"


@pytest.mark.parametrize("bad", ["", "329", "3:xx", "a:10", "-1:10"])
def test_malformed_duration_raises(bad):
    with pytest.raises(InvalidDurationError) as exc_info:
        duration_to_seconds(bad)
    assert exc_info.value.code == "INVALID_DURATION"
