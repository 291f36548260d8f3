from __future__ import annotations

import pytest

from modules.timeline.time_utils import (
    add_minutes,
    compare_times,
    is_valid_range,
    minutes_to_time,
    normalize_time,
    time_to_minutes,
)


@pytest.mark.parametrize(
    "value, expected",
    [("09:00", 540), ("9:05", 545), ("23:59", 1439), ("00:00", 0),
     ("", None), ("24:00", None), ("12:60", None), ("noon", None), (None, None)],
)
def test_time_to_minutes(value, expected):
    assert time_to_minutes(value) == expected


def test_minutes_to_time_clamps_to_the_day():
    assert minutes_to_time(600) == "10:00"
    assert minutes_to_time(24 * 60 + 30) == "23:59"
    assert minutes_to_time(-5) == "00:00"


def test_add_minutes():
    assert add_minutes("09:30", 60) == "10:30"
    assert add_minutes("23:30", 60) == "23:59"
    assert add_minutes("", 60) == ""


def test_compare_times():
    assert compare_times("09:00", "10:00") == -1
    assert compare_times("10:00", "10:00") == 0
    assert compare_times("11:00", "10:00") == 1


def test_is_valid_range_is_strict_and_allows_missing_sides():
    assert is_valid_range("09:00", "10:00")
    assert not is_valid_range("10:00", "10:00")
    assert not is_valid_range("11:00", "10:00")
    assert is_valid_range("", "10:00")
    assert is_valid_range("09:00", "")


def test_is_valid_range_treats_malformed_sides_as_missing():
    # compare_times alone would order "25:00" as 00:00 and call this inverted
    assert compare_times("00:30", "25:00") == 1
    assert is_valid_range("00:30", "25:00")
    assert is_valid_range("1O:00", "09:00")


def test_normalize_time():
    assert normalize_time(" 9:5 ") == "09:05"
    assert normalize_time("09:30") == "09:30"
    assert normalize_time("") == ""
    # not a time yet: kept so the user can finish typing
    assert normalize_time(" 9 ") == "9"
