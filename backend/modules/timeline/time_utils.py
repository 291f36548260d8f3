"""
modules/timeline/time_utils.py
-------------------------------
Wall-clock helpers for "HH:mm" strings.

Times are compared as minute-of-day integers. Arithmetic is clamped to the
day (00:00 .. 23:59) so every produced value is a valid 24-hour time.
Empty or malformed strings are "missing": they parse to None and never
fail a range check on their own.
"""

from __future__ import annotations

import re
from typing import Optional

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{1,2})$")

LAST_MINUTE_OF_DAY: int = 23 * 60 + 59


def time_to_minutes(value: Optional[str]) -> Optional[int]:
    """Minutes since midnight, or None when the value is missing/malformed."""
    if not value:
        return None
    match = _HHMM_RE.match(value.strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    minutes = max(0, min(int(minutes), LAST_MINUTE_OF_DAY))
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def is_usable(value: Optional[str]) -> bool:
    return time_to_minutes(value) is not None


def add_minutes(value: str, minutes: int) -> str:
    """Shift a time by ``minutes``; returns "" if the input is not a time."""
    base = time_to_minutes(value)
    if base is None:
        return ""
    return minutes_to_time(base + minutes)


def compare_times(first: str, second: str) -> int:
    """-1 / 0 / 1 ordering of two times; missing values sort as 00:00."""
    a = time_to_minutes(first) or 0
    b = time_to_minutes(second) or 0
    return (a > b) - (a < b)


def is_valid_range(start_time: str, end_time: str) -> bool:
    """True when start < end, or when either side is missing."""
    if not is_usable(start_time) or not is_usable(end_time):
        return True
    return compare_times(start_time, end_time) < 0


def normalize_time(value: str) -> str:
    """
    Tidy user input into "HH:mm": strips whitespace and stray characters and
    zero-pads ("9:5" -> "09:05"). Input that still isn't a time is returned
    trimmed, so the user can keep typing and fix it later.
    """
    if not value:
        return ""
    trimmed = value.strip()
    cleaned = re.sub(r"[^\d:]", "", trimmed)
    parts = cleaned.split(":")
    if len(parts) == 2 and parts[0] and parts[1]:
        candidate = f"{parts[0].zfill(2)[:2]}:{parts[1].zfill(2)[:2]}"
        if is_usable(candidate):
            return candidate
    return trimmed
