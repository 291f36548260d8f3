"""modules/timeline — HH:mm helpers and the activity time-link engine."""

from modules.timeline.time_link import (
    TimeSlot,
    append_slot,
    cascade_forward,
    default_slot,
    relink_after_removal,
)
from modules.timeline.time_utils import (
    add_minutes,
    compare_times,
    is_valid_range,
    minutes_to_time,
    normalize_time,
    time_to_minutes,
)

__all__ = [
    "TimeSlot",
    "append_slot",
    "cascade_forward",
    "default_slot",
    "relink_after_removal",
    "add_minutes",
    "compare_times",
    "is_valid_range",
    "minutes_to_time",
    "normalize_time",
    "time_to_minutes",
]
