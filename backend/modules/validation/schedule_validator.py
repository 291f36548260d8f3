"""
modules/validation/schedule_validator.py
-----------------------------------------
Read-only checks over a day's activity list, used to warn the user before
a journey is submitted. Nothing here blocks an edit: a temporarily
illogical schedule is allowed while the user is still typing.

  Day:
    ✓ at most one NOTE
    ✓ start < end for every activity with both times set
    ✓ times that are set parse as HH:mm
    ✓ an unpinned start equals the previous end (no gap)

Usage:
    from modules.validation import validate_day_schedule

    result = validate_day_schedule(store.activities_for("Day 1"), day="Day 1")
    if not result:
        print(result.errors)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from modules.timeline.time_utils import is_usable, is_valid_range
from schemas.journey import Activity


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class ValidationResult:
    """
    Outcome of a single validation run.

    Attributes:
        valid:  True iff there are zero errors.
        errors: Human-readable list of findings.
    """
    valid: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


# ── Day validation ─────────────────────────────────────────────────────────────

def validate_day_schedule(activities: Sequence[Activity], day: str = "") -> ValidationResult:
    prefix = f"{day}: " if day else ""
    errors: list[str] = []

    notes = sum(1 for a in activities if a.is_note)
    if notes > 1:
        errors.append(f"{prefix}{notes} notes found, at most one is allowed")

    for index, activity in enumerate(activities):
        label = f"{prefix}#{index} '{activity.name}'"

        for side in ("start_time", "end_time"):
            value = getattr(activity, side)
            if value and not is_usable(value):
                errors.append(f"{label} {side}={value!r} is not a HH:mm time")

        if not is_valid_range(activity.start_time, activity.end_time):
            errors.append(
                f"{label} ends at {activity.end_time} before it starts at {activity.start_time}"
            )

        if index == 0 or activity.has_manual_start:
            continue
        previous_end = activities[index - 1].end_time
        if is_usable(previous_end) and activity.start_time != previous_end:
            errors.append(
                f"{label} starts at {activity.start_time or '--:--'} "
                f"but the previous activity ends at {previous_end}"
            )

    return ValidationResult(valid=len(errors) == 0, errors=errors)


def validate_days(activities_by_day: dict[str, Sequence[Activity]]) -> ValidationResult:
    """Run validate_day_schedule over every day and merge the findings."""
    errors: list[str] = []
    for day, activities in activities_by_day.items():
        errors.extend(validate_day_schedule(activities, day=day).errors)
    return ValidationResult(valid=len(errors) == 0, errors=errors)
