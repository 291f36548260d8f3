"""
modules/timeline/time_link.py
------------------------------
Time-link engine — keeps one day's ordered activities chronologically linked.

Pure functions over an activity list. Nothing here mutates its input: every
rule returns a fresh list of fresh Activity objects, so the caller can swap
the whole day in one assignment.

Rules
─────
DEFAULT      index i → start 09:00 + i h, end start + 60 min. An end clamped
             to 23:59 that no longer follows its start is left empty.
APPEND       first activity gets DEFAULT(0); later ones start at the previous
             end (zero gap) and last 60 min; no usable previous end → DEFAULT(i).
RELINK       after a removal, an unpinned start snaps to the previous
             (already re-linked) end and its unpinned end to start + 60 min.
             No anchor, or position 0 → DEFAULT(i) for the unpinned sides.
             A pinned start keeps its end unless that end is unpinned and
             missing or inverted. A reset end that would still fail start < end
             takes DEFAULT(i).end, or stays empty if that fails too.
CASCADE      after the user edits end_time at k, the new end flows forward:
               pinned start            → wall, stop
               pinned end              → take the new start, carry own end
               both unpinned           → take (E, E + 60 min), carry new end
             A candidate that fails start < end stops the wave unwritten.

Pins (has_manual_start / has_manual_end) are never cleared or overwritten
here. No rule raises; they fall back to DEFAULT or stop early instead.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional, Sequence

from modules.timeline.time_utils import (
    add_minutes,
    is_usable,
    is_valid_range,
    minutes_to_time,
    time_to_minutes,
)
from schemas.journey import Activity


# ── Constants ──────────────────────────────────────────────────────────────────

DAY_START_MINUTES:        int = 9 * 60    # first default slot begins 09:00
DEFAULT_DURATION_MINUTES: int = 60        # default length of any slot


@dataclass(frozen=True)
class TimeSlot:
    start_time: str
    end_time: str


# ── Default + append ───────────────────────────────────────────────────────────

def _slot_from(start_minutes: int) -> TimeSlot:
    start = minutes_to_time(start_minutes)
    end = minutes_to_time(start_minutes + DEFAULT_DURATION_MINUTES)
    # clamped at 23:59 the end can no longer follow the start
    if not is_valid_range(start, end):
        end = ""
    return TimeSlot(start_time=start, end_time=end)


def default_slot(index: int) -> TimeSlot:
    """Fallback slot for position ``index``: 09:00 + index hours, one hour long."""
    return _slot_from(DAY_START_MINUTES + index * 60)


def append_slot(activities: Sequence[Activity]) -> TimeSlot:
    """Times for a new activity appended after ``activities``."""
    index = len(activities)
    if index == 0:
        return default_slot(0)
    previous_end = time_to_minutes(activities[index - 1].end_time)
    if previous_end is not None:
        return _slot_from(previous_end)
    return default_slot(index)


# ── Re-link after removal ──────────────────────────────────────────────────────

def _end_after(start: str, fallback: TimeSlot) -> str:
    """start + 60 min, else the index default end, else "" if neither follows start."""
    if is_usable(start):
        candidate = add_minutes(start, DEFAULT_DURATION_MINUTES)
        if is_valid_range(start, candidate):
            return candidate
    if is_valid_range(start, fallback.end_time):
        return fallback.end_time
    return ""


def relink_after_removal(activities: Sequence[Activity]) -> list[Activity]:
    linked: list[Activity] = []
    for index, activity in enumerate(activities):
        fallback = default_slot(index)
        anchor: Optional[str] = linked[index - 1].end_time if index > 0 else None

        start, end = activity.start_time, activity.end_time
        if not activity.has_manual_start:
            if is_usable(anchor):
                start = anchor
                if not activity.has_manual_end:
                    end = _end_after(start, fallback)
            else:
                start = fallback.start_time
                if not activity.has_manual_end:
                    end = fallback.end_time
        elif not activity.has_manual_end:
            # pinned start: the end only moves when it no longer follows it
            if not is_usable(end) or not is_valid_range(start, end):
                end = _end_after(start, fallback)

        linked.append(dataclasses.replace(activity, start_time=start, end_time=end))
    return linked


# ── Cascade forward ────────────────────────────────────────────────────────────

def cascade_forward(activities: Sequence[Activity], edited_index: int) -> list[Activity]:
    """
    Propagate ``activities[edited_index].end_time`` into the activities after it.

    Returns a new list; entries the wave never reaches are the same objects
    as in the input.
    """
    updated = list(activities)
    if not 0 <= edited_index < len(updated):
        return updated

    carried = updated[edited_index].end_time
    if not is_usable(carried):
        return updated

    for j in range(edited_index + 1, len(updated)):
        current = updated[j]
        if current.has_manual_start:
            break

        if not current.has_manual_end:
            new_end = add_minutes(carried, DEFAULT_DURATION_MINUTES)
            if not is_valid_range(carried, new_end):
                break
            updated[j] = dataclasses.replace(current, start_time=carried, end_time=new_end)
            carried = new_end
            continue

        pinned_end = current.end_time
        if not is_usable(pinned_end):
            updated[j] = dataclasses.replace(current, start_time=carried)
            break
        if not is_valid_range(carried, pinned_end):
            break
        updated[j] = dataclasses.replace(current, start_time=carried)
        carried = pinned_end

    return updated
