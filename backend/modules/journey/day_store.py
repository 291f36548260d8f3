"""
modules/journey/day_store.py
-----------------------------
DayActivityStore — the ordered days of a journey draft and each day's
ordered activity list.

Every mutation builds a new list for the affected day and assigns it in one
step; time computation is delegated to modules.timeline.time_link. Invalid
requests (deleting the last day, a second NOTE, an index past the end) are
silent no-ops, logged at DEBUG.

Lifecycle:
    store = DayActivityStore()
    store.add_activity(PlaceType.ACTIVITY)        # 09:00-10:00
    store.add_activity(PlaceType.FOOD)            # 10:00-11:00
    store.update_field(0, "end_time", "09:30")    # FOOD → 09:30-10:30
    store.remove_activity(0)                      # FOOD → 09:00-10:00
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Any, Optional

from modules.observability.logger import StructuredLogger
from modules.timeline.time_link import append_slot, cascade_forward, relink_after_removal
from modules.timeline.time_utils import normalize_time
from schemas.journey import PLACEHOLDER_NAMES, Activity, PlaceType

logger = logging.getLogger(__name__)

# Fields a user may edit through update_field(); the manual flags are not
# among them, they follow from editing the times.
EDITABLE_FIELDS: frozenset[str] = frozenset({
    "type", "name", "description", "start_time", "end_time",
    "address", "latitude", "longitude",
})

# UI payloads use the wire (camelCase) names
_FIELD_ALIASES: dict[str, str] = {
    "startTime": "start_time",
    "endTime":   "end_time",
}

# Plain fields are converted on the way in so the wire models always validate
_FIELD_TYPES: dict[str, type] = {
    "name":        str,
    "description": str,
    "address":     str,
    "latitude":    float,
    "longitude":   float,
}


def _coerce(field: str, value: Any) -> Optional[Any]:
    """Convert ``value`` to the field's type; None when it cannot be."""
    if value is None:
        return None
    try:
        coerced = _FIELD_TYPES[field](value)
    except (TypeError, ValueError):
        return None
    if isinstance(coerced, float) and not math.isfinite(coerced):
        return None
    return coerced


def day_label(number: int) -> str:
    return f"Day {number}"


class DayActivityStore:
    """
    Single source of truth for:
      - days:        ordered labels "Day 1" .. "Day N" (always contiguous)
      - active_day:  the day add/remove/update act on
      - per-day ordered activity lists
    """

    def __init__(
        self,
        event_log: Optional[StructuredLogger] = None,
        draft_id: str = "default",
    ) -> None:
        self._days: list[str] = [day_label(1)]
        self._active_day: str = day_label(1)
        self._activities: dict[str, list[Activity]] = {day_label(1): []}
        self._event_log = event_log
        self._draft_id = draft_id

    # ── Read access ───────────────────────────────────────────────────────────

    @property
    def days(self) -> list[str]:
        return list(self._days)

    @property
    def active_day(self) -> str:
        return self._active_day

    def activities_for(self, label: str) -> list[Activity]:
        return list(self._activities.get(label, []))

    def active_activities(self) -> list[Activity]:
        return self.activities_for(self._active_day)

    def activities_by_type(self, place_type: PlaceType) -> list[Activity]:
        return [a for a in self.active_activities() if a.type == place_type]

    def activities_by_day(self) -> dict[str, list[Activity]]:
        return {label: self.activities_for(label) for label in self._days}

    # ── Days ──────────────────────────────────────────────────────────────────

    def set_active_day(self, label: str) -> None:
        if label not in self._activities:
            logger.debug("set_active_day: unknown day %r ignored", label)
            return
        self._active_day = label

    def add_day(self) -> str:
        label = day_label(len(self._days) + 1)
        self._days = [*self._days, label]
        self._activities = {**self._activities, label: []}
        self._active_day = label
        self._emit("day_added", {"day": label})
        return label

    def delete_day(self, label: str) -> None:
        if len(self._days) <= 1:
            logger.debug("delete_day: refusing to delete the only day")
            return
        if label not in self._days:
            logger.debug("delete_day: unknown day %r ignored", label)
            return

        deleted_index = self._days.index(label)
        survivors = [d for d in self._days if d != label]

        # old position → new label, built before anything is reassigned
        remap = {old: day_label(new_index + 1) for new_index, old in enumerate(survivors)}
        self._activities = {remap[old]: self._activities.get(old, []) for old in survivors}
        self._days = [remap[old] for old in survivors]

        if self._active_day == label:
            self._active_day = day_label(1)
        else:
            active_index = survivors.index(self._active_day)
            self._active_day = day_label(active_index + 1)

        self._emit("day_deleted", {
            "day": label,
            "position": deleted_index,
            "active_day": self._active_day,
            "days": len(self._days),
        })

    # ── Activities ────────────────────────────────────────────────────────────

    def add_activity(self, place_type: PlaceType) -> Optional[Activity]:
        current = self._activities.get(self._active_day, [])
        if place_type == PlaceType.NOTE and any(a.is_note for a in current):
            logger.debug("add_activity: %s already has a note", self._active_day)
            return None

        slot = append_slot(current)
        activity = Activity(
            type=place_type,
            name=PLACEHOLDER_NAMES.get(place_type, "New Place"),
            start_time=slot.start_time,
            end_time=slot.end_time,
        )
        self._replace_active([*current, activity])
        self._emit("activity_added", {
            "type": place_type.value,
            "index": len(current),
            "start_time": activity.start_time,
            "end_time": activity.end_time,
        })
        return activity

    def remove_activity(self, index: int) -> None:
        current = self._activities.get(self._active_day, [])
        if not 0 <= index < len(current):
            logger.debug("remove_activity: index %d out of range", index)
            return
        remaining = current[:index] + current[index + 1:]
        self._replace_active(relink_after_removal(remaining))
        self._emit("activity_removed", {"index": index, "remaining": len(remaining)})

    def update_field(self, index: int, field: str, value: Any) -> None:
        field = _FIELD_ALIASES.get(field, field)
        current = self._activities.get(self._active_day, [])
        if not 0 <= index < len(current):
            logger.debug("update_field: index %d out of range", index)
            return
        if field not in EDITABLE_FIELDS:
            logger.debug("update_field: field %r is not editable", field)
            return

        place = current[index]
        changes: dict[str, Any] = {}

        if field == "type":
            try:
                new_type = PlaceType(value)
            except ValueError:
                logger.debug("update_field: unknown place type %r", value)
                return
            others = current[:index] + current[index + 1:]
            if new_type == PlaceType.NOTE and any(a.is_note for a in others):
                logger.debug("update_field: %s already has a note", self._active_day)
                return
            changes["type"] = new_type
        elif field == "start_time":
            changes.update(start_time=normalize_time(str(value)), has_manual_start=True)
        elif field == "end_time":
            changes.update(end_time=normalize_time(str(value)), has_manual_end=True)
        else:
            coerced = _coerce(field, value)
            if coerced is None:
                logger.debug("update_field: %r is not a valid %s", value, field)
                return
            changes[field] = coerced

        updated = list(current)
        updated[index] = dataclasses.replace(place, **changes)
        if field == "end_time":
            updated = cascade_forward(updated, index)

        self._replace_active(updated)
        self._emit("field_updated", {"index": index, "field": field, "value": changes.get(field, value)})

    # ── Photos (inert to the time engine) ─────────────────────────────────────

    def update_photos(self, index: int, photos: list[str]) -> None:
        self._set_photos(index, lambda _: list(photos))

    def add_photo(self, index: int, photo_key: str) -> None:
        self._set_photos(index, lambda existing: [*existing, photo_key])

    def remove_photo(self, index: int, photo_index: int) -> None:
        self._set_photos(
            index,
            lambda existing: [p for i, p in enumerate(existing) if i != photo_index],
        )

    # ── internals ─────────────────────────────────────────────────────────────

    def _set_photos(self, index: int, change) -> None:
        current = self._activities.get(self._active_day, [])
        if not 0 <= index < len(current):
            logger.debug("photo update: index %d out of range", index)
            return
        updated = list(current)
        updated[index] = dataclasses.replace(current[index], photos=change(current[index].photos))
        self._replace_active(updated)

    def _replace_active(self, activities: list[Activity]) -> None:
        self._activities = {**self._activities, self._active_day: activities}

    def _emit(self, event_type: str, payload: dict) -> None:
        if self._event_log is None:
            return
        self._event_log.log(
            self._draft_id, event_type, {"active_day": self._active_day, **payload}
        )
