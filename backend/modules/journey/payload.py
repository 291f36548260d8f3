"""
modules/journey/payload.py
---------------------------
Turns the form header and the store's per-day activity lists into the
createJourney request payload.

Per day:
  - NOTE entries are left out of ``places``; the first one's description
    becomes the day-level ``notes`` string.
  - ``dayNumber`` is zero-based, ``date`` is start_date + day index.
  - Photo keys become ``media`` entries; ``media`` is omitted when empty.
  - Manual-edit flags stay internal and are never serialized.
"""

from __future__ import annotations

from datetime import timedelta

from schemas.journey import Activity, JourneyFormData, JourneyMediaType
from schemas.payload import CreateJourneyPayload, DayPayload, MediaPayload, PlacePayload
from modules.journey.day_store import DayActivityStore


def _place_payload(activity: Activity) -> PlacePayload:
    fields = dict(
        type=activity.type,
        name=activity.name,
        description=activity.description or "",
        start_time=activity.start_time or "",
        end_time=activity.end_time or "",
        address=activity.address or "",
        # 0.0 means "not picked on the map"
        latitude=activity.latitude or None,
        longitude=activity.longitude or None,
    )
    if activity.photos:
        fields["media"] = [
            MediaPayload(type=JourneyMediaType.IMAGE, url=key, order=order)
            for order, key in enumerate(activity.photos)
        ]
    return PlacePayload(**fields)


def build_day_payload(form: JourneyFormData, index: int, activities: list[Activity]) -> DayPayload:
    note = next((a for a in activities if a.is_note), None)
    return DayPayload(
        day_number=index,
        date=(form.start_date + timedelta(days=index)).isoformat(),
        notes=(note.description or "") if note else "",
        places=[_place_payload(a) for a in activities if not a.is_note],
    )


def build_journey_payload(form: JourneyFormData, store: DayActivityStore) -> CreateJourneyPayload:
    return CreateJourneyPayload(
        title=form.title,
        description=form.description,
        cover_image=form.cover_image_url,
        days=[
            build_day_payload(form, index, store.activities_for(label))
            for index, label in enumerate(store.days)
        ],
    )
