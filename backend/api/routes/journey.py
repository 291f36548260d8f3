"""
api/routes/journey.py
----------------------
Draft-editing endpoints for the journey-creation form.

Flow:
  1. POST   /v1/journeys/drafts                          → draft_id + empty Day 1
  2. POST   /v1/journeys/drafts/{id}/days                → append a day
     DELETE /v1/journeys/drafts/{id}/days/{day_number}   → delete + renumber
     PUT    /v1/journeys/drafts/{id}/active-day          → switch day
  3. POST   /v1/journeys/drafts/{id}/activities          → add to active day
     PATCH  /v1/journeys/drafts/{id}/activities/{index}  → edit one field
     DELETE /v1/journeys/drafts/{id}/activities/{index}  → remove + re-link
  4. GET    /v1/journeys/drafts/{id}/payload             → createJourney body
     POST   /v1/journeys/drafts/{id}/submit              → send to backend

Edits that the form would ignore (second note, last day, bad index) are
ignored here too: the response is the unchanged draft, not an error.

In-memory draft store; drafts are lost on restart.
"""

from __future__ import annotations

import uuid
from datetime import date as date_type
from typing import Any, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

import config
from modules.journey.api_client import JourneyApiClient
from modules.journey.day_store import day_label
from modules.journey.journey_form import JourneyForm
from modules.observability.logger import StructuredLogger
from schemas.journey import Activity, JourneyFormData, PlaceType

router = APIRouter()

# ── In-memory draft store ──────────────────────────────────────────────────────
# key: draft_id (str uuid4) → JourneyForm
_drafts: dict[str, JourneyForm] = {}
_event_log: Optional[StructuredLogger] = StructuredLogger() if config.EDITOR_EVENT_LOG else None


# ── Request schemas ────────────────────────────────────────────────────────────

class CreateDraftRequest(BaseModel):
    title: str = ""
    description: str = ""
    start_date: Optional[str] = Field(None, description="ISO-8601 date YYYY-MM-DD; today if omitted")
    cover_image_url: Optional[str] = None
    cover_image_key: Optional[str] = None


class ActiveDayRequest(BaseModel):
    day: str                                  # "Day N"


class AddActivityRequest(BaseModel):
    type: PlaceType


class UpdateFieldRequest(BaseModel):
    field: str                                # start_time | end_time | name | ...
    value: Union[str, float, int]


# ── Serialisers ────────────────────────────────────────────────────────────────

def _ser_activity(activity: Activity) -> dict:
    return {
        "type":             activity.type.value,
        "name":             activity.name,
        "description":      activity.description,
        "start_time":       activity.start_time,
        "end_time":         activity.end_time,
        "address":          activity.address,
        "latitude":         activity.latitude,
        "longitude":        activity.longitude,
        "photos":           list(activity.photos),
        "has_manual_start": activity.has_manual_start,
        "has_manual_end":   activity.has_manual_end,
    }


def _ser_draft(draft_id: str, form: JourneyForm) -> dict:
    store = form.store
    return {
        "draft_id":    draft_id,
        "title":       form.data.title,
        "description": form.data.description,
        "start_date":  form.data.start_date.isoformat(),
        "active_day":  store.active_day,
        "days": [
            {
                "day":        label,
                "date_label": form.date_for_day(label),
                "activities": [_ser_activity(a) for a in store.activities_for(label)],
            }
            for label in store.days
        ],
        "warnings": form.warnings(),
    }


def get_draft(draft_id: str) -> JourneyForm:
    """Retrieve a stored draft or raise 404."""
    form = _drafts.get(draft_id)
    if form is None:
        raise HTTPException(
            status_code=404,
            detail=f"Draft '{draft_id}' not found. Call POST /v1/journeys/drafts first.",
        )
    return form


def open_draft_count() -> int:
    return len(_drafts)


# ── Endpoints ──────────────────────────────────────────────────────────────────

@router.post("/drafts", status_code=201, summary="Start a new journey draft")
def create_draft(req: CreateDraftRequest) -> dict:
    try:
        start = date_type.fromisoformat(req.start_date) if req.start_date else date_type.today()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid date format: {exc}") from exc

    draft_id = str(uuid.uuid4())
    data = JourneyFormData(
        title=req.title,
        description=req.description,
        start_date=start,
        cover_image_url=req.cover_image_url,
        cover_image_key=req.cover_image_key,
    )
    _drafts[draft_id] = JourneyForm(data=data, event_log=_event_log, draft_id=draft_id)
    return _ser_draft(draft_id, _drafts[draft_id])


@router.get("/drafts/{draft_id}", summary="Current state of a draft")
def read_draft(draft_id: str) -> dict:
    return _ser_draft(draft_id, get_draft(draft_id))


@router.post("/drafts/{draft_id}/days", summary="Append a day and make it active")
def add_day(draft_id: str) -> dict:
    form = get_draft(draft_id)
    form.store.add_day()
    return _ser_draft(draft_id, form)


@router.delete("/drafts/{draft_id}/days/{day_number}", summary="Delete a day and renumber the rest")
def delete_day(draft_id: str, day_number: int) -> dict:
    form = get_draft(draft_id)
    form.store.delete_day(day_label(day_number))
    return _ser_draft(draft_id, form)


@router.put("/drafts/{draft_id}/active-day", summary="Switch the active day")
def set_active_day(draft_id: str, req: ActiveDayRequest) -> dict:
    form = get_draft(draft_id)
    form.store.set_active_day(req.day)
    return _ser_draft(draft_id, form)


@router.post("/drafts/{draft_id}/activities", summary="Add an activity to the active day")
def add_activity(draft_id: str, req: AddActivityRequest) -> dict:
    form = get_draft(draft_id)
    form.store.add_activity(req.type)
    return _ser_draft(draft_id, form)


@router.patch("/drafts/{draft_id}/activities/{index}", summary="Edit one field of an activity")
def update_activity(draft_id: str, index: int, req: UpdateFieldRequest) -> dict:
    form = get_draft(draft_id)
    form.store.update_field(index, req.field, req.value)
    return _ser_draft(draft_id, form)


@router.delete("/drafts/{draft_id}/activities/{index}", summary="Remove an activity and re-link times")
def remove_activity(draft_id: str, index: int) -> dict:
    form = get_draft(draft_id)
    form.store.remove_activity(index)
    return _ser_draft(draft_id, form)


@router.get("/drafts/{draft_id}/payload", summary="createJourney request body for the draft")
def draft_payload(draft_id: str) -> dict[str, Any]:
    return get_draft(draft_id).build_payload().to_request_body()


@router.post("/drafts/{draft_id}/submit", summary="Send the draft to the journey backend")
def submit_draft(draft_id: str) -> dict:
    form = get_draft(draft_id)
    journey_id = form.submit(JourneyApiClient())
    if journey_id is None:
        raise HTTPException(status_code=502, detail=form.error_message)
    return {"draft_id": draft_id, "journey_id": journey_id}
