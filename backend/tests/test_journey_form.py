from __future__ import annotations

import datetime as dt
from unittest.mock import MagicMock

from modules.journey.api_client import JourneyApiClient, JourneySubmissionError
from modules.journey.journey_form import JourneyForm
from schemas.journey import PlaceType


def _fill(form: JourneyForm) -> None:
    store = form.store
    store.add_activity(PlaceType.ACTIVITY)
    store.update_field(0, "name", "Louvre")
    store.update_field(0, "latitude", 48.8606)
    store.add_photo(0, "journeys/louvre-1.jpg")
    store.add_photo(0, "journeys/louvre-2.jpg")
    store.add_activity(PlaceType.NOTE)
    store.update_field(1, "description", "Bring an umbrella")
    store.add_activity(PlaceType.FOOD)

    store.add_day()
    store.add_activity(PlaceType.TRANSPORT)


# ── Dates ──────────────────────────────────────────────────────────────────────

def test_date_for_day_counts_from_start_date(form: JourneyForm):
    assert form.date_for_day("Day 1") == "Monday, Jan 1"
    assert form.date_for_day("Day 3") == "Wednesday, Jan 3"


def test_date_for_day_follows_start_date_changes(form: JourneyForm):
    form.update_form_data(start_date=dt.date(2024, 2, 28))
    assert form.date_for_day("Day 2") == "Thursday, Feb 29"


# ── Expansion state ────────────────────────────────────────────────────────────

def test_toggle_place_expansion(form: JourneyForm):
    assert not form.is_place_expanded("Day 1", 0)
    form.toggle_place_expansion("Day 1", 0)
    assert form.is_place_expanded("Day 1", 0)
    assert not form.is_place_expanded("Day 2", 0)
    form.toggle_place_expansion("Day 1", 0)
    assert not form.is_place_expanded("Day 1", 0)


# ── Payload ────────────────────────────────────────────────────────────────────

def test_payload_shape(form: JourneyForm):
    _fill(form)
    body = form.build_payload().to_request_body()

    assert body["title"] == "Paris"
    assert body["description"] == "Two days"
    assert body["coverImage"] is None
    assert [d["dayNumber"] for d in body["days"]] == [0, 1]
    assert [d["date"] for d in body["days"]] == ["2024-01-01", "2024-01-02"]

    first = body["days"][0]
    assert first["notes"] == "Bring an umbrella"
    assert [p["type"] for p in first["places"]] == ["activity", "food"]
    assert first["places"][0] == {
        "type": "activity",
        "name": "Louvre",
        "description": "",
        "startTime": "09:00",
        "endTime": "10:00",
        "address": "",
        "latitude": 48.8606,
        "longitude": None,
        "media": [
            {"type": "image", "url": "journeys/louvre-1.jpg", "order": 0},
            {"type": "image", "url": "journeys/louvre-2.jpg", "order": 1},
        ],
    }
    # the food slot follows the note, which still occupies 10:00-11:00
    assert (first["places"][1]["startTime"], first["places"][1]["endTime"]) == ("11:00", "12:00")
    assert "media" not in first["places"][1]

    second = body["days"][1]
    assert second["notes"] == ""
    assert second["places"][0]["type"] == "transport"


def test_payload_never_carries_manual_flags(form: JourneyForm):
    _fill(form)
    form.store.update_field(0, "start_time", "08:00")
    body = form.build_payload().to_request_body()
    for day in body["days"]:
        for place in day["places"]:
            assert "hasManualStart" not in place
            assert "hasManualEnd" not in place
            assert "has_manual_start" not in place


def test_payload_overrides_do_not_stick(form: JourneyForm):
    body = form.build_payload(title="Rome", start_date=dt.date(2024, 5, 1)).to_request_body()
    assert body["title"] == "Rome"
    assert body["days"][0]["date"] == "2024-05-01"
    assert form.data.title == "Paris"


# ── Submission ─────────────────────────────────────────────────────────────────

def test_submit_returns_journey_id(form: JourneyForm):
    _fill(form)
    client = MagicMock(spec=JourneyApiClient)
    client.create_journey.return_value = "journey-42"

    assert form.submit(client, cover_image_url="https://cdn/cover.jpg") == "journey-42"
    assert form.error_message is None
    assert not form.is_submitting

    (body,), _ = client.create_journey.call_args
    assert body["coverImage"] == "https://cdn/cover.jpg"
    assert len(body["days"]) == 2


def test_submit_failure_sets_error_message(form: JourneyForm):
    client = MagicMock(spec=JourneyApiClient)
    client.create_journey.side_effect = JourneySubmissionError("Title must not be empty")

    assert form.submit(client) is None
    assert form.error_message == "Title must not be empty"
    assert not form.is_submitting


def test_submit_clears_previous_error(form: JourneyForm):
    form.error_message = "old failure"
    client = MagicMock(spec=JourneyApiClient)
    client.create_journey.return_value = "journey-1"
    form.submit(client)
    assert form.error_message is None


def test_warnings_report_inverted_times(form: JourneyForm):
    form.store.add_activity(PlaceType.ACTIVITY)
    form.store.update_field(0, "end_time", "08:00")
    assert any("ends at 08:00" in w for w in form.warnings())
