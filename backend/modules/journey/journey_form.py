"""
modules/journey/journey_form.py
--------------------------------
JourneyForm — everything the journey-creation form holds besides the
schedule itself: header fields, calendar dates for day labels, which
activity cards are expanded, and the submit workflow.

The schedule lives in ``self.store`` (DayActivityStore); the form only adds
the pieces around it.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import timedelta
from typing import Any, Optional

from modules.journey.api_client import JourneyApiClient, JourneySubmissionError
from modules.journey.day_store import DayActivityStore
from modules.journey.payload import build_journey_payload
from modules.observability.logger import StructuredLogger
from modules.validation import validate_days
from schemas.journey import JourneyFormData
from schemas.payload import CreateJourneyPayload

logger = logging.getLogger(__name__)

GENERIC_SUBMIT_ERROR = "An error occurred while creating your journey. Please try again."


class JourneyForm:
    """
    Single source of truth for one journey draft:
      - data:             header fields (title, description, start date, cover)
      - store:            days and their linked activity lists
      - expanded_places:  which activity cards are open, keyed "<day>-<index>"
      - is_submitting / error_message:  state of the last submit
    """

    def __init__(
        self,
        data: Optional[JourneyFormData] = None,
        event_log: Optional[StructuredLogger] = None,
        draft_id: str = "default",
    ) -> None:
        self.data = data or JourneyFormData()
        self.store = DayActivityStore(event_log=event_log, draft_id=draft_id)
        self.draft_id = draft_id
        self.expanded_places: dict[str, bool] = {}
        self.is_submitting: bool = False
        self.error_message: Optional[str] = None

    # ── Header ────────────────────────────────────────────────────────────────

    def update_form_data(self, **updates: Any) -> None:
        """Replace header fields; unknown names raise TypeError."""
        self.data = dataclasses.replace(self.data, **updates)

    def date_for_day(self, label: str) -> str:
        """'Day 3' with a 1 Jan start → 'Wednesday, Jan 3'."""
        try:
            offset = int(label.split(" ")[1]) - 1
        except (IndexError, ValueError):
            offset = 0
        day = self.data.start_date + timedelta(days=offset)
        return f"{day:%A}, {day:%b} {day.day}"

    # ── Expansion state ───────────────────────────────────────────────────────

    def toggle_place_expansion(self, day: str, index: int) -> None:
        key = f"{day}-{index}"
        self.expanded_places = {**self.expanded_places, key: not self.expanded_places.get(key, False)}

    def is_place_expanded(self, day: str, index: int) -> bool:
        return self.expanded_places.get(f"{day}-{index}", False)

    # ── Submission ────────────────────────────────────────────────────────────

    def build_payload(self, **overrides: Any) -> CreateJourneyPayload:
        data = dataclasses.replace(self.data, **overrides) if overrides else self.data
        return build_journey_payload(data, self.store)

    def warnings(self) -> list[str]:
        return validate_days(self.store.activities_by_day()).errors

    def submit(self, client: JourneyApiClient, **overrides: Any) -> Optional[str]:
        """
        Send the journey to the backend.

        Returns the new journey id, or None with ``error_message`` set.
        ``overrides`` replace header fields for this submission only.
        """
        self.is_submitting = True
        self.error_message = None
        try:
            for warning in self.warnings():
                logger.warning("Submitting draft %s with schedule issue: %s", self.draft_id, warning)
            body = self.build_payload(**overrides).to_request_body()
            return client.create_journey(body)
        except JourneySubmissionError as exc:
            logger.error("Failed to create journey for draft %s: %s", self.draft_id, exc)
            self.error_message = str(exc) or GENERIC_SUBMIT_ERROR
            return None
        finally:
            self.is_submitting = False
